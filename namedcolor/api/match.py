import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from ..color.palette_loader import get_default_palette
from ..color.palette_matcher import match_color
from ..core.errors import InvalidPaletteError, SelectionError
from ..core.selection import copy_message, match_selection
from ..models.api_schemas import MatchResponse, PaletteInfo, SelectionMatchRequest
from ..models.color import Palette

logger = logging.getLogger(__name__)

router = APIRouter()


def get_palette() -> Palette:
    try:
        return get_default_palette()
    except InvalidPaletteError as e:
        logger.error("Palette unavailable: %s", e)
        raise HTTPException(status_code=503, detail="Palette unavailable")


# =====================================================================
#   PALETTE
# =====================================================================

@router.get("/palette", response_model=PaletteInfo)
async def palette_info(palette: Palette = Depends(get_palette)):
    return PaletteInfo(name=palette.name, size=len(palette))


# =====================================================================
#   MATCH BY HEX
# =====================================================================

@router.get("/match", response_model=MatchResponse)
async def match_hex(
    hex: str = Query(..., description="Color as #rrggbb or rrggbb; anything else matches as black"),
    palette: Palette = Depends(get_palette),
):
    result = match_color(hex, palette)
    return MatchResponse.from_result(result)


# =====================================================================
#   MATCH SELECTION FILL
# =====================================================================

@router.post("/match/selection", response_model=MatchResponse)
async def match_selection_fill(
    payload: SelectionMatchRequest,
    palette: Palette = Depends(get_palette),
):
    try:
        result = match_selection(payload.selection, palette)
    except SelectionError as e:
        logger.warning("Selection rejected: %s", e.message)
        raise HTTPException(status_code=400, detail=e.message)
    return MatchResponse.from_result(result, message=copy_message(result))
