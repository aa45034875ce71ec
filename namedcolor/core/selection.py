from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..color.palette_matcher import match_fraction_rgb
from ..models.color import ColorEntry, MatchResult
from ..models.paint import PaintColor, SceneNode, SolidPaint
from .errors import EmptyFillsError, NoFillsError, NoSelectionError, NoSolidFillError

logger = logging.getLogger(__name__)


def _first_visible_solid(fills) -> Optional[SolidPaint]:
    for paint in fills:
        if isinstance(paint, SolidPaint) and paint.visible is not False:
            return paint
    return None


def extract_fill_color(selection: Sequence[SceneNode]) -> PaintColor:
    """Return the color of the first visible solid fill of the first selected node.

    Raises a :class:`~namedcolor.core.errors.SelectionError` subclass naming
    the first precondition that failed.
    """
    if not selection:
        raise NoSelectionError()

    node = selection[0]
    if node.fills is None:
        raise NoFillsError()

    fills = node.fills
    if not isinstance(fills, list) or not fills:
        raise EmptyFillsError()

    solid = _first_visible_solid(fills)
    if solid is None:
        raise NoSolidFillError()

    logger.debug("Using solid fill of node %s", node.id or node.name or "<unnamed>")
    return solid.color


def match_selection(selection: Sequence[SceneNode], palette: Sequence[ColorEntry]) -> MatchResult:
    color = extract_fill_color(selection)
    return match_fraction_rgb(color.r, color.g, color.b, palette)


def copy_message(result: MatchResult) -> str:
    return f'Copied "{result.name}" to clipboard ({result.query_hex} -> {result.hex})'
