from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .color import MatchResult
from .paint import SceneNode


class PaletteInfo(BaseModel):
    name: str
    size: int


class MatchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    hex: str
    query_hex: str = Field(..., alias="queryHex")
    distance: float
    exact: bool
    parsed: bool
    message: Optional[str] = None

    @classmethod
    def from_result(cls, result: MatchResult, message: Optional[str] = None) -> "MatchResponse":
        return cls(
            name=result.name,
            hex=result.hex,
            query_hex=result.query_hex,
            distance=result.distance,
            exact=result.exact,
            parsed=result.parsed,
            message=message,
        )


class SelectionMatchRequest(BaseModel):
    selection: List[SceneNode] = Field(default_factory=list)
