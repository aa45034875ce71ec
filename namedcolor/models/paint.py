from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..core.types import GradientType


class PaintColor(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    r: float
    g: float
    b: float


class SolidPaint(BaseModel):
    type: Literal["SOLID"] = "SOLID"
    color: PaintColor
    visible: bool = True
    opacity: float = 1.0


class GradientPaint(BaseModel):
    type: GradientType
    visible: bool = True
    opacity: float = 1.0


class ImagePaint(BaseModel):
    type: Literal["IMAGE"] = "IMAGE"
    visible: bool = True
    opacity: float = 1.0
    imageHash: Optional[str] = None


class VideoPaint(BaseModel):
    type: Literal["VIDEO"] = "VIDEO"
    visible: bool = True
    opacity: float = 1.0


Paint = Annotated[
    Union[SolidPaint, GradientPaint, ImagePaint, VideoPaint],
    Field(discriminator="type"),
]


class SceneNode(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    # None: node type without fills; "mixed": host reports mixed fills
    fills: Union[List[Paint], Literal["mixed"], None] = None
