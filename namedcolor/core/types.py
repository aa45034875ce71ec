"""Common lightweight types shared by the matcher and the selection adapter."""

from typing import Literal, NamedTuple


class RGB(NamedTuple):
    r: int
    g: int
    b: int


BLACK = RGB(0, 0, 0)

GradientType = Literal[
    "GRADIENT_LINEAR",
    "GRADIENT_RADIAL",
    "GRADIENT_ANGULAR",
    "GRADIENT_DIAMOND",
]

__all__ = ["RGB", "BLACK", "GradientType"]
