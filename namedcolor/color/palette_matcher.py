from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from ..core.errors import InvalidPaletteError
from ..models.color import ColorEntry, MatchResult
from .convert import hex_to_rgb, parse_hex, rgb_fraction_to_hex, rgb_to_hex


def color_distance(rgb_a: Tuple[int, int, int], rgb_b: Tuple[int, int, int]) -> float:
    """Euclidean distance in plain RGB space.

    No perceptual weighting is applied; the palette lookup trades accuracy
    for a simple and fast metric.
    """
    a = np.array(rgb_a, dtype=float)
    b = np.array(rgb_b, dtype=float)
    return float(np.linalg.norm(a - b))


def _scan(target: Tuple[int, int, int], palette: Sequence[ColorEntry]) -> Tuple[ColorEntry, float]:
    if len(palette) == 0:
        raise InvalidPaletteError("Cannot match against an empty palette")

    closest = palette[0]
    min_distance = math.inf
    for entry in palette:
        distance = color_distance(target, hex_to_rgb(entry.hex))
        # strict: the first entry wins among equal distances
        if distance < min_distance:
            min_distance = distance
            closest = entry
        if distance == 0:
            break
    return closest, min_distance


def find_closest_color(hex_value: str, palette: Sequence[ColorEntry]) -> ColorEntry:
    """Return the palette entry closest to ``hex_value``.

    Malformed hex is matched as black (see :func:`hex_to_rgb`).
    """
    closest, _ = _scan(hex_to_rgb(hex_value), palette)
    return closest


def match_color(hex_value: str, palette: Sequence[ColorEntry]) -> MatchResult:
    target, parsed = parse_hex(hex_value)
    closest, distance = _scan(target, palette)
    return MatchResult(
        entry=closest,
        query_hex=rgb_to_hex(target),
        distance=distance,
        parsed=parsed,
    )


def match_fraction_rgb(r: float, g: float, b: float, palette: Sequence[ColorEntry]) -> MatchResult:
    return match_color(rgb_fraction_to_hex(r, g, b), palette)
