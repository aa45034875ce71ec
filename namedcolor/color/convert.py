from __future__ import annotations

import logging
import math
import re
from typing import Tuple

from ..core.types import BLACK, RGB

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def parse_hex(value: str) -> Tuple[RGB, bool]:
    """Parse ``#rrggbb`` / ``rrggbb`` and report whether parsing succeeded.

    Returns ``(rgb, True)`` on success and ``(BLACK, False)`` for anything that
    is not exactly six hex digits with an optional leading ``#``.
    """
    match = _HEX_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        logger.debug("Unparseable hex %r, defaulting to black", value)
        return BLACK, False
    r, g, b = (int(group, 16) for group in match.groups())
    return RGB(r, g, b), True


def hex_to_rgb(value: str) -> RGB:
    """Convert a hex color string to an RGB triple.

    Malformed input (3-digit shorthand, wrong length, non-hex characters,
    surrounding whitespace) does not raise: callers receive black
    ``RGB(0, 0, 0)``. Use :func:`parse_hex` to tell the two cases apart.
    """
    rgb, _ = parse_hex(value)
    return rgb


def rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    r, g, b = (int(v) for v in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_hex(value: str) -> str:
    return rgb_to_hex(hex_to_rgb(value))


def _fraction_to_byte(value: float) -> int:
    value = float(value)
    if math.isnan(value):
        raise ValueError("Color channel is NaN")
    # Clamp instead of emitting malformed hex for out-of-range channels.
    value = min(1.0, max(0.0, value))
    # Half-up rounding; round() would send 0.5 * 255 style ties to even.
    return int(math.floor(value * 255 + 0.5))


def rgb_fraction_to_hex(r: float, g: float, b: float) -> str:
    """Convert fractional channels in [0, 1] to a lowercase ``#rrggbb`` string.

    Values outside [0, 1] are clamped.
    """
    return rgb_to_hex((_fraction_to_byte(r), _fraction_to_byte(g), _fraction_to_byte(b)))


__all__ = ["parse_hex", "hex_to_rgb", "rgb_to_hex", "normalize_hex", "rgb_fraction_to_hex"]
