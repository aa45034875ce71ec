"""Named color lookup: conversions, palettes and nearest-match search."""

from .convert import hex_to_rgb, normalize_hex, parse_hex, rgb_fraction_to_hex, rgb_to_hex
from .palette_loader import available_palettes, get_default_palette, load_palette, load_palette_file
from .palette_matcher import color_distance, find_closest_color, match_color, match_fraction_rgb

__all__ = [
    "available_palettes",
    "color_distance",
    "find_closest_color",
    "get_default_palette",
    "hex_to_rgb",
    "load_palette",
    "load_palette_file",
    "match_color",
    "match_fraction_rgb",
    "normalize_hex",
    "parse_hex",
    "rgb_fraction_to_hex",
    "rgb_to_hex",
]
