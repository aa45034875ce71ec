from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namedcolor.color.palette_loader import (  # noqa: E402
    available_palettes,
    get_default_palette,
    load_palette,
    load_palette_file,
)
from namedcolor.color.palette_matcher import match_color, match_fraction_rgb  # noqa: E402
from namedcolor.core.errors import InvalidPaletteError  # noqa: E402
from namedcolor.models.api_schemas import MatchResponse  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find the closest named color")
    parser.add_argument("hex", nargs="?", help="Query color as #rrggbb or rrggbb")
    parser.add_argument(
        "--rgb",
        nargs=3,
        type=float,
        metavar=("R", "G", "B"),
        help="Query color as fractional channels in [0, 1]",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--palette", choices=available_palettes(), help="Bundled palette name")
    source.add_argument("--palette-file", type=Path, help="JSON palette file")
    parser.add_argument("--json", action="store_true", help="Print the match as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.hex is None) == (args.rgb is None):
        parser.error("give either a hex color or --rgb R G B")

    try:
        if args.palette_file:
            palette = load_palette_file(args.palette_file)
        elif args.palette:
            palette = load_palette(args.palette)
        else:
            palette = get_default_palette()
    except InvalidPaletteError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.rgb is not None:
        try:
            result = match_fraction_rgb(*args.rgb, palette)
        except ValueError as exc:
            parser.error(f"--rgb: {exc}")
    else:
        result = match_color(args.hex, palette)

    if args.json:
        response = MatchResponse.from_result(result)
        print(json.dumps(response.model_dump(by_alias=True, exclude_none=True), indent=2))
    else:
        print(f"{result.name} ({result.query_hex} -> {result.hex})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
