from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List

from ..core.errors import InvalidPaletteError
from ..models.color import Palette
from ..settings import PALETTE_NAME, PALETTE_PATH

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"


def available_palettes() -> List[str]:
    return sorted(p.stem for p in DATA_DIR.glob("*.json"))


def _read_entries(path: Path) -> list:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise InvalidPaletteError(f"Cannot read palette file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise InvalidPaletteError(f"Palette file {path} is not valid JSON: {exc}") from exc

    # Both a bare list and {"colors": [...]} are accepted.
    if isinstance(raw, dict):
        raw = raw.get("colors")
    if not isinstance(raw, list):
        raise InvalidPaletteError(f"Palette file {path} must contain a list of colors")
    return raw


def load_palette_file(path: str | Path, name: str | None = None) -> Palette:
    path = Path(path)
    palette = Palette(_read_entries(path), name=name or path.stem)
    logger.info("Loaded palette %r with %d colors from %s", palette.name, len(palette), path)
    return palette


@lru_cache(maxsize=None)
def load_palette(name: str = "css") -> Palette:
    if name not in available_palettes():
        raise InvalidPaletteError(
            f"Unknown palette {name!r}; available: {', '.join(available_palettes())}"
        )
    return load_palette_file(DATA_DIR / f"{name}.json", name=name)


@lru_cache(maxsize=1)
def get_default_palette() -> Palette:
    if PALETTE_PATH:
        return load_palette_file(PALETTE_PATH)
    return load_palette(PALETTE_NAME)
