from __future__ import annotations

from typing import Iterable, Iterator, Sequence, overload

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.errors import InvalidPaletteError

HEX_PATTERN = r"^#?[0-9a-fA-F]{6}$"


class ColorEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    hex: str = Field(..., pattern=HEX_PATTERN)


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    entry: ColorEntry
    query_hex: str
    distance: float
    # False when the query could not be parsed and was matched as black
    parsed: bool = True

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def hex(self) -> str:
        return self.entry.hex

    @property
    def exact(self) -> bool:
        return self.distance == 0


class Palette(Sequence[ColorEntry]):
    """Immutable, ordered, non-empty collection of named colors.

    Order is the order of the source dataset and decides ties during matching.
    Duplicate hex values are allowed.
    """

    __slots__ = ("_entries", "name")

    def __init__(self, entries: Iterable[ColorEntry | dict], name: str = "custom") -> None:
        items: list[ColorEntry] = []
        for idx, entry in enumerate(entries):
            if isinstance(entry, ColorEntry):
                items.append(entry)
                continue
            try:
                items.append(ColorEntry.model_validate(entry))
            except ValidationError as exc:
                raise InvalidPaletteError(
                    f"Palette {name!r}: invalid entry at index {idx}: {entry!r}"
                ) from exc
        if not items:
            raise InvalidPaletteError(f"Palette {name!r} is empty")
        self._entries: tuple[ColorEntry, ...] = tuple(items)
        self.name = name

    @overload
    def __getitem__(self, index: int) -> ColorEntry: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[ColorEntry, ...]: ...

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ColorEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Palette(name={self.name!r}, size={len(self._entries)})"
