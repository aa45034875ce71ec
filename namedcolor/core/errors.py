from __future__ import annotations


class InvalidPaletteError(ValueError):
    """Raised when a palette is empty or one of its entries is unusable."""


class SelectionError(ValueError):
    """Base class for selections that cannot be resolved to a single fill color.

    ``message`` is the text shown to the user by the host.
    """

    message = "Selection cannot be matched"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NoSelectionError(SelectionError):
    message = "Please select an object with a fill color"


class NoFillsError(SelectionError):
    message = "Selected object does not have fills"


class EmptyFillsError(SelectionError):
    message = "Selected object has no fills"


class NoSolidFillError(SelectionError):
    message = "No solid fill found on selected object"
