"""Palette cursor used to color layout nodes."""

DEFAULT_PALETTE = ("#468966", "#FFF0A5", "#FFB03B", "#B64926", "#8E2800")


class ColorAllocator:
    """Hands out palette colors in order, wrapping around at the end.

    The cursor survives across layouts so that nodes colored in one render
    keep their colors after a zoom; reset() starts over from the first entry.
    """

    def __init__(self, palette: tuple[str, ...] = DEFAULT_PALETTE):
        if not palette:
            raise ValueError("Palette must contain at least one color")
        self.palette = tuple(palette)
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    def next(self) -> str:
        """Return the next palette color and advance the cursor."""
        color = self.palette[self._cursor % len(self.palette)]
        self._cursor += 1
        return color

    def reset(self) -> None:
        """Restart from the first palette color."""
        self._cursor = 0

    def seek(self, cursor: int) -> None:
        """Move the cursor back to a position returned by `cursor`."""
        if cursor < 0:
            raise ValueError(f"Cursor must not be negative, got {cursor}")
        self._cursor = cursor
