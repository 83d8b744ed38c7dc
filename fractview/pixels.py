"""A CPU-side map of 32-bit pixels written one at a time."""

from __future__ import annotations

from collections.abc import Iterator

_COLOR_MASK = 0xFFFFFFFF


class PixelBuffer:
    """A row-major grid of 32-bit colours, all zero at the start.

    ``modified`` is set whenever the contents change and is left for the
    consumer to reset once it has taken a copy.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("width and height must not be negative")
        self.width = width
        self.height = height
        # One spare cell, so that the pixel just past the last row is kept.
        self._cells = [0] * (width * height + 1)
        self.modified = True

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at ``(x, y)``; points outside the map are ignored.

        A column equal to the width is accepted and lands at the start of
        the following row.
        """
        if x < 0 or y < 0 or x > self.width or y > self.height:
            return
        index = y * self.width + x
        if index >= len(self._cells):
            return
        self._cells[index] = color & _COLOR_MASK
        self.modified = True

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at ``(x, y)``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the buffer")
        return self._cells[y * self.width + x]

    def clear(self) -> None:
        """Reset every pixel to zero."""
        self._cells = [0] * (self.width * self.height)
        self.modified = True

    def rows(self) -> Iterator[list[int]]:
        """Yield each row of the map, top to bottom."""
        for y in range(self.height):
            start = y * self.width
            yield self._cells[start:start + self.width]