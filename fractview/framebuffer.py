"""A render target of a fixed size holding RGBA colours."""

from __future__ import annotations

Color = tuple[float, float, float, float]

_TRANSPARENT: Color = (0.0, 0.0, 0.0, 0.0)


class FrameBuffer:
    """A width by height grid of RGBA colours in the range [0, 1].

    ``pixels`` is indexed as ``pixels[y][x]``.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"cannot create a {width}x{height} framebuffer")
        self.width = width
        self.height = height
        self.pixels: list[list[Color]] = [[_TRANSPARENT] * width for _ in range(height)]
        self.is_alive = True

    def destroy(self) -> None:
        """Release the pixel storage; destroying twice does nothing."""
        self.pixels = []
        self.is_alive = False