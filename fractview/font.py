"""TrueType fonts rasterised into a glyph atlas for printable ASCII."""

from __future__ import annotations

import io
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from PIL import Image, ImageDraw, ImageFont

ATLAS_SIZE = 1024
FIRST_CHAR = 32
CHAR_COUNT = 96
DEFAULT_FONT_NAME = "default"
_PADDING = 1

FontData = Union[bytes, bytearray, str, os.PathLike, None]


@dataclass(frozen=True)
class PackedChar:
    """Where a glyph sits in the atlas and how it is placed around the pen."""

    x0: int
    y0: int
    x1: int
    y1: int
    xoff: float
    yoff: float
    xadvance: float
    xoff2: float
    yoff2: float


@dataclass(frozen=True)
class AlignedQuad:
    """A glyph's screen rectangle and its texture coordinates."""

    x0: float
    y0: float
    s0: float
    t0: float
    x1: float
    y1: float
    s1: float
    t1: float


class Font:
    """A named font at a given pixel scale.

    ``data`` holds the TrueType bytes; when it is None the font is read from
    the file ``name``, or, for the name ``"default"``, the built-in font is used.
    Two fonts are equal when their names and scales are.
    """

    def __init__(self, name: str, scale: float, data: FontData = None) -> None:
        self.name = str(name)
        self.scale = float(scale)
        if isinstance(data, (str, os.PathLike)):
            self._bytes: bytes | None = None
            self._path: Path | None = Path(data)
        else:
            self._bytes = bytes(data) if data is not None else None
            self._path = None if data is not None or self.name == DEFAULT_FONT_NAME else Path(self.name)
        self.chars: list[PackedChar] = []
        self.atlas: Image.Image | None = None
        self.is_built = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Font):
            return NotImplemented
        return self.name == other.name and self.scale == other.scale

    def __hash__(self) -> int:
        return hash((self.name, self.scale))

    def _load_face(self) -> Any:
        size = max(1, round(self.scale))
        if self._path is not None:
            return ImageFont.truetype(io.BytesIO(self._path.read_bytes()), size)
        if self._bytes is not None:
            return ImageFont.truetype(io.BytesIO(self._bytes), size)
        try:
            return ImageFont.load_default(size=size)
        except TypeError:
            return ImageFont.load_default()

    def build(self) -> None:
        """Rasterise the printable ASCII glyphs into the atlas."""
        face = self._load_face()
        gray = Image.new("L", (ATLAS_SIZE, ATLAS_SIZE), 0)
        chars: list[PackedChar] = []
        pen_x = pen_y = _PADDING
        row_height = 0
        baseline = None if isinstance(face, ImageFont.FreeTypeFont) else int(face.getbbox("H")[3])
        for code in range(FIRST_CHAR, FIRST_CHAR + CHAR_COUNT):
            ch = chr(code)
            if baseline is None:
                left, top, right, bottom = (int(v) for v in face.getbbox(ch, anchor="ls"))
                draw_options: dict[str, Any] = {"anchor": "ls"}
                y_shift = 0
            else:
                left, top, right, bottom = (int(v) for v in face.getbbox(ch))
                draw_options = {}
                y_shift = baseline
            advance = float(face.getlength(ch))
            width = max(right - left, 0)
            height = max(bottom - top, 0)
            if pen_x + width + _PADDING > ATLAS_SIZE:
                pen_x = _PADDING
                pen_y += row_height + _PADDING
                row_height = 0
            if pen_y + height + _PADDING > ATLAS_SIZE:
                raise ValueError(f"font {self.name!r} at scale {self.scale} does not fit the atlas")
            if width and height:
                glyph = Image.new("L", (width, height), 0)
                ImageDraw.Draw(glyph).text((-left, -top), ch, fill=255, font=face, **draw_options)
                gray.paste(glyph, (pen_x, pen_y))
            chars.append(
                PackedChar(
                    x0=pen_x,
                    y0=pen_y,
                    x1=pen_x + width,
                    y1=pen_y + height,
                    xoff=float(left),
                    yoff=float(top - y_shift),
                    xadvance=advance,
                    xoff2=float(left + width),
                    yoff2=float(top - y_shift + height),
                )
            )
            pen_x += width + _PADDING
            row_height = max(row_height, height)
        self.chars = chars
        self.atlas = Image.merge("RGBA", (gray, gray, gray, gray))
        self.is_built = True

    def packed_quad(self, char: str, x: float, y: float) -> tuple[AlignedQuad, float]:
        """Return the quad for ``char`` with the pen at ``(x, y)`` and the advanced pen x."""
        if not self.is_built:
            raise RuntimeError(f"font {self.name!r} has not been built")
        index = ord(char) - FIRST_CHAR
        if not 0 <= index < CHAR_COUNT:
            raise ValueError(f"character {char!r} is not in the font's range")
        b = self.chars[index]
        left = math.floor(x + b.xoff + 0.5)
        top = math.floor(y + b.yoff + 0.5)
        quad = AlignedQuad(
            x0=float(left),
            y0=float(top),
            s0=b.x0 / ATLAS_SIZE,
            t0=b.y0 / ATLAS_SIZE,
            x1=left + b.xoff2 - b.xoff,
            y1=top + b.yoff2 - b.yoff,
            s1=b.x1 / ATLAS_SIZE,
            t1=b.y1 / ATLAS_SIZE,
        )
        return quad, x + b.xadvance

    def destroy(self) -> None:
        """Drop the atlas; the font can be built again afterwards."""
        self.atlas = None
        self.chars = []
        self.is_built = False