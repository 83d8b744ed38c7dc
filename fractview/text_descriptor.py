"""A piece of text placed on screen, with its glyph geometry and drawing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fractview.font import CHAR_COUNT, FIRST_CHAR, Font
from fractview.font_library import FontLibrary
from fractview.pipeline import Vec4, Vertex
from fractview.renderer import Renderer
from fractview.text import Text
from fractview.text_library import NULL_TEXT, TextLibrary


def unpack_color(color: int) -> Vec4:
    """Split a colour into (r, g, b, a) in [0, 1], red in the lowest byte."""
    return (
        (color & 0x000000FF) / 255.0,
        ((color & 0x0000FF00) >> 8) / 255.0,
        ((color & 0x00FF0000) >> 16) / 255.0,
        ((color & 0xFF000000) >> 24) / 255.0,
    )


def build_geometry(text: str, font: Font, color: int) -> tuple[list[Vertex], list[int]]:
    """Return four vertices and six indices per drawable character of ``text``.

    Characters outside the font's range, such as control characters, are skipped.
    """
    vertices: list[Vertex] = []
    indices: list[int] = []
    vertex_color = unpack_color(color)
    pen_x = 0.0
    pen_y = 0.0
    for ch in text:
        if not FIRST_CHAR <= ord(ch) < FIRST_CHAR + CHAR_COUNT:
            continue
        q, pen_x = font.packed_quad(ch, pen_x, pen_y)
        base = len(vertices)
        vertices.extend(
            (
                Vertex((q.x0, q.y0), vertex_color, (q.s0, q.t0)),
                Vertex((q.x1, q.y0), vertex_color, (q.s1, q.t0)),
                Vertex((q.x1, q.y1), vertex_color, (q.s1, q.t1)),
                Vertex((q.x0, q.y1), vertex_color, (q.s0, q.t1)),
            )
        )
        indices.extend((base, base + 1, base + 2, base + 2, base + 3, base))
    return vertices, indices


class _AtlasRow:
    def __init__(self, pixels: Any, y: int, width: int) -> None:
        self._pixels = pixels
        self._y = y
        self._width = width

    def __len__(self) -> int:
        return self._width

    def __getitem__(self, x: int) -> Vec4:
        r, g, b, a = self._pixels[x, self._y]
        return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


class _AtlasTexture:
    """Reads an RGBA atlas image lazily as rows of normalised colours."""

    def __init__(self, image: Any) -> None:
        self._pixels = image.load()
        self._width, self._height = image.size

    def __len__(self) -> int:
        return self._height

    def __getitem__(self, y: int) -> _AtlasRow:
        return _AtlasRow(self._pixels, y, self._width)


@dataclass(unsafe_hash=True)
class TextDrawDescriptor:
    """A string at a position and colour; equal when those four match."""

    text: str
    color: int
    x: int
    y: int
    id: int = field(default=NULL_TEXT, compare=False, hash=False)

    def build(self, font_id: int, fonts: FontLibrary, texts: TextLibrary) -> int:
        """Lay out the glyphs with the font, register the text and return its id."""
        font = fonts.get(font_id)
        vertices, indices = build_geometry(self.text, font, self.color)
        text_data = Text()
        text_data.load(self.text, font_id, self.color, vertices, indices)
        self.id = texts.add(text_data)
        return self.id

    def render(self, renderer: Renderer, fonts: FontLibrary, texts: TextLibrary) -> int:
        """Draw the text into the current frame; return the number of fragments written."""
        if not renderer.recording:
            raise RuntimeError("no frame is being recorded")
        draw_data = texts.get(self.id)
        font = fonts.get(draw_data.font_id)
        if font.atlas is None:
            raise RuntimeError(f"font {font.name!r} has no atlas")
        buffers = draw_data.vertex_buffers
        vertices = buffers[renderer.current_frame_index % len(buffers)]
        return renderer.pipeline.draw(
            renderer.framebuffer,
            vertices,
            draw_data.indices,
            _AtlasTexture(font.atlas),
            translate=(float(self.x), float(self.y)),
        )