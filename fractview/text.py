"""Vertex and index data for one piece of text drawn with a font."""

from __future__ import annotations

from collections.abc import Sequence

from fractview.font_library import NULL_FONT
from fractview.pipeline import Vertex
from fractview.renderer import MAX_FRAMES_IN_FLIGHT

_COLOR_MASK = 0xFFFFFFFF


class Text:
    """A string's geometry, with one vertex buffer per frame in flight.

    Loading is done once; further loads are ignored until the text is
    destroyed. Vertex updates and destruction of an unloaded text do nothing.
    """

    def __init__(self, frames_in_flight: int = MAX_FRAMES_IN_FLIGHT) -> None:
        if frames_in_flight < 1:
            raise ValueError("at least one frame must be in flight")
        self.frames_in_flight = frames_in_flight
        self.text = ""
        self.color = 0
        self.font_id = NULL_FONT
        self.vertex_buffers: list[list[Vertex]] = [[] for _ in range(frames_in_flight)]
        self.indices: list[int] = []
        self.is_loaded = False

    @property
    def index_count(self) -> int:
        """The number of indices to draw."""
        return len(self.indices)

    def load(
        self,
        text: str,
        font_id: int,
        color: int,
        vertices: Sequence[Vertex],
        indices: Sequence[int],
    ) -> None:
        """Store the text and copy its geometry into every frame's buffer."""
        if self.is_loaded:
            return
        self.text = text
        self.color = color & _COLOR_MASK
        self.font_id = font_id
        self.vertex_buffers = [list(vertices) for _ in range(self.frames_in_flight)]
        self.indices = list(indices)
        self.is_loaded = True

    def update_vertices(self, frame: int, vertices: Sequence[Vertex]) -> None:
        """Replace the vertices of one frame's buffer."""
        if not self.is_loaded:
            return
        if not 0 <= frame < self.frames_in_flight:
            raise IndexError(f"frame {frame} is out of range")
        self.vertex_buffers[frame] = list(vertices)

    def destroy(self) -> None:
        """Release the buffers; the text can then be loaded again."""
        if not self.is_loaded:
            return
        self.vertex_buffers = [[] for _ in range(self.frames_in_flight)]
        self.indices = []
        self.is_loaded = False