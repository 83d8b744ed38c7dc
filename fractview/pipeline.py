"""A software graphics pipeline: vertex layout, shading, blending and rasterising."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from fractview.framebuffer import FrameBuffer

Vec2 = tuple[float, float]
Vec4 = tuple[float, float, float, float]
Texture = Sequence[Sequence[Vec4]]

FLOAT_SIZE = 4
VERTEX_STRIDE = 8 * FLOAT_SIZE
PUSH_CONSTANT_SIZE = 2 * FLOAT_SIZE
DYNAMIC_STATES = ("viewport", "scissor")

_WHITE: Vec4 = (1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Vertex:
    """One vertex: a position in pixels, an RGBA colour and texture coordinates."""

    pos: Vec2
    color: Vec4
    uv: Vec2


@dataclass(frozen=True)
class AttributeDescription:
    """Where one vertex attribute lives inside a vertex record."""

    binding: int
    location: int
    format: str
    offset: int


def attribute_descriptions() -> list[AttributeDescription]:
    """Return the layout of position, colour and texture coordinates in a vertex."""
    return [
        AttributeDescription(0, 0, "R32G32_SFLOAT", 0),
        AttributeDescription(0, 1, "R32G32B32A32_SFLOAT", 2 * FLOAT_SIZE),
        AttributeDescription(0, 2, "R32G32_SFLOAT", 6 * FLOAT_SIZE),
    ]


def blend(src: Vec4, dst: Vec4) -> Vec4:
    """Blend ``src`` over ``dst`` with source alpha and one minus source alpha."""
    alpha = src[3]
    keep = 1.0 - alpha
    return (
        src[0] * alpha + dst[0] * keep,
        src[1] * alpha + dst[1] * keep,
        src[2] * alpha + dst[2] * keep,
        src[3] * alpha + dst[3] * keep,
    )


def shade_fragment(color: Vec4, texel: Vec4) -> Vec4 | None:
    """Multiply the vertex colour by the texel; a fully transparent result is discarded."""
    result = (
        color[0] * texel[0],
        color[1] * texel[1],
        color[2] * texel[2],
        color[3] * texel[3],
    )
    if result[3] == 0:
        return None
    return result


def _sample(texture: Texture | None, uv: Vec2) -> Vec4:
    if texture is None:
        return _WHITE
    height = len(texture)
    width = len(texture[0]) if height else 0
    if width == 0:
        return _WHITE
    x = min(max(int(uv[0] * width), 0), width - 1)
    y = min(max(int(uv[1] * height), 0), height - 1)
    return tuple(texture[y][x])  # type: ignore[return-value]


def _edge(a: Vec2, b: Vec2, p: Vec2) -> float:
    return (p[0] - a[0]) * (b[1] - a[1]) - (p[1] - a[1]) * (b[0] - a[0])


def _owns_edge(a: Vec2, b: Vec2) -> bool:
    # Consistent tie-break so that a shared edge belongs to exactly one triangle.
    dy = b[1] - a[1]
    dx = b[0] - a[0]
    return dy > 0 or (dy == 0 and dx < 0)


def _lerp(weights: tuple[float, float, float], values: Sequence[Sequence[float]]) -> tuple[float, ...]:
    w0, w1, w2 = weights
    return tuple(w0 * a + w1 * b + w2 * c for a, b, c in zip(*values))


class GraphicPipeline:
    """Draws indexed triangle lists into a framebuffer within a fixed viewport."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"cannot create a pipeline for a {width}x{height} viewport")
        self.width = width
        self.height = height
        self.attributes = attribute_descriptions()
        self.is_alive = True

    def draw(
        self,
        target: FrameBuffer,
        vertices: Sequence[Vertex],
        indices: Sequence[int],
        texture: Texture | None = None,
        translate: Vec2 = (0.0, 0.0),
    ) -> int:
        """Rasterise the triangles into ``target``; return the number of fragments written.

        Indices are taken three at a time; an incomplete last triangle is ignored.
        """
        if not self.is_alive:
            raise RuntimeError("the pipeline has been destroyed")
        if not target.is_alive:
            raise RuntimeError("the framebuffer has been destroyed")
        clip_w = min(self.width, target.width)
        clip_h = min(self.height, target.height)
        tx, ty = translate
        written = 0
        for first in range(0, len(indices) - len(indices) % 3, 3):
            tri = [vertices[i] for i in indices[first:first + 3]]
            pos = [(v.pos[0] + tx, v.pos[1] + ty) for v in tri]
            area = _edge(pos[0], pos[1], pos[2])
            if area == 0:
                continue
            if area < 0:
                tri[1], tri[2] = tri[2], tri[1]
                pos[1], pos[2] = pos[2], pos[1]
                area = -area
            written += self._raster(target, tri, pos, area, texture, clip_w, clip_h)
        return written

    def _raster(
        self,
        target: FrameBuffer,
        tri: list[Vertex],
        pos: list[Vec2],
        area: float,
        texture: Texture | None,
        clip_w: int,
        clip_h: int,
    ) -> int:
        v0, v1, v2 = pos
        edges = ((v1, v2), (v2, v0), (v0, v1))
        owned = [_owns_edge(a, b) for a, b in edges]
        xs = [p[0] for p in pos]
        ys = [p[1] for p in pos]
        x_start = max(int(min(xs)) - 1, 0)
        x_end = min(int(max(xs)) + 1, clip_w - 1)
        y_start = max(int(min(ys)) - 1, 0)
        y_end = min(int(max(ys)) + 1, clip_h - 1)
        colors = [v.color for v in tri]
        uvs = [v.uv for v in tri]
        written = 0
        for y in range(y_start, y_end + 1):
            row = target.pixels[y]
            for x in range(x_start, x_end + 1):
                p = (x + 0.5, y + 0.5)
                weights = [_edge(a, b, p) for a, b in edges]
                if any(w < 0 or (w == 0 and not own) for w, own in zip(weights, owned)):
                    continue
                bary = (weights[0] / area, weights[1] / area, weights[2] / area)
                color = _lerp(bary, colors)
                uv = _lerp(bary, uvs)
                fragment = shade_fragment(color, _sample(texture, (uv[0], uv[1])))
                if fragment is None:
                    continue
                row[x] = blend(fragment, row[x])
                written += 1
        return written

    def destroy(self) -> None:
        """Release the pipeline; drawing afterwards is an error."""
        self.is_alive = False