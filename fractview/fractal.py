"""Escape-time fractals: Julia, Mandelbrot and the burning ship."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

from fractview.pixels import PixelBuffer

DEFAULT_ITERATIONS = 100
DEFAULT_JULIA_C = complex(0.285, 0.01)
DEFAULT_COLOR = 6
_ESCAPE_RADIUS_SQUARED = 4.0
_OPAQUE = 0xFF000000
_COLOR_MASK = 0xFFFFFFFF


class FractalKind(enum.IntEnum):
    """The fractals that can be drawn."""

    JULIA = 0
    MANDELBROT = 1
    BURNING_SHIP = 2


_NAMES = {
    "julia": FractalKind.JULIA,
    "mandelbrot": FractalKind.MANDELBROT,
}
_BONUS_NAMES = {**_NAMES, "burning-ship": FractalKind.BURNING_SHIP}


@dataclass
class Viewport:
    """The region of the plane shown and the drawing settings."""

    kind: FractalKind
    width: int
    height: int
    bonus: bool = False
    x_min: float = -2.0
    x_max: float = 2.0
    y_min: float = -2.0
    y_max: float = 2.0
    x_move: float = 0.0
    y_move: float = 0.0
    zoom: float = 1.0
    pixel_print: int = 1
    cx_custom: float = 0.0
    cy_custom: float = 0.0
    iteration: int = DEFAULT_ITERATIONS
    color: int = DEFAULT_COLOR
    x_mouse: int = 0
    y_mouse: int = 0


def fractal_kind(name: str, bonus: bool = False) -> FractalKind:
    """Return the fractal called ``name``; raise ValueError for an unknown one."""
    names = _BONUS_NAMES if bonus else _NAMES
    try:
        return names[name]
    except KeyError:
        raise ValueError(f"unknown fractal: {name!r}") from None


def initial_view(
    kind: FractalKind,
    params: Sequence[float] | None,
    argc: int,
    width: int,
    height: int,
    bonus: bool = False,
) -> Viewport:
    """Build the starting viewport; custom constants are used when ``argc`` is 4."""
    view = Viewport(
        kind=kind,
        width=width,
        height=height,
        bonus=bonus,
        x_mouse=int(width * 0.5),
        y_mouse=int(height * 0.5),
    )
    if argc == 4:
        if params is None or len(params) < 2:
            raise ValueError("two custom parameters are required")
        view.cx_custom = params[0]
        view.cy_custom = params[1]
    return view


def _aspect(view: Viewport) -> tuple[int, int]:
    if view.width > view.height:
        return view.width // view.height, 1
    return 1, view.height // view.width


def _map(view: Viewport, x: int, y: int) -> complex:
    ar_width, ar_height = _aspect(view)
    real = (view.x_min + (x / view.width) * (view.x_max - view.x_min) + view.x_move) * ar_width
    imag = (view.y_min + (y / view.height) * (view.y_max - view.y_min) + view.y_move) * ar_height
    return complex(real, imag)


def _has_custom_constant(view: Viewport) -> bool:
    if view.bonus:
        return bool(view.cx_custom and view.cy_custom)
    return bool(view.cx_custom or view.cy_custom)


def start_point(view: Viewport, x: int, y: int) -> tuple[complex, complex]:
    """Return the starting value ``z`` and the constant ``c`` for pixel ``(x, y)``."""
    custom = complex(view.cx_custom, view.cy_custom)
    if view.kind is FractalKind.JULIA:
        c = custom if _has_custom_constant(view) else DEFAULT_JULIA_C
        return _map(view, x, y), c
    return custom, _map(view, x, y)


def step(kind: FractalKind, z: complex, c: complex) -> complex:
    """Apply one iteration of the fractal's recurrence."""
    if kind is FractalKind.BURNING_SHIP:
        x, y = z.real, z.imag
        return complex(x * x - y * y + c.real, abs(2 * x * y) + c.imag)
    return z * z + c


def escape_time(view: Viewport, x: int, y: int) -> int:
    """Count iterations before escape; ``iteration + 1`` means the point stayed bounded."""
    z, c = start_point(view, x, y)
    n = 0
    while z.real * z.real + z.imag * z.imag < _ESCAPE_RADIUS_SQUARED:
        n += 1
        if n > view.iteration:
            break
        z = step(view.kind, z, c)
    return n


def pixel_color(view: Viewport, n: int) -> int:
    """Return the 32-bit colour for an escape count ``n``; bounded points are black."""
    if n == view.iteration + 1:
        return 0
    offset = view.color * 0.1 if view.bonus else 0.6
    v = (n / 150.0 + offset) ** 2
    red = int(v * 75)
    green = int(v * 40)
    blue = int(v * 255)
    return (_OPAQUE | red << 16 | green << 8 | blue) & _COLOR_MASK


def render(view: Viewport, buffer: PixelBuffer) -> PixelBuffer:
    """Draw the whole fractal into ``buffer`` and return it."""
    for y in range(view.height):
        x = 0
        while x < view.width:
            n = escape_time(view, x, y)
            x += view.pixel_print
            if n == view.iteration + 1:
                buffer.set_pixel(x, y, 0)
                continue
            color = pixel_color(view, n)
            for offset in range(view.pixel_print - 1, -2, -1):
                buffer.set_pixel(x - offset, y, color)
    return buffer


def shift_color(view: Viewport) -> None:
    """Advance the colour offset, wrapping to zero once it passes 100."""
    if view.color < 100:
        view.color += 3
    else:
        view.color = 0