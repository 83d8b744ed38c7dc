import pytest

from fractview.fractal import (
    DEFAULT_ITERATIONS,
    FractalKind,
    escape_time,
    fractal_kind,
    initial_view,
    pixel_color,
    render,
    shift_color,
    start_point,
    step,
)
from fractview.pixels import PixelBuffer


def test_fractal_kind_names():
    assert fractal_kind("julia") is FractalKind.JULIA
    assert fractal_kind("mandelbrot") is FractalKind.MANDELBROT
    assert fractal_kind("burning-ship", bonus=True) is FractalKind.BURNING_SHIP


def test_burning_ship_needs_bonus():
    with pytest.raises(ValueError):
        fractal_kind("burning-ship")


def test_unknown_fractal():
    with pytest.raises(ValueError):
        fractal_kind("sierpinski", bonus=True)


def test_initial_view_defaults():
    view = initial_view(FractalKind.MANDELBROT, [], 2, 800, 600)
    assert (view.x_min, view.x_max, view.y_min, view.y_max) == (-2.0, 2.0, -2.0, 2.0)
    assert view.pixel_print == 1
    assert view.zoom == 1.0
    assert view.iteration == DEFAULT_ITERATIONS
    assert (view.cx_custom, view.cy_custom) == (0.0, 0.0)
    assert (view.x_mouse, view.y_mouse) == (400, 300)


def test_initial_view_custom_params_only_with_four_args():
    view = initial_view(FractalKind.JULIA, [0.5, -0.25], 4, 100, 100)
    assert (view.cx_custom, view.cy_custom) == (0.5, -0.25)
    other = initial_view(FractalKind.JULIA, [0.5], 3, 100, 100)
    assert (other.cx_custom, other.cy_custom) == (0.0, 0.0)


def test_julia_default_constant():
    view = initial_view(FractalKind.JULIA, [], 2, 4, 4)
    z, c = start_point(view, 0, 0)
    assert c == complex(0.285, 0.01)
    assert z == complex(-2.0, -2.0)


def test_julia_custom_constant_rule_differs_with_bonus():
    plain = initial_view(FractalKind.JULIA, [0.5, 0.0], 4, 4, 4)
    bonus = initial_view(FractalKind.JULIA, [0.5, 0.0], 4, 4, 4, bonus=True)
    assert start_point(plain, 1, 1)[1] == complex(0.5, 0.0)
    assert start_point(bonus, 1, 1)[1] == complex(0.285, 0.01)


def test_mandelbrot_start_point_uses_custom_start():
    view = initial_view(FractalKind.MANDELBROT, [0.5, 0.25], 4, 4, 4)
    z, c = start_point(view, 2, 2)
    assert z == complex(0.5, 0.25)
    assert c == complex(0.0, 0.0)


def test_step_mandelbrot_from_zero_gives_constant():
    c = complex(0.3, -0.7)
    assert step(FractalKind.MANDELBROT, 0j, c) == c


def test_step_burning_ship_takes_absolute_imaginary():
    z = complex(1.0, -1.0)
    mandel = step(FractalKind.MANDELBROT, z, 0j)
    ship = step(FractalKind.BURNING_SHIP, z, 0j)
    assert ship.real == mandel.real
    assert ship.imag == abs(mandel.imag)


def test_bounded_point_reports_iteration_plus_one():
    view = initial_view(FractalKind.MANDELBROT, [], 2, 4, 4)
    view.iteration = 20
    assert escape_time(view, 2, 2) == view.iteration + 1
    assert pixel_color(view, view.iteration + 1) == 0


def test_far_point_escapes_immediately():
    view = initial_view(FractalKind.MANDELBROT, [], 2, 4, 4)
    assert escape_time(view, 0, 0) == 1


def test_pixel_color_is_opaque():
    view = initial_view(FractalKind.MANDELBROT, [], 2, 4, 4)
    for n in range(0, 10):
        assert pixel_color(view, n) & 0xFF000000 == 0xFF000000


def test_render_paints_shifted_columns():
    view = initial_view(FractalKind.MANDELBROT, [], 2, 4, 4)
    view.iteration = 20
    buffer = render(view, PixelBuffer(4, 4))
    assert buffer.get_pixel(3, 2) == 0
    assert buffer.get_pixel(1, 2) == pixel_color(view, escape_time(view, 0, 2))


def test_shift_color_wraps():
    view = initial_view(FractalKind.MANDELBROT, [], 2, 4, 4, bonus=True)
    shift_color(view)
    assert view.color == 9
    view.color = 100
    shift_color(view)
    assert view.color == 0