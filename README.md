# fractview

An interactive fractal explorer. It draws the Julia set and the Mandelbrot
set in an 800×800 window. With `--bonus` it also draws the burning ship. In
that mode you can pan and recolour the view, and zooming follows the pointer.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
fractview <fractal_name> [<Cx> <Cy>] [--bonus]
```

Fractal names:

1. `mandelbrot`
2. `julia`
3. `burning-ship` (only with `--bonus`)

The optional `Cx` and `Cy` set a custom complex constant. Both must be given
for it to be used.

- For the Julia set it is the constant `c`.
  - Without `--bonus`, it is used when either part is non-zero.
  - With `--bonus`, it is used only when both parts are non-zero.
  - Otherwise `0.285 + 0.01i` is used.
- For the Mandelbrot set and the burning ship it is the starting point `z0`.

The numbers are read as `[sign]digits[.digits]`.

```
fractview julia -0.8 0.156
fractview mandelbrot
fractview burning-ship --bonus
```

If the name is unknown or the number of arguments is wrong, the program
prints the usage text and exits with status 0.

## Controls

| Input                  | Effect                                                          |
|------------------------|-----------------------------------------------------------------|
| Mouse wheel up / down  | Zoom in / out. With `--bonus`, the view also shifts towards the pointer. |
| `1` / `2`              | Coarser / finer pixel stepping (coarser draws faster)           |
| Escape, or closing the window | Quit                                                     |

These controls work only with `--bonus`:

| Input                        | Effect                       |
|------------------------------|------------------------------|
| Right arrow or `D`           | Pan in +x                    |
| Left arrow or `A`            | Pan in −x                    |
| Down arrow or `S`            | Pan in +y                    |
| Up arrow or `W`              | Pan in −y                    |
| Left Shift                   | Shift the colour palette     |

With `--bonus`, any other letter key clears the window without redrawing it.

## Using it as a library

The fractal maths does not depend on a window, so you can call it directly:

```python
from fractview.fractal import fractal_kind, initial_view, render
from fractview.pixels import PixelBuffer

kind = fractal_kind("burning-ship", bonus=True)
view = initial_view(kind, [], 2, 400, 400, bonus=True)
buffer = render(view, PixelBuffer(400, 400))
row = next(buffer.rows())
```

### `fractview.fractal`

- `FractalKind`
- `Viewport`
- `escape_time`
- `pixel_color`
- `start_point`
- `step`
- `shift_color`

### `fractview.events`

- `key_event` and `mouse_event` apply input to a `Viewport`.
- Both return an `Action`: `NONE`, `CLEAR`, `REDRAW` or `QUIT`.

### Other modules

- `fractview.parse` holds `atoi`, `atof` and `parse_params`.
- `fractview.printf` holds `format_printf` and `printf`. They handle the
  conversions `%c %s %p %d %i %u %x %X %%`.

### Software renderer

A small software renderer is also included:

| Module                        | What it holds |
|-------------------------------|---------------|
| `fractview.framebuffer`       | `FrameBuffer` |
| `fractview.swapchain`         | `SwapChain`, plus the image-count, extent and present-mode choices |
| `fractview.pipeline`          | `GraphicPipeline`, which rasterises indexed, coloured, textured triangles with alpha blending |
| `fractview.renderer`          | `Renderer`, which handles frames in flight and resizing |
| `fractview.font`              | Glyph atlases built with Pillow |
| `fractview.font_library`      | `FontLibrary` |
| `fractview.text`              | `Text` |
| `fractview.text_library`      | `TextLibrary` |
| `fractview.text_descriptor`   | `TextDrawDescriptor` |
| `fractview.text_manager`      | `TextManager` |

## Limitations

The viewer window does not use the software renderer or the text modules. It
draws the `PixelBuffer` through pygame, and it shows no on-screen text. The
window size is fixed at 800×800.