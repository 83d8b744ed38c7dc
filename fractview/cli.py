"""Command-line entry point: parse the arguments and open the viewer window."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from fractview.events import WHEEL_DOWN, WHEEL_UP, Action, key_event, mouse_event
from fractview.fractal import Viewport, fractal_kind, initial_view, render
from fractview.parse import parse_params
from fractview.pixels import PixelBuffer
from fractview.printf import printf

WIDTH = 800
HEIGHT = 800
FPS = 60
BONUS_FLAG = "--bonus"


def usage(bonus: bool = False) -> str:
    """Return the usage text shown when the arguments are wrong."""
    text = (
        "Use this format :"
        " ./fractview <fractol_name> <Cx> <Cy>\n"
        "Fractol name :\n1) mandelbrot\n2) julia\n"
    )
    if bonus:
        text += "3) burning-ship\n"
    return text


def _configure(args: Sequence[str], bonus: bool) -> Viewport | None:
    argc = len(args) + 1
    if argc < 2 or argc > 4:
        return None
    params = parse_params(args[1:])
    try:
        kind = fractal_kind(args[0], bonus)
    except ValueError:
        return None
    return initial_view(kind, params, argc, WIDTH, HEIGHT, bonus)


def _to_bytes(buffer: PixelBuffer) -> bytes:
    return bytes(
        channel
        for row in buffer.rows()
        for color in row
        for channel in ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
    )


def _run(view: Viewport) -> None:
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((view.width, view.height))
        pygame.display.set_caption("Fractol Bonus" if view.bonus else "Fractol")
        clock = pygame.time.Clock()
        buffer = render(view, PixelBuffer(view.width, view.height))
        running = True
        while running:
            for event in pygame.event.get():
                action = Action.NONE
                if event.type == pygame.QUIT:
                    action = Action.QUIT
                elif event.type == pygame.KEYDOWN:
                    action = key_event(view, event.scancode, pygame.mouse.get_pos())
                elif event.type == pygame.MOUSEWHEEL:
                    if event.y > 0:
                        wheel = WHEEL_UP
                    elif event.y < 0:
                        wheel = WHEEL_DOWN
                    else:
                        wheel = 0
                    action = mouse_event(view, wheel, pygame.mouse.get_pos())
                if action is Action.QUIT:
                    running = False
                    break
                if action >= Action.CLEAR:
                    buffer.clear()
                if action >= Action.REDRAW:
                    render(view, buffer)
            if buffer.modified:
                surface = pygame.image.frombuffer(
                    _to_bytes(buffer), (view.width, view.height), "RGB"
                )
                screen.blit(surface, (0, 0))
                buffer.modified = False
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the viewer; print the usage text when the arguments are wrong.

    A ``--bonus`` flag enables panning, colour shifting and the burning ship.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = BONUS_FLAG in args
    args = [arg for arg in args if arg != BONUS_FLAG]
    view = _configure(args, bonus)
    if view is None:
        printf("%s", usage(bonus))
        return 0
    _run(view)
    return 0