"""Keyboard and mouse-wheel handling for the fractal viewer."""

from __future__ import annotations

import enum

from fractview.fractal import Viewport, shift_color

KEY_ESCAPE = 41
KEY_FINER = 30
KEY_COARSER = 31
KEY_COLOR_SHIFT = 225
WHEEL_UP = 1
WHEEL_DOWN = 2

_RIGHT = (79, 7)
_LEFT = (80, 4)
_DOWN = (81, 22)
_UP = (82, 26)


class Action(enum.IntEnum):
    """What the caller must do after an event, in rising order of effect."""

    NONE = 0
    CLEAR = 1
    REDRAW = 2
    QUIT = 3


def mouse_caption(pos: int, size: int) -> float:
    """Return the offset of ``pos`` from the window centre, scaled to [-2, 2]."""
    half = size // 2
    return ((pos - half) * 2) / half


def move(view: Viewport, key: int) -> Action:
    """Pan the view for an arrow or letter key; the window is cleared in any case."""
    step = 0.1 * view.zoom
    if key in _RIGHT:
        view.x_move += step
    elif key in _LEFT:
        view.x_move -= step
    elif key in _DOWN:
        view.y_move += step
    elif key in _UP:
        view.y_move -= step
    else:
        return Action.CLEAR
    return Action.REDRAW


def _is_move_key(key: int) -> bool:
    return 79 <= key <= 82 or 4 <= key < 30


def key_event(view: Viewport, key: int, mouse: tuple[int, int] | None = None) -> Action:
    """Apply a key press to ``view`` and return what must follow."""
    if view.bonus and mouse is not None:
        view.x_mouse, view.y_mouse = mouse
    if key == KEY_ESCAPE:
        return Action.QUIT
    action = Action.NONE
    if key == KEY_FINER:
        view.pixel_print += 1
        action = Action.REDRAW
    if key == KEY_COARSER and view.pixel_print > 1:
        view.pixel_print -= 1
        action = Action.REDRAW
    if view.bonus:
        if _is_move_key(key):
            action = max(action, move(view, key))
        if key == KEY_COLOR_SHIFT:
            shift_color(view)
            action = Action.REDRAW
    return action


def _scale(view: Viewport, factor: float) -> None:
    view.x_min *= factor
    view.x_max *= factor
    view.y_min *= factor
    view.y_max *= factor
    view.zoom *= factor


def mouse_event(view: Viewport, event: int, mouse: tuple[int, int] | None = None) -> Action:
    """Zoom for a wheel event; with the bonus, the view also follows the pointer."""
    if event == WHEEL_DOWN:
        _scale(view, 2.0)
    elif event == WHEEL_UP:
        _scale(view, 0.5)
    if view.bonus:
        if mouse is not None:
            view.x_mouse, view.y_mouse = mouse
        view.x_move += mouse_caption(view.x_mouse, view.width) * view.zoom
        view.y_move += mouse_caption(view.y_mouse, view.height) * view.zoom
    return Action.REDRAW