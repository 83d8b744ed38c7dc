"""A small printf with the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

NULL_POINTER = "(nil)"
NULL_STRING = "(null)"

_UINT32_MASK = 0xFFFFFFFF
_UINTPTR_MASK = (1 << 64) - 1


def _int32(value: Any) -> int:
    number = int(value) & _UINT32_MASK
    return number - (1 << 32) if number & 0x80000000 else number


def _uint32(value: Any) -> int:
    return int(value) & _UINT32_MASK


def _char(value: Any, _spec: str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any, _spec: str) -> str:
    return NULL_STRING if value is None else str(value)


def _pointer(value: Any, _spec: str) -> str:
    if value is None or (isinstance(value, int) and value == 0):
        return NULL_POINTER
    address = value if isinstance(value, int) else id(value)
    return f"0x{address & _UINTPTR_MASK:x}"


def _signed(value: Any, _spec: str) -> str:
    return str(_int32(value))


def _unsigned(value: Any, _spec: str) -> str:
    return str(_uint32(value))


def _hexadecimal(value: Any, spec: str) -> str:
    return format(_uint32(value), spec)


_CONVERSIONS: dict[str, Callable[[Any, str], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hexadecimal,
    "X": _hexadecimal,
}


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text that printf would write for ``fmt`` and ``args``.

    Unknown conversions produce nothing and consume no argument; a lone
    trailing ``%`` is dropped.
    """
    if fmt is None:
        raise ValueError("format string is missing")
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        pieces.append(convert(value, spec))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    text = format_printf(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)