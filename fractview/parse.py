"""Parsing of the numeric command-line parameters."""

from __future__ import annotations

from collections.abc import Iterable

_WHITESPACE = frozenset(" \t\n\v\f\r")


def atoi(text: str) -> int:
    """Read an optionally signed decimal integer after leading whitespace.

    Parsing stops at the first character that is not a digit; a string
    without digits gives 0.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    negative = False
    if position < length and text[position] in "+-":
        negative = text[position] == "-"
        position += 1
    result = 0
    while position < length and "0" <= text[position] <= "9":
        result = result * 10 + ord(text[position]) - ord("0")
        position += 1
    return -result if negative else result


def atof(text: str) -> float:
    """Read a decimal number of the form ``[sign]digits[.digits]``.

    The integer part is read with :func:`atoi`; the fractional digits are
    then added and, when the text starts with ``-``, the sum is negated.
    """
    result = float(atoi(text))
    dot = text.find(".")
    if dot < 0:
        return result
    weight = 0.1
    for ch in text[dot + 1:]:
        if not "0" <= ch <= "9":
            break
        result += (ord(ch) - ord("0")) * weight
        weight *= 0.1
    if text.startswith("-"):
        return -result
    return result


def parse_params(args: Iterable[str]) -> list[float]:
    """Convert each parameter string with :func:`atof`."""
    return [atof(arg) for arg in args]