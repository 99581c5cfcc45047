"""Lenient decimal parsing in the style of the classic ``atoi``."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\r\v\f")
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace is skipped, one optional ``+`` or ``-`` is accepted,
    and ASCII digits are read up to the first other character. Text without
    digits yields 0.
    """
    if not isinstance(text, str):
        raise TypeError(f"atoi() expects str, not {type(text).__name__}")
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    result = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        result = result * 10 + _DIGITS.index(ch)
    return sign * result