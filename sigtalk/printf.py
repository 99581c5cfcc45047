"""A small ``printf``-style formatter with the conversions c, s, d, i, u, x, X, p and %."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any

from sigtalk.numfmt import itoa, itoa_hex, itoa_ptr, itoa_unsigned


def _convert_char(value: Any) -> str:
    """One character: a one-character string, or the low byte of an integer."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _convert_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects str or None, not {type(value).__name__}")
    return value


def _convert_pointer(value: Any) -> str:
    if value is None:
        return itoa_ptr(0)
    return itoa_ptr(value)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _convert_char,
    "s": _convert_string,
    "d": itoa,
    "i": itoa,
    "u": itoa_unsigned,
    "x": lambda value: itoa_hex(value, upper=False),
    "X": lambda value: itoa_hex(value, upper=True),
    "p": _convert_pointer,
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    chars = iter(fmt)
    remaining = iter(args)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            # Unknown conversions produce nothing and consume no argument.
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        yield convert(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by the formatted *args*."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)