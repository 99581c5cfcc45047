"""Integer-to-text conversions used by the formatter."""

from __future__ import annotations

import operator

_INT_BITS = 32
_UINT_MOD = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))
_PTR_MOD = 1 << 64


def _as_uint32(n: int) -> int:
    """Reduce *n* to the value a 32-bit unsigned integer would hold."""
    return operator.index(n) % _UINT_MOD


def _as_int32(n: int) -> int:
    """Reduce *n* to the value a 32-bit signed integer would hold."""
    value = _as_uint32(n)
    return value - _UINT_MOD if value >= -_INT_MIN else value


def _digits(value: int, base: int, alphabet: str) -> str:
    """Render a non-negative *value* in *base*, most significant digit first."""
    if value == 0:
        return alphabet[0]
    out = []
    while value:
        value, digit = divmod(value, base)
        out.append(alphabet[digit])
    return "".join(reversed(out))


_DEC = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def itoa(n: int) -> str:
    """Signed decimal text of *n*, taken as a 32-bit signed integer."""
    value = _as_int32(n)
    if value < 0:
        return "-" + _digits(-value, 10, _DEC)
    return _digits(value, 10, _DEC)


def itoa_unsigned(n: int) -> str:
    """Decimal text of *n*, taken as a 32-bit unsigned integer."""
    return _digits(_as_uint32(n), 10, _DEC)


def itoa_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal text of *n*, taken as a 32-bit unsigned integer, without prefix."""
    return _digits(_as_uint32(n), 16, _HEX_UPPER if upper else _HEX_LOWER)


def itoa_ptr(n: int) -> str:
    """Pointer text: ``(nil)`` for zero, otherwise ``0x`` followed by lower-case hex."""
    value = operator.index(n) % _PTR_MOD
    if value == 0:
        return "(nil)"
    return "0x" + _digits(value, 16, _HEX_LOWER)