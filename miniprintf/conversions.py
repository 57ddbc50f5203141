"""Single-conversion formatters used by the printf family.

Each function renders one value the way the matching conversion
specifier does and returns the resulting text.
"""

from __future__ import annotations

import operator

_INT_BITS = 32
_PTR_BITS = 64
_UINT_MASK = (1 << _INT_BITS) - 1
_PTR_MASK = (1 << _PTR_BITS) - 1
_INT_MIN = -(1 << (_INT_BITS - 1))

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"
POINTER_PREFIX = "0x"


def _as_int(value: object) -> int:
    """Return *value* as a Python int, rejecting non-integral types."""
    return operator.index(value)


def _to_signed32(n: int) -> int:
    return ((n - _INT_MIN) & _UINT_MASK) + _INT_MIN


def format_char(c: int | str) -> str:
    """Render ``%c``: one character, integers truncated to a single byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"%c expects a single character, got {c!r}")
        return c
    return chr(_as_int(c) & 0xFF)


def format_str(s: str | None) -> str:
    """Render ``%s``; ``None`` becomes ``(null)``."""
    if s is None:
        return NULL_STRING
    if not isinstance(s, str):
        raise TypeError(f"%s expects a string or None, got {type(s).__name__}")
    return s


def format_percent() -> str:
    """Render ``%%``."""
    return "%"


def format_nbr(n: int) -> str:
    """Render ``%d``/``%i``: a signed 32-bit decimal integer."""
    return str(_to_signed32(_as_int(n)))


def format_unsigned(n: int) -> str:
    """Render ``%u``: an unsigned 32-bit decimal integer."""
    return str(_as_int(n) & _UINT_MASK)


def format_hex(num: int, spec: str) -> str:
    """Render ``%x`` or ``%X``: an unsigned 32-bit hexadecimal integer."""
    if spec not in ("x", "X"):
        raise ValueError(f"hex specifier must be 'x' or 'X', got {spec!r}")
    return format(_as_int(num) & _UINT_MASK, spec)


def format_ptr(ptr: int | None) -> str:
    """Render ``%p``: ``0x``-prefixed lowercase hex, or ``(nil)`` for null."""
    value = 0 if ptr is None else _as_int(ptr) & _PTR_MASK
    if value == 0:
        return NULL_POINTER
    return POINTER_PREFIX + format(value, "x")