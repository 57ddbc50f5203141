"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator
from functools import partial
from typing import Any, TextIO

from miniprintf.conversions import (
    format_char,
    format_hex,
    format_nbr,
    format_percent,
    format_ptr,
    format_str,
    format_unsigned,
)


class FormatError(ValueError):
    """Raised when a format string cannot be rendered."""


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_str,
    "d": format_nbr,
    "i": format_nbr,
    "u": format_unsigned,
    "x": partial(format_hex, spec="x"),
    "X": partial(format_hex, spec="X"),
    "p": format_ptr,
}


def _render(fmt: str, args: Iterable[Any]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield format_percent()
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            # Unknown specifiers produce nothing and consume no argument.
            continue
        try:
            value = next(values)
        except StopIteration:
            raise FormatError(f"missing argument for %{spec}") from None
        yield converter(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions filled from *args*."""
    if fmt is None:
        raise FormatError("format string is None")
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to *file* (stdout by default); return its length."""
    text = sprintf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)