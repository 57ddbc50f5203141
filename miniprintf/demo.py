"""Demonstration comparing this printf with Python's own % formatting."""

from __future__ import annotations

import sys
from typing import Any, NamedTuple

from miniprintf.printf import printf


class _Case(NamedTuple):
    fmt: str
    args: tuple[Any, ...]
    reference_fmt: str
    reference_args: tuple[Any, ...]


_CASES = (
    _Case("Test char: %c\n", ("A",), "Test char: %c\n", ("A",)),
    _Case("", (), "", ()),
    _Case(
        "Test string: %s\n",
        ("Hello, World!",),
        "Test string: %s\n",
        ("Hello, World!",),
    ),
    _Case("Test pointer: %p\n", (0x12345678,), "Test pointer: %#x\n", (0x12345678,)),
    _Case("Test decimal: %d\n", (-42,), "Test decimal: %d\n", (-42,)),
    _Case("Test integer: %i\n", (2147483647,), "Test integer: %i\n", (2147483647,)),
    _Case("Test unsigned: %u\n", (4294967295,), "Test unsigned: %u\n", (4294967295,)),
    _Case("Test hex lower: %x\n", (255,), "Test hex lower: %x\n", (255,)),
    _Case("Test hex upper: %X\n", (255,), "Test hex upper: %X\n", (255,)),
    _Case("Test percent: %%\n", (), "Test percent: %%\n", ()),
    _Case("Test NULL string: %s\n", (None,), "Test NULL string: %s\n", ("(null)",)),
    _Case("Test NULL pointer: %p\n", (None,), "Test NULL pointer: (nil)\n", ()),
)


def main(argv: list[str] | None = None) -> int:
    """Print every demo case twice and report both lengths."""
    out = sys.stdout
    for case in _CASES:
        ours = printf(case.fmt, *case.args, file=out)
        reference = case.reference_fmt % case.reference_args
        out.write(reference)
        printf(
            "ft_printf return: %d, printf return: %d\n\n",
            ours,
            len(reference),
            file=out,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())