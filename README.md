# miniprintf

A small printf-style formatter with a fixed set of conversions. It has no
flags, widths, precisions or length modifiers.

## Supported conversions

| Spec | Argument                     | Output                                                   |
|------|------------------------------|----------------------------------------------------------|
| `%c` | one-character `str`, or int  | the character; an int is reduced to its low byte first   |
| `%s` | `str` or `None`              | the string, or `(null)` for `None`                       |
| `%p` | int or `None`                | `0x` and lowercase hex of the value taken as 64 bits, or `(nil)` for 0 or `None` |
| `%d` | int                          | decimal of the value wrapped to a signed 32-bit integer  |
| `%i` | int                          | same as `%d`                                             |
| `%u` | int                          | decimal of the value taken as an unsigned 32-bit integer |
| `%x` | int                          | lowercase hex of the value taken as unsigned 32 bits     |
| `%X` | int                          | uppercase hex of the value taken as unsigned 32 bits     |
| `%%` | none                         | a literal `%`                                            |

Other details of the format string:

- If `%` is followed by any other character, both are dropped from the
  output and no argument is consumed.
- A lone `%` at the very end of the format string is dropped.
- Arguments left over after the format string is done are ignored.

Integer arguments may be any object usable as an index (`int`, `bool`,
objects with `__index__`); other types raise `TypeError`.

## Installation

```
pip install miniprintf
```

## Usage

```python
from miniprintf.printf import sprintf, printf

text = sprintf("Value: %d, hex: %x\n", -42, 255)
# 'Value: -42, hex: ff\n'

count = printf("Hello, %s!\n", "World")
# writes to standard output and returns the number of characters written: 14
```

`printf` takes an optional keyword argument `file` naming a text stream to
write to; it defaults to standard output. It returns the length of the
text written.

The single-conversion helpers live in `miniprintf.conversions`:
`format_char`, `format_str`, `format_percent`, `format_nbr`,
`format_unsigned`, `format_hex` (with `spec` set to `"x"` or `"X"`) and
`format_ptr`. Each returns the rendered text.

## Errors

`sprintf` and `printf` raise `miniprintf.printf.FormatError` (a subclass
of `ValueError`) when the format string is `None` or when a conversion has
no argument left to consume. Bad argument values are reported by the
conversion helpers themselves: `%c` with a string that is not exactly one
character raises `ValueError`, and `%s` with something other than a string
or `None` raises `TypeError`.

## Demo

To print a series of sample conversions, each shown once by this package
and once by Python's own `%` formatting, followed by a line giving the
length each produced:

```
miniprintf-demo
```