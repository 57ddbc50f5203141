import pytest

from miniprintf.conversions import (
    format_char,
    format_hex,
    format_nbr,
    format_percent,
    format_ptr,
    format_str,
    format_unsigned,
)


def test_char_from_str():
    assert format_char("A") == "A"


def test_char_from_int():
    assert format_char(65) == "A"


def test_char_truncates_to_byte():
    assert format_char(0x141) == format_char(0x41)


def test_char_zero_is_nul():
    assert format_char(0) == "\x00"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("AB")


def test_char_rejects_float():
    with pytest.raises(TypeError):
        format_char(1.5)


def test_str_plain():
    assert format_str("Hello, World!") == "Hello, World!"


def test_str_empty():
    assert format_str("") == ""


def test_str_none():
    assert format_str(None) == "(null)"


def test_str_rejects_int():
    with pytest.raises(TypeError):
        format_str(5)


def test_percent():
    assert format_percent() == "%"


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_nbr_round_trip(n):
    assert int(format_nbr(n)) == n


def test_nbr_wraps_to_32_bits():
    assert format_nbr(2**31) == format_nbr(-(2**31))
    assert format_nbr(2**32 + 7) == format_nbr(7)


def test_nbr_rejects_float():
    with pytest.raises(TypeError):
        format_nbr(1.5)


def test_unsigned_max():
    assert format_unsigned(4294967295) == "4294967295"


def test_unsigned_negative_wraps():
    assert format_unsigned(-1) == format_unsigned(4294967295)


@pytest.mark.parametrize("n", [0, 7, 10, 1000, 4294967295])
def test_unsigned_round_trip(n):
    assert int(format_unsigned(n)) == n


@pytest.mark.parametrize("n", [0, 9, 10, 15, 16, 255, 0x12345678, 0xFFFFFFFF])
def test_hex_round_trip(n):
    text = format_hex(n, "x")
    assert int(text, 16) == n
    assert text == text.lower()
    assert format_hex(n, "X") == text.upper()


def test_hex_zero():
    assert format_hex(0, "x") == "0"


def test_hex_no_leading_zeros():
    for n in (1, 16, 256, 4096):
        assert not format_hex(n, "x").startswith("0")


def test_hex_known_value():
    assert format_hex(255, "x") == "ff"


def test_hex_negative_wraps():
    assert int(format_hex(-1, "x"), 16) == 0xFFFFFFFF


def test_hex_bad_spec():
    with pytest.raises(ValueError):
        format_hex(1, "q")


def test_ptr_null():
    assert format_ptr(0) == "(nil)"
    assert format_ptr(None) == "(nil)"


def test_ptr_value():
    assert format_ptr(0x12345678) == "0x12345678"


@pytest.mark.parametrize("n", [1, 15, 16, 0xDEADBEEF, 2**63, 2**64 - 1])
def test_ptr_round_trip(n):
    text = format_ptr(n)
    assert text.startswith("0x")
    assert int(text[2:], 16) == n
    assert text == text.lower()


def test_ptr_wraps_to_64_bits():
    assert int(format_ptr(-1)[2:], 16) == 2**64 - 1