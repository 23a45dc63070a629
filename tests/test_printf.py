import pytest

from fdfview.printf import (
    format_hex,
    format_pointer,
    format_signed,
    format_string,
    format_unsigned,
    printf,
    render_format,
)


@pytest.mark.parametrize("number", [0, 1, 15, 16, 255, 4096, 123456789, 2**32 - 1])
def test_format_hex_round_trip(number):
    assert int(format_hex(number, "x"), 16) == number
    assert format_hex(number, "X") == format_hex(number, "x").upper()


def test_format_hex_wraps_negative_to_unsigned():
    assert format_hex(-1, "x") == "ffffffff"


def test_format_hex_rejects_other_conversion():
    with pytest.raises(ValueError):
        format_hex(10, "d")


def test_format_pointer_zero():
    assert format_pointer(0) == "0x0"


@pytest.mark.parametrize("ptr", [1, 0xDEAD, 2**40 + 7, 2**64 - 1])
def test_format_pointer_round_trip(ptr):
    text = format_pointer(ptr)
    assert text.startswith("0x")
    assert int(text[2:], 16) == ptr


def test_format_signed_int_min():
    assert format_signed(-2147483648) == "-2147483648"


@pytest.mark.parametrize("number", [0, 7, -7, 2147483647, -2147483647])
def test_format_signed_in_range(number):
    assert format_signed(number) == str(number)


def test_format_signed_wraps_past_int_max():
    assert format_signed(2**31) == format_signed(-(2**31))


def test_format_unsigned_wraps_negative():
    assert int(format_unsigned(-1)) == 2**32 - 1
    assert format_unsigned(42) == str(42)


def test_format_string_null():
    assert format_string(None) == "(null)"
    assert format_string("map") == "map"


def test_render_plain_text_passes_through():
    assert render_format("Map's empty") == "Map's empty"


def test_render_conversions():
    assert render_format("x%dy", 42) == "x" + str(42) + "y"
    assert render_format("%s|%c", "abc", "z") == "abc|z"
    assert render_format("%c", ord("A")) == "A"
    assert render_format("%u", -1) == format_unsigned(-1)
    assert render_format("%x%X", 255, 255) == format_hex(255, "x") + format_hex(255, "X")
    assert render_format("%p", 0) == format_pointer(0)
    assert render_format("%i", -5) == str(-5)


def test_render_percent_literal():
    assert render_format("100%%") == "100%"


def test_render_unknown_conversion_drops_percent():
    assert render_format("a%qb") == "aqb"


def test_render_trailing_percent_dropped():
    assert render_format("abc%") == "abc"


def test_render_missing_argument():
    with pytest.raises(TypeError):
        render_format("%d %d", 1)


def test_printf_writes_and_returns_length(capsys):
    count = printf("%s wrong hex value, %c", "0xZZ", "Z")
    out = capsys.readouterr().out
    assert out == render_format("%s wrong hex value, %c", "0xZZ", "Z")
    assert count == len(out)