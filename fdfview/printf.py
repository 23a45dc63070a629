"""A small printf: %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import sys
from typing import Any

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_UINT32 = 0xFFFFFFFF
_SIZE_T = 0xFFFFFFFFFFFFFFFF


def _to_uint32(number: int) -> int:
    return operator.index(number) & _UINT32


def _to_int32(number: int) -> int:
    value = _to_uint32(number)
    return value - (1 << 32) if value & 0x80000000 else value


def _digits(number: int, base: str) -> str:
    radix = len(base)
    out = []
    while True:
        number, rest = divmod(number, radix)
        out.append(base[rest])
        if number == 0:
            break
    return "".join(reversed(out))


def format_hex(number: int, conversion: str = "x") -> str:
    """Render ``number`` as a 32-bit unsigned hexadecimal value.

    ``conversion`` is 'x' for lower-case digits or 'X' for upper-case.
    """
    if conversion == "x":
        base = _LOWER_HEX
    elif conversion == "X":
        base = _UPPER_HEX
    else:
        raise ValueError(f"conversion must be 'x' or 'X', got {conversion!r}")
    return _digits(_to_uint32(number), base)


def format_pointer(ptr: int) -> str:
    """Render an address as '0x' followed by lower-case hex digits."""
    return "0x" + _digits(operator.index(ptr) & _SIZE_T, _LOWER_HEX)


def format_signed(number: int) -> str:
    """Render ``number`` as a signed 32-bit decimal."""
    return str(_to_int32(number))


def format_unsigned(number: int) -> str:
    """Render ``number`` as an unsigned 32-bit decimal."""
    return str(_to_uint32(number))


def format_string(value: str | None) -> str:
    """Render a string; None becomes '(null)'."""
    return "(null)" if value is None else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


_CONVERSIONS = {
    "c": _format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, "x"),
    "X": lambda value: format_hex(value, "X"),
}


def render_format(fmt: str, *args: Any) -> str:
    """Return the text ``printf`` would write for ``fmt`` and ``args``.

    A '%' followed by an unknown character is dropped and the character is
    kept as ordinary text; a trailing '%' is dropped.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        if conversion == "%":
            pieces.append("%")
        elif conversion in _CONVERSIONS:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
            pieces.append(_CONVERSIONS[conversion](value))
        else:
            pieces.append(conversion)
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = render_format(fmt, *args)
    sys.stdout.write(text)
    return len(text)