"""Character classification and numeric conversion helpers."""

from __future__ import annotations

import operator

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = " \t\n\v\f\r"
_HEX_DIGITS = "0123456789abcdefABCDEF"


class IntRangeError(ValueError):
    """A decimal number does not fit in a signed 32-bit integer."""

    def __init__(self, value: int) -> None:
        super().__init__("All numbers must be within INT max and min")
        self.value = value


class HexValueError(ValueError):
    """A hexadecimal value holds a character that is not a hex digit."""

    def __init__(self, text: str, char: str) -> None:
        super().__init__(f"{text} wrong hex value, {char}")
        self.text = text
        self.char = char


def _code(c: str | int) -> int:
    """Return the character code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_sign(c: str | int) -> bool:
    """True for '+' or '-'."""
    return _code(c) in (ord("+"), ord("-"))


def _shift_case(c: str | int, low: str, high: str, delta: int) -> str | int:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII letter; other input comes back unchanged."""
    return _shift_case(c, "a", "z", -32)


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII letter; other input comes back unchanged."""
    return _shift_case(c, "A", "Z", 32)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as C's atoi does.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. Raises IntRangeError outside the 32-bit signed range.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not is_digit(char):
            break
        result = result * 10 + (ord(char) - ord("0"))
    value = sign * result
    if value > INT_MAX or value < INT_MIN:
        raise IntRangeError(value)
    return value


def atoi_base(text: str) -> int:
    """Parse a hexadecimal number with an optional '0x' prefix.

    Leading whitespace is skipped and parsing ends at a newline or the end
    of the text. Any other non-hex character raises HexValueError.
    """
    body = text.lstrip(_WHITESPACE)
    if body.startswith("0x"):
        body = body[2:]
    body = body.partition("\n")[0]
    number = 0
    for char in body:
        if char not in _HEX_DIGITS:
            raise HexValueError(text, char)
        number = number * 16 + int(char, 16)
    return number


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    return str(operator.index(n))