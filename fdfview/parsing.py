"""Reading and checking map files."""

from __future__ import annotations

import itertools
import os
from collections.abc import Iterable

from .chars import HexValueError, IntRangeError, atoi, atoi_base, is_alnum, is_digit, is_sign
from .linereader import LineReader
from .model import WHITE, MapView, Point, init_view
from .strings import get_string, split

EMPTY = "Map's empty 😔"
WRONGLY_DEFINED_COLOR = "Hexadecimal color not correctly defined"
WRONGLY_DEFINED_NUMBER = "Number is not correctly defined"
WRONG_AMOUNT_OF_NUMBERS = "Wrong amount of numbers"

_LINE_ENDS = ("\n", "\0")


class MapError(ValueError):
    """A map file is empty or badly formed."""


def _char_at(line: str, index: int) -> str:
    return line[index] if index < len(line) else "\0"


def _body(line: str) -> str:
    for end in _LINE_ENDS:
        line = line.partition(end)[0]
    return line


def check_spaces(line: str) -> None:
    """Reject a sign that does not follow a space."""
    body = _body(line)
    for previous, char in zip(body, body[1:]):
        if is_sign(char) and previous != " ":
            raise MapError(WRONGLY_DEFINED_NUMBER)


def check_hex_color(hex_text: str) -> None:
    """Check a colour such as '0xFF0000 ' taken from a map line.

    The last character is the one that ended the colour and is not checked.
    """
    if not 4 <= len(hex_text) <= 9:
        raise MapError(WRONGLY_DEFINED_COLOR)
    if not hex_text.startswith("0x"):
        raise MapError(WRONGLY_DEFINED_COLOR)
    if not all(is_alnum(char) for char in hex_text[:-1]):
        raise MapError(WRONGLY_DEFINED_COLOR)


def count_numbers(line: str) -> int:
    """Count the numbers on a map line, checking every character.

    Only digits, spaces, '-' and ',' followed by a colour are allowed.
    """
    counter = 0
    count = 0
    while (char := _char_at(line, counter)) not in _LINE_ENDS:
        if char == ",":
            hex_text = get_string(line[counter:], "0", " ")
            if hex_text is None:
                raise MapError(WRONGLY_DEFINED_COLOR)
            check_hex_color(hex_text)
            counter += len(hex_text)
        elif not is_digit(char) and char not in (" ", "-"):
            raise MapError(WRONGLY_DEFINED_NUMBER)
        if is_digit(_char_at(line, counter)) and not is_digit(_char_at(line, counter + 1)):
            count += 1
        counter += 1
    return count


def measure(lines: Iterable[str]) -> tuple[int, int]:
    """Check every line and return the numbers per row and the row count."""
    iterator = iter(lines)
    first = next(iterator, None)
    if first is None:
        raise MapError(EMPTY)
    expected = count_numbers(first)
    rows = 0
    for line in itertools.chain([first], iterator):
        check_spaces(line)
        if count_numbers(line) != expected:
            raise MapError(WRONG_AMOUNT_OF_NUMBERS)
        rows += 1
    return expected, rows


def _point(word: str, x: int, y: int) -> Point:
    try:
        z = atoi(word)
        _, comma, color_text = word.partition(",")
        color = atoi_base(color_text) if comma else WHITE
    except (IntRangeError, HexValueError) as err:
        raise MapError(str(err)) from err
    return Point(x=x, y=y, z=z, color=color)


def read_points(lines: Iterable[str], x_nbrs: int, y_nbrs: int) -> list[list[Point]]:
    """Build the grid of points from lines already checked by measure.

    Each point keeps its column and row as x and y; a word without a
    colour is white.
    """
    grid: list[list[Point]] = []
    iterator = iter(lines)
    for y in range(y_nbrs):
        line = next(iterator, None)
        if line is None:
            raise MapError(WRONG_AMOUNT_OF_NUMBERS)
        words = split(line, " ")
        if len(words) < x_nbrs:
            raise MapError(WRONG_AMOUNT_OF_NUMBERS)
        grid.append([_point(word, x, y) for x, word in enumerate(words[:x_nbrs])])
    return grid


def load_map(path: str | os.PathLike[str]) -> MapView:
    """Read, check and place the map stored at ``path``."""
    with open(path, encoding="latin-1", newline="") as stream:
        lines = list(LineReader(stream))
    x_nbrs, y_nbrs = measure(lines)
    return init_view(read_points(lines, x_nbrs, y_nbrs))