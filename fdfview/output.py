"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO


def put_char_fd(c: str, stream: TextIO) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str_fd(s: str | None, stream: TextIO) -> None:
    """Write a string; None writes nothing."""
    if s is None:
        return
    stream.write(s)


def put_endl_fd(s: str | None, stream: TextIO) -> None:
    """Write a string followed by a newline; None writes nothing."""
    if s is None:
        return
    stream.write(s + "\n")


def put_nbr_fd(n: int, stream: TextIO) -> None:
    """Write an integer in decimal."""
    stream.write(str(n))