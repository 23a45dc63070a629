"""String searching, slicing and joining helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(s: str, c: str) -> str | None:
    """Return the part of ``s`` from the first ``c`` on, or None.

    Searching for the NUL character finds the end of the string, so an
    empty string comes back.
    """
    _check_char(c)
    if c == _NUL:
        return ""
    index = s.find(c)
    return None if index < 0 else s[index:]


def strrchr(s: str, c: str) -> str | None:
    """Return the part of ``s`` from the last ``c`` on, or None."""
    _check_char(c)
    if c == _NUL:
        return ""
    index = s.rfind(c)
    return None if index < 0 else s[index:]


def revstrchr(s: str, c: str) -> str:
    """Return the text before the first ``c``, newline or end of ``s``."""
    _check_char(c)
    end = len(s)
    for stop in (c, "\n"):
        index = s.find(stop, 0, end)
        if index >= 0:
            end = index
    return s[:end]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the part of ``haystack`` from the match on, the whole haystack
    for an empty needle, or None when there is no match.
    """
    _check_size(length, "length")
    if not needle:
        return haystack
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else haystack[index:]


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``."""
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return f"{s1}{s2}"


def strtrim(s: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def split(s: str, c: str) -> list[str]:
    """Split ``s`` on ``c``, dropping empty pieces."""
    _check_char(c)
    return [word for word in s.split(c) if word]


def get_string(s: str, start: str, end: str) -> str | None:
    """Extract the text that begins at the first ``start`` character.

    The search for ``start`` stops at a newline. The extracted text runs up
    to ``end``, a newline or the end of ``s``, and keeps the ``end`` or
    newline character that stopped it. Returns None when ``start`` is not
    found.
    """
    _check_char(start)
    _check_char(end)
    line_end = s.find("\n")
    search_limit = len(s) if line_end < 0 else line_end
    first = s.find(start, 0, search_limit)
    if first < 0:
        return None
    stop = first
    while stop < len(s) and s[stop] not in (end, "\n"):
        stop += 1
    return s[first:stop + 1]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the order."""
    _check_size(n, "n")
    if n == 0:
        return 0
    a = b = 0
    for index in range(n):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a != b or a == 0:
            break
    return a - b


def strlcpy(src: str, dstsize: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters.

    Returns the text that fits, leaving room for the terminator, and the
    full length of ``src``.
    """
    _check_size(dstsize, "dstsize")
    if dstsize == 0:
        return "", len(src)
    return src[:dstsize - 1], len(src)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` characters.

    Returns the resulting text and the length the full result would have
    had, as strlcat does.
    """
    _check_size(dstsize, "dstsize")
    if dstsize == 0:
        return dst, len(src)
    if dstsize < len(dst):
        return dst, len(src) + dstsize
    room = max(0, dstsize - 1 - len(dst))
    return dst + src[:room], len(src) + len(dst)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(
    s: MutableSequence[str] | None,
    func: Callable[[int, str], str | None] | None,
) -> None:
    """Apply ``func(index, char)`` to every character of ``s`` in place.

    A returned string replaces the character; None leaves it as it was.
    """
    if s is None or func is None:
        return
    for index, char in enumerate(list(s)):
        replacement = func(index, char)
        if replacement is not None:
            s[index] = replacement