"""String helpers: searching, comparing, slicing, trimming and splitting text."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; ints are taken as code points."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def _non_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative")


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code-point difference of the first unequal pair, or 0.
    The shorter string compares as if followed by NUL.
    """
    _non_negative(n, "count")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` inside the first ``length`` characters of ``big``, or None.

    An empty ``little`` is found at index 0.
    """
    _non_negative(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty when ``start`` is past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: str | None) -> str:
    """Strip every character of ``charset`` from both ends of ``s``.

    With no charset the string is returned unchanged.
    """
    if charset is None:
        return strdup(s)
    return s.strip(charset)


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` for each character of ``s``.

    ``f`` is called from the last character towards the first.
    """
    mapped = [f(index, ch) for index, ch in reversed(list(enumerate(s)))]
    return "".join(reversed(mapped))


def striteri(chars: list[str], f: Callable[[int, str], str]) -> None:
    """Replace each element of ``chars`` in place with ``f(index, char)``."""
    for index, ch in enumerate(chars):
        chars[index] = f(index, ch)


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the resulting text and the length of ``src``; with a size of 0
    the destination is left as it was.
    """
    _non_negative(size, "size")
    if size == 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters, terminator included.

    Returns the resulting text and the length the full result would have had.
    When ``size`` does not exceed ``len(dst)`` nothing is appended and the
    length returned is ``size + len(src)``.
    """
    _non_negative(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)