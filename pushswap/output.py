"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from pushswap.chars import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character; an int is taken as a code point."""
    if isinstance(c, int):
        c = chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s``; None writes nothing."""
    if s:
        _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline; None writes just the newline."""
    out = _target(stream)
    put_str(s, out)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write a 32-bit integer in decimal."""
    put_str(itoa(n), _target(stream))