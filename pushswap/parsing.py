"""Reading and validating the integers given on the command line."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.chars import is_digit
from pushswap.strings import split

_INT_BITS = 32
# Only the control whitespace characters tab through carriage return are skipped.
_LEADING = frozenset("\t\n\v\f\r")


class InputError(ValueError):
    """The input is not a list of distinct integers."""


def _to_int32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def parse_int(text: str) -> int:
    """Parse a whole argument as an integer.

    Leading tab-to-carriage-return whitespace and one sign are allowed;
    every other character must be a digit, or InputError is raised.  Text
    with no digits gives 0.  The result is truncated to 32 bits.
    """
    pos = 0
    while pos < len(text) and text[pos] in _LEADING:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    digits = text[pos:]
    bad = next((ch for ch in digits if not is_digit(ch)), None)
    if bad is not None:
        raise InputError(f"invalid character {bad!r} in {text!r}")
    value = int(digits) if digits else 0
    return _to_int32(-value if negative else value)


def check_duplicates(values: Iterable[int]) -> None:
    """Raise InputError if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise InputError(f"duplicate value {value}")
        seen.add(value)


def process_input(args: Sequence[str]) -> list[int]:
    """Turn the command-line arguments into the values for stack a.

    A single argument is split on spaces; several arguments each hold one
    number.  Raises InputError on an invalid number or a duplicate.
    """
    words = split(args[0], " ") if len(args) == 1 else list(args)
    values = [parse_int(word) for word in words]
    check_duplicates(values)
    return values