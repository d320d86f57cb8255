"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_INT_BITS = 32
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: int | str) -> int:
    """Return the code point of ``c``, which may be an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _like(original: int | str, code: int) -> int | str:
    """Return ``code`` in the same form (int or str) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: int | str) -> bool:
    """True for code points 0-127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + 32)
    return c


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code - 32)
    return c


def _wrap_int(value: int) -> int:
    """Truncate ``value`` to a signed 32-bit integer, as a C ``int`` would hold it."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; text without digits gives 0.
    The result is truncated to a signed 32-bit integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    start = pos
    while pos < len(text) and is_digit(text[pos]):
        pos += 1
    value = int(text[start:pos]) if pos > start else 0
    return _wrap_int(-value if negative else value)


def itoa(n: int) -> str:
    """Render a 32-bit integer in decimal."""
    if _wrap_int(n) != n:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    return str(n)