"""Byte-buffer helpers working on bytes-like objects and bytearrays."""

from __future__ import annotations

_SIZE_MAX = (1 << 64) - 1


def _check_length(buf: bytes | bytearray, n: int, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > len(buf):
        raise IndexError(f"{what} holds {len(buf)} bytes, {n} requested")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_length(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes.

    Raises OverflowError when the total size does not fit in 64 bits.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("counts must not be negative")
    total = nmemb * size
    if total > _SIZE_MAX:
        raise OverflowError(f"{nmemb} * {size} bytes is too large")
    return bytearray(total)


def memchr(buf: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_length(buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_length(a, n, "first buffer")
    _check_length(b, n, "second buffer")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_length(dest, n, "destination")
    _check_length(src, n, "source")
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("length must not be negative")
    if max(dst, src) + n > len(buf):
        raise IndexError("move runs past the end of the buffer")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf