"""Byte buffer helpers: search, compare, copy, fill and allocate."""

from __future__ import annotations


def _byte(c: int | str) -> int:
    """Return ``c`` as a byte value, truncated to its low eight bits."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c) & 0xFF
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return c & 0xFF


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer of {len(buf)} bytes")


def memchr(data: bytes | bytearray, c: int | str, n: int) -> int | None:
    """Index of the first byte equal to ``c`` among the first ``n``, or ``None``."""
    _check_count(n, data)
    index = bytes(data[:n]).find(bytes([_byte(c)]))
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first differing bytes within ``n``, 0 when equal."""
    _check_count(n, a, b)
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy up to ``n`` bytes of ``src`` into ``dest``, stopping at a zero byte."""
    _check_count(n, dest, src)
    chunk = bytes(src[:n]).split(b"\0", 1)[0]
    dest[: len(chunk)] = chunk
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    A backward-overlapping move copies all ``n`` bytes; a forward move
    stops at the first zero byte of the source region.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if dest + n > len(buf) or src + n > len(buf):
        raise ValueError("move reaches past the end of the buffer")
    if dest > src:
        buf[dest : dest + n] = buf[src : src + n]
    elif dest < src:
        for offset in range(n):
            value = buf[src + offset]
            if value == 0:
                break
            buf[dest + offset] = value
    return buf


def memset(buf: bytearray, c: int | str, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``c``."""
    _check_count(n, buf)
    buf[:n] = bytes([_byte(c)]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)