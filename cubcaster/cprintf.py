"""A small printf-style formatter and writers for text streams.

Supported conversions: ``%%``, ``%c``, ``%s``, ``%u``, ``%d``, ``%i``,
``%x``, ``%X`` and ``%p``. Any other conversion character, including a
lone ``%`` at the end of the format, produces ``"0"``.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from cubcaster.cstring import strdup

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def format_hex(value: int, upper: bool = False) -> str:
    """Hexadecimal digits of ``value`` taken as an unsigned 32-bit integer."""
    text = format(int(value) & _UINT_MASK, "x")
    return text.upper() if upper else text


def format_pointer(value: int) -> str:
    """Pointer notation: ``(nil)`` for zero, otherwise ``0x`` and hex digits."""
    value = int(value) & _POINTER_MASK
    if not value:
        return "(nil)"
    return "0x" + format(value, "x")


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, args: list[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csudixXp" or spec == "":
        return "0"
    if not args:
        raise TypeError(f"not enough arguments for conversion %{spec}")
    value = args.pop(0)
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else strdup(str(value))
    if spec == "u":
        return str(int(value) & _UINT_MASK)
    if spec in "di":
        return str(_to_int32(int(value)))
    if spec == "x":
        return format_hex(value)
    if spec == "X":
        return format_hex(value, upper=True)
    return format_pointer(value)


def cformat(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the given arguments."""
    pending = list(args)
    pieces: list[str] = []
    text = strdup(fmt)
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch != "%":
            pieces.append(ch)
            pos += 1
            continue
        spec = text[pos + 1] if pos + 1 < len(text) else ""
        pieces.append(_convert(spec, pending))
        pos += 2
    return "".join(pieces)


def _resolve(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = cformat(fmt, *args)
    _resolve(stream).write(text)
    return len(text)


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write a single character."""
    _resolve(stream).write(_format_char(c))


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write a string up to its terminator."""
    _resolve(stream).write(strdup(s))


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    _resolve(stream).write(strdup(s) + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _resolve(stream).write(str(int(n)))