"""Line and character helpers used while reading scene files."""

from __future__ import annotations

from enum import IntEnum

from cubcaster.cstring import strdup, strnstr

TILE_KIND = 4
SPAWN_KIND = 3
OTHER_KIND = 1


class ParamKind(IntEnum):
    """What a scene file line declares."""

    NONE = 1
    COLOR = 2
    TEXTURE = 3


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_space(c: int | str) -> bool:
    """True for the ASCII whitespace characters (tab to carriage return, space)."""
    code = _code(c)
    return 9 <= code <= 13 or code == 32


def is_line_empty(line: str) -> bool:
    """True when the line holds nothing but whitespace."""
    return all(is_space(ch) for ch in strdup(line))


def _starts_with(line: str, ident: str) -> bool:
    return strnstr(line, ident, len(ident)) is not None


def param_kind(line: str) -> ParamKind:
    """Classify a line by its leading identifier."""
    if any(_starts_with(line, ident) for ident in ("NO", "EA", "WE", "SO")):
        return ParamKind.TEXTURE
    if _starts_with(line, "F") or _starts_with(line, "C"):
        return ParamKind.COLOR
    return ParamKind.NONE


def n_atoi(text: str, end: int, start: int) -> int:
    """Parse the decimal digits of ``text`` from ``start`` up to, not including, ``end``."""
    text = strdup(text)
    value = 0
    index = start
    while index < end and index < len(text) and "0" <= text[index] <= "9":
        value = value * 10 + (ord(text[index]) - 48)
        index += 1
    return value


def strip_newline(line: str) -> str:
    """Cut the line at its first newline; a line without one is returned as is."""
    line = strdup(line)
    index = line.find("\n")
    return line if index < 0 else line[:index]


def map_char_kind(c: int | str) -> int:
    """``TILE_KIND`` for walls and floor, ``SPAWN_KIND`` for a player start, else ``OTHER_KIND``."""
    ch = chr(_code(c))
    if ch in "10":
        return TILE_KIND
    if ch in "NESW":
        return SPAWN_KIND
    return OTHER_KIND


def change_spaces(rows: list[str]) -> list[str]:
    """Rows with every whitespace character turned into floor (``'0'``)."""
    return ["".join("0" if is_space(ch) else ch for ch in strdup(row)) for row in rows]