"""String building, splitting and trimming helpers.

Strings are plain ``str`` values; a ``"\\0"`` inside an argument ends it,
as a terminator does. Separator and search characters may be given as a
one-character string or as an integer code point.
"""

from __future__ import annotations

from collections.abc import Callable

from cubcaster.cstring import strdup


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c)


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(s: str, c: int | str) -> list[str]:
    """Split ``s`` on the separator ``c``, dropping empty words."""
    sep = _char(c)
    text = strdup(s)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def count_words(s: str, c: int | str) -> int:
    """Number of non-empty runs of characters other than ``c``."""
    sep = _char(c)
    count = 0
    inside = False
    for ch in strdup(s):
        if ch != sep and not inside:
            count += 1
            inside = True
        elif ch == sep:
            inside = False
    return count


def find_chrs(text: str, chars: str) -> int | None:
    """Index in ``text`` of the first character of ``chars`` that occurs in it.

    The characters of ``chars`` are tried in order; the first one found
    decides the result. ``None`` when none occurs.
    """
    haystack = strdup(text)
    for ch in strdup(chars):
        index = haystack.find(ch)
        if index >= 0:
            return index
    return None


def first_word(command: str) -> str:
    """The first space-delimited word, after skipping at most one space."""
    text = strdup(command)
    start = 1 if text.startswith(" ") else 0
    end = text.find(" ", start)
    if end < 0:
        end = len(text)
    return text[start:end]


def striteri(s: str, f: Callable[[int, str], str | None]) -> str:
    """Call ``f(index, char)`` for each character.

    A character returned by ``f`` takes the place of the original one;
    ``None`` leaves it unchanged. The resulting string is returned.
    """
    result = []
    for index, ch in enumerate(strdup(s)):
        replacement = f(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of two strings."""
    return strdup(s1) + strdup(s2)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the new contents of the buffer and the length the full
    concatenation would have had (``size + len(src)`` when ``size`` is
    smaller than ``dst``).
    """
    _non_negative(size, "size")
    dst_text, src_text = strdup(dst), strdup(src)
    room = max(size - 1 - len(dst_text), 0) if size > 0 else 0
    result = dst_text + src_text[:room]
    if size < len(dst_text):
        return result, size + len(src_text)
    return result, len(dst_text) + len(src_text)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy of ``src`` that fits a buffer of ``size`` characters, and ``len(src)``."""
    _non_negative(size, "size")
    text = strdup(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """String made of ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(strdup(s)))


def strtrim(s: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``s``."""
    text = strdup(s)
    trim = set(strdup(charset))
    start = 0
    while start < len(text) and text[start] in trim:
        start += 1
    end = len(text)
    while end > start and text[end - 1] in trim:
        end -= 1
    return text[start:end]


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from index ``start``.

    A start past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    text = strdup(s)
    if start > len(text):
        return ""
    return text[start : start + length]