"""Character classification and NUL-terminated string helpers.

Strings are handled as Python ``str`` values; a ``"\\0"`` inside a string
ends it, as a terminator does. Character arguments may be given either as
a one-character string or as an integer code point.
"""

from __future__ import annotations

_WHITESPACE = frozenset(range(9, 14)) | {32}


def _code(c: int | str) -> int:
    """Return the code point of a character given as ``int`` or ``str``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return c


def _terminated(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _at(s: str, i: int) -> int:
    """Code point at ``i``, or 0 past the end of the string."""
    return ord(s[i]) if i < len(s) else 0


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign."""
    text = _terminated(text)
    pos = 0
    while pos < len(text) and ord(text[pos]) in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - 48)
        pos += 1
    return value * sign


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(c) <= 57


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(c) < 127


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    return str(int(n))


def _shift_case(c: int | str, low: int, high: int, delta: int) -> int | str:
    code = _code(c)
    if low <= code <= high:
        code += delta
    return chr(code) if isinstance(c, str) else code


def tolower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    return _shift_case(c, 65, 90, 32)


def toupper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    return _shift_case(c, 97, 122, -32)


def strlen(s: str | None) -> int:
    """Length up to the terminator; ``None`` counts as empty."""
    if s is None:
        return 0
    return len(_terminated(s))


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of ``c``, or ``None``.

    Searching for the NUL character yields the index of the terminator.
    """
    s = _terminated(s)
    target = chr(_code(c))
    if target == "\0":
        return len(s)
    index = s.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of ``c``, or ``None``.

    Searching for the NUL character yields the index of the terminator.
    """
    s = _terminated(s)
    target = chr(_code(c))
    if target == "\0":
        return len(s)
    index = s.rfind(target)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first differing characters, 0 when equal."""
    s1, s2 = _terminated(s1), _terminated(s2)
    i = 0
    while _at(s1, i) == _at(s2, i) and i < len(s1):
        i += 1
    return _at(s1, i) - _at(s2, i)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like :func:`strcmp` but looks at no more than ``n`` characters."""
    if n <= 0:
        return 0
    s1, s2 = _terminated(s1), _terminated(s2)
    i = 0
    while _at(s1, i) == _at(s2, i) and i < n - 1 and i < len(s1):
        i += 1
    return _at(s1, i) - _at(s2, i)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` in the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0; a miss gives ``None``.
    """
    little = _terminated(little)
    if not little:
        return 0
    window = _terminated(big)[: max(length, 0)]
    index = window.find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Copy of ``s`` up to its terminator."""
    return _terminated(s)