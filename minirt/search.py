"""Length, search, comparison and bounded copy on NUL-terminated text.

Strings are treated as C strings: everything from the first ``"\\0"`` on is
ignored. Comparisons work on character codes.
"""

from __future__ import annotations

from typing import Optional

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def _cstr(text: str) -> str:
    return text.split("\0", 1)[0]


def _char(c: str | int) -> str:
    if isinstance(c, int):
        return chr(c % 256)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def c_length(text: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(text))


def find_char(text: str, c: str | int) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``c_length(text)``.
    """
    s = _cstr(text)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def rfind_char(text: str, c: str | int) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``c_length(text)``.
    """
    s = _cstr(text)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def _diff(s1: str, s2: str, index: int) -> int:
    a = ord(s1[index]) if index < len(s1) else 0
    b = ord(s2[index]) if index < len(s2) else 0
    return a - b


def compare(s1: Optional[str], s2: Optional[str]) -> int:
    """Difference of the first mismatching character codes, 0 if equal.

    A missing (None) argument compares as equal.
    """
    if s1 is None or s2 is None:
        return 0
    return compare_n(s1, s2, max(len(s1), len(s2)) + 1)


def compare_n(s1: str, s2: str, n: int) -> int:
    """Like :func:`compare`, looking at no more than ``n`` characters."""
    a, b = _cstr(s1), _cstr(s2)
    index = 0
    while index < n and index < len(a) and index < len(b) and a[index] == b[index]:
        index += 1
    if index >= n:
        return 0
    return _diff(a, b, index)


def find_within(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` in the first ``length`` characters of ``big``.

    An empty ``little`` is found at 0. Returns None when there is no match
    that ends inside the bound.
    """
    needle = _cstr(little)
    if not needle:
        return 0
    haystack = _cstr(big)[: max(length, 0)]
    index = haystack.find(needle)
    return None if index < 0 else index


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the NUL.

    Returns the text that fits (at most ``size - 1`` characters; nothing is
    written when ``size`` is 0) and the full length of ``src``, so that
    truncation shows as a returned length of ``size`` or more.
    """
    s = _cstr(src)
    copied = s[: size - 1] if size > 0 else ""
    return copied, len(s)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the new buffer contents and the length the whole concatenation
    would have needed; a result of ``size`` or more means it was cut short.
    """
    d, s = _cstr(dst), _cstr(src)
    if size == 0:
        return d, len(s)
    if size <= len(d):
        return d, size + len(s)
    room = size - 1 - len(d)
    return d + s[:room], len(d) + len(s)


def int_to_text(n: int) -> str:
    """Decimal text of a 32-bit signed integer.

    Raises OverflowError for values outside the 32-bit range.
    """
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)