"""Building new strings from NUL-terminated text: copies, slices, joins, splits.

Text is read the way C reads it: everything from the first ``"\\0"`` on is
ignored.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union


def _cstr(text: str) -> str:
    return text.split("\0", 1)[0]


def _single(c: str, what: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")
    return c


def duplicate(text: str) -> str:
    """A copy of ``text`` up to its first NUL."""
    return _cstr(text)


def substring(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end, or a zero length, gives an empty string.
    Raises ValueError for a negative start or length.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    s = _cstr(text)
    if start >= len(s) or length == 0:
        return ""
    return s[start : start + length]


def join(s1: Optional[str], s2: Optional[str]) -> str:
    """``s1`` followed by ``s2``.

    Raises TypeError when either argument is missing.
    """
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return _cstr(s1) + _cstr(s2)


def trim(text: Optional[str], charset: Optional[str]) -> str:
    """``text`` with every character of ``charset`` removed from both ends.

    Raises TypeError when either argument is missing.
    """
    if text is None or charset is None:
        raise TypeError("both text and charset are required")
    chars = set(_cstr(charset))
    s = _cstr(text)
    begin = 0
    while begin < len(s) and s[begin] in chars:
        begin += 1
    end = len(s)
    while end > begin and s[end - 1] in chars:
        end -= 1
    return s[begin:end]


def split_fields(text: Optional[str], sep: str) -> list[str]:
    """The non-empty runs of ``text`` between occurrences of ``sep``.

    Raises TypeError when ``text`` is missing and ValueError when ``sep``
    is not a single character.
    """
    if text is None:
        raise TypeError("text is required")
    _single(sep, "separator")
    s = _cstr(text)
    if sep == "\0":
        return [s] if s else []
    return [field for field in s.split(sep) if field]


def map_indexed(text: Optional[str], func: Callable[[int, str], str]) -> str:
    """Apply ``func(index, char)`` to every character and join the results.

    The result is read up to its first NUL, so a function that returns
    ``"\\0"`` ends the string there. Raises TypeError when ``text`` is missing.
    """
    if text is None:
        raise TypeError("text is required")
    return _cstr("".join(func(index, ch) for index, ch in enumerate(_cstr(text))))


def _is_terminator(value: Union[str, int]) -> bool:
    return value == "\0" or value == 0


def iter_indexed(
    buffer: Optional[MutableSequence],
    func: Callable[[int, Union[str, int]], Optional[Union[str, int]]],
) -> None:
    """Call ``func(index, value)`` on each element of ``buffer`` in place.

    Iteration stops at the first NUL (``"\\0"`` or ``0``) or at the end.
    A result other than None replaces the element. A missing buffer is a
    no-op.
    """
    if buffer is None:
        return
    index = 0
    while index < len(buffer) and not _is_terminator(buffer[index]):
        result = func(index, buffer[index])
        if result is not None:
            buffer[index] = result
        index += 1