"""Reading a stream or a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import AnyStr, Callable, Dict, Iterator, Optional, Union

BUFFER_SIZE = 42
MAX_DESCRIPTORS = 1024

Chunk = Union[str, bytes]


def _newline(data: Chunk) -> Chunk:
    return "\n" if isinstance(data, str) else b"\n"


def _has_newline(stash: Optional[Chunk]) -> bool:
    return stash is not None and _newline(stash) in stash


def _take_line(
    read: Callable[[int], Optional[AnyStr]], size: int, stash: Optional[AnyStr]
) -> tuple[Optional[AnyStr], Optional[AnyStr]]:
    """Read chunks until ``stash`` holds a full line or input runs out.

    Returns the next line, newline included, and what is left over.
    The line is None once nothing remains.
    """
    while not _has_newline(stash):
        chunk = read(size)
        if not chunk:
            break
        stash = chunk if stash is None else stash + chunk
    if not stash:
        return None, None
    cut = stash.find(_newline(stash))
    end = len(stash) if cut < 0 else cut + 1
    return stash[:end], (stash[end:] or None)


def _check_size(buffer_size: int) -> int:
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    return buffer_size


class LineReader:
    """Reads lines from a text or binary stream in fixed-size chunks.

    Each line keeps its trailing newline; the last line may lack one.
    Data read past the end of a line is kept for the next call.
    """

    def __init__(self, stream, buffer_size: int = BUFFER_SIZE) -> None:
        self._stream = stream
        self._size = _check_size(buffer_size)
        self._stash: Optional[Chunk] = None

    def read_line(self) -> Optional[Chunk]:
        """The next line, or None at the end of the stream."""
        line, self._stash = _take_line(self._stream.read, self._size, self._stash)
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.read_line()) is not None:
            yield line


class DescriptorLines:
    """Reads lines from several open file descriptors, each with its own buffer."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        self._size = _check_size(buffer_size)
        self._stashes: Dict[int, Optional[bytes]] = {}

    def next_line(self, fd: int) -> Optional[bytes]:
        """The next line read from ``fd``, or None at its end.

        Raises ValueError for a descriptor outside 0..1023.
        """
        if not 0 <= fd < MAX_DESCRIPTORS:
            raise ValueError(f"file descriptor out of range: {fd}")
        line, rest = _take_line(
            lambda size: os.read(fd, size), self._size, self._stashes.get(fd)
        )
        if rest is None:
            self._stashes.pop(fd, None)
        else:
            self._stashes[fd] = rest
        return line