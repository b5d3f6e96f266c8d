"""Eight-bit RGB colours with byte-wrapping arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


def _to_byte(value: float) -> int:
    """Truncate toward zero and keep the low eight bits."""
    return int(value) % 256


@dataclass(frozen=True)
class Color:
    """An RGB colour whose channels are bytes (0-255)."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name, channel in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"channel {name} must be an int in 0..255, got {channel!r}")

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b

    def scale(self, factor: float) -> Color:
        """Multiply every channel by ``factor``, truncating to a byte."""
        return Color(*(_to_byte(c * factor) for c in self))

    def add(self, other: Color) -> Color:
        """Add channel by channel, wrapping each sum modulo 256."""
        return Color(*((a + b) % 256 for a, b in zip(self, other)))

    def reflected(self, multiplier: float) -> Color:
        """The share of this colour carried by a reflection of strength ``multiplier``."""
        return Color(*(_to_byte(c * multiplier) for c in self))