"""Raw pixel images and RGBA cells."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

__all__ = ["Cell", "Image"]


def _channel(value: float) -> int:
    return math.trunc(min(max(float(value), 0.0), 1.0) * 255)


@dataclass(frozen=True)
class Cell:
    """One RGBA pixel with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    @staticmethod
    def from_color(color: Sequence[float]) -> "Cell":
        """Build a cell from four 0..1 floats, clamped and truncated."""
        r, g, b, a = color
        return Cell(_channel(r), _channel(g), _channel(b), _channel(a))

    def __or__(self, other: Union["Cell", Sequence[float]]) -> "Cell":
        if not isinstance(other, Cell):
            other = Cell.from_color(other)
        return Cell(self.r | other.r, self.g | other.g,
                    self.b | other.b, self.a | other.a)


class Image:
    """A width x height image with ``per_pixel`` bytes per pixel."""

    def __init__(self, width: int = 0, height: int = 0, per_pixel: int = 0) -> None:
        self.width = width
        self.height = height
        self.per_pixel = per_pixel
        self.data = bytearray(width * height * per_pixel)

    def reset(self) -> None:
        """Make the image empty."""
        self.width = 0
        self.height = 0
        self.per_pixel = 0
        self.data = bytearray()

    def copy(self) -> "Image":
        """Return an independent copy."""
        other = Image()
        other.width = self.width
        other.height = self.height
        other.per_pixel = self.per_pixel
        other.data = bytearray(self.data)
        return other

    def cells(self) -> Iterator[Cell]:
        """Yield the pixels of a four-byte-per-pixel image as cells."""
        if self.per_pixel != 4:
            raise ValueError("cells() needs an image with 4 bytes per pixel")
        for offset in range(0, len(self.data), 4):
            yield Cell(*self.data[offset:offset + 4])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (self.width, self.height, self.per_pixel, self.data) == (
            other.width, other.height, other.per_pixel, other.data)

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height}, per_pixel={self.per_pixel})"