"""In-memory 32-bit images with the pixel layout of the drawing layer."""

from __future__ import annotations

import struct
from collections.abc import Iterator

__all__ = ["Image", "get_color_value"]

_PIXEL = struct.Struct("<I")


def get_color_value(color: int) -> int:
    """Return ``color`` as the unsigned 32-bit 0xAARRGGBB value stored in images.

    The alpha byte represents transparency rather than opacity.
    """
    return color & 0xFFFFFFFF


class Image:
    """A width x height image of 32-bit little-endian 0xAARRGGBB pixels, all zero at first."""

    bits_per_pixel = 32
    bytes_per_pixel = 4
    endian = 0  # little endian

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.data = bytearray(width * height * self.bytes_per_pixel)

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"

    @property
    def size_line(self) -> int:
        """Number of bytes in one row of pixels."""
        return self.width * self.bytes_per_pixel

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y); the origin is the top left corner."""
        _PIXEL.pack_into(self.data, self._offset(x, y), get_color_value(color))

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned colour stored at (x, y)."""
        return _PIXEL.unpack_from(self.data, self._offset(x, y))[0]

    def rows(self) -> Iterator[list[int]]:
        """Yield each row, top to bottom, as a list of pixel values."""
        line = self.size_line
        for start in range(0, len(self.data), line):
            yield [value for (value,) in _PIXEL.iter_unpack(self.data[start:start + line])]

    def to_bytes(self) -> bytes:
        """Return a copy of the raw pixel data."""
        return bytes(self.data)