"""In-memory 32-bit pixel images."""

from __future__ import annotations

import sys
from array import array
from dataclasses import dataclass, field

_PIXEL_MASK = 0xFFFFFFFF


@dataclass
class Image:
    """A zero-filled image of 32-bit pixels stored row by row.

    A pixel value is an unsigned 32-bit integer laid out as ``0xAARRGGBB``.
    """

    width: int
    height: int
    pixels: array = field(init=False, repr=False, compare=False)

    bits_per_pixel = 32

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"image size must be positive, got {self.width}x{self.height}"
            )
        self.pixels = array("I", [0]) * (self.width * self.height)

    @property
    def line_length(self) -> int:
        """Number of bytes in one row of pixels."""
        return self.width * self.bits_per_pixel // 8

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at column ``x`` of row ``y``."""
        self.pixels[self._offset(x, y)] = color & _PIXEL_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` of row ``y``."""
        return self.pixels[self._offset(x, y)]

    def blit(self, source: "Image", x: int, y: int) -> None:
        """Copy ``source`` so that its top-left corner lands at ``(x, y)``.

        Parts of ``source`` that fall outside this image are left out.
        """
        left = max(x, 0)
        right = min(x + source.width, self.width)
        if left >= right:
            return
        first_row = max(0, -y)
        last_row = min(source.height, self.height - y)
        for src_row in range(first_row, last_row):
            dst_start = (src_row + y) * self.width
            src_start = src_row * source.width - x
            self.pixels[dst_start + left:dst_start + right] = source.pixels[
                src_start + left:src_start + right
            ]

    def to_bytes(self) -> bytes:
        """Return the pixel data as little-endian 32-bit words, row by row."""
        if sys.byteorder == "little":
            return self.pixels.tobytes()
        swapped = array("I", self.pixels)
        swapped.byteswap()
        return swapped.tobytes()