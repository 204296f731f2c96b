"""RGBA images held in memory."""

from __future__ import annotations

from typing import Optional, Tuple

Pixel = Tuple[int, int, int, int]


class Image:
    """An image of ``width`` by ``height`` pixels, four bytes per pixel, row by row."""

    def __init__(self, width: int = 0, height: int = 0, pixels: Optional[bytes] = None) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        size = 4 * width * height
        if pixels is None:
            self.pixels = bytearray(size)
        else:
            if len(pixels) != size:
                raise ValueError(f"expected {size} bytes of pixel data, got {len(pixels)}")
            self.pixels = bytearray(pixels)

    @property
    def num_pixels(self) -> int:
        return self.width * self.height

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return 4 * (x + y * self.width)

    def pixel(self, x: int, y: int) -> Pixel:
        """The four channel values of the pixel at column ``x``, row ``y``."""
        start = self._offset(x, y)
        r, g, b, a = self.pixels[start:start + 4]
        return (r, g, b, a)

    def crop(self, x: int, y: int, width: int, height: int) -> "Image":
        """A new image copied from the given rectangle of this one."""
        if x < 0 or y < 0 or width < 0 or height < 0:
            raise ValueError("crop rectangle must not have negative coordinates or size")
        if x + width > self.width or y + height > self.height:
            raise ValueError("crop rectangle extends outside the image")
        data = bytearray()
        for row in range(y, y + height):
            start = 4 * (x + row * self.width)
            data += self.pixels[start:start + 4 * width]
        return Image(width, height, bytes(data))

    def set_transparent_colour(self, r: int, g: int, b: int) -> None:
        """Make pixels of the given colour transparent and all others opaque."""
        target = bytes((r, g, b))
        for start in range(0, len(self.pixels), 4):
            self.pixels[start + 3] = 0 if self.pixels[start:start + 3] == target else 255