"""In-memory 32-bit pixel images and colour conversion for a visual's depth."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    "BIG_ENDIAN",
    "BITS_PER_PIXEL",
    "LITTLE_ENDIAN",
    "Image",
    "good_color",
    "new_image",
    "rgb_shifts",
]

LITTLE_ENDIAN = 0
BIG_ENDIAN = 1
BITS_PER_PIXEL = 32


@dataclass
class Image:
    """A ZPixmap-style image: rows of 32-bit pixels in the given byte order."""

    width: int
    height: int
    endian: int = LITTLE_ENDIAN
    bpp: int = field(default=BITS_PER_PIXEL, init=False)
    data: bytearray = field(default_factory=bytearray, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.endian not in (LITTLE_ENDIAN, BIG_ENDIAN):
            raise ValueError(f"invalid byte order {self.endian!r}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def size_line(self) -> int:
        """Number of bytes in one row of pixels."""
        return self.width * self.bytes_per_pixel

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian == BIG_ENDIAN else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low 32 bits of *color* at (x, y)."""
        offset = self._offset(x, y)
        size = self.bytes_per_pixel
        self.data[offset:offset + size] = (color & 0xFFFFFFFF).to_bytes(size, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y) as an unsigned 32-bit value."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + self.bytes_per_pixel], self._byteorder)

    def pixels(self) -> list[int]:
        """Return every pixel, row by row from the top-left corner."""
        size = self.bytes_per_pixel
        order = self._byteorder
        return [
            int.from_bytes(self.data[offset:offset + size], order)
            for offset in range(0, len(self.data), size)
        ]


def new_image(width: int, height: int, endian: int = LITTLE_ENDIAN) -> Image:
    """Create a zero-filled image; raise ValueError for a non-positive size."""
    return Image(width, height, endian)


def _mask_shift(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, got {mask:#x}")
    offset = 0
    while not mask & 1:
        mask >>= 1
        offset += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return offset, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (offset, bits) for red, green and blue, flattened into six values."""
    return (*_mask_shift(red_mask), *_mask_shift(green_mask), *_mask_shift(blue_mask))


def good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual of *depth* bits."""
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )