"""Pixel buffer model for Image Transformer."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Self

CHANNELS = 4

Pixel = tuple[int, int, int, int]


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major RGBA image data.

    ``data`` holds four bytes (R, G, B, A) per pixel, row ``y`` occupying
    ``data[y * width * 4:(y + 1) * width * 4]``. The length is not checked
    here: a decoder may hand over a malformed buffer and the pipeline is
    the one that rejects it.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        data: Raw RGBA bytes.
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        # bytes() raises ValueError for values outside 0..255
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_pixels(cls, width: int, height: int, pixels: Iterable[Pixel]) -> Self:
        """Create a buffer from RGBA tuples in reading order.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.
            pixels: Iterable of (R, G, B, A) tuples.

        Returns:
            PixelBuffer holding the flattened pixels.

        Raises:
            ValueError: If a pixel does not have four channels or a channel
                is outside 0..255.
        """
        data = bytearray()
        for pixel in pixels:
            if len(pixel) != CHANNELS:
                raise ValueError(f"Pixel must have {CHANNELS} channels (got {len(pixel)})")
            data.extend(pixel)
        return cls(width, height, bytes(data))

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def expected_length(self) -> int:
        """Byte length the data must have for these dimensions."""
        return self.pixel_count * CHANNELS

    def pixel(self, x: int, y: int) -> Pixel:
        """Return the RGBA tuple at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        i = (y * self.width + x) * CHANNELS
        r, g, b, a = self.data[i : i + CHANNELS]
        return (r, g, b, a)

    def pixels(self) -> Iterator[Pixel]:
        """Iterate RGBA tuples in reading order."""
        data = self.data
        for i in range(0, len(data) - CHANNELS + 1, CHANNELS):
            yield (data[i], data[i + 1], data[i + 2], data[i + 3])
