"""Pytest configuration and shared fixtures."""

import io
import itertools

import pytest
from PIL import Image

from imgx.models.buffer import PixelBuffer
from imgx.models.config import OPTION_NAMES, TransformConfig

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 128)
BLUE = (0, 0, 255, 64)
WHITE = (255, 255, 255, 0)


ALL_CONFIGS = [
    TransformConfig(**dict(zip(OPTION_NAMES, flags)))
    for flags in itertools.product([False, True], repeat=len(OPTION_NAMES))
]


@pytest.fixture(
    params=ALL_CONFIGS,
    ids=lambda c: "+".join(c.enabled_options) or "none",
)
def any_config(request) -> TransformConfig:
    """Each of the sixteen option combinations in turn."""
    return request.param


@pytest.fixture
def quad_buffer() -> PixelBuffer:
    """2x2 buffer: red, green / blue, white, each with a different alpha."""
    return PixelBuffer.from_pixels(2, 2, [RED, GREEN, BLUE, WHITE])


@pytest.fixture
def gradient_buffer() -> PixelBuffer:
    """Create a 5x3 buffer where every pixel is distinct."""
    pixels = []
    for y in range(3):
        for x in range(5):
            pixels.append((x * 50, y * 100, (x * 37 + y * 91) % 256, 255 - x * 10 - y))
    return PixelBuffer.from_pixels(5, 3, pixels)


@pytest.fixture
def sample_image() -> Image.Image:
    """Create a small RGBA image with a gradient and varying alpha."""
    img = Image.new("RGBA", (4, 3))
    pixels = img.load()

    for x in range(4):
        for y in range(3):
            pixels[x, y] = (x * 60, y * 100, 200, 255 - x * 20)  # type: ignore[index]

    return img


@pytest.fixture
def sample_png_bytes(sample_image: Image.Image) -> bytes:
    """Get sample image as PNG bytes."""
    output = io.BytesIO()
    sample_image.save(output, format="PNG")
    return output.getvalue()


@pytest.fixture
def sample_jpeg_bytes() -> bytes:
    """Solid RGB JPEG (no alpha channel)."""
    img = Image.new("RGB", (8, 6), (10, 20, 30))
    output = io.BytesIO()
    img.save(output, format="JPEG", quality=95)
    return output.getvalue()


@pytest.fixture
def default_config() -> TransformConfig:
    """Default configuration (invert only)."""
    return TransformConfig()
