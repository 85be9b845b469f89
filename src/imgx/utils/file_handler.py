"""File handling utilities for Image Transformer.

This module decodes uploaded image bytes into pixel buffers and encodes
transformed buffers back to PNG for download.
"""

import io
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from imgx.models.buffer import PixelBuffer

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_NAME = "processed-image.png"

SUPPORTED_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp")


class DecodeError(ValueError):
    """Image bytes could not be decoded into a pixel buffer."""


class ExportError(ValueError):
    """A pixel buffer could not be encoded for download."""


def is_supported_image(filename: str, mime_type: str | None = None) -> bool:
    """Check whether an upload looks like an image.

    Args:
        filename: Name of the uploaded file.
        mime_type: MIME type reported by the uploader, if any.

    Returns:
        True for image/* MIME types, or for known image extensions when
        no MIME type is given.
    """
    if mime_type:
        return mime_type.startswith("image/")
    return Path(filename).suffix.lower() in SUPPORTED_EXTENSIONS


def decode_image(data: bytes) -> PixelBuffer:
    """Decode image bytes into an RGBA pixel buffer.

    Args:
        data: Raw bytes of a PNG, JPEG, GIF, BMP or WebP file.

    Returns:
        PixelBuffer with the first frame of the image.

    Raises:
        DecodeError: If the bytes are empty, corrupt or not a supported format.
    """
    if not data:
        raise DecodeError("Image data is empty")

    try:
        with io.BytesIO(data) as image_stream:
            with Image.open(image_stream) as img:
                rgba = img.convert("RGBA")
                return PixelBuffer(rgba.width, rgba.height, rgba.tobytes())
    except UnidentifiedImageError as e:
        raise DecodeError(f"Unsupported image format: {e}") from e
    except Image.DecompressionBombError as e:
        raise DecodeError(f"Image is too large: {e}") from e
    except (OSError, ValueError, SyntaxError) as e:
        # Truncated or otherwise corrupt files; Pillow reports broken
        # headers and tiles as ValueError or SyntaxError
        raise DecodeError(f"Corrupt image data: {e}") from e


def read_image_bytes(path: Path) -> bytes:
    """Read an image file from disk.

    Raises:
        DecodeError: If the file cannot be read (missing, permission denied).
    """
    try:
        return path.read_bytes()
    except OSError as e:
        raise DecodeError(f"Could not read {path}: {e}") from e


def encode_png(buffer: PixelBuffer) -> bytes:
    """Encode a pixel buffer as PNG.

    Args:
        buffer: Transformed pixel buffer.

    Returns:
        PNG image as bytes.

    Raises:
        ExportError: If the buffer has no pixels or its data does not fit
            its dimensions.
    """
    if buffer.width <= 0 or buffer.height <= 0:
        raise ExportError("No processed image to export")

    try:
        img = Image.frombytes("RGBA", buffer.size, buffer.data)
    except ValueError as e:
        raise ExportError(f"Buffer does not match its dimensions: {e}") from e

    output_stream = io.BytesIO()
    img.save(output_stream, format="PNG", optimize=False)
    return output_stream.getvalue()


def get_output_filename(original_name: str | None) -> str:
    """Generate the download filename for a processed image.

    Args:
        original_name: Name of the uploaded file, if known.

    Returns:
        "<stem>-processed.png", or "processed-image.png" without a name.

    Example:
        >>> get_output_filename("holiday.jpg")
        "holiday-processed.png"
    """
    if not original_name:
        return DEFAULT_OUTPUT_NAME
    stem = Path(original_name).stem
    if not stem:
        return DEFAULT_OUTPUT_NAME
    return f"{stem}-processed.png"
