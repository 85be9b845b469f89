"""Validation utilities for Image Transformer.

This module defines the errors the transform pipeline raises and the
checks it runs on a source buffer before touching any pixels.
"""

import logging

from imgx.models.buffer import PixelBuffer

logger = logging.getLogger(__name__)


class TransformError(ValueError):
    """Base class for errors raised by the transform pipeline."""


class EmptyInput(TransformError):
    """Source buffer has zero width or height."""


class BufferSizeMismatch(TransformError):
    """Source buffer data length does not match its dimensions."""


def validate_dimensions(width: int, height: int) -> None:
    """Check that an image has a drawable area.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Raises:
        EmptyInput: If width or height is not positive.
    """
    if width <= 0 or height <= 0:
        raise EmptyInput(f"Image must have a positive size (got {width}x{height})")


def validate_buffer(buffer: PixelBuffer) -> None:
    """Check a source buffer before transforming it.

    Args:
        buffer: The buffer to check.

    Raises:
        EmptyInput: If the buffer has no pixels.
        BufferSizeMismatch: If the data length is not width * height * 4.
    """
    validate_dimensions(buffer.width, buffer.height)

    if len(buffer.data) != buffer.expected_length:
        raise BufferSizeMismatch(
            f"Buffer for a {buffer.width}x{buffer.height} image must hold "
            f"{buffer.expected_length} bytes (got {len(buffer.data)})"
        )
