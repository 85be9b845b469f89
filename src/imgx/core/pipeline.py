"""Transform pipeline for Image Transformer.

This module maps a source buffer and a TransformConfig to a new buffer:
flips first, then the color rules on the flipped pixels. Each run is a
pure function of its inputs and never modifies the source.
"""

import logging

from imgx.core.color import apply_color
from imgx.core.geometry import remap
from imgx.core.validation import validate_buffer
from imgx.models.buffer import PixelBuffer
from imgx.models.config import TransformConfig

logger = logging.getLogger(__name__)


def run(source: PixelBuffer, config: TransformConfig) -> PixelBuffer:
    """Apply the configured transforms to a buffer.

    Args:
        source: Decoded source image. Left untouched.
        config: Options to apply.

    Returns:
        New PixelBuffer with the same dimensions as the source.

    Raises:
        EmptyInput: If the source has zero width or height.
        BufferSizeMismatch: If the source data length does not match its
            dimensions.
    """
    validate_buffer(source)

    logger.debug(
        f"Transforming {source.width}x{source.height} image "
        f"with {', '.join(config.enabled_options) or 'no options'}"
    )

    output = bytearray(len(source.data))
    remap(
        source.data,
        output,
        source.width,
        source.height,
        config.flip_horizontal,
        config.flip_vertical,
    )
    if config.needs_color_pass:
        apply_color(output, config.invert, config.grayscale)

    return PixelBuffer(source.width, source.height, bytes(output))
