"""Geometric remapping for Image Transformer.

Flips are exact pixel permutations: every output pixel is copied from one
source pixel, dimensions never change and nothing is resampled.
"""

from imgx.models.buffer import CHANNELS


def source_coordinate(
    x: int,
    y: int,
    width: int,
    height: int,
    flip_horizontal: bool,
    flip_vertical: bool,
) -> tuple[int, int]:
    """Map an output coordinate to the source coordinate to sample.

    Args:
        x: Output column, 0 <= x < width.
        y: Output row, 0 <= y < height.
        width: Image width in pixels.
        height: Image height in pixels.
        flip_horizontal: Mirror across the vertical axis.
        flip_vertical: Mirror across the horizontal axis.

    Returns:
        (src_x, src_y) tuple.

    Examples:
        >>> source_coordinate(0, 0, 3, 2, True, False)
        (2, 0)
        >>> source_coordinate(0, 0, 3, 2, True, True)
        (2, 1)
    """
    src_x = width - 1 - x if flip_horizontal else x
    src_y = height - 1 - y if flip_vertical else y
    return src_x, src_y


def remap(
    source: bytes,
    output: bytearray,
    width: int,
    height: int,
    flip_horizontal: bool,
    flip_vertical: bool,
) -> None:
    """Fill output with the flipped source pixels.

    Works a row at a time: the source row comes from source_coordinate, a
    vertical flip is a plain row copy and a horizontal flip reverses each
    channel slice of the row, so pixels move as whole 4-byte groups.

    Args:
        source: Source RGBA bytes, width * height * 4 long.
        output: Destination bytearray of the same length.
        width: Image width in pixels.
        height: Image height in pixels.
        flip_horizontal: Mirror across the vertical axis.
        flip_vertical: Mirror across the horizontal axis.
    """
    row_bytes = width * CHANNELS
    for y in range(height):
        _, src_y = source_coordinate(0, y, width, height, False, flip_vertical)
        src = source[src_y * row_bytes : (src_y + 1) * row_bytes]
        dst = y * row_bytes
        if flip_horizontal:
            for channel in range(CHANNELS):
                output[dst + channel : dst + row_bytes : CHANNELS] = src[channel::CHANNELS][::-1]
        else:
            output[dst : dst + row_bytes] = src
