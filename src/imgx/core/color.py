"""Per-pixel color rules for Image Transformer.

Invert and grayscale only touch the RGB channels; alpha is copied through
unchanged by both.
"""

from imgx.models.buffer import CHANNELS, Pixel

# Lookup table for channel inversion
INVERT_LUT = bytes(255 - c for c in range(256))

# Rec. 601 luma weights, scaled to integers so rounding is exact
LUMA_WEIGHTS = (299, 587, 114)
LUMA_SCALE = 1000

# Weighted channel values; the rounding offset is folded into red
_WEIGHTED_R = tuple(LUMA_WEIGHTS[0] * c + LUMA_SCALE // 2 for c in range(256))
_WEIGHTED_G = tuple(LUMA_WEIGHTS[1] * c for c in range(256))
_WEIGHTED_B = tuple(LUMA_WEIGHTS[2] * c for c in range(256))


def luminance(r: int, g: int, b: int) -> int:
    """Return round(0.299 R + 0.587 G + 0.114 B), rounding halves up.

    Integer arithmetic avoids float drift, so 140.75 always rounds to 141
    and 5.5 always rounds to 6.
    """
    weighted = LUMA_WEIGHTS[0] * r + LUMA_WEIGHTS[1] * g + LUMA_WEIGHTS[2] * b
    return (weighted + LUMA_SCALE // 2) // LUMA_SCALE


def invert_pixel(pixel: Pixel) -> Pixel:
    r, g, b, a = pixel
    return (INVERT_LUT[r], INVERT_LUT[g], INVERT_LUT[b], a)


def grayscale_pixel(pixel: Pixel) -> Pixel:
    r, g, b, a = pixel
    lum = luminance(r, g, b)
    return (lum, lum, lum, a)


def transform_pixel(pixel: Pixel, invert: bool, grayscale: bool) -> Pixel:
    """Apply the enabled color rules to one pixel.

    Invert runs first and grayscale sees the inverted channels. Swapping
    the order gives the same result except when the weighted sum lands
    exactly on a half, where the two orders differ by one level.

    Args:
        pixel: (R, G, B, A) tuple.
        invert: Apply channel inversion.
        grayscale: Apply luminance grayscale.

    Returns:
        Transformed (R, G, B, A) tuple.
    """
    if invert:
        pixel = invert_pixel(pixel)
    if grayscale:
        pixel = grayscale_pixel(pixel)
    return pixel


def apply_color(data: bytearray, invert: bool, grayscale: bool) -> None:
    """Apply color rules in place to an RGBA bytearray.

    Each rule works on whole channel slices (every fourth byte) rather than
    pixel by pixel. Invert goes through bytearray.translate with the LUT;
    grayscale sums per-channel weight tables, which gives the same values
    as luminance().

    Args:
        data: RGBA bytes to modify.
        invert: Apply channel inversion.
        grayscale: Apply luminance grayscale.
    """
    if invert:
        for channel in range(3):
            data[channel::CHANNELS] = data[channel::CHANNELS].translate(INVERT_LUT)

    if grayscale:
        lum = bytes(
            (_WEIGHTED_R[r] + _WEIGHTED_G[g] + _WEIGHTED_B[b]) // LUMA_SCALE
            for r, g, b in zip(data[0::CHANNELS], data[1::CHANNELS], data[2::CHANNELS])
        )
        for channel in range(3):
            data[channel::CHANNELS] = lum
