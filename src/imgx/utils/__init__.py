"""Utility modules for Image Transformer."""

from imgx.utils.file_handler import (
    DecodeError,
    ExportError,
    decode_image,
    encode_png,
    get_output_filename,
    is_supported_image,
    read_image_bytes,
)

__all__ = [
    "DecodeError",
    "ExportError",
    "decode_image",
    "encode_png",
    "get_output_filename",
    "is_supported_image",
    "read_image_bytes",
]
