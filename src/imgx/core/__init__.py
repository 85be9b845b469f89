"""Core processing modules for Image Transformer."""

from imgx.core.pipeline import run
from imgx.core.processor import ProcessingResult, process_image
from imgx.core.validation import BufferSizeMismatch, EmptyInput, TransformError

__all__ = [
    "run",
    "process_image",
    "ProcessingResult",
    "TransformError",
    "EmptyInput",
    "BufferSizeMismatch",
]
