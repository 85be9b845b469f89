"""Single image processing for Image Transformer.

Ties the decoder, the transform pipeline and the PNG exporter together so
the CLI and the Streamlit app share one code path.
"""

import logging
from dataclasses import dataclass, field

from imgx.core.pipeline import run
from imgx.core.validation import TransformError
from imgx.models.config import TransformConfig
from imgx.utils.file_handler import (
    DecodeError,
    ExportError,
    decode_image,
    encode_png,
    get_output_filename,
)

logger = logging.getLogger(__name__)


@dataclass
class ProcessingResult:
    """Result of processing a single image."""

    filename: str
    success: bool
    output_data: bytes | None
    warnings: list[str] = field(default_factory=list)
    width: int = 0
    height: int = 0


def process_image(
    data: bytes,
    filename: str | None,
    config: TransformConfig,
) -> ProcessingResult:
    """Decode, transform and re-encode one image.

    Args:
        data: Raw bytes of the uploaded image.
        filename: Original filename (used for the output name and logs).
        config: Options to apply.

    Returns:
        ProcessingResult with PNG bytes on success.
    """
    name = filename or "image"
    warnings = config.validate()

    try:
        source = decode_image(data)
        result = run(source, config)
        output_data = encode_png(result)
    except (DecodeError, TransformError, ExportError) as e:
        logger.warning(f"Failed to process {name}: {e}")
        return ProcessingResult(
            filename=name,
            success=False,
            output_data=None,
            warnings=warnings + [f"Processing failed: {e}"],
        )

    logger.info(
        f"Processed {name} ({result.width}x{result.height}) "
        f"with {', '.join(config.enabled_options) or 'no options'}"
    )
    return ProcessingResult(
        filename=get_output_filename(filename),
        success=True,
        output_data=output_data,
        warnings=warnings,
        width=result.width,
        height=result.height,
    )
