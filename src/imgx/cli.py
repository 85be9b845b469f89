"""Command-line interface for Image Transformer.

This module provides a CLI for transforming a single image without
requiring the Streamlit UI.
"""

import argparse
import logging
import sys
from pathlib import Path

from imgx.core.processor import process_image
from imgx.models.config import TransformConfig
from imgx.utils.file_handler import (
    DecodeError,
    get_output_filename,
    is_supported_image,
    read_image_bytes,
)

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Flip, invert and grayscale an image",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  imgx-cli photo.jpg
  imgx-cli photo.jpg --no-invert --flip-horizontal --output mirrored.png
  imgx-cli scan.png --grayscale --flip-vertical -v
        """,
    )

    parser.add_argument(
        "file",
        type=Path,
        help="Path to the image to transform",
    )

    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output PNG path (default: <name>-processed.png next to the input)",
    )

    parser.add_argument(
        "--invert",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Invert colors (default: on)",
    )

    parser.add_argument(
        "--flip-horizontal",
        action="store_true",
        help="Mirror the image left to right",
    )

    parser.add_argument(
        "--flip-vertical",
        action="store_true",
        help="Mirror the image top to bottom",
    )

    parser.add_argument(
        "--grayscale",
        action="store_true",
        help="Convert to grayscale",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args(argv)


def resolve_output_path(input_path: Path, output: Path | None) -> Path:
    """Pick where to write the processed image.

    Args:
        input_path: The input image path.
        output: Explicit output path or directory, if given.

    Returns:
        Path of the PNG to write.
    """
    if output is None:
        return input_path.with_name(get_output_filename(input_path.name))
    output = output.expanduser()
    if output.is_dir():
        return output / get_output_filename(input_path.name)
    return output


def build_config(args: argparse.Namespace) -> TransformConfig:
    return TransformConfig(
        invert=args.invert,
        flip_horizontal=args.flip_horizontal,
        flip_vertical=args.flip_vertical,
        grayscale=args.grayscale,
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    input_path: Path = args.file
    if not input_path.is_file():
        logger.error(f"File {input_path} does not exist")
        return 1
    if not is_supported_image(input_path.name):
        logger.error(f"File {input_path} is not a supported image")
        return 1

    try:
        data = read_image_bytes(input_path)
    except DecodeError as e:
        logger.error(str(e))
        return 1

    config = build_config(args)
    result = process_image(data, input_path.name, config)
    if not result.success or result.output_data is None:
        logger.error(result.warnings[-1])
        return 1

    for warning in result.warnings:
        logger.warning(warning)

    output_path = resolve_output_path(input_path, args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(result.output_data)
    logger.info(f"Wrote {result.width}x{result.height} image to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
