"""Image Transformer - Flip, invert and grayscale a single image."""

import logging

__version__ = "0.1.0"

# Configure logging for the entire package
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
