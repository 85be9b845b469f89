"""Quick benchmarks for the Image Transformer pipeline.

Usage:
  uv run python bench.py --repeat 3
  uv run python bench.py --size 1024x768 --repeat 5

Outputs wall-clock timings so you can compare optimizations.
"""

from __future__ import annotations

import argparse
import statistics
import time

from imgx.core.pipeline import run
from imgx.models.buffer import PixelBuffer
from imgx.models.config import TransformConfig


def make_buffer(width: int, height: int) -> PixelBuffer:
    """Build a deterministic gradient buffer."""
    data = bytearray()
    for y in range(height):
        for x in range(width):
            data.extend((x % 256, y % 256, (x + y) % 256, 255))
    return PixelBuffer(width, height, bytes(data))


def run_once(buffer: PixelBuffer, config: TransformConfig) -> float:
    start = time.perf_counter()
    run(buffer, config)
    return (time.perf_counter() - start) * 1000  # ms


def main() -> None:
    parser = argparse.ArgumentParser(description="Run pipeline benchmarks on a synthetic image")
    parser.add_argument("--size", default="512x512", help="Image size as WIDTHxHEIGHT")
    parser.add_argument("--repeat", type=int, default=3, help="Number of timing runs")
    args = parser.parse_args()

    try:
        width, height = (int(part) for part in args.size.lower().split("x"))
    except ValueError:
        raise SystemExit(f"Invalid size: {args.size}")

    buffer = make_buffer(width, height)
    config = TransformConfig(
        invert=True,
        flip_horizontal=True,
        flip_vertical=True,
        grayscale=True,
    )

    timings = []
    for _ in range(args.repeat):
        timings.append(run_once(buffer, config))

    mean_ms = statistics.mean(timings)
    p95_ms = statistics.quantiles(timings, n=20)[18] if len(timings) > 1 else mean_ms
    per_mpx_ms = mean_ms / (buffer.pixel_count / 1_000_000)

    print(f"Runs: {args.repeat}")
    print(f"Image: {width}x{height}")
    print(f"Mean: {mean_ms:.1f} ms (p95: {p95_ms:.1f} ms)")
    print(f"Per-megapixel mean: {per_mpx_ms:.1f} ms")


if __name__ == "__main__":
    main()
