"""Tests for CLI module."""

import io
from pathlib import Path
from unittest.mock import patch

import pytest
from PIL import Image

from imgx.cli import build_config, main, parse_args, resolve_output_path
from imgx.models.config import TransformConfig


class TestParseArgs:
    """Tests for argument parsing."""

    def test_minimal_args(self):
        """Test parsing with minimal arguments."""
        args = parse_args(["photo.png"])
        assert args.file == Path("photo.png")
        assert args.output is None
        assert args.invert is True
        assert args.flip_horizontal is False
        assert args.flip_vertical is False
        assert args.grayscale is False

    def test_no_invert(self):
        args = parse_args(["photo.png", "--no-invert"])
        assert args.invert is False

    def test_all_flags(self):
        args = parse_args([
            "photo.png",
            "--flip-horizontal",
            "--flip-vertical",
            "--grayscale",
            "-v",
        ])
        assert args.flip_horizontal is True
        assert args.flip_vertical is True
        assert args.grayscale is True
        assert args.verbose is True

    def test_output_path(self):
        args = parse_args(["photo.png", "--output", "/tmp/out.png"])
        assert args.output == Path("/tmp/out.png")

    def test_help(self):
        """Test that help is available."""
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--help"])
        # Exit code 0 for --help
        assert exc_info.value.code == 0

    def test_missing_file(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestBuildConfig:
    """Tests for build_config."""

    def test_defaults(self):
        assert build_config(parse_args(["photo.png"])) == TransformConfig()

    def test_flags(self):
        config = build_config(parse_args(["photo.png", "--no-invert", "--grayscale"]))
        assert config == TransformConfig(invert=False, grayscale=True)


class TestResolveOutputPath:
    """Tests for resolve_output_path."""

    def test_default_next_to_input(self, tmp_path):
        assert resolve_output_path(tmp_path / "cat.jpg", None) == tmp_path / "cat-processed.png"

    def test_directory(self, tmp_path):
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        assert resolve_output_path(Path("cat.jpg"), out_dir) == out_dir / "cat-processed.png"

    def test_explicit_file(self, tmp_path):
        target = tmp_path / "result.png"
        assert resolve_output_path(Path("cat.jpg"), target) == target


class TestMain:
    """Integration tests for the CLI entry point."""

    def test_writes_output(self, tmp_path, sample_png_bytes: bytes):
        source = tmp_path / "sample.png"
        source.write_bytes(sample_png_bytes)

        exit_code = main([str(source), "--no-invert", "--flip-vertical"])

        assert exit_code == 0
        output = tmp_path / "sample-processed.png"
        assert output.is_file()
        with Image.open(io.BytesIO(output.read_bytes())) as img:
            assert img.size == (4, 3)
            # Source (0, 2) is (0, 200, 200, 255)
            assert img.getpixel((0, 0)) == (0, 200, 200, 255)

    def test_nested_output_directory_created(self, tmp_path, sample_png_bytes: bytes):
        source = tmp_path / "sample.png"
        source.write_bytes(sample_png_bytes)
        target = tmp_path / "nested" / "dir" / "out.png"

        assert main([str(source), "--output", str(target)]) == 0
        assert target.is_file()

    def test_missing_input(self, tmp_path):
        assert main([str(tmp_path / "missing.png")]) == 1

    def test_unsupported_extension(self, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_text("hello")
        assert main([str(source)]) == 1

    def test_corrupt_image(self, tmp_path):
        source = tmp_path / "broken.png"
        source.write_bytes(b"not a png")
        assert main([str(source)]) == 1
        assert not (tmp_path / "broken-processed.png").exists()

    def test_unreadable_input(self, tmp_path, sample_png_bytes: bytes):
        """Test a read error is logged and exits 1 instead of raising."""
        source = tmp_path / "sample.png"
        source.write_bytes(sample_png_bytes)

        with (
            patch.object(Path, "read_bytes", side_effect=PermissionError("denied")),
            patch("imgx.cli.logger") as mock_logger,
        ):
            exit_code = main([str(source)])

        assert exit_code == 1
        assert "Could not read" in mock_logger.error.call_args[0][0]
        assert not (tmp_path / "sample-processed.png").exists()
