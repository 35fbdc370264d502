"""
Tests for the command line interface.

Test Coverage:
- Argument parsing and config resolution
- End-to-end run writing a PNG
- Exit status on failure
"""

import json
from pathlib import Path

import pytest
from PIL import Image

from polaroid_toolkit.cli import build_parser, main, resolve_config
from polaroid_toolkit.frame import FrameConfig


class TestResolveConfig:
    def test_resolve_when_no_flags_then_defaults(self, tmp_path):
        args = build_parser().parse_args([str(tmp_path / "in.jpg")])

        assert resolve_config(args) == FrameConfig()

    def test_resolve_when_file_and_flags_then_flags_win(self, tmp_path):
        config_path = tmp_path / "frame.json"
        config_path.write_text(json.dumps({"padding": 8, "title_size": 30}), encoding="utf-8")
        args = build_parser().parse_args(["in.jpg", "--config", str(config_path), "--padding", "12"])

        assert resolve_config(args) == FrameConfig(padding=12, title_size=30)


class TestMain:
    def test_main_when_photo_then_png_written(self, tmp_path, make_jpeg, capsys):
        # Arrange
        source = tmp_path / "photo.jpg"
        source.write_bytes(make_jpeg(size=(640, 480)))
        output = tmp_path / "framed.png"

        # Act
        status = main([str(source), "-o", str(output), "--device", "Pixel 8", "--iso", "50"])

        # Assert
        assert status == 0
        assert Path(capsys.readouterr().out.strip()) == output
        with Image.open(output) as img:
            assert img.width > 800

    def test_main_when_missing_input_then_exit_1(self, tmp_path, capsys):
        status = main([str(tmp_path / "missing.jpg"), "-o", str(tmp_path / "out.png")])

        assert status == 1
        assert "File not found" in capsys.readouterr().err

    def test_main_when_negative_padding_then_usage_error(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "in.jpg"), "--padding", "-1"])

        assert excinfo.value.code == 2
