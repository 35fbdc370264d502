"""
Unit tests for frame.config.

Test Coverage:
- FrameConfig defaults and validation
- from_dict() / to_dict()
- load_frame_config() fallbacks
"""

import json
import logging
import math

import pytest

from polaroid_toolkit.frame.config import DEFAULT_FRAME_CONFIG, FrameConfig, load_frame_config


class TestFrameConfig:
    """Tests for FrameConfig dataclass."""

    def test_init_when_defaults_then_padding_16_title_24(self):
        config = FrameConfig()
        assert config.padding == 16
        assert config.title_size == 24
        assert DEFAULT_FRAME_CONFIG == config

    def test_init_when_zero_padding_then_allowed(self):
        assert FrameConfig(padding=0).padding == 0

    @pytest.mark.parametrize("kwargs", [{"padding": -1}, {"padding": math.inf}, {"title_size": 0}, {"title_size": math.nan}])
    def test_init_when_invalid_then_raises(self, kwargs):
        with pytest.raises(ValueError):
            FrameConfig(**kwargs)

    def test_from_dict_when_unknown_keys_then_ignored(self):
        config = FrameConfig.from_dict({"padding": 20, "description": "x", "descriptionSize": 16})
        assert config == FrameConfig(padding=20)

    def test_from_dict_when_not_number_then_raises(self):
        with pytest.raises(ValueError, match="must be a number"):
            FrameConfig.from_dict({"title_size": "big"})

    def test_to_dict_when_round_trip_then_equal(self):
        config = FrameConfig(padding=12, title_size=30)
        assert FrameConfig.from_dict(config.to_dict()) == config


class TestLoadFrameConfig:
    """Tests for load_frame_config()."""

    def test_load_when_none_then_defaults(self):
        assert load_frame_config(None) is DEFAULT_FRAME_CONFIG

    def test_load_when_missing_file_then_defaults(self, tmp_path):
        assert load_frame_config(tmp_path / "missing.json") == DEFAULT_FRAME_CONFIG

    def test_load_when_valid_file_then_values(self, tmp_path):
        path = tmp_path / "frame.json"
        path.write_text(json.dumps({"padding": 8, "title_size": 18}), encoding="utf-8")

        assert load_frame_config(path) == FrameConfig(padding=8, title_size=18)

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"padding": -3}'])
    def test_load_when_bad_file_then_defaults_with_warning(self, tmp_path, caplog, content):
        path = tmp_path / "frame.json"
        path.write_text(content, encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="polaroid_toolkit.frame.config"):
            config = load_frame_config(path)

        assert config == DEFAULT_FRAME_CONFIG
        assert "Using defaults" in caplog.text
