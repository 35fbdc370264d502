"""
Unit tests for core.models.captions.

Test Coverage:
- format_number(): integral, fractional, missing and non-finite values
- CaptionSet.footer_text composition and fallbacks
- CaptionSet.with_overrides()
"""

import math

import pytest

from polaroid_toolkit.core.models import CaptionSet, format_number


class TestFormatNumber:
    """Tests for format_number()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (24, "24"),
            (24.0, "24"),
            (1.8, "1.8"),
            (2.25, "2.25"),
            (0, "0"),
        ],
    )
    def test_format_when_finite_then_shortest_text(self, value, expected):
        assert format_number(value) == expected

    @pytest.mark.parametrize("value", [None, math.nan, math.inf, -math.inf])
    def test_format_when_missing_or_non_finite_then_zero(self, value):
        assert format_number(value) == "0"

    def test_format_when_string_then_passes_through(self):
        assert format_number(" 35 ") == "35"
        assert format_number("") == "0"


class TestCaptionSet:
    """Tests for CaptionSet."""

    def test_footer_text_when_all_values_then_composed(self, galaxy_captions):
        assert galaxy_captions.footer_text == "24mm f/1.8 1/400s ISO200"

    def test_footer_text_when_focal_length_multi_digit_then_not_truncated(self):
        captions = CaptionSet(focal_length=135, aperture=2.8, shutter_speed="1/60", iso=800)
        assert captions.footer_text.startswith("135mm ")

    def test_footer_text_when_values_missing_then_fallbacks(self):
        # Arrange
        captions = CaptionSet(focal_length=math.nan, aperture=None, shutter_speed=None, iso=None)

        # Act & Assert
        assert captions.footer_text == "0mm f/0 s ISO0"

    def test_title_when_device_none_then_empty(self):
        captions = CaptionSet(device_name=None)
        assert captions.title_text == ""

    def test_measured_prefix_when_default_then_trailing_space(self):
        captions = CaptionSet()
        assert captions.prefix_text == "Shot on"
        assert captions.measured_prefix == "Shot on "

    def test_with_overrides_when_values_then_replaced_and_none_ignored(self, galaxy_captions):
        # Act
        updated = galaxy_captions.with_overrides(device_name="Pixel 8", iso=None)

        # Assert
        assert updated.device_name == "Pixel 8"
        assert updated.iso == 200
        assert galaxy_captions.device_name == "Samsung Galaxy A54"

    def test_with_overrides_when_unknown_field_then_raises(self, galaxy_captions):
        with pytest.raises(TypeError, match="Unknown caption fields"):
            galaxy_captions.with_overrides(lens="50mm")
