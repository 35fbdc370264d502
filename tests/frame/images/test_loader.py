"""
Tests for frame.images.loader

Test Coverage:
- load_image() from bytes, paths and streams
- EXIF orientation applied
- Mode normalization
- ImageLoadError for missing and non-image input
"""

import io

import pytest
from PIL import ExifTags, Image

from polaroid_toolkit.frame.images import ImageLoadError, load_image


class TestLoadImage:
    def test_load_when_bytes_then_decoded(self, make_jpeg):
        image = load_image(make_jpeg(size=(120, 80)))

        assert image.size == (120, 80)
        assert image.mode == "RGB"

    def test_load_when_path_then_decoded(self, sample_image):
        assert load_image(sample_image).size == (200, 100)

    def test_load_when_stream_then_decoded(self, make_jpeg):
        assert load_image(io.BytesIO(make_jpeg())).size == (120, 80)

    def test_load_when_exif_then_metadata_kept(self, exif_jpeg):
        image = load_image(exif_jpeg)

        assert image.getexif().get(ExifTags.Base.Model) == "Galaxy A54"

    def test_load_when_rotated_orientation_then_transposed(self):
        # Arrange: orientation 6 = rotate 90 degrees clockwise on display
        exif = Image.Exif()
        exif[ExifTags.Base.Orientation] = 6
        buffer = io.BytesIO()
        Image.new("RGB", (120, 80), "blue").save(buffer, format="JPEG", exif=exif)

        # Act
        image = load_image(buffer.getvalue())

        # Assert
        assert image.size == (80, 120)

    def test_load_when_palette_png_then_rgb(self):
        buffer = io.BytesIO()
        Image.new("P", (10, 10)).save(buffer, format="PNG")

        assert load_image(buffer.getvalue()).mode == "RGB"

    def test_load_when_la_png_then_rgba(self):
        buffer = io.BytesIO()
        Image.new("LA", (10, 10)).save(buffer, format="PNG")

        assert load_image(buffer.getvalue()).mode == "RGBA"

    def test_load_when_not_image_then_raises(self):
        with pytest.raises(ImageLoadError, match="Not an image"):
            load_image(b"definitely not a photo")

    def test_load_when_missing_file_then_raises(self, tmp_path):
        with pytest.raises(ImageLoadError, match="File not found"):
            load_image(tmp_path / "nope.jpg")

    def test_load_error_when_raised_then_is_value_error(self):
        assert issubclass(ImageLoadError, ValueError)
