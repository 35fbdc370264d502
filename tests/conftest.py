import io
import sys
from pathlib import Path

import pytest
from PIL import ExifTags, Image
from PIL.TiffImagePlugin import IFDRational

# Add src to sys.path so we can import polaroid_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from polaroid_toolkit.core.models import CaptionSet
from polaroid_toolkit.frame.layout import FontSpec, TextMetrics


class StubMeasurer:
    """Deterministic measurer: every character is half the font size wide."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, FontSpec]] = []

    def __call__(self, text: str, font: FontSpec) -> TextMetrics:
        self.calls.append((text, font))
        return TextMetrics(width=len(text) * font.size * 0.5)


@pytest.fixture
def stub_measure():
    """Return a recording stub measurer."""
    return StubMeasurer()


@pytest.fixture
def galaxy_captions():
    """Captions of the reference Samsung shot."""
    return CaptionSet(
        device_name="Samsung Galaxy A54",
        focal_length=24,
        aperture=1.8,
        shutter_speed="1/400",
        iso=200,
    )


def make_exif(**overrides) -> Image.Exif:
    """Build an EXIF block with camera tags in the primary IFD.

    Keyword overrides: make, model, focal_length, f_number,
    exposure_time, iso. A None override drops the tag.
    """
    values = {
        "make": "samsung",
        "model": "Galaxy A54",
        "focal_length": IFDRational(24, 1),
        "f_number": IFDRational(18, 10),
        "exposure_time": IFDRational(1, 400),
        "iso": 200,
    }
    values.update(overrides)
    tags = {
        "make": ExifTags.Base.Make,
        "model": ExifTags.Base.Model,
        "focal_length": ExifTags.Base.FocalLength,
        "f_number": ExifTags.Base.FNumber,
        "exposure_time": ExifTags.Base.ExposureTime,
        "iso": ExifTags.Base.ISOSpeedRatings,
    }
    exif = Image.Exif()
    for name, value in values.items():
        if value is not None:
            exif[tags[name]] = value
    return exif


def jpeg_bytes(size=(120, 80), color="red", exif=None) -> bytes:
    """Encode a solid-color JPEG, optionally with EXIF."""
    buffer = io.BytesIO()
    img = Image.new("RGB", size, color=color)
    if exif is not None:
        img.save(buffer, format="JPEG", exif=exif)
    else:
        img.save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def exif_jpeg():
    """JPEG bytes carrying full camera EXIF."""
    return jpeg_bytes(exif=make_exif())


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image on disk."""
    img = Image.new("RGB", (200, 100), color="red")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path


@pytest.fixture
def make_jpeg():
    """Factory: make_jpeg(size=..., color=..., **exif_overrides) -> bytes.

    Pass exif=False for a JPEG without EXIF; tag overrides set to None
    remove the tag.
    """
    def _create(size=(120, 80), color="red", exif=True, **tag_overrides):
        block = make_exif(**tag_overrides) if exif else None
        return jpeg_bytes(size=size, color=color, exif=block)
    return _create
