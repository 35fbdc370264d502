"""
Module: frame.images.metadata

Purpose:
    Extract caption values (device name and shooting parameters) from
    a photo's EXIF block. Missing or unreadable tags yield None, which
    the caption renders as its fallback; extraction never raises for
    bad metadata.

Key Functions:
    - extract_captions(): EXIF -> CaptionSet
    - format_exposure(): Exposure time in seconds -> "1/400"

Dependencies:
    - PIL: Exif reading (Image.getexif, ExifTags)
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from PIL import ExifTags, Image

from polaroid_toolkit.core.models import CaptionSet, DEFAULT_PREFIX, format_number

logger = logging.getLogger(__name__)

_TAG_MAKE = ExifTags.Base.Make
_TAG_MODEL = ExifTags.Base.Model
_TAG_FOCAL_LENGTH = ExifTags.Base.FocalLength
_TAG_F_NUMBER = ExifTags.Base.FNumber
_TAG_EXPOSURE_TIME = ExifTags.Base.ExposureTime
_TAG_ISO = ExifTags.Base.ISOSpeedRatings


def extract_captions(image: Image.Image, *, prefix: str = DEFAULT_PREFIX) -> CaptionSet:
    """
    Build a CaptionSet from the image's EXIF metadata.

    Args:
        image: Decoded image (EXIF read via getexif())
        prefix: Title prefix

    Returns:
        CaptionSet; fields whose tags are missing are None/empty

    Example:
        >>> extract_captions(Image.new("RGB", (10, 10))).footer_text
        '0mm f/0 s ISO0'
    """
    try:
        exif = image.getexif()
        exif_ifd = exif.get_ifd(ExifTags.IFD.Exif)
    except (OSError, ValueError, SyntaxError) as e:
        logger.warning(f"Could not read EXIF metadata: {e}")
        return CaptionSet(prefix=prefix)

    def lookup(tag: int) -> Any:
        value = exif_ifd.get(tag)
        if value is None:
            value = exif.get(tag)
        return value

    captions = CaptionSet(
        prefix=prefix,
        device_name=device_name(lookup(_TAG_MAKE), lookup(_TAG_MODEL)),
        focal_length=_to_float(lookup(_TAG_FOCAL_LENGTH)),
        aperture=_to_float(lookup(_TAG_F_NUMBER)),
        shutter_speed=format_exposure(_to_float(lookup(_TAG_EXPOSURE_TIME))),
        iso=_to_int(lookup(_TAG_ISO)),
    )

    logger.debug(f"EXIF captions: {captions.title_text!r} / {captions.footer_text!r}")
    return captions


def device_name(make: Any, model: Any) -> str:
    """
    Combine EXIF Make and Model into a display name.

    The make is dropped when the model already starts with it.

    Example:
        >>> device_name("Canon", "Canon EOS R6")
        'Canon EOS R6'
        >>> device_name("FUJIFILM", "X-T4")
        'FUJIFILM X-T4'
    """
    make_text = _clean_text(make)
    model_text = _clean_text(model)
    if not model_text:
        return make_text
    if not make_text or model_text.lower().startswith(make_text.lower()):
        return model_text
    return f"{make_text} {model_text}"


def format_exposure(seconds: Optional[float]) -> Optional[str]:
    """
    Render an exposure time as display text.

    Sub-second exposures become a reciprocal ("1/400"), longer ones
    are printed as numbers ("2", "1.5").
    """
    if seconds is None or not math.isfinite(seconds) or seconds <= 0:
        return None
    if seconds < 1:
        return f"1/{round(1 / seconds)}"
    return format_number(seconds)


def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    return str(value).replace("\x00", "").strip()


def _first(value: Any) -> Any:
    if isinstance(value, (tuple, list)):
        return value[0] if value else None
    return value


def _to_float(value: Any) -> Optional[float]:
    value = _first(value)
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, ZeroDivisionError):
        return None
    return number if math.isfinite(number) else None


def _to_int(value: Any) -> Optional[int]:
    number = _to_float(value)
    return None if number is None else int(number)
