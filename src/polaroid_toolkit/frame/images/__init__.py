"""
Module: frame.images

Purpose:
    Image decoding and EXIF caption extraction ahead of layout.

Key Functions:
    - load_image(): Decode bytes or a file into a PIL image
    - extract_captions(): Read caption values from EXIF
"""

from .loader import ImageInput, ImageLoadError, load_image
from .metadata import device_name, extract_captions, format_exposure

__all__ = [
    "ImageInput",
    "ImageLoadError",
    "load_image",
    "extract_captions",
    "device_name",
    "format_exposure",
]
