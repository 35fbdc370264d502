"""
Module: core.models

Purpose:
    Immutable value types used across the frame pipeline.

Key Classes:
    - CaptionSet: Caption strings drawn under the photo
    - ImageSize: Pixel dimensions of a source image
    - DrawRect: Placement rectangle on the canvas
"""

from .captions import CaptionSet, DEFAULT_PREFIX, format_number
from .geometry import DrawRect, ImageSize

__all__ = [
    "CaptionSet",
    "DEFAULT_PREFIX",
    "format_number",
    "DrawRect",
    "ImageSize",
]
