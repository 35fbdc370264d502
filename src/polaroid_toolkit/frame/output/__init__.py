"""
Module: frame.output

Purpose:
    Paint computed layouts and export the result.

Key Functions:
    - render(): Paint a FrameLayout onto a RasterSurface
    - encode_png() / export_png(): PNG output
"""

from .compositor import FontLoader, render
from .exporter import DEFAULT_EXPORT_NAME, encode_png, export_png
from .surface import RasterSurface

__all__ = [
    "RasterSurface",
    "FontLoader",
    "render",
    "encode_png",
    "export_png",
    "DEFAULT_EXPORT_NAME",
]
