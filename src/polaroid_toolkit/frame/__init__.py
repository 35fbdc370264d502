"""
Module: frame

Purpose:
    Polaroid-style framing pipeline: decodes a photo, reads its
    shooting parameters, lays out the white frame and captions, and
    paints the result for export.

Key Functions:
    - frame_photo(): Main entry point
    - compute_layout(): Pure frame geometry
    - render(): Paint a layout

Key Classes:
    - FrameConfig: Frame configuration
    - FrameLayout: Layout output
    - FrameResult / FrameError: Pipeline result and failure

Dependencies:
    - PIL: Decoding, text metrics, painting, PNG export

Used By:
    - polaroid_toolkit.cli
"""

from .config import DEFAULT_FRAME_CONFIG, FrameConfig, load_frame_config
from .controller import FrameError, FrameResult, frame_photo
from .layout import FrameLayout, InvalidDimension, MeasurementFailure, compute_layout
from .output import RasterSurface, render

__all__ = [
    # Config
    "FrameConfig",
    "DEFAULT_FRAME_CONFIG",
    "load_frame_config",
    # Layout
    "compute_layout",
    "FrameLayout",
    "InvalidDimension",
    "MeasurementFailure",
    # Output
    "RasterSurface",
    "render",
    # Controller
    "frame_photo",
    "FrameResult",
    "FrameError",
]
