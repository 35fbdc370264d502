"""
Module: frame.layout

Purpose:
    Frame geometry for a photo and its captions.

Key Functions:
    - compute_layout(): Main entry point for layout

Key Classes:
    - FrameLayout: Layout output
    - FontSpec / TextMetrics / TextMeasurer: Measurement contract
    - InvalidDimension / MeasurementFailure: Layout errors
"""

from .engine import InvalidDimension, compute_layout
from .measure import BOLD, REGULAR, FontSpec, MeasurementFailure, TextMeasurer, TextMetrics
from .models import FooterLine, FrameLayout, TitleLine

__all__ = [
    # Functions
    "compute_layout",
    # Models
    "FrameLayout",
    "TitleLine",
    "FooterLine",
    # Measurement
    "FontSpec",
    "TextMetrics",
    "TextMeasurer",
    "REGULAR",
    "BOLD",
    # Errors
    "InvalidDimension",
    "MeasurementFailure",
]
