"""
Module: frame.layout.models

Purpose:
    Data models for frame layout.
    Immutable dataclasses describing where every element of the frame
    is painted.

Key Classes:
    - TitleLine: "Shot on <device>" line positions
    - FooterLine: Shooting-parameter line position
    - FrameLayout: Complete layout output

Dependencies:
    - dataclasses (std)
    - core.models.geometry: DrawRect

Used By:
    - frame.layout.engine: Creates FrameLayouts
    - frame.output.compositor: Paints FrameLayouts
"""

from __future__ import annotations

from dataclasses import dataclass

from polaroid_toolkit.core.models import DrawRect

from .measure import FontSpec


@dataclass(frozen=True)
class TitleLine:
    """
    Title line: prefix immediately followed by the device name.

    Attributes:
        prefix_x: X of the prefix run
        title_x: X of the device name run (prefix_x + prefix_width)
        baseline_y: Shared text baseline
        prefix_text: Prefix as drawn
        title_text: Device name as drawn
        prefix_width: Measured width of the prefix including its space
        title_width: Measured width of the device name
        prefix_font: Font of the prefix run
        title_font: Font of the device name run
    """

    prefix_x: float
    title_x: float
    baseline_y: float
    prefix_text: str
    title_text: str
    prefix_width: float
    title_width: float
    prefix_font: FontSpec
    title_font: FontSpec


@dataclass(frozen=True)
class FooterLine:
    """Footer line position and content."""

    x: float
    baseline_y: float
    text: str
    width: float
    font: FontSpec


@dataclass(frozen=True)
class FrameLayout:
    """
    Computed frame geometry (immutable).

    ``frame_width``/``frame_height`` are the exact float sizes; the
    integer canvas dimensions round them up so every painted element
    fits on the raster.

    Attributes:
        display_width: Width the photo is drawn at
        scale: display_width / source width
        frame_width: Exact frame width
        frame_height: Exact frame height
        canvas_width: Raster width in pixels
        canvas_height: Raster height in pixels
        normalized_padding: Border unit in pixels
        normalized_title_size: Title font size in pixels
        normalized_footer_size: Footer font size in pixels
        image_rect: Where the scaled photo is drawn
        title: Title line
        footer: Footer line

    Example:
        >>> layout.canvas_size
        (1261, 1028)
    """

    display_width: int
    scale: float
    frame_width: float
    frame_height: float
    canvas_width: int
    canvas_height: int
    normalized_padding: float
    normalized_title_size: float
    normalized_footer_size: float
    image_rect: DrawRect
    title: TitleLine
    footer: FooterLine

    @property
    def canvas_size(self) -> tuple[int, int]:
        """(canvas_width, canvas_height)."""
        return (self.canvas_width, self.canvas_height)
