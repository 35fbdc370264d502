"""
Module: frame.layout.engine

Purpose:
    Compute the frame geometry for a photo: border padding, font sizes,
    caption positions and final canvas size. Pure and deterministic;
    text widths come from an injected measurer.

Key Functions:
    - compute_layout(): Main entry point for layout

Key Classes:
    - InvalidDimension: Raised for non-positive image sizes

Dependencies:
    - frame.config: FrameConfig and design constants
    - frame.layout.measure: FontSpec, TextMeasurer

Used By:
    - frame.controller: Pipeline orchestration
"""

from __future__ import annotations

import logging
import math

from polaroid_toolkit.core.models import CaptionSet, DrawRect, ImageSize

from ..config import (
    DEFAULT_FRAME_CONFIG,
    FOOTER_SIZE_FACTOR,
    MIN_FRAME_WIDTH,
    PADDING_FACTOR,
    TITLE_SIZE_FACTOR,
    FrameConfig,
)
from .measure import BOLD, REGULAR, FontSpec, TextMeasurer
from .models import FooterLine, FrameLayout, TitleLine

logger = logging.getLogger(__name__)


class InvalidDimension(ValueError):
    """Image width or height is not positive."""
    pass


def compute_layout(
    image_size: ImageSize,
    captions: CaptionSet,
    config: FrameConfig = DEFAULT_FRAME_CONFIG,
    *,
    measure_text: TextMeasurer,
) -> FrameLayout:
    """
    Compute the frame layout for an image.

    Steps, in order:
    1. Display width: at least MIN_FRAME_WIDTH, else native width
    2. Uniform scale of the photo to the display width
    3. Normalize padding and font sizes to the display width
    4. Measure prefix, device name and footer
    5. Size the canvas
    6. Center the caption lines within the display width

    Args:
        image_size: Source image dimensions
        captions: Caption values to render
        config: Frame configuration
        measure_text: Text measurer; its errors propagate unchanged

    Returns:
        Fully populated FrameLayout

    Raises:
        InvalidDimension: If width or height <= 0

    Example:
        >>> layout = compute_layout(ImageSize(1200, 800), captions, measure_text=measure)
        >>> layout.display_width, layout.scale
        (1200, 1.0)
    """
    width, height = image_size.width, image_size.height
    if width <= 0 or height <= 0:
        raise InvalidDimension(f"Image dimensions must be positive: {width}x{height}")

    # 1-2. Display width and uniform scale
    display_width = max(MIN_FRAME_WIDTH, width)
    scale = display_width / width
    scaled_height = height * scale

    # 3. Design units -> canvas pixels
    padding = config.padding * display_width * PADDING_FACTOR
    title_size = config.title_size * display_width * TITLE_SIZE_FACTOR
    footer_size = config.title_size * display_width * FOOTER_SIZE_FACTOR

    # 4. Measure
    prefix_font = FontSpec(REGULAR, title_size)
    title_font = FontSpec(BOLD, title_size)
    footer_font = FontSpec(REGULAR, footer_size)

    title_text = captions.title_text
    footer_text = captions.footer_text

    prefix_width = measure_text(captions.measured_prefix, prefix_font).width
    title_width = measure_text(title_text, title_font).width if title_text else 0.0
    footer_width = measure_text(footer_text, footer_font).width

    # 5. Canvas size; summation order is fixed
    additional_height = (
        2 * padding  # top and bottom border
        + 2 * padding  # before and after caption block
        + padding  # between title and footer
        + title_size
        + footer_size
    )
    frame_width = 2 * padding + display_width
    frame_height = scaled_height + additional_height
    image_rect = DrawRect(padding, padding, display_width, scaled_height)

    # Whole pixels truncate like a canvas size; never cut into the photo
    canvas_width = max(math.floor(frame_width), math.ceil(image_rect.right))
    canvas_height = max(math.floor(frame_height), math.ceil(image_rect.bottom))

    # 6. Positions, centered within display_width
    prefix_x = _center(display_width, prefix_width + title_width)
    title_baseline = scaled_height + 2 * padding + title_size
    footer_x = _center(display_width, footer_width)
    footer_baseline = scaled_height + 3 * padding + title_size + padding

    layout = FrameLayout(
        display_width=display_width,
        scale=scale,
        frame_width=frame_width,
        frame_height=frame_height,
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        normalized_padding=padding,
        normalized_title_size=title_size,
        normalized_footer_size=footer_size,
        image_rect=image_rect,
        title=TitleLine(
            prefix_x=prefix_x,
            title_x=prefix_x + prefix_width,
            baseline_y=title_baseline,
            prefix_text=captions.prefix_text,
            title_text=title_text,
            prefix_width=prefix_width,
            title_width=title_width,
            prefix_font=prefix_font,
            title_font=title_font,
        ),
        footer=FooterLine(
            x=footer_x,
            baseline_y=footer_baseline,
            text=footer_text,
            width=footer_width,
            font=footer_font,
        ),
    )

    logger.debug(
        f"Layout {width}x{height} -> canvas {layout.canvas_width}x{layout.canvas_height} "
        f"(scale={scale:.4f}, padding={padding:.2f}, title={title_size:.2f}px, "
        f"footer={footer_size:.2f}px)"
    )

    return layout


def _center(container_width: float, content_width: float) -> float:
    """Left offset centering content; clamped at 0 for overflowing text."""
    return max(0.0, (container_width - content_width) / 2)
