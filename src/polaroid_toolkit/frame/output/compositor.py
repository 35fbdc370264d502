"""
Module: frame.output.compositor

Purpose:
    Paint a FrameLayout: white background, the scaled photo, the title
    line and the footer line, in that order, onto a RasterSurface.

Key Functions:
    - render(): Paint a layout onto a surface

Dependencies:
    - PIL: Image resizing and text drawing
    - frame.fonts: Font loading for caption runs

Used By:
    - frame.controller: Pipeline orchestration
"""

from __future__ import annotations

import logging
from typing import Optional

from PIL import Image

from polaroid_toolkit.frame.config import BACKGROUND_COLOR, MUTED_TEXT_COLOR, TITLE_TEXT_COLOR
from polaroid_toolkit.frame.fonts import FontLoader, PillowFont, PillowFontLoader
from polaroid_toolkit.frame.layout import FrameLayout

from .surface import RasterSurface

logger = logging.getLogger(__name__)


def render(
    surface: RasterSurface,
    image: Image.Image,
    layout: FrameLayout,
    *,
    fonts: Optional[FontLoader] = None,
) -> None:
    """
    Paint the framed photo onto a surface.

    The surface is resized to the layout's canvas size (discarding its
    content), then painted background -> photo -> title -> footer so
    no later fill covers anti-aliased text.

    Args:
        surface: Target surface (mutated in place)
        image: Source photo
        layout: Layout computed for this photo
        fonts: Font loader; defaults to PillowFontLoader()

    Raises:
        MeasurementFailure: If a caption font cannot be loaded
    """
    fonts = fonts or PillowFontLoader()

    surface.resize(*layout.canvas_size)
    draw = surface.draw

    # 1. Background
    draw.rectangle((0, 0, layout.canvas_width, layout.canvas_height), fill=BACKGROUND_COLOR)

    # 2. Photo
    _draw_photo(surface, image, layout)

    # 3. Title: muted prefix, bold device name on the same baseline
    title = layout.title
    _draw_text(surface, title.prefix_x, title.baseline_y, title.prefix_text,
               fonts.font_for(title.prefix_font), MUTED_TEXT_COLOR)
    if title.title_text:
        _draw_text(surface, title.title_x, title.baseline_y, title.title_text,
                   fonts.font_for(title.title_font), TITLE_TEXT_COLOR)

    # 4. Footer
    footer = layout.footer
    _draw_text(surface, footer.x, footer.baseline_y, footer.text,
               fonts.font_for(footer.font), MUTED_TEXT_COLOR)

    logger.debug(f"Rendered frame {layout.canvas_width}x{layout.canvas_height}")


def _draw_photo(surface: RasterSurface, image: Image.Image, layout: FrameLayout) -> None:
    """Scale the photo by layout.scale and paste it at image_rect."""
    left, top, right, bottom = layout.image_rect.to_box()
    target_size = (right - left, bottom - top)

    photo = image
    if photo.mode not in ("RGB", "RGBA"):
        photo = photo.convert("RGBA" if "A" in photo.getbands() else "RGB")
    if photo.size != target_size:
        photo = photo.resize(target_size, Image.Resampling.LANCZOS)

    mask = photo if photo.mode == "RGBA" else None
    if photo.mode != surface.mode:
        photo = photo.convert(surface.mode)
    # paste clips to the surface bounds
    surface.image.paste(photo, (left, top), mask)


def _draw_text(
    surface: RasterSurface,
    x: float,
    baseline_y: float,
    text: str,
    font: PillowFont,
    color: str,
) -> None:
    """Draw text anchored at its left baseline."""
    if not text:
        return
    surface.draw.text((x, baseline_y), text, fill=color, font=font, anchor="ls")
