"""
Module: frame.controller

Purpose:
    Orchestrate the complete framing pipeline.
    Load → Extract captions → Override → Layout → Render → Export

Key Functions:
    - frame_photo(): Main entry point for framing a photo

Key Classes:
    - FrameResult: Complete framing result
    - FrameError: Exception for pipeline failures

Dependencies:
    - frame.images: Decoding and EXIF captions
    - frame.layout: Geometry
    - frame.output: Painting and PNG export

Used By:
    - polaroid_toolkit.cli: Command line interface
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from PIL import Image

from polaroid_toolkit.core.models import CaptionSet, ImageSize

from .config import DEFAULT_FRAME_CONFIG, FrameConfig
from .fonts import FontLoader, PillowFontLoader, PillowTextMeasurer
from .images import ImageLoadError, ImageInput, extract_captions, load_image
from .layout import FrameLayout, InvalidDimension, MeasurementFailure, TextMeasurer, compute_layout
from .output import RasterSurface, export_png, render

logger = logging.getLogger(__name__)


class FrameError(Exception):
    """Error during the framing pipeline."""
    pass


@dataclass(frozen=True)
class FrameResult:
    """
    Complete framing result (immutable).

    Attributes:
        surface: Painted surface holding the framed photo
        layout: Layout that was painted
        captions: Captions after overrides
        output_path: Written PNG path, if exported

    Example:
        >>> result = frame_photo(Path("photo.jpg"), output_path=Path("out"))
        >>> result.layout.canvas_size
        (1261, 1028)
    """

    surface: RasterSurface
    layout: FrameLayout
    captions: CaptionSet
    output_path: Optional[Path] = None

    @property
    def image(self) -> Image.Image:
        """Framed photo."""
        return self.surface.image


def frame_photo(
    source: ImageInput,
    *,
    config: FrameConfig = DEFAULT_FRAME_CONFIG,
    overrides: Optional[Mapping[str, object]] = None,
    measurer: Optional[TextMeasurer] = None,
    fonts: Optional[FontLoader] = None,
    output_path: Optional[Path] = None,
) -> FrameResult:
    """
    Frame a photo from start to finish.

    Pipeline:
    1. Decode the image
    2. Extract captions from EXIF
    3. Apply caption overrides (manual form input)
    4. Compute layout
    5. Render onto a fresh surface
    6. (Optional) Export PNG

    Args:
        source: Image bytes, path or binary stream
        config: Frame configuration
        overrides: Caption fields replacing extracted values (None values ignored)
        measurer: Text measurer; defaults to Pillow metrics from ``fonts``
        fonts: Font loader shared by measurer and compositor
        output_path: PNG file or directory to export to

    Returns:
        FrameResult with the painted surface and layout

    Raises:
        FrameError: If any step fails; nothing is written in that case
    """
    start_time = time.perf_counter()

    # 1. Decode
    try:
        image = load_image(source)
    except ImageLoadError as e:
        raise FrameError(f"Failed to load image: {e}") from e

    # 2-3. Captions
    captions = extract_captions(image)
    if overrides:
        try:
            captions = captions.with_overrides(**overrides)
        except TypeError as e:
            raise FrameError(str(e)) from e

    # 4. Layout
    if fonts is None:
        fonts = PillowFontLoader()
    if measurer is None:
        measurer = PillowTextMeasurer(fonts)

    try:
        layout = compute_layout(ImageSize.of(image), captions, config, measure_text=measurer)
    except InvalidDimension as e:
        raise FrameError(f"Invalid image: {e}") from e
    except MeasurementFailure as e:
        raise FrameError(f"Text measurement failed: {e}") from e

    # 5. Render
    surface = RasterSurface()
    try:
        render(surface, image, layout, fonts=fonts)
    except MeasurementFailure as e:
        raise FrameError(f"Caption font unavailable: {e}") from e

    # 6. Export
    written: Optional[Path] = None
    if output_path is not None:
        try:
            written = export_png(surface, output_path)
        except OSError as e:
            raise FrameError(f"Failed to write {output_path}: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Framed {image.width}x{image.height} photo into "
        f"{layout.canvas_width}x{layout.canvas_height} in {elapsed:.2f}s"
    )

    return FrameResult(surface=surface, layout=layout, captions=captions, output_path=written)
