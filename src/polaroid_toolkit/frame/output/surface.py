"""
Module: frame.output.surface

Purpose:
    Mutable raster target the compositor paints into. Wraps a PIL
    image that is replaced (and thereby cleared) on resize.

Key Classes:
    - RasterSurface: Resizable drawing surface
"""

from __future__ import annotations

from typing import Optional

from PIL import Image, ImageDraw

DEFAULT_MODE = "RGB"


class RasterSurface:
    """
    Resizable raster surface.

    Resizing discards prior content, like resizing an HTML canvas.
    A surface must not be painted by two renders at the same time.

    Attributes:
        mode: PIL mode of the backing image
        image: Current backing image

    Example:
        >>> surface = RasterSurface()
        >>> surface.resize(100, 50)
        >>> surface.size
        (100, 50)
    """

    def __init__(self, width: int = 0, height: int = 0, *, mode: str = DEFAULT_MODE) -> None:
        self.mode = mode
        self.image: Image.Image = Image.new(mode, (width, height))
        self._draw: Optional[ImageDraw.ImageDraw] = None

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) in pixels."""
        return self.image.size

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def resize(self, width: int, height: int) -> None:
        """Resize to (width, height), clearing all content."""
        if width < 0 or height < 0:
            raise ValueError(f"Surface size must be >= 0: {width}x{height}")
        self.image = Image.new(self.mode, (width, height))
        self._draw = None

    @property
    def draw(self) -> ImageDraw.ImageDraw:
        """Drawing context bound to the current backing image."""
        if self._draw is None:
            self._draw = ImageDraw.Draw(self.image)
        return self._draw
