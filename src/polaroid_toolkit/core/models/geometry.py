"""
Module: core.models.geometry

Purpose:
    Geometry value types for frame layout: the source image size and
    the rectangle the scaled photo is drawn into.

Key Classes:
    - ImageSize: Width/height of a decoded image
    - DrawRect: Float rectangle on the output canvas

Dependencies:
    - dataclasses (std)
    - PIL.Image (TYPE_CHECKING only)

Used By:
    - frame.layout.engine
    - frame.output.compositor
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PIL import Image


@dataclass(frozen=True, slots=True)
class ImageSize:
    """
    Pixel dimensions of a source image.

    Not validated here: the layout engine owns the dimension check so
    that an invalid size fails at layout time with InvalidDimension.
    """

    width: int
    height: int

    @classmethod
    def of(cls, image: "Image.Image") -> "ImageSize":
        """Read the size of a PIL image."""
        width, height = image.size
        return cls(width=width, height=height)


@dataclass(frozen=True, slots=True)
class DrawRect:
    """
    Placement rectangle in canvas pixels.

    Attributes:
        x: Left edge
        y: Top edge
        width: Width (>= 0)
        height: Height (>= 0)

    Invariants:
        - all values >= 0

    Example:
        >>> rect = DrawRect(30.72, 30.72, 1200, 800)
        >>> rect.bottom
        830.72
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate rectangle on construction."""
        if self.x < 0 or self.y < 0:
            raise ValueError(f"origin must be >= 0: ({self.x}, {self.y})")
        if self.width < 0 or self.height < 0:
            raise ValueError(f"size must be >= 0: {self.width}x{self.height}")

    @property
    def right(self) -> float:
        """Right edge (x + width)."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge (y + height)."""
        return self.y + self.height

    def to_box(self) -> tuple[int, int, int, int]:
        """Integer (left, top, right, bottom) box rounded to whole pixels."""
        left = round(self.x)
        top = round(self.y)
        return (left, top, left + round(self.width), top + round(self.height))
