"""
Module: frame.layout.measure

Purpose:
    Text measurement contract for the layout engine. The engine never
    loads fonts itself; it is handed a measuring function and only
    consumes the widths it returns.

Key Classes:
    - FontSpec: Weight, size and family of a caption font
    - TextMetrics: Result of measuring a string
    - TextMeasurer: Callable protocol (text, font) -> TextMetrics
    - MeasurementFailure: Raised when text cannot be measured

Dependencies:
    - dataclasses (std)

Used By:
    - frame.layout.engine
    - frame.fonts: Pillow-backed implementation
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

from polaroid_toolkit.frame.config import FONT_FAMILY

FontWeight = Union[int, str]

REGULAR = 400
BOLD = "bold"


class MeasurementFailure(RuntimeError):
    """Text could not be measured (font unavailable or measuring failed)."""
    pass


@dataclass(frozen=True)
class FontSpec:
    """
    Font used for one caption run.

    Attributes:
        weight: CSS weight, 400 or "bold"
        size: Font size in canvas pixels
        family: Font family name
    """

    weight: FontWeight
    size: float
    family: str = FONT_FAMILY

    @property
    def is_bold(self) -> bool:
        """True for "bold"/"bolder" or numeric weights of 600 and up."""
        if isinstance(self.weight, str):
            if self.weight.isdigit():
                return int(self.weight) >= 600
            return self.weight.lower() in ("bold", "bolder")
        return self.weight >= 600

    @property
    def css(self) -> str:
        """CSS font shorthand, e.g. "400 33.6px Roboto"."""
        return f"{self.weight} {self.size}px {self.family}"


@dataclass(frozen=True)
class TextMetrics:
    """Measured extent of a string."""

    width: float


class TextMeasurer(Protocol):
    """Maps (text, font) to its measured width."""

    def __call__(self, text: str, font: FontSpec) -> TextMetrics:
        ...
