"""
Module: core.models.captions

Purpose:
    Caption strings rendered below the photo: the "Shot on <device>"
    title and the shooting-parameter footer. Values are display values
    only; composition never validates them and never raises.

Key Classes:
    - CaptionSet: Immutable caption values

Key Functions:
    - format_number(): Render a number the way the frame prints it

Dependencies:
    - dataclasses (std)
    - math (std)

Used By:
    - frame.images.metadata: Builds CaptionSets from EXIF
    - frame.layout.engine: Measures and positions caption text
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from numbers import Real
from typing import Optional, Union

DEFAULT_PREFIX = "Shot on"

Number = Union[int, float, Real]


def format_number(value: Optional[Union[Number, str]]) -> str:
    """
    Render a caption number as display text.

    Integral values drop the fractional part ("24", not "24.0"),
    other values use the shortest round-trip form ("1.8"). Missing or
    non-finite values fall back to "0". Strings pass through stripped,
    so form input is shown exactly as typed.

    Example:
        >>> format_number(24.0)
        '24'
        >>> format_number(float("nan"))
        '0'
    """
    if value is None or isinstance(value, bool):
        return "0"
    if isinstance(value, str):
        return value.strip() or "0"
    try:
        number = float(value)
    except (TypeError, ValueError, ZeroDivisionError):
        return "0"
    if not math.isfinite(number):
        return "0"
    if number.is_integer():
        return str(int(number))
    return repr(number)


@dataclass(frozen=True)
class CaptionSet:
    """
    Caption values for one frame (immutable).

    Attributes:
        prefix: Literal drawn before the device name
        device_name: Camera or phone name (may be empty)
        focal_length: Focal length in mm
        aperture: f-stop number
        shutter_speed: Exposure time as display text, e.g. "1/400"
        iso: ISO sensitivity

    Example:
        >>> captions = CaptionSet(device_name="Pixel 8", focal_length=24,
        ...                       aperture=1.8, shutter_speed="1/400", iso=200)
        >>> captions.footer_text
        '24mm f/1.8 1/400s ISO200'
    """

    prefix: str = DEFAULT_PREFIX
    device_name: Optional[str] = ""
    focal_length: Optional[Union[Number, str]] = None
    aperture: Optional[Union[Number, str]] = None
    shutter_speed: Optional[str] = None
    iso: Optional[Union[Number, str]] = None

    @property
    def prefix_text(self) -> str:
        """Prefix as drawn (no trailing separator)."""
        return self.prefix or ""

    @property
    def measured_prefix(self) -> str:
        """Prefix as measured: includes the space before the device name."""
        return f"{self.prefix_text} "

    @property
    def title_text(self) -> str:
        """Device name, empty when unknown."""
        return (self.device_name or "").strip()

    @property
    def footer_text(self) -> str:
        """Composed shooting-parameter line."""
        shutter = (self.shutter_speed or "").strip()
        return (
            f"{format_number(self.focal_length)}mm "
            f"f/{format_number(self.aperture)} "
            f"{shutter}s "
            f"ISO{format_number(self.iso)}"
        )

    def with_overrides(self, **overrides: object) -> "CaptionSet":
        """
        Return a copy with the given non-None fields replaced.

        Unknown names raise TypeError so typos in form mappings are caught.
        """
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown caption fields: {sorted(unknown)}")
        changes = {name: value for name, value in overrides.items() if value is not None}
        if not changes:
            return self
        return replace(self, **changes)
