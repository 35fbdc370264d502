"""
Module: frame.fonts

Purpose:
    Pillow-backed font loading and text measurement. Resolves the
    caption font family in regular and bold weights, falling back to
    common system fonts and finally to Pillow's bundled default font.

Key Classes:
    - FontLoader: Protocol for FontSpec -> Pillow font
    - PillowFontLoader: FontSpec -> ImageFont, cached per spec
    - PillowTextMeasurer: TextMeasurer backed by a PillowFontLoader

Dependencies:
    - PIL: ImageFont

Used By:
    - frame.output.compositor: Drawing caption text
    - frame.controller: Default measurer
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Union

from PIL import ImageFont

from polaroid_toolkit.frame.layout.measure import FontSpec, MeasurementFailure, TextMetrics

logger = logging.getLogger(__name__)

PillowFont = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


class FontLoader(Protocol):
    """Resolves a FontSpec to a drawable Pillow font."""

    def font_for(self, spec: FontSpec) -> PillowFont:
        ...

# System fallbacks, tried after the requested family
BOLD_FALLBACKS = [
    "DejaVuSans-Bold.ttf",  # DejaVu Sans Bold (Linux)
    "arialbd.ttf",          # Arial Bold (Windows)
    "Arial Bold.ttf",       # Arial Bold (Mac)
]
REGULAR_FALLBACKS = [
    "DejaVuSans.ttf",
    "arial.ttf",
    "Arial.ttf",
]


def font_file_candidates(spec: FontSpec) -> List[str]:
    """
    File names to try for a font spec, most preferred first.

    Example:
        >>> font_file_candidates(FontSpec("bold", 20))[:2]
        ['Roboto-Bold.ttf', 'Roboto Bold.ttf']
    """
    family = spec.family.replace(" ", "")
    if spec.is_bold:
        return [f"{family}-Bold.ttf", f"{spec.family} Bold.ttf", *BOLD_FALLBACKS]
    return [f"{family}-Regular.ttf", f"{family}.ttf", *REGULAR_FALLBACKS]


class PillowFontLoader:
    """
    Load and cache Pillow fonts for FontSpecs.

    Font files are looked up in ``font_dirs`` first (by full path),
    then by bare name, which lets FreeType search the system font
    directories.

    Attributes:
        font_dirs: Extra directories searched before system fonts
    """

    def __init__(self, font_dirs: Optional[Iterable[Path]] = None) -> None:
        self.font_dirs = [Path(d) for d in (font_dirs or [])]
        self._cache: Dict[FontSpec, PillowFont] = {}
        self._warned: set[str] = set()

    def font_for(self, spec: FontSpec) -> PillowFont:
        """
        Get the Pillow font for a spec.

        Raises:
            MeasurementFailure: If no font at all can be loaded
        """
        font = self._cache.get(spec)
        if font is None:
            font = self._load(spec)
            self._cache[spec] = font
        return font

    def _load(self, spec: FontSpec) -> PillowFont:
        for name in font_file_candidates(spec):
            for candidate in self._paths_for(name):
                try:
                    font = ImageFont.truetype(candidate, spec.size)
                except (IOError, OSError):
                    continue
                logger.debug(f"Loaded {candidate} for {spec.css}")
                return font

        if spec.family not in self._warned:
            self._warned.add(spec.family)
            logger.warning(f"Could not load TrueType font for {spec.family}, using default")
        try:
            return ImageFont.load_default(spec.size)
        except (IOError, OSError) as e:
            raise MeasurementFailure(f"No font available for {spec.css}: {e}") from e

    def _paths_for(self, name: str) -> List[str]:
        paths = [str(d / name) for d in self.font_dirs if (d / name).is_file()]
        paths.append(name)
        return paths


class PillowTextMeasurer:
    """
    TextMeasurer using Pillow font metrics.

    Width is the advance width of the string, matching how the text is
    later positioned by the compositor.

    Example:
        >>> measure = PillowTextMeasurer()
        >>> measure("Shot on ", FontSpec(400, 33.6)).width > 0
        True
    """

    def __init__(self, fonts: Optional[FontLoader] = None) -> None:
        self.fonts = fonts or PillowFontLoader()

    def __call__(self, text: str, font: FontSpec) -> TextMetrics:
        pil_font = self.fonts.font_for(font)
        try:
            width = pil_font.getlength(text)
        except (OSError, ValueError, UnicodeError) as e:
            raise MeasurementFailure(f"Could not measure {text!r} with {font.css}: {e}") from e
        return TextMetrics(width=float(width))
