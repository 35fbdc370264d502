"""
Module: frame.config

Purpose:
    Configuration for the frame layout. Immutable configuration with
    validation on construction, plus JSON loading that falls back to
    defaults instead of failing.

Key Classes:
    - FrameConfig: Border and font base units

Key Functions:
    - load_frame_config(): Read a FrameConfig from a JSON file

Dependencies:
    - dataclasses (std)
    - json (std)

Used By:
    - frame.layout.engine: Unit normalization
    - frame.controller: Pipeline orchestration
    - cli: --config / --padding / --title-size
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

# Design-space defaults
DEFAULT_PADDING = 16
DEFAULT_TITLE_SIZE = 24

# Frames are never narrower than this, so captions stay legible on small photos
MIN_FRAME_WIDTH = 800

# Multipliers from design units to canvas pixels (per pixel of display width)
PADDING_FACTOR = 0.0016
TITLE_SIZE_FACTOR = 0.0014
FOOTER_SIZE_FACTOR = 0.0012

FONT_FAMILY = "Roboto"
BACKGROUND_COLOR = "white"
MUTED_TEXT_COLOR = "#666"
TITLE_TEXT_COLOR = "black"


@dataclass(frozen=True)
class FrameConfig:
    """
    Configuration for the frame (immutable).

    Attributes:
        padding: Border base unit in design-space pixels
        title_size: Title font base size in design-space pixels

    Example:
        >>> config = FrameConfig(padding=20)
        >>> config.title_size
        24
    """

    padding: float = DEFAULT_PADDING
    title_size: float = DEFAULT_TITLE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not math.isfinite(self.padding) or self.padding < 0:
            raise ValueError(f"padding must be a finite number >= 0: {self.padding}")
        if not math.isfinite(self.title_size) or self.title_size <= 0:
            raise ValueError(f"title_size must be a finite positive number: {self.title_size}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FrameConfig":
        """
        Build a config from a mapping, ignoring unknown keys.

        Raises:
            ValueError: If a known value is not a valid number
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key not in known:
                logger.debug(f"Ignoring unknown frame config key: {key}")
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{key} must be a number: {value!r}")
            values[key] = value
        return cls(**values)

    def to_dict(self) -> dict[str, float]:
        """Serialize for JSON."""
        return {"padding": self.padding, "title_size": self.title_size}


DEFAULT_FRAME_CONFIG = FrameConfig()


def load_frame_config(path: Optional[Path]) -> FrameConfig:
    """
    Load a FrameConfig from a JSON file.

    Any problem (missing file, malformed JSON, invalid values) is logged
    and the default configuration is returned.

    Args:
        path: JSON file path, or None for defaults

    Returns:
        Loaded or default FrameConfig
    """
    if path is None:
        return DEFAULT_FRAME_CONFIG
    if not path.exists():
        logger.info(f"Frame config {path} not found, using defaults")
        return DEFAULT_FRAME_CONFIG

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to read frame config {path}: {e}. Using defaults")
        return DEFAULT_FRAME_CONFIG

    if not isinstance(data, dict):
        logger.warning(f"Frame config {path} is not a JSON object. Using defaults")
        return DEFAULT_FRAME_CONFIG

    try:
        config = FrameConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        logger.warning(f"Invalid frame config {path}: {e}. Using defaults")
        return DEFAULT_FRAME_CONFIG

    logger.debug(f"Loaded frame config from {path}: {config}")
    return config
