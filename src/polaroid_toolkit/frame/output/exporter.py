"""
Module: frame.output.exporter

Purpose:
    Encode a painted surface as PNG, either to bytes or to a file.

Key Functions:
    - encode_png(): Surface -> PNG bytes
    - export_png(): Surface -> PNG file

Dependencies:
    - PIL: PNG encoding
"""

from __future__ import annotations

import io
import logging
import tempfile
from pathlib import Path

from .surface import RasterSurface

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "result.png"


def encode_png(surface: RasterSurface) -> bytes:
    """Encode the surface content as PNG bytes."""
    buffer = io.BytesIO()
    surface.image.save(buffer, format="PNG")
    return buffer.getvalue()


def export_png(surface: RasterSurface, output_path: Path) -> Path:
    """
    Write the surface to a PNG file.

    If ``output_path`` is an existing directory, the file is written
    inside it as result.png. Parent directories are created. The PNG is
    written to a temp file next to the target and renamed over it, so a
    failed write leaves no partial file (and any existing file intact).

    Returns:
        Path of the written file

    Raises:
        OSError: If the file cannot be written
    """
    output_path = Path(output_path)
    if output_path.is_dir():
        output_path = output_path / DEFAULT_EXPORT_NAME
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="wb",
        suffix=".png",
        dir=output_path.parent,
        delete=False,
    ) as f:
        temp_path = Path(f.name)
        try:
            surface.image.save(f, format="PNG")
        except Exception:
            f.close()
            temp_path.unlink(missing_ok=True)
            raise

    temp_path.replace(output_path)

    logger.info(f"Exported {surface.width}x{surface.height} frame to {output_path}")
    return output_path
