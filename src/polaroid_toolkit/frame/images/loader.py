"""
Module: frame.images.loader

Purpose:
    Decode uploaded image bytes into a PIL image ready for framing.
    Applies the EXIF orientation and normalizes the color mode.

Key Functions:
    - load_image(): Decode bytes, a path or a binary stream

Key Classes:
    - ImageLoadError: Data is not a decodable image

Dependencies:
    - PIL: Image decoding
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Union

from PIL import Image, ImageOps, UnidentifiedImageError

logger = logging.getLogger(__name__)

ImageInput = Union[bytes, bytearray, str, Path, BinaryIO]


class ImageLoadError(ValueError):
    """Image could not be read or decoded."""
    pass


def load_image(source: ImageInput) -> Image.Image:
    """
    Load and decode an image.

    The returned image keeps its EXIF block in ``image.info`` /
    ``getexif()`` so captions can be extracted afterwards, is rotated
    upright according to its orientation tag, and is in RGB or RGBA mode.

    Args:
        source: Raw bytes, a file path, or a readable binary stream

    Returns:
        Decoded, fully loaded PIL image

    Raises:
        ImageLoadError: If the file is missing or not an image
    """
    if isinstance(source, (bytes, bytearray)):
        fp: Union[str, Path, BinaryIO] = io.BytesIO(bytes(source))
        label = f"<{len(source)} bytes>"
    else:
        fp = source
        label = str(source) if isinstance(source, (str, Path)) else "<stream>"

    if isinstance(fp, (str, Path)) and not Path(fp).is_file():
        raise ImageLoadError(f"File not found: {fp}")

    try:
        with Image.open(fp) as opened:
            opened.load()
            image = ImageOps.exif_transpose(opened)
    except UnidentifiedImageError as e:
        raise ImageLoadError(f"Not an image: {label}") from e
    except OSError as e:
        raise ImageLoadError(f"Could not decode image {label}: {e}") from e

    if image.mode not in ("RGB", "RGBA"):
        target = "RGBA" if _has_alpha(image) else "RGB"
        image = image.convert(target)

    logger.debug(f"Loaded {label}: {image.width}x{image.height} {image.mode}")
    return image


def _has_alpha(image: Image.Image) -> bool:
    return image.mode in ("LA", "PA") or (image.mode == "P" and "transparency" in image.info)
