"""
Module: cli

Purpose:
    Command line interface: frame a photo and write the result as PNG.
    Caption flags override the values read from the photo's EXIF.

Key Functions:
    - build_parser(): Argument parser
    - main(): Entry point, returns the exit status

Used By:
    - polaroid-frame console script
    - python -m polaroid_toolkit
    - run_polaroid.py
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from polaroid_toolkit import __version__
from polaroid_toolkit.frame import FrameConfig, FrameError, frame_photo, load_frame_config
from polaroid_toolkit.frame.fonts import PillowFontLoader
from polaroid_toolkit.frame.output import DEFAULT_EXPORT_NAME

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polaroid-frame",
        description="Frame a photo Polaroid-style with its device name and shooting parameters",
    )
    parser.add_argument("input", type=Path, help="Photo to frame")
    parser.add_argument("--output", "-o", type=Path, default=Path(DEFAULT_EXPORT_NAME),
                        help=f"Output PNG file or directory (default: {DEFAULT_EXPORT_NAME})")
    parser.add_argument("--config", "-c", type=Path, help="JSON file with padding/title_size")
    parser.add_argument("--padding", type=float, help="Border base unit (default 16)")
    parser.add_argument("--title-size", type=float, help="Title base font size (default 24)")
    parser.add_argument("--font-dir", type=Path, action="append", default=[],
                        help="Directory containing Roboto-Regular.ttf / Roboto-Bold.ttf (repeatable)")

    captions = parser.add_argument_group("captions", "Override values read from EXIF")
    captions.add_argument("--device", dest="device_name", help="Device name, e.g. 'Pixel 8'")
    captions.add_argument("--focal-length", type=float, help="Focal length in mm")
    captions.add_argument("--aperture", type=float, help="f-number, e.g. 1.8")
    captions.add_argument("--shutter-speed", help="Exposure time, e.g. 1/400")
    captions.add_argument("--iso", type=int, help="ISO sensitivity")

    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_config(args: argparse.Namespace) -> FrameConfig:
    """Config file values, then explicit flags on top."""
    config = load_frame_config(args.config)
    values = config.to_dict()
    if args.padding is not None:
        values["padding"] = args.padding
    if args.title_size is not None:
        values["title_size"] = args.title_size
    return FrameConfig(**values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
    except ValueError as e:
        parser.error(str(e))

    overrides = {
        "device_name": args.device_name,
        "focal_length": args.focal_length,
        "aperture": args.aperture,
        "shutter_speed": args.shutter_speed,
        "iso": args.iso,
    }

    try:
        result = frame_photo(
            args.input,
            config=config,
            overrides=overrides,
            fonts=PillowFontLoader(args.font_dir),
            output_path=args.output,
        )
    except FrameError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result.output_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
