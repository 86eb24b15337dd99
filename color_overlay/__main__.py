"""Command line entry point: render the overlay and edge images."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Optional, Sequence

from .config import SETTINGS, configure_logging
from .errors import OverlayError
from .render import render_files


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="color-overlay",
        description="Replace the dominant color of an image with a tiled background.",
    )
    parser.add_argument("--foreground", default=SETTINGS.foreground_path)
    parser.add_argument("--background", default=SETTINGS.background_path)
    parser.add_argument("--overlay", default=SETTINGS.overlay_path)
    parser.add_argument("--output", default=SETTINGS.output_path)
    parser.add_argument("--buckets", type=int, default=SETTINGS.buckets_per_channel)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = configure_logging()

    try:
        settings = replace(
            SETTINGS,
            foreground_path=args.foreground,
            background_path=args.background,
            overlay_path=args.overlay,
            output_path=args.output,
            buckets_per_channel=args.buckets,
        )
        render_files(settings)
    except (OverlayError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
