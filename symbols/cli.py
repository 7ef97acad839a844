"""
symbols/cli.py
Command-line interface for the random symbols renderer

Usage:
    python -m symbols
    python -m symbols -o picture.png -n 50
    python -m symbols -s            # new picture every run
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .canvas import TypefaceError
from .config import DEFAULT_CONFIG, RenderConfig
from .logger import LogLevel, logger
from .render import draw_picture


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="symbols",
        description="Draw randomly placed, colored and styled shapes into a PNG",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("-o", "--output", type=str, default=DEFAULT_CONFIG.output_path,
                        help=f"png output file (default: {DEFAULT_CONFIG.output_path})")
    parser.add_argument("-n", "--num", type=_non_negative_int, default=DEFAULT_CONFIG.num_objects,
                        help=f"number of objects (default: {DEFAULT_CONFIG.num_objects})")
    parser.add_argument("-s", "--seed-random", action="store_true",
                        help="initialize with random seed")
    parser.add_argument("-f", "--font", type=str, default=None,
                        help="bold TrueType font for the caption (default: embedded face)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug info")
    parser.add_argument("--log-file", type=str, default=None, help="Also log to this file")
    return parser


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    return RenderConfig(
        output_path=args.output,
        num_objects=args.num,
        reseed=args.seed_random,
        font_path=args.font,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logger.set_level(LogLevel.DEBUG if args.verbose else LogLevel.INFO)
    if args.log_file:
        logger.enable_file_logging(args.log_file)

    try:
        draw_picture(config_from_args(args))
    except TypefaceError as e:
        logger.error("Caption typeface unavailable", component="CLI", details=str(e))
        return 1
    finally:
        if args.log_file:
            logger.disable_file_logging()

    return 0


if __name__ == "__main__":
    sys.exit(main())
