"""
main.py — Terminal Sorting Visualizer
======================================
Entry point.  Parses the command line, sets up logging and hands
control to the interactive menu.

Usage:
    python main.py                         # defaults: 20 values, 100 ms per frame
    python main.py --size 40 --delay 30    # bigger, faster
    python main.py --seed 7 --no-clear     # reproducible arrays, scrolling output
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

# add project root to path so imports work when run as a script
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import (
    Settings,
    MIN_SIZE, MAX_SIZE, DEFAULT_SIZE,
    MIN_DELAY_MS, MAX_DELAY_MS, DEFAULT_DELAY_MS,
    valid_size, valid_delay,
)
from logging_config import setup_logging
from ui import console, Menu


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortviz",
        description="Animate bubble, selection, insertion and quick sort in the terminal.",
    )
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE,
                        help=f"random array size ({MIN_SIZE}-{MAX_SIZE})")
    parser.add_argument("--delay", type=int, default=DEFAULT_DELAY_MS,
                        help=f"milliseconds per frame ({MIN_DELAY_MS}-{MAX_DELAY_MS})")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for random arrays")
    parser.add_argument("--no-clear", action="store_true",
                        help="do not clear the screen between frames")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None,
                        help="also write logs to this file")
    return parser


def parse_settings(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not valid_size(args.size):
        parser.error(f"--size must be between {MIN_SIZE} and {MAX_SIZE}")
    if not valid_delay(args.delay):
        parser.error(f"--delay must be between {MIN_DELAY_MS} and {MAX_DELAY_MS}")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_settings(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    settings = Settings(
        size=args.size,
        delay_ms=args.delay,
        clear_screen=not args.no_clear,
        seed=args.seed,
    )
    Menu(console, settings).loop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
