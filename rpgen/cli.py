"""
Command-line interface: print passwords or launch the GUI.
"""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from .config import PasswordConfig, DEFAULT_CONFIG, MIN_LENGTH, MAX_LENGTH, clamp_length
from .generator import generate_password

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rpgen",
        description="Generate random passwords from letters, digits and symbols.",
    )
    parser.add_argument(
        "--length", "-l",
        type=int,
        default=DEFAULT_CONFIG.length,
        help=f"Password length, clamped to {MIN_LENGTH}-{MAX_LENGTH} "
             f"(default: {DEFAULT_CONFIG.length})",
    )
    parser.add_argument("--digits", "-d", action="store_true", help="Include digits")
    parser.add_argument("--symbols", "-s", action="store_true", help="Include special characters")
    parser.add_argument("--count", "-c", type=positive_int, default=1, help="Number of passwords to print")
    parser.add_argument("--gui", action="store_true", help="Open the generator window")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> PasswordConfig:
    length = clamp_length(args.length)
    if length != args.length:
        logger.warning(
            "Length %d out of range, using %d instead", args.length, length
        )
    return PasswordConfig(
        length=length,
        include_digits=args.digits,
        include_symbols=args.symbols,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `python -m rpgen.cli`, `run_rpgen.py` and `rpgen`.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = config_from_args(args)

    if args.gui:
        # Imported lazily so printing passwords does not load Qt widgets.
        from .gui_qt import main as gui_main

        gui_main(cfg)
        return 0

    for _ in range(args.count):
        print(generate_password(cfg))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
