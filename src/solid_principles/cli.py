"""Command line entry point that runs the principle demos."""

from __future__ import annotations

import argparse
import logging

from .principles import PAGES

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the demo runner"""
    parser = argparse.ArgumentParser(
        prog="solid-principles",
        description="Run the SOLID principle examples",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "page",
        nargs="?",
        choices=[*PAGES, "all"],
        default="all",
        help="Principle page to run",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    selected = list(PAGES) if args.page == "all" else [args.page]
    for key in selected:
        title, run = PAGES[key]
        logger.debug("Running page %s", key)
        print(f"== {title} ==")
        run()
        print()
    return 0
