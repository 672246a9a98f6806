"""CLI entry point for kitsumanga.

Usage: kitsumanga <title...>
"""

import argparse
from sys import exit

from utils.exceptions import ConfigError

USAGE = "Usage: kitsumanga <title>"


def _timeout(value: str) -> float:
    seconds = float(value)
    if not 0 < seconds <= 120:
        raise argparse.ArgumentTypeError(f"timeout must be in (0, 120], got {value}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Options go before the title; from the first title word on, every
    argument belongs to the title, even words starting with "-".
    """
    parser = argparse.ArgumentParser(
        prog="kitsumanga",
        description="Look up a manga on Kitsu and print a summary.",
    )
    parser.add_argument("--debug", "-d", action="store_true", help="Debug logging on stderr")
    parser.add_argument(
        "--timeout",
        type=_timeout,
        metavar="SECONDS",
        help="Network deadline (default: 10, or KITSU_MANGA__KITSU__TIMEOUT_SECONDS)",
    )
    parser.add_argument(
        "title",
        nargs=argparse.REMAINDER,
        help="Manga title (words are joined with spaces)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one lookup.

    Returns:
        Exit status; always 0, errors are reported on stdout
    """
    args = build_parser().parse_args(argv)

    title = " ".join(args.title)
    if not title:
        print(USAGE)
        return 0

    # Settings are validated on import
    try:
        from commands import lookup
        from models.config import settings
        from services.kitsu_service import KitsuClient
        from utils.logging import configure_logging
    except ConfigError as e:
        print(f"Error: {e}")
        return 0

    configure_logging(debug=args.debug)

    config = settings.kitsu
    if args.timeout is not None:
        config = config.model_copy(update={"timeout_seconds": args.timeout})

    lookup(title, KitsuClient(config))
    return 0


def cli() -> None:
    """Entry point for CLI."""
    exit(main())


if __name__ == "__main__":
    cli()
