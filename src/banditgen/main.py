"""Command line entry point for banditgen."""

import argparse
import sys

import structlog
from pydantic import ValidationError

from banditgen.config import Settings, get_settings
from banditgen.generator import (
    generate_party,
    make_rng,
    parse_class,
    render_party,
)
from banditgen.logging_setup import configure_logging

logger = structlog.get_logger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the argument parser with defaults taken from settings."""
    parser = argparse.ArgumentParser(
        prog="banditgen",
        description="Generate random bandit NPCs for D&D 5th edition",
    )
    parser.add_argument("--level", "-l", type=int, help="Character level (clamped to 1-20)")
    parser.add_argument(
        "--class",
        "-c",
        dest="char_class",
        help="Character class: Barbarian, Fighter or Rogue",
    )
    parser.add_argument(
        "--count", "-n", type=int, default=settings.party_size, help="Number of characters"
    )
    parser.add_argument("--seed", "-s", type=int, default=settings.seed, help="Random seed")
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=settings.color,
        help="Colorize headers",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Parse arguments, generate the party and print it.

    Returns:
        Process exit status
    """
    configure_logging()

    try:
        settings = get_settings()
    except ValidationError as e:
        logger.warning("invalid_arguments", error=str(e))
        build_parser(Settings.model_construct()).error(str(e))

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    configure_logging(args.log_level, settings.log_format)

    try:
        char_class = parse_class(args.char_class) if args.char_class else None
        party = generate_party(args.count, args.level, char_class, rng=make_rng(args.seed))
    except ValueError as e:
        logger.warning("invalid_arguments", error=str(e))
        parser.error(str(e))

    print(render_party(party, color=args.color))
    return 0


def run() -> None:
    """Console script entry point."""
    configure_logging()
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("stopped_by_user")
    except Exception as e:
        logger.error(
            "fatal_error",
            error=str(e),
            exc_info=True,
        )
        sys.exit(1)


if __name__ == "__main__":
    run()
