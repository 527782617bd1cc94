"""Command-line entry point.

Run with ``deckview DECK.md`` or ``python -m deckview DECK.md``.
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger

from . import __version__
from .Deck.loader import load_deck
from .app import DeckViewApp
from .Logging_Config import configure_logging
from .config import load_settings, write_default_config
from .errors import ConfigError, DeckLoadError
from .navigation.hook_loader import load_hook_registry
from .navigation.location import Location, format_slide_fragment


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deckview",
        description="Present a Markdown slide deck in the terminal.",
    )
    parser.add_argument("deck", nargs="?", help="Markdown file; slides are separated by lines containing only ---")
    start = parser.add_mutually_exclusive_group()
    start.add_argument("--slide", type=int, help="Start on this slide (0-based)")
    start.add_argument("--fragment", help="Start from a location fragment such as '#slide-3'")
    parser.add_argument("--hooks", metavar="MODULE", help="Python module providing slide activation hooks")
    parser.add_argument("--config", metavar="PATH", help="Config file (default: ~/.config/deckview/config.toml)")
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument("--write-default-config", action="store_true", help="Write the default config file and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def initial_fragment(args: argparse.Namespace) -> Optional[str]:
    """Starting location from --slide or --fragment."""
    if args.slide is not None:
        return format_slide_fragment(args.slide)
    return args.fragment


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.write_default_config:
        path = write_default_config(args.config)
        print(f"Config file: {path}")
        return 0

    if not args.deck:
        parser.error("a deck file is required")

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        print(f"deckview: {e}", file=sys.stderr)
        return 2

    configure_logging(settings.logging, level_override=args.log_level)

    try:
        deck = load_deck(args.deck)
    except DeckLoadError as e:
        logger.error(str(e))
        print(f"deckview: {e}", file=sys.stderr)
        return 1

    hooks = load_hook_registry(args.hooks)
    location = Location(initial_fragment(args))

    app = DeckViewApp(deck, settings=settings, location=location, hooks=hooks)
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("--- KeyboardInterrupt received ---")
    except Exception:
        logger.exception("--- CRITICAL ERROR DURING app.run() ---")
        raise
    return 0


def main_cli_runner() -> None:
    """Entry point for the ``deckview`` command (see pyproject.toml)."""
    sys.exit(main())


if __name__ == "__main__":
    main_cli_runner()
