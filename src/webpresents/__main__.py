"""Command line entry point: present a deck, or rehearse it headless."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from webpresents.config import Config, load_config
from webpresents.infra import ConfigurationError, configure_logging, install_exception_hook
from webpresents.rehearsal import DEFAULT_LIMIT_MS, rehearse

logger = logging.getLogger("app.main")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a webPresents slide deck.")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config/deck.yaml"),
        help="Path to the deck file (YAML or JSON).",
    )
    parser.add_argument(
        "--full-screen",
        action="store_true",
        help="Scale the stage to fill the screen (overrides the deck file).",
    )
    parser.add_argument(
        "--loop",
        action="store_true",
        help="Return to the first slide after the last one (overrides the deck file).",
    )
    parser.add_argument(
        "--no-window",
        action="store_true",
        help="Rehearse the deck headless on a virtual clock and print its timeline.",
    )
    parser.add_argument(
        "--limit-ms",
        type=float,
        default=DEFAULT_LIMIT_MS,
        help="Virtual time budget for --no-window rehearsals.",
    )
    return parser.parse_args(argv)


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    deck = config.deck
    if args.full_screen:
        deck = dataclasses.replace(deck, full_screen=True)
    if args.loop:
        deck = dataclasses.replace(deck, loop=True)
    return dataclasses.replace(config, deck=deck)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = apply_overrides(load_config(args.config), args)
    except (OSError, ConfigurationError) as exc:
        print(f"Could not read deck file: {exc}", file=sys.stderr)
        return 1

    configure_logging(config.logging)
    install_exception_hook(show_dialog=not args.no_window)
    logger.info("Configuration loaded from %s", args.config)

    if args.no_window:
        timeline = rehearse(config, limit_ms=args.limit_ms)
        for step in timeline:
            print(f"{step.at_ms / 1000:8.2f}s  {step.index + 1:>3}  {step.name}")
        return 0

    from webpresents.ui.controller import PresentationController

    return PresentationController(config).run()


if __name__ == "__main__":
    sys.exit(main())
