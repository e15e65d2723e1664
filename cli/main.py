"""Bid tracker CLI.

Loads bids from a CSV export into a linked list and runs the interactive
menu:
- Enter Bid, Load Bids, Show All, Find Bid, Remove Bid, Exit

Usage: bid-tracker [csv_path] [bid_key]
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from cli.session import Session
from common.config_loader import ConfigError, LoadedConfig, find_data_file, load_all
from display.theme import THEMES, make_console, resolve_theme


def configure_logging(level: str, verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def resolve_csv_path(cfg: LoadedConfig, csv_path: Optional[str]) -> str:
    """Use the path given on the command line, else search for the configured file."""
    if csv_path:
        return csv_path
    return find_data_file(cfg.csv_file, cfg.search_dirs)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bid-tracker",
        description="Bid tracker: load, list, find and remove bids held in a linked list",
    )
    p.add_argument("csv_path", nargs="?", default=None, help="CSV file to load bids from")
    p.add_argument("bid_key", nargs="?", default=None, help="Default bid ID for find/remove prompts")
    p.add_argument("--config", default="config/bid_tracker.yaml", help="Tracker config file")
    p.add_argument("--theme", choices=THEMES, default=None, help="Colour theme (default: from config)")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p


def run(args) -> int:
    """Build a session from parsed arguments and run it."""
    try:
        cfg = load_all(args.config)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    configure_logging(cfg.log_level, args.verbose)

    session = Session(
        config=cfg,
        console=make_console(
            resolve_theme(args.theme or cfg.theme),
            default_width=cfg.default_width,
            min_width=cfg.min_width,
        ),
        csv_path=resolve_csv_path(cfg, args.csv_path),
        default_key=args.bid_key if args.bid_key is not None else cfg.default_bid_key,
    )
    try:
        return session.run()
    finally:
        session.bids.clear()


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    raise SystemExit(run(args))


if __name__ == "__main__":
    main()
