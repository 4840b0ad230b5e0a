"""Command line: find a setup for a player count and target loss percentage.

    sentinels-setup --pc 4 --lp 60 --rg 5 --packs baseset rookcity

Exit codes: 0 found, 1 no setup (exhausted or impossible), 2 bad arguments.
"""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import get_config
from .data import load_engine
from .errors import SearchExhausted, StructuralError
from .formatting import format_card_listing, format_setup_report
from .models import PACK_TITLES


class UsageError(ValueError):
    """Raised for argument values outside the accepted ranges."""


def build_parser(config: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sentinels-setup",
        description="Pick a random setup near a target loss percentage.",
    )
    parser.add_argument("--pc", type=int, default=config["default_player_count"],
                        help="player count (3-5)")
    parser.add_argument("--lp", type=int, default=config["default_loss_pct"],
                        help="target loss percent (1-99)")
    parser.add_argument("--rg", type=int, default=config["default_tolerance"],
                        help="allowable difficulty variance around target loss percent (0-100)")
    parser.add_argument("--packs", nargs="+", choices=list(PACK_TITLES),
                        default=config["default_packs"],
                        help="card sets to draw from")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed the random generator for reproducible draws")
    parser.add_argument("--data-file", type=Path, default=None,
                        help="dataset JSON (default: bundled data or DATA_FILE)")
    parser.add_argument("--list", action="store_true",
                        help="list the eligible cards instead of searching")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log search progress")
    return parser


def validate_args(args: argparse.Namespace) -> None:
    if args.pc < 3 or args.pc > 5:
        raise UsageError("player count must be between 3 and 5.")
    if args.lp < 1 or args.lp > 99:
        raise UsageError("loss percentage must be between 1 and 99.")
    if args.rg < 0 or args.rg > 100:
        raise UsageError("range must be between 0 and 100.")


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    config = get_config()
    args = build_parser(config).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        validate_args(args)
    except UsageError as e:
        print(e)
        return 2

    data_file = args.data_file or (Path(os.environ["DATA_FILE"]) if os.getenv("DATA_FILE") else None)
    engine = load_engine(data_file, config)

    if args.list:
        print(format_card_listing(engine.eligible(args.packs)), end="")
        return 0

    rng = random.Random(args.seed)
    try:
        candidate, trials = engine.find_setup(args.pc, args.lp, args.rg, args.packs, rng=rng)
    except SearchExhausted as e:
        print(f"\nNo setup found in {e.trials} iterations.")
        return 1
    except StructuralError as e:
        print(e)
        return 1

    print()
    print(format_setup_report(candidate, trials), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
