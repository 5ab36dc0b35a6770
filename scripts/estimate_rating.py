#!/usr/bin/env python3
"""
Estimate a rating from contest performances.

Performances are given newest first, either on the command line or as the
contest site's history JSON saved to a local file (unrated contests are
skipped and records are sorted by end time).

Usage:
    python scripts/estimate_rating.py 1702 1650 1480
    python scripts/estimate_rating.py --history-json tourist.json

Required performance for a displayed target rating:
    python scripts/estimate_rating.py 1702 1650 1480 --target 1600

Machine-readable output:
    python scripts/estimate_rating.py 1702 1650 --json
"""
from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path

# Add src to path so this script can be run directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from acrating.config import settings
from acrating.history import get_performance_histories, parse_history
from acrating.rating import (
    InvalidInputError,
    calc_required_performance,
    estimate_from_history,
    unpositivize_rating,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate a rating from contest performances.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "performances",
        nargs="*",
        type=float,
        help="Performances of rated contests, newest first.",
    )
    parser.add_argument(
        "--history-json",
        default=None,
        help="Read performances from a saved history JSON file instead.",
    )
    parser.add_argument(
        "--target",
        type=float,
        default=None,
        help="Displayed rating to reach; prints the performance needed next contest.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON.",
    )
    return parser


def _load_history(path: str) -> list[float]:
    records = json.loads(Path(path).read_text(encoding="utf-8"))
    results = parse_history(records)
    history = [float(p) for p in get_performance_histories(results)]
    logger.info("Loaded %d rated contests from %s (%d records)", len(history), path, len(results))
    return history


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.history_json and args.performances:
        print("ERROR: give performances or --history-json, not both")
        return 1

    try:
        history = _load_history(args.history_json) if args.history_json else list(args.performances)
    except (OSError, ValueError, KeyError) as exc:
        print(f"ERROR: could not read history: {exc}")
        return 1

    payload: dict[str, object] = {"rated_matches": len(history)}
    if history:
        try:
            estimate = estimate_from_history(history)
        except (InvalidInputError, ValueError, OverflowError) as exc:
            print(f"ERROR: {exc}")
            return 1
        if not math.isfinite(estimate.rating):
            print(f"ERROR: performances out of range, rating is {estimate.rating}")
            return 1
        payload.update(
            rating=estimate.rating,
            display_rating=estimate.display_rating,
            color=estimate.color,
        )
    elif args.target is None:
        print("ERROR: no rated contests given")
        return 1

    if args.target is not None:
        required = calc_required_performance(
            unpositivize_rating(args.target),
            history,
            lower=settings.search_lower,
            upper=settings.search_upper,
            iterations=settings.search_iterations,
        )
        payload.update(target=args.target, required_performance=required)

    if args.json:
        print(json.dumps(payload, indent=2))
        return 0

    print(f"Rated contests:         {len(history)}")
    if history:
        print(f"Internal rating:        {payload['rating']:.2f}")
        print(f"Rating:                 {payload['display_rating']:.0f} ({payload['color']})")
    if args.target is not None:
        print(f"Required performance:   {payload['required_performance']:.0f}  (target {args.target:.0f})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
