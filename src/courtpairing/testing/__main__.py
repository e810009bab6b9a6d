"""Command-line interface for the session simulator.

Usage::

    python -m courtpairing.testing --players 8 --courts 2 --rounds 10 --seed 42
"""

# Court Pairing
# Copyright (C) 2025  Court Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import logging
import sys
from typing import List, Optional

from courtpairing.constants import (
    DEFAULT_NUMBER_OF_COURTS,
    DEFAULT_SCHEDULING_SYSTEM,
    SCHEDULING_SYSTEMS,
)
from courtpairing.exceptions import CourtPairingException
from courtpairing.testing.simulator import SessionSimulator, SimulationConfig
from courtpairing.utils import configure_logging, setup_logger

logger = setup_logger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a whole number, got '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"Must be at least 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="courtpairing-simulate",
        description="Simulate a session and report how fairly play was spread.",
    )
    parser.add_argument(
        "--players",
        type=_positive_int,
        default=8,
        help="Number of players on the roster (default: 8)",
    )
    parser.add_argument(
        "--courts",
        type=_positive_int,
        default=DEFAULT_NUMBER_OF_COURTS,
        help=f"Number of courts (default: {DEFAULT_NUMBER_OF_COURTS})",
    )
    parser.add_argument(
        "--rounds",
        type=_positive_int,
        default=10,
        help="Number of rounds to play (default: 10)",
    )
    parser.add_argument(
        "--system",
        choices=SCHEDULING_SYSTEMS,
        default=DEFAULT_SCHEDULING_SYSTEM,
        help=f"Scheduling system (default: {DEFAULT_SCHEDULING_SYSTEM})",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument(
        "--json", action="store_true", help="Print the report as JSON"
    )
    parser.add_argument(
        "--show-rounds", action="store_true", help="Print every round's matches"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    args = create_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    config = SimulationConfig(
        num_players=args.players,
        num_rounds=args.rounds,
        number_of_courts=args.courts,
        scheduling_system=args.system,
        seed=args.seed,
    )
    try:
        result = SessionSimulator(config).run()
    except CourtPairingException as e:
        logger.error("Simulation failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = result.report.to_dict()
        if args.show_rounds:
            payload["rounds"] = [
                [m.to_dict() for m in round_matches] for round_matches in result.rounds
            ]
        print(json.dumps(payload, indent=2))
        return 0

    if args.show_rounds:
        for number, round_matches in enumerate(result.rounds, start=1):
            print(f"Round {number}")
            for match in round_matches:
                print(f"  {match}")
        print()
    print(result.report.format_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())
