"""Console session: pick vehicles, print their parts, build a car and a van.

Usage::

    vehicle-studies                      # interactive
    vehicle-studies --vehicles Car,Van --game Chess
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Sequence

from vehicle_studies.builders import build_vehicle
from vehicle_studies.config import (
    CLOSING_MESSAGE,
    DEMO_BUILDS,
    GAME_CHOICES,
    GREETING,
    VEHICLE_CHOICES,
    configure_logging,
    load_config,
)
from vehicle_studies.factories import UnknownKindError, collect_parts, default_registry

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def parse_selection(raw: str, choices: Sequence[str]) -> list[str]:
    """Resolve a comma-separated answer against *choices*.

    Each token may be a choice name (case-insensitive) or its 1-based
    number.  Duplicates are dropped, first occurrence wins.

    Raises
    ------
    ValueError
        If a token matches no choice.
    """
    by_name = {choice.lower(): choice for choice in choices}
    selected: list[str] = []

    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        if token.isdigit():
            index = int(token) - 1
            if not 0 <= index < len(choices):
                raise ValueError(f"No choice numbered {token}")
            choice = choices[index]
        else:
            choice = by_name.get(token.lower())
            if choice is None:
                raise ValueError(f"Unknown choice: {token}")
        if choice not in selected:
            selected.append(choice)

    return selected


def prompt_multi_select(
    title: str,
    choices: Sequence[str],
    input_fn: InputFn | None = None,
    output: OutputFn = print,
) -> list[str]:
    """Ask until the user selects at least one of *choices*.

    ``EOFError`` from *input_fn* is left to the caller.
    """
    input_fn = input_fn or input
    output(title)
    for number, choice in enumerate(choices, start=1):
        output(f"  {number}) {choice}")

    while True:
        raw = input_fn("Select one or more (comma-separated): ")
        try:
            selected = parse_selection(raw, choices)
        except ValueError as e:
            output(str(e))
            continue
        if selected:
            return selected
        output("Please select at least one option.")


def _vehicle_choices() -> list[str]:
    registry = default_registry()
    return [choice for choice in VEHICLE_CHOICES if choice in registry]


def run_session(
    vehicles: Sequence[str] | None = None,
    games: Sequence[str] | None = None,
    input_fn: InputFn | None = None,
    output: OutputFn = print,
) -> int:
    """Run one console session and return the process exit code."""
    registry = default_registry()
    vehicle_choices = _vehicle_choices()

    output(GREETING)

    if vehicles is None:
        vehicles = prompt_multi_select(
            "Select the vehicle you want parts for:", vehicle_choices, input_fn, output
        )
    output(f"Selected vehicle: {', '.join(vehicles)}")

    parts = collect_parts(vehicles, registry)
    output(", ".join(parts["body_parts"]))

    for kind in DEMO_BUILDS:
        output(str(build_vehicle(kind)))

    if games is None:
        games = prompt_multi_select(
            "Select what game you want to play with me:", GAME_CHOICES, input_fn, output
        )
    output(f"Selected Game: {', '.join(games)}")
    output(CLOSING_MESSAGE)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vehicle-studies",
        description="Abstract Factory and Builder pattern demo on a toy vehicle domain.",
    )
    parser.add_argument(
        "--vehicles",
        help="Comma-separated vehicle types to list parts for (skips the prompt)",
    )
    parser.add_argument(
        "--game",
        action="append",
        dest="games",
        help="Game to play (repeatable, skips the closing prompt)",
    )
    parser.add_argument("--log-level", help="Logging level (default from environment)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config()
    configure_logging(args.log_level or config["VEHICLE_STUDIES_LOG_LEVEL"])

    vehicles: list[str] | None = None
    if args.vehicles is not None:
        try:
            vehicles = parse_selection(args.vehicles, _vehicle_choices())
        except ValueError as e:
            parser.error(str(e))
        if not vehicles:
            parser.error("--vehicles needs at least one vehicle type")

    games: list[str] | None = None
    if args.games is not None:
        try:
            games = parse_selection(",".join(args.games), GAME_CHOICES)
        except ValueError as e:
            parser.error(str(e))
        if not games:
            parser.error("--game needs at least one game")

    try:
        return run_session(vehicles=vehicles, games=games)
    except EOFError:
        print()
        logger.info("Input closed, aborting session")
        return 1
    except UnknownKindError as e:
        logger.error("%s", e)
        return 2
