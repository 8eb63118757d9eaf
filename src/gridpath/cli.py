"""Command Line Interface for run-constrained grid path search.

This module provides a CLI that reads a grid file and prints the minimal total cost
for one or both named run configurations.

The CLI supports the following commands:
    - solve: Print the minimal cost per configuration
    - estimate: Print the staircase upper bound per configuration

Example Usage:
    python -m gridpath solve data/grid.txt
    python -m gridpath solve data/grid.txt --mode extended --strategy dijkstra
    python -m gridpath estimate data/grid.txt -v
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.exceptions import ConfigurationError, SearchError, ValidationError
from .core.grid import Grid, parse_grid
from .core.models import NAMED_CONSTRAINTS, RunConstraints
from .core.search import RunPathFinding, SearchSettings, SearchStrategy

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def load_grid(path: str) -> Grid:
    """Read and parse a grid file.

    Args:
        path (str): Path to a text file with one row of digits per line.

    Returns:
        Grid: Parsed grid.

    Raises:
        ValueError: If the file does not exist.
        MalformedGridError: If the file content is not a valid grid.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ValueError(f"File not found: {file_path}")
    return parse_grid(file_path.read_text())


def selected_constraints(mode: str) -> List[RunConstraints]:
    """Map a --mode value to the run configurations to report."""
    if mode == "all":
        return list(NAMED_CONSTRAINTS.values())
    return [RunConstraints.from_name(mode)]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gridpath",
        description="Minimum-cost grid paths under directional-run constraints",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    mode_choices = ["all", *NAMED_CONSTRAINTS]

    solve_parser = subparsers.add_parser("solve", help="Print the minimal total cost")
    solve_parser.add_argument("grid", help="Path to the grid file")
    solve_parser.add_argument("--mode", choices=mode_choices, default="all")
    solve_parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in SearchStrategy],
        default=SearchStrategy.BRANCH_AND_BOUND.value,
    )
    solve_parser.add_argument("--timeout", type=float, help="Search timeout in seconds")
    solve_parser.add_argument("--max-states", type=int, help="Maximum states to visit")
    solve_parser.add_argument(
        "--show-route", action="store_true", help="Also print the legs of the route"
    )

    estimate_parser = subparsers.add_parser(
        "estimate", help="Print the staircase upper bound"
    )
    estimate_parser.add_argument("grid", help="Path to the grid file")
    estimate_parser.add_argument("--mode", choices=mode_choices, default="all")

    return parser


def run_solve(args: argparse.Namespace) -> int:
    grid = load_grid(args.grid)
    settings = SearchSettings(timeout=args.timeout, max_states=args.max_states)
    finding = RunPathFinding()
    for constraints in selected_constraints(args.mode):
        result = finding.find_route(
            grid, constraints, SearchStrategy(args.strategy), settings
        )
        print(f"{constraints.name}: {result.cost}")
        if args.show_route:
            legs = " ".join(f"{heading.name}x{length}" for heading, length in result.route.legs())
            print(f"  route: {legs}")
    return 0


def run_estimate(args: argparse.Namespace) -> int:
    grid = load_grid(args.grid)
    finding = RunPathFinding()
    for constraints in selected_constraints(args.mode):
        route = finding.estimate(grid, constraints)
        print(f"{constraints.name}: {route.cost if route is not None else 'none'}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns:
        int: Process exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    commands = {
        "solve": run_solve,
        "estimate": run_estimate,
    }
    try:
        return commands[args.command](args)
    except (ValidationError, ConfigurationError, SearchError, ValueError) as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
