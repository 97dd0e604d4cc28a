"""CLI subcommand registration for the /route skill."""

from __future__ import annotations

import argparse
from typing import Any


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``route`` subcommand and its sub-actions."""
    rte = subparsers.add_parser("route", help="Route queries between cities")
    rte_sub = rte.add_subparsers(dest="action")

    # --- route find ---
    fnd = rte_sub.add_parser("find", help="Find a route between two cities")
    fnd.add_argument("source", type=int, help="Source city")
    fnd.add_argument("target", type=int, help="Destination city")
    fnd.add_argument("input_file", help="Path to the adjacency table file")
    fnd.add_argument(
        "--all",
        dest="all_paths",
        action="store_true",
        help="Also list every simple route over direct links, shortest first",
    )
    fnd.add_argument(
        "--max-depth",
        type=int,
        default=10,
        help="Maximum cities on a listed route (default: 10)",
    )
    fnd.add_argument(
        "--skip-reflexive",
        action="store_true",
        help="Never derive a city's route back to itself",
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate route action."""
    from citylink.skills.route import find

    if args.action == "find":
        return find(
            args.input_file,
            args.source,
            args.target,
            all_paths=args.all_paths,
            max_depth=args.max_depth,
            skip_reflexive=args.skip_reflexive,
        )

    return {"error": f"Unknown route action: {args.action}"}
