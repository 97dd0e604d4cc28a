"""CLI subcommand registration for the /closure skill."""

from __future__ import annotations

import argparse
from typing import Any


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``closure`` subcommand and its sub-actions."""
    cls = subparsers.add_parser("closure", help="Transitive closure operations")
    cls_sub = cls.add_subparsers(dest="action")

    # --- closure build ---
    bld = cls_sub.add_parser("build", help="Compute the R* table")
    bld.add_argument("input_file", help="Path to the adjacency table file")
    bld.add_argument(
        "--write",
        action="store_true",
        help="Also write the R* table to out-<input name>",
    )
    bld.add_argument(
        "--skip-reflexive",
        action="store_true",
        help="Never derive a city's route back to itself",
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate closure action."""
    from citylink.skills.closure import build

    if args.action == "build":
        return build(
            args.input_file,
            write=args.write,
            skip_reflexive=args.skip_reflexive,
        )

    return {"error": f"Unknown closure action: {args.action}"}
