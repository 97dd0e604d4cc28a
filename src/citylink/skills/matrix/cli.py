"""CLI subcommand registration for the /matrix skill."""

from __future__ import annotations

import argparse
from typing import Any


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``matrix`` subcommand and its sub-actions."""
    mtx = subparsers.add_parser("matrix", help="Adjacency table operations")
    mtx_sub = mtx.add_subparsers(dest="action")

    # --- matrix show ---
    shw = mtx_sub.add_parser("show", help="Dump the neighbor table")
    shw.add_argument("input_file", help="Path to the adjacency table file")


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate matrix action."""
    from citylink.skills.matrix import show

    if args.action == "show":
        return show(args.input_file)

    return {"error": f"Unknown matrix action: {args.action}"}
