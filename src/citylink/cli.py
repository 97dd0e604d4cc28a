"""CLI entry point for citylink skills."""

from __future__ import annotations

import argparse
import json
import sys

from citylink.config import RunConfig, parse_route
from citylink.core import render_report, run
from citylink.errors import CityLinkError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="citylink",
        description="Transitive closure and route finding over city adjacency tables",
    )
    sub = parser.add_subparsers(dest="command")

    # --- Register skill subcommands ---
    from citylink.skills.matrix.cli import register as register_matrix
    from citylink.skills.closure.cli import register as register_closure
    from citylink.skills.route.cli import register as register_route

    register_matrix(sub)
    register_closure(sub)
    register_route(sub)

    # --- One-shot run sub-command ---
    rn = sub.add_parser(
        "run",
        help="Read a table, build R* and optionally query a route",
    )
    rn.add_argument(
        "-i",
        "--input",
        dest="input_file",
        required=True,
        help="Path to the adjacency table file",
    )
    rn.add_argument(
        "-r",
        "--route",
        type=parse_route,
        default=None,
        metavar="SOURCE,DESTINATION",
        help="Find a route between two cities",
    )
    rn.add_argument(
        "-p",
        "--print",
        dest="print_closure",
        action="store_true",
        help="Include the R* table in the output",
    )
    rn.add_argument(
        "-o",
        "--output",
        dest="write_output",
        action="store_true",
        help="Write the R* table to out-<input name>",
    )
    rn.add_argument(
        "--skip-reflexive",
        action="store_true",
        help="Never derive a city's route back to itself",
    )
    rn.add_argument(
        "--text",
        action="store_true",
        help="Print a plain-text report instead of JSON",
    )
    rn.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Progress details on stderr",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    # --- Dispatch ---
    if args.command == "run":
        config = RunConfig(
            input_file=args.input_file,
            route=args.route,
            print_closure=args.print_closure,
            write_output=args.write_output,
            skip_reflexive=args.skip_reflexive,
        )
        try:
            result = run(config, verbose=args.verbose)
        except CityLinkError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        if args.text:
            sys.stdout.write(render_report(result))
        else:
            json.dump(result, sys.stdout, indent=2)
            print()
        return 0

    # Skill subcommands with two-level dispatch
    skill_dispatch = {
        "matrix": "citylink.skills.matrix.cli",
        "closure": "citylink.skills.closure.cli",
        "route": "citylink.skills.route.cli",
    }

    if args.command in skill_dispatch:
        # Check if action was provided
        if not getattr(args, "action", None):
            # Re-parse to show skill-specific help
            parser.parse_args([args.command, "--help"])
            return 1

        import importlib
        cli_mod = importlib.import_module(skill_dispatch[args.command])
        try:
            result = cli_mod.run(args)
        except CityLinkError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        json.dump(result, sys.stdout, indent=2)
        print()
        return 0

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
