"""Core orchestration for a one-shot citylink run.

Ties together matrix reading, closure construction, the optional route
query and the optional R* table dump, driven by a RunConfig.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from citylink.config import RunConfig
from citylink.skills.closure import compute, format_closure, write_closure
from citylink.skills.matrix import format_matrix, load
from citylink.skills.route import check_node, format_path, query


def run(config: RunConfig, *, verbose: bool = False) -> dict[str, Any]:
    """Main entry point: read the table, close it, answer the route query.

    Returns the result dict:
    {
        "input_file", "size", "matrix", "edge_count", "closure_size",
        "closure": [[u, v], ...] (only when print_closure),
        "route": { "source", "target", "reachable", "path", ... } | None,
        "output_file": str | None
    }
    """
    # 1. Read the neighbor table
    matrix = load(config.input_file)
    if verbose:
        print(f"Loaded {len(matrix)}x{len(matrix)} table from {config.input_file}", file=sys.stderr)

    # 2. Validate the route before doing any work
    if config.route is not None:
        check_node(config.route[0], len(matrix))
        check_node(config.route[1], len(matrix))

    # 3. Edge list and closure
    edges, closure = compute(matrix, skip_reflexive=config.skip_reflexive)
    if verbose:
        print(f"  Direct links: {len(edges)}", file=sys.stderr)
        print(f"  R* pairs: {len(closure)}", file=sys.stderr)

    result: dict[str, Any] = {
        "input_file": str(Path(config.input_file).resolve()),
        "size": len(matrix),
        "matrix": matrix,
        "edge_count": len(edges),
        "closure_size": len(closure),
    }
    if config.print_closure:
        result["closure"] = [list(e) for e in closure]

    # 4. Route query
    result["route"] = None
    if config.route is not None:
        source, target = config.route
        result["route"] = query(edges, closure, source, target)

    # 5. Dump the R* table
    result["output_file"] = None
    if config.write_output:
        written = write_closure(closure, config.input_file)
        result["output_file"] = str(written)
        if verbose:
            print(f"Written: {written}", file=sys.stderr)

    return result


def render_report(result: dict[str, Any]) -> str:
    """Plain-text console report of a run result."""
    out = [format_matrix(result["matrix"])]

    if "closure" in result:
        out.append(format_closure(tuple(e) for e in result["closure"]))

    route = result.get("route")
    if route is not None:
        if route["reachable"]:
            out.append("Yes path exists!\n" + format_path(route["path"]) + "\n")
        else:
            out.append("No Path Exists!\n")

    if result.get("output_file"):
        out.append(f"Saving {Path(result['output_file']).name}...\n")

    return "\n".join(out)
