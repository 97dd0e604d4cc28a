"""Closure skill – build the transitive closure (R* table) of a city table.

Public API
----------
- compute(matrix, *, skip_reflexive=False) -> tuple[list[Edge], tuple[Edge, ...]]
- build(input_file, *, write=False, skip_reflexive=False) -> dict
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from citylink.skills.closure.edges import Edge, build_edge_list
from citylink.skills.closure.engine import close, is_closed
from citylink.skills.closure.writer import format_closure, output_path, write_closure
from citylink.skills.matrix import load as _load_matrix


def compute(
    matrix: list[list[int]],
    *,
    skip_reflexive: bool = False,
) -> tuple[list[Edge], tuple[Edge, ...]]:
    """Return the direct edge list of ``matrix`` and its closure."""
    edges = build_edge_list(matrix, len(matrix))
    return edges, close(edges, skip_reflexive=skip_reflexive)


def build(
    input_file: str | Path,
    *,
    write: bool = False,
    skip_reflexive: bool = False,
) -> dict[str, Any]:
    """Build the transitive closure of the table stored in ``input_file``.

    Returns dict with keys: input_file, size, edges, edge_count, closure,
    closure_size, output_file (None unless ``write``).
    """
    matrix = _load_matrix(input_file)
    edges, closure = compute(matrix, skip_reflexive=skip_reflexive)

    written = write_closure(closure, input_file) if write else None

    return {
        "input_file": str(Path(input_file).resolve()),
        "size": len(matrix),
        "edges": [list(e) for e in edges],
        "edge_count": len(edges),
        "closure": [list(e) for e in closure],
        "closure_size": len(closure),
        "output_file": str(written) if written is not None else None,
    }


__all__ = [
    "Edge",
    "build",
    "build_edge_list",
    "close",
    "compute",
    "format_closure",
    "is_closed",
    "output_path",
    "write_closure",
]
