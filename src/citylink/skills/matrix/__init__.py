"""Matrix skill – read and inspect adjacency (neighbor) tables.

Public API
----------
- load(input_file) -> list[list[int]]
- show(input_file) -> dict
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from citylink.skills.matrix.reader import (
    AdjacencyMatrix,
    format_matrix,
    parse_matrix,
    read_matrix,
)


def load(input_file: str | Path) -> AdjacencyMatrix:
    """Read the adjacency matrix stored in ``input_file``."""
    return read_matrix(input_file)


def show(input_file: str | Path) -> dict[str, Any]:
    """Return the neighbor table as JSON.

    Returns dict with keys: input_file, size, matrix, edge_count.
    """
    matrix = read_matrix(input_file)
    return {
        "input_file": str(Path(input_file).resolve()),
        "size": len(matrix),
        "matrix": matrix,
        "edge_count": sum(sum(row) for row in matrix),
    }


__all__ = [
    "AdjacencyMatrix",
    "format_matrix",
    "load",
    "parse_matrix",
    "read_matrix",
    "show",
]
