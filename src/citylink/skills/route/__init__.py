"""Route skill – answer reachability queries between two cities.

Public API
----------
- find(input_file, source, target, *, all_paths=False, max_depth=10,
       skip_reflexive=False) -> dict
- query(edges, closure, source, target, *, all_paths=False, max_depth=10) -> dict
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from citylink.errors import NodeNotFoundError
from citylink.skills.closure import Edge, compute as _compute_closure
from citylink.skills.matrix import load as _load_matrix
from citylink.skills.route.pathfinder import (
    find_all_paths,
    find_path,
    format_path,
    is_reachable,
)

NO_PATH_MESSAGE = "No path exists"
PATH_MESSAGE = "Path exists"


def check_node(node: int, size: int) -> None:
    """Raise NodeNotFoundError unless ``node`` indexes a city of the table."""
    if size == 0:
        raise NodeNotFoundError(
            f"City {node} is not in the table (the table has no cities)"
        )
    if not 0 <= node < size:
        raise NodeNotFoundError(
            f"City {node} is not in the table (valid cities: 0..{size - 1})"
        )


def query(
    edges: Sequence[Edge],
    closure: Sequence[Edge],
    source: int,
    target: int,
    *,
    all_paths: bool = False,
    max_depth: int = 10,
) -> dict[str, Any]:
    """Answer one route query against an already built closure.

    Returns dict with keys: source, target, reachable, path, length, message,
    and with ``all_paths`` also paths and path_count.
    """
    path = find_path(closure, source, target)
    result: dict[str, Any] = {
        "source": source,
        "target": target,
        "reachable": path is not None,
        "path": path,
        "length": len(path) if path is not None else 0,
        "message": PATH_MESSAGE if path is not None else NO_PATH_MESSAGE,
    }
    if all_paths:
        paths = find_all_paths(edges, source, target, max_depth)
        result["paths"] = paths
        result["path_count"] = len(paths)
    return result


def find(
    input_file: str | Path,
    source: int,
    target: int,
    *,
    all_paths: bool = False,
    max_depth: int = 10,
    skip_reflexive: bool = False,
) -> dict[str, Any]:
    """Find a route from source to target in the table stored in ``input_file``."""
    matrix = _load_matrix(input_file)
    check_node(source, len(matrix))
    check_node(target, len(matrix))

    edges, closure = _compute_closure(matrix, skip_reflexive=skip_reflexive)
    return query(
        edges,
        closure,
        source,
        target,
        all_paths=all_paths,
        max_depth=max_depth,
    )


__all__ = [
    "NO_PATH_MESSAGE",
    "check_node",
    "find",
    "find_all_paths",
    "find_path",
    "format_path",
    "is_reachable",
    "query",
]
