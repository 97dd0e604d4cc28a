"""Route reconstruction over a transitive closure.

``find_path`` walks the closure greedily in its stored order and reports a
single route.  ``find_all_paths`` is a BFS over the direct edges that
enumerates every simple route up to a depth limit, shortest first.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from citylink.errors import AllocationError, PathConsistencyError
from citylink.skills.closure.edges import Edge


def is_reachable(closure: Sequence[Edge], start: int, target: int) -> bool:
    """Reachability is exactly "the pair is in the closure"."""
    return (start, target) in closure


def find_path(
    closure: Sequence[Edge],
    start: int,
    target: int,
) -> list[int] | None:
    """Reconstruct one route from ``start`` to ``target``, or None.

    Starting at ``start``, the walk repeatedly takes the first edge in
    closure order whose head is the target, or an unvisited node that still
    reaches the target.  The result depends on edge order, not on hop count.
    """
    try:
        pairs = set(closure)
        if (start, target) not in pairs:
            return None

        path = [start]
        visited = {start}
        current = start
        while True:
            for u, v in closure:
                if u != current:
                    continue
                if v == target:
                    path.append(v)
                    return path
                if v not in visited and (v, target) in pairs:
                    path.append(v)
                    visited.add(v)
                    current = v
                    break
            else:
                raise PathConsistencyError(
                    f"Route {start} => {target} stalled at node {current}; "
                    "the edge list is not transitively closed"
                )
    except MemoryError as e:
        raise AllocationError("path") from e


def find_all_paths(
    edges: Sequence[Edge],
    start: int,
    target: int,
    max_depth: int = 10,
) -> list[list[int]]:
    """BFS to find all simple routes from start to target over direct edges.

    ``max_depth`` bounds the number of nodes on a route.  Routes come out
    shortest first.
    """
    graph: dict[int, list[int]] = {}
    for u, v in edges:
        graph.setdefault(u, []).append(v)

    results: list[list[int]] = []
    queue: deque[list[int]] = deque([[start]])

    while queue:
        path = queue.popleft()
        current = path[-1]

        for nxt in graph.get(current, []):
            if nxt == target:
                if len(path) + 1 <= max_depth:
                    results.append(path + [nxt])
                continue
            if nxt in path:
                # Skip cycles
                continue
            new_path = path + [nxt]
            if len(new_path) < max_depth:
                queue.append(new_path)

    return results


def format_path(path: Sequence[int]) -> str:
    """Render a route as ``0 => 1 => 2``."""
    return " => ".join(str(node) for node in path)
