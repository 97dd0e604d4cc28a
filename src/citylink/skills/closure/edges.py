"""Adjacency matrix to direct edge list."""

from __future__ import annotations

from citylink.errors import AllocationError


Edge = tuple[int, int]


def build_edge_list(matrix: list[list[int]], n: int | None = None) -> list[Edge]:
    """Return one (row, col) edge per 1-cell, in row-major order.

    The matrix is assumed valid; ``n`` defaults to its row count.
    """
    if n is None:
        n = len(matrix)
    try:
        return [
            (i, j)
            for i in range(n)
            for j in range(n)
            if matrix[i][j] == 1
        ]
    except MemoryError as e:
        raise AllocationError("edge-list") from e
