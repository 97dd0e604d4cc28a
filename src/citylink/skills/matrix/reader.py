"""Adjacency matrix file parsing.

The file holds the node count N on its first non-blank line, followed by N
rows of N cells.  Cells are ``0`` or ``1`` separated by whitespace; a row may
also be written as N consecutive digits (``0110``).
"""

from __future__ import annotations

from pathlib import Path

from citylink.errors import MatrixFormatError, MatrixNotFoundError


AdjacencyMatrix = list[list[int]]


def read_matrix(path: str | Path) -> AdjacencyMatrix:
    """Read an adjacency matrix from a text file."""
    p = Path(path)
    if not p.is_file():
        raise MatrixNotFoundError(f"Input file can not be read: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MatrixNotFoundError(f"Input file can not be read: {p} ({e})") from e
    return parse_matrix(text)


def parse_matrix(text: str) -> AdjacencyMatrix:
    """Parse the text form of an adjacency matrix."""
    lines = [
        (lineno, line.strip())
        for lineno, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
    if not lines:
        raise MatrixFormatError("missing matrix size")

    size_line, size_text = lines[0]
    try:
        n = int(size_text)
    except ValueError:
        raise MatrixFormatError(
            f"matrix size must be an integer, got {size_text!r}", size_line
        ) from None
    if n < 0:
        raise MatrixFormatError(f"matrix size must be non-negative, got {n}", size_line)

    rows = lines[1:]
    if len(rows) != n:
        raise MatrixFormatError(f"expected {n} rows, found {len(rows)}")

    matrix: AdjacencyMatrix = []
    for lineno, line in rows:
        matrix.append(_parse_row(line, n, lineno))
    return matrix


def _parse_row(line: str, n: int, lineno: int) -> list[int]:
    cells = line.split()
    if len(cells) == 1 and n > 1 and len(cells[0]) == n:
        cells = list(cells[0])
    if len(cells) != n:
        raise MatrixFormatError(f"expected {n} cells, found {len(cells)}", lineno)

    row: list[int] = []
    for cell in cells:
        if cell not in ("0", "1"):
            raise MatrixFormatError(f"cell must be 0 or 1, got {cell!r}", lineno)
        row.append(int(cell))
    return row


def format_matrix(matrix: AdjacencyMatrix) -> str:
    """Render the neighbor table the way the console report shows it."""
    lines = ["Neighbor table"]
    for row in matrix:
        lines.append(" ".join(str(cell) for cell in row))
    return "\n".join(lines) + "\n"
