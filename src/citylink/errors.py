"""Shared exception classes for citylink skills."""

from __future__ import annotations


class CityLinkError(Exception):
    """Base class for every failure the CLI reports as ``Error: ...``."""


class AllocationError(CityLinkError):
    """Raised when storage for edges, the closure or a path cannot grow."""

    def __init__(self, stage: str) -> None:
        self.stage = stage
        super().__init__(
            f"Unable to allocate enough memory during {stage} construction"
        )


class MatrixNotFoundError(CityLinkError):
    """Raised when the adjacency matrix file is missing or unreadable."""


class MatrixFormatError(CityLinkError):
    """Raised when the adjacency matrix file is malformed."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class NodeNotFoundError(CityLinkError):
    """Raised when a route endpoint is not a node of the matrix."""


class OutputWriteError(CityLinkError):
    """Raised when the R* table dump cannot be written."""


class PathConsistencyError(CityLinkError):
    """Raised when a path walk stalls because the edge list is not closed."""
