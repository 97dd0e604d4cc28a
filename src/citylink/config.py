"""Run configuration for the one-shot ``citylink run`` command."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path


def parse_route(value: str) -> tuple[int, int]:
    """Parse a ``SOURCE,TARGET`` route specification.

    Used as an argparse ``type=`` so malformed values surface as usage errors.
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(
            f"route must look like <source>,<destination>, got {value!r}"
        )
    try:
        start, target = (int(p.strip()) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"route endpoints must be integers, got {value!r}"
        ) from None
    if start < 0 or target < 0:
        raise argparse.ArgumentTypeError(
            f"route endpoints must be non-negative, got {value!r}"
        )
    return start, target


@dataclass
class RunConfig:
    """Options of a single run: input table, optional route, outputs."""

    input_file: Path
    route: tuple[int, int] | None = None
    print_closure: bool = False
    write_output: bool = False
    skip_reflexive: bool = False

    def __post_init__(self) -> None:
        self.input_file = Path(self.input_file)
        if self.route is not None:
            if len(self.route) != 2:
                raise ValueError(f"route must be a (source, target) pair, got {self.route}")
            self.route = (int(self.route[0]), int(self.route[1]))
