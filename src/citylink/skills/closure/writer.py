"""Text rendering and flat-file dump of the transitive closure (R* table)."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from citylink.errors import OutputWriteError
from citylink.skills.closure.edges import Edge

OUTPUT_PREFIX = "out-"


def format_closure(closure: Iterable[Edge]) -> str:
    """Render the R* table: a header, then one ``u -> v`` pair per line."""
    lines = ["R* Table"]
    lines.extend(f"{u} -> {v}" for u, v in closure)
    return "\n".join(lines) + "\n"


def output_path(input_file: str | Path) -> Path:
    """``out-<name>`` beside the input file."""
    p = Path(input_file)
    return p.with_name(OUTPUT_PREFIX + p.name)


def write_closure(closure: Iterable[Edge], input_file: str | Path) -> Path:
    """Write the R* table next to ``input_file`` and return the written path."""
    out = output_path(input_file)
    try:
        out.write_text(format_closure(closure) + "\n", encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Unable to write {out}: {e.strerror or e}") from e
    return out
