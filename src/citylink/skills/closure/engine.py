"""Fixed-point transitive closure over a direct edge list.

Each pass composes every pair of edges known at the start of the pass,
(u, v) and (v, w), into (u, w).  Edges derived during a pass only take part
in composition from the next pass on.  The loop stops after a pass that adds
nothing; since pairs are never removed and at most N*N distinct pairs exist,
it always terminates.
"""

from __future__ import annotations

from collections.abc import Iterable

from citylink.errors import AllocationError
from citylink.skills.closure.edges import Edge


def close(edges: Iterable[Edge], *, skip_reflexive: bool = False) -> tuple[Edge, ...]:
    """Return the transitive closure of ``edges``.

    The result keeps the input edges first, in their order, followed by the
    derived pairs in the order they were found.  A pair is never derived
    from an edge composed with itself (u == y and v == w).  With
    ``skip_reflexive`` no (u, u) pair is derived at all.
    """
    try:
        closure: list[Edge] = [(u, v) for u, v in edges]
        seen: set[Edge] = set(closure)

        changed = True
        while changed:
            changed = False
            snapshot = closure[:]
            for u, v in snapshot:
                for y, w in snapshot:
                    if v != y:
                        continue
                    if u == y and v == w:
                        continue
                    if skip_reflexive and u == w:
                        continue
                    if (u, w) in seen:
                        continue
                    closure.append((u, w))
                    seen.add((u, w))
                    changed = True
    except MemoryError as e:
        raise AllocationError("closure") from e

    return tuple(closure)


def is_closed(edges: Iterable[Edge], *, skip_reflexive: bool = False) -> bool:
    """True when composing ``edges`` once more would add no pair."""
    edge_list = list(edges)
    present = set(edge_list)
    for u, v in edge_list:
        for y, w in edge_list:
            if v != y or (u == y and v == w) or (skip_reflexive and u == w):
                continue
            if (u, w) not in present:
                return False
    return True
