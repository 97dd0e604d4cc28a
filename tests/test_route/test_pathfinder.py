"""Tests for route reconstruction — pure functions, no mocking needed."""

import itertools
from unittest.mock import patch

import pytest

from citylink.errors import AllocationError, PathConsistencyError
from citylink.skills.closure.engine import close
from citylink.skills.route.pathfinder import (
    find_all_paths,
    find_path,
    format_path,
    is_reachable,
)


# ---------------------------------------------------------------------------
# find_path — greedy walk over the closure
# ---------------------------------------------------------------------------
def test_two_hop():
    closure = close([(0, 1), (1, 2)])
    assert find_path(closure, 0, 2) == [0, 1, 2]


def test_direct_link():
    closure = close([(0, 1), (1, 2)])
    assert find_path(closure, 1, 2) == [1, 2]


def test_unreachable_returns_none():
    closure = close([(0, 1), (1, 2)])
    assert find_path(closure, 2, 0) is None


def test_empty_closure():
    assert find_path((), 0, 1) is None


def test_follows_closure_order():
    # A derived pair stored first is taken first.
    assert find_path(((0, 1), (1, 2), (0, 2)), 0, 2) == [0, 1, 2]
    assert find_path(((0, 2), (0, 1), (1, 2)), 0, 2) == [0, 2]


def test_skips_dead_end_branch():
    # 0 -> 1 is a dead end; the route to 3 goes through 2.
    closure = close([(0, 1), (0, 2), (2, 3)])
    assert find_path(closure, 0, 3) == [0, 2, 3]


def test_cycle_avoidance():
    closure = close([(0, 1), (1, 0), (1, 2)])
    assert find_path(closure, 0, 2) == [0, 1, 2]


def test_round_trip_on_cycle():
    closure = close([(0, 1), (1, 2), (2, 0)])
    assert find_path(closure, 0, 0) == [0, 1, 2, 0]


def test_self_loop_round_trip():
    assert find_path(close([(0, 0)]), 0, 0) == [0, 0]


def test_no_round_trip_without_cycle():
    assert find_path(close([(0, 1)]), 0, 0) is None


def test_one_shot_iterable_reports_inconsistency():
    # The pairs are consumed by the reachability check, leaving nothing to walk.
    with pytest.raises(PathConsistencyError, match="stalled at node 0"):
        find_path(iter([(0, 1)]), 0, 1)


def test_memory_error_names_stage():
    with patch(
        "citylink.skills.route.pathfinder.set",
        side_effect=MemoryError,
        create=True,
    ):
        with pytest.raises(AllocationError) as exc:
            find_path(((0, 1),), 0, 1)
    assert exc.value.stage == "path"


GRAPHS = [
    [(0, 1), (1, 2)],
    [(0, 1), (1, 2), (2, 0)],
    [(0, 1), (0, 2), (2, 3), (3, 1), (1, 4)],
    [(0, 0), (0, 1), (1, 1), (1, 2)],
    [(4, 3), (3, 2), (2, 1), (1, 0), (0, 4), (2, 4)],
]


@pytest.mark.parametrize("edges", GRAPHS)
def test_every_returned_path_is_valid(edges):
    closure = close(edges)
    pairs = set(closure)
    for start, target in itertools.product(range(5), repeat=2):
        path = find_path(closure, start, target)
        if (start, target) not in pairs:
            assert path is None
            continue
        assert path[0] == start
        assert path[-1] == target
        assert len(path) >= 2
        for a, b in zip(path, path[1:]):
            assert (a, b) in pairs
        inner = path[:-1] if start == target else path
        assert len(inner) == len(set(inner))


# ---------------------------------------------------------------------------
# is_reachable
# ---------------------------------------------------------------------------
def test_is_reachable():
    closure = close([(0, 1), (1, 2)])
    assert is_reachable(closure, 0, 2)
    assert not is_reachable(closure, 2, 0)


# ---------------------------------------------------------------------------
# find_all_paths — BFS over direct links
# ---------------------------------------------------------------------------
def test_all_paths_direct():
    assert find_all_paths([(0, 1)], 0, 1) == [[0, 1]]


def test_all_paths_two_hop():
    assert find_all_paths([(0, 1), (1, 2)], 0, 2) == [[0, 1, 2]]


def test_all_paths_shortest_first():
    edges = [(0, 1), (1, 2), (2, 3), (0, 3)]
    assert find_all_paths(edges, 0, 3) == [[0, 3], [0, 1, 2, 3]]


def test_all_paths_diamond():
    edges = [(0, 1), (0, 2), (1, 3), (2, 3)]
    assert sorted(find_all_paths(edges, 0, 3)) == [[0, 1, 3], [0, 2, 3]]


def test_all_paths_none():
    assert find_all_paths([(0, 1), (2, 3)], 0, 3) == []


def test_all_paths_cycle_avoidance():
    assert find_all_paths([(0, 1), (1, 0), (1, 2)], 0, 2) == [[0, 1, 2]]


def test_all_paths_round_trip():
    assert find_all_paths([(0, 1), (1, 0)], 0, 0) == [[0, 1, 0]]


def test_all_paths_max_depth_limit():
    edges = [(0, 1), (1, 2), (2, 3), (3, 4)]
    assert find_all_paths(edges, 0, 4, max_depth=4) == []
    assert find_all_paths(edges, 0, 4, max_depth=5) == [[0, 1, 2, 3, 4]]


def test_all_paths_empty():
    assert find_all_paths([], 0, 1) == []


# ---------------------------------------------------------------------------
# format_path
# ---------------------------------------------------------------------------
def test_format_path():
    assert format_path([0, 1, 2]) == "0 => 1 => 2"


def test_format_single_hop():
    assert format_path([3, 4]) == "3 => 4"
