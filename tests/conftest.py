"""Shared test fixtures for citylink tests."""

import textwrap

import pytest


@pytest.fixture
def write_table(tmp_path):
    """Factory writing an adjacency table file into tmp_path.

    Usage:
        path = write_table([[0, 1], [0, 0]])
        path = write_table(text="2\\n0 1\\n0 0\\n", name="odd.txt")
    """
    def _write(matrix=None, *, text=None, name="cities.txt"):
        if text is None:
            rows = "\n".join(" ".join(str(c) for c in row) for row in matrix)
            text = f"{len(matrix)}\n{rows}\n"
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def chain_table(tmp_path):
    """Three cities linked 0 -> 1 -> 2."""
    path = tmp_path / "chain.txt"
    path.write_text(textwrap.dedent("""\
        3
        0 1 0
        0 0 1
        0 0 0
    """))
    return path


@pytest.fixture
def cycle_table(tmp_path):
    """Three cities linked in a ring 0 -> 1 -> 2 -> 0."""
    path = tmp_path / "cycle.txt"
    path.write_text(textwrap.dedent("""\
        3
        0 1 0
        0 0 1
        1 0 0
    """))
    return path


@pytest.fixture
def isolated_table(tmp_path):
    """Two cities with no links at all."""
    path = tmp_path / "isolated.txt"
    path.write_text("2\n0 0\n0 0\n")
    return path
