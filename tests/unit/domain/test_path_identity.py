from __future__ import annotations

"""
Unit tests for the Path Identity value type.

Verifies canonicalization, hashing and segment-wise ordering.
"""

import os
from pathlib import Path

import pytest

from fsgraph.domain.path_identity import PathId


def test_equal_after_lexical_normalization() -> None:
    """Redundant separators and '.' segments do not create new identities."""
    a = PathId(os.path.join("a", "b"))
    b = PathId(os.path.join("a", ".", "b") + os.sep)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_of_accepts_str_pathlib_and_pathid() -> None:
    pid = PathId("x/y")
    assert PathId.of(pid) is pid
    assert PathId.of(Path("x") / "y") == pid
    assert PathId.of("x/y") == pid


def test_ordering_is_segment_wise() -> None:
    """A directory sorts before its children, children before later siblings."""
    parent = PathId("a/b")
    child = PathId("a/b/c")
    sibling = PathId("a/c")
    other = PathId("a/b-x")

    assert parent < child < sibling
    assert sorted([sibling, child, parent]) == [parent, child, sibling]
    # Segment comparison, not raw string comparison ("/" vs "-")
    assert child < other


def test_name_and_str() -> None:
    pid = PathId("docs/guide.md")
    assert pid.name == "guide.md"
    assert str(pid) == os.path.normpath("docs/guide.md")
    assert os.fspath(pid) == str(pid)


def test_absolute_and_relative_differ() -> None:
    assert PathId(os.sep + "a") != PathId("a")


def test_comparison_with_other_types() -> None:
    assert PathId("a") != "a"
    with pytest.raises(TypeError):
        _ = PathId("a") < "b"  # type: ignore[operator]


def test_is_immutable() -> None:
    pid = PathId("a")
    with pytest.raises(AttributeError):
        pid.value = "b"  # type: ignore[misc]
