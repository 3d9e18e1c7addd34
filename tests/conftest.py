from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared graph factories and on-disk directory layouts.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fsgraph.core.graph.store import GraphStore  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_graph() -> Callable[[Iterable[Tuple[str, str]]], GraphStore]:
    """
    Return a factory building a GraphStore from (source, destination) pairs.
    """
    def _factory(edges: Iterable[Tuple[str, str]]) -> GraphStore:
        graph = GraphStore()
        for src, dst in edges:
            graph.add_edge(src, dst)
        return graph

    return _factory


@pytest.fixture
def chain_graph(make_graph) -> GraphStore:
    """A -> B -> C -> D."""
    return make_graph([("A", "B"), ("B", "C"), ("C", "D")])


@pytest.fixture
def star_graph(make_graph) -> GraphStore:
    """root with four direct children and no deeper edges."""
    return make_graph([("root", f"root/c{i}") for i in range(4)])


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small directory layout on disk.

    Structure:
    /project
      /docs
        guide.md
      /src
        /pkg
          core.py
        main.py
      README.md
    """
    root = tmp_path / "project"
    (root / "docs").mkdir(parents=True)
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "docs" / "guide.md").write_text("# Guide", encoding="utf-8")
    (root / "src" / "pkg" / "core.py").write_text("X = 1", encoding="utf-8")
    (root / "src" / "main.py").write_text("print('hi')", encoding="utf-8")
    (root / "README.md").write_text("# Project", encoding="utf-8")
    return root
