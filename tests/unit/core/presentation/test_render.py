from __future__ import annotations

"""
Unit tests for the Text Renderer.

Verifies adjacency listings, path lines and ASCII spanning tree layout.
"""

from fsgraph.core.algorithms.shortest_path import shortest_path
from fsgraph.core.algorithms.spanning_tree import minimum_spanning_tree
from fsgraph.core.graph.store import GraphStore
from fsgraph.core.presentation.render import (
    render_build_errors,
    render_graph,
    render_path,
    render_spanning_tree,
)
from fsgraph.domain.graph_models import BuildResult, BuildStatus, EnumerationFailure
from fsgraph.domain.path_identity import PathId


def test_render_graph_layout(make_graph) -> None:
    graph = make_graph([("b", "b/x"), ("a", "a/y"), ("a", "a/z")])
    assert render_graph(graph) == [
        "a:",
        "  a/y",
        "  a/z",
        "a/y:",
        "a/z:",
        "b:",
        "  b/x",
        "b/x:",
    ]


def test_render_path_found(chain_graph) -> None:
    assert render_path(shortest_path(chain_graph, "A", "D")) == ["A -> B -> C -> D (3 hops)"]
    assert render_path(shortest_path(chain_graph, "A", "B")) == ["A -> B (1 hop)"]


def test_render_path_missing(chain_graph) -> None:
    assert render_path(shortest_path(chain_graph, "D", "A")) == ["No path from D to A."]


def test_render_spanning_tree_connectors(make_graph) -> None:
    graph = make_graph([
        ("r", "r/a"), ("r", "r/b"),
        ("r/a", "r/a/x"), ("r/a", "r/a/y"),
        ("r/b", "r/b/z"),
    ])
    lines = render_spanning_tree(minimum_spanning_tree(graph))
    assert lines == [
        "r",
        "├── a",
        "│   ├── x",
        "│   └── y",
        "└── b",
        "    └── z",
    ]


def test_render_spanning_tree_full_names(make_graph) -> None:
    graph = make_graph([("r", "r/a")])
    lines = render_spanning_tree(minimum_spanning_tree(graph), short_names=False)
    assert lines == ["r", "└── r/a"]


def test_render_build_errors() -> None:
    result = BuildResult(
        status=BuildStatus.SUCCESS,
        root=PathId("r"),
        graph=GraphStore(),
        errors=[EnumerationFailure(path="r/locked", error="Permission denied")],
    )
    assert render_build_errors(result) == ["ERROR: r/locked: Permission denied"]
