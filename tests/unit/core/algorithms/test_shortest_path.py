from __future__ import annotations

"""
Unit tests for the Shortest Path Engine.

Verifies minimum-hop paths, deterministic tie-breaks, and explicit
reporting of unreachable destinations.
"""

import pytest

from fsgraph.core.algorithms.shortest_path import shortest_path
from fsgraph.domain.graph_models import NoPathError
from fsgraph.domain.path_identity import PathId


def _names(result):
    return [v.value for v in result.vertices]


def test_chain_path(chain_graph) -> None:
    result = shortest_path(chain_graph, "A", "D")
    assert result.found
    assert _names(result) == ["A", "B", "C", "D"]
    assert len(result.vertices) == 4
    assert result.hops == 3


def test_self_path_is_single_vertex(chain_graph) -> None:
    result = shortest_path(chain_graph, "B", "B")
    assert result.found
    assert result.vertices == (PathId("B"),)
    assert result.hops == 0


def test_edges_are_directed(chain_graph) -> None:
    result = shortest_path(chain_graph, "D", "A")
    assert not result.found
    assert result.vertices == ()
    assert result.hops is None


def test_disconnected_pair_reports_no_path(make_graph) -> None:
    graph = make_graph([("A", "B"), ("X", "Y")])
    result = shortest_path(graph, "A", "Y")
    assert not result.found
    assert result.vertices == ()
    with pytest.raises(NoPathError):
        result.require_path()


def test_unknown_vertices_report_no_path(chain_graph) -> None:
    assert not shortest_path(chain_graph, "A", "nowhere").found
    assert not shortest_path(chain_graph, "nowhere", "A").found


def test_prefers_fewer_hops_over_insertion_order(make_graph) -> None:
    graph = make_graph([
        ("S", "a"), ("a", "b"), ("b", "T"),
        ("S", "T"),
    ])
    result = shortest_path(graph, "S", "T")
    assert _names(result) == ["S", "T"]
    assert result.hops == 1


def test_tie_goes_to_first_inserted_route(make_graph) -> None:
    """Two equal-length routes: the one through the earlier vertex wins."""
    graph = make_graph([
        ("S", "left"), ("S", "right"),
        ("right", "T"), ("left", "T"),
    ])
    result = shortest_path(graph, "S", "T")
    assert _names(result) == ["S", "left", "T"]


def test_duplicate_edges_do_not_change_result(make_graph) -> None:
    graph = make_graph([("A", "B"), ("A", "B"), ("B", "C")])
    assert _names(shortest_path(graph, "A", "C")) == ["A", "B", "C"]


def test_require_path_returns_vertices(chain_graph) -> None:
    result = shortest_path(chain_graph, "A", "C")
    assert result.require_path() == (PathId("A"), PathId("B"), PathId("C"))


def test_source_equal_destination_not_in_graph(chain_graph) -> None:
    result = shortest_path(chain_graph, "Z", "Z")
    assert result.found
    assert result.hops == 0
