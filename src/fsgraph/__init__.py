from __future__ import annotations

from fsgraph.core.algorithms.shortest_path import shortest_path
from fsgraph.core.algorithms.spanning_tree import StartPolicy, minimum_spanning_tree
from fsgraph.core.graph.builder import GraphBuilder, build_graph
from fsgraph.core.graph.store import GraphStore
from fsgraph.domain.graph_models import (
    BuildResult,
    BuildStatus,
    EmptyGraphError,
    GraphError,
    NoPathError,
    ShortestPathResult,
    SpanningTree,
    VertexNotFoundError,
)
from fsgraph.domain.path_identity import PathId

__version__ = "0.1.0"

__all__ = [
    "BuildResult",
    "BuildStatus",
    "EmptyGraphError",
    "GraphBuilder",
    "GraphError",
    "GraphStore",
    "NoPathError",
    "PathId",
    "ShortestPathResult",
    "SpanningTree",
    "StartPolicy",
    "VertexNotFoundError",
    "build_graph",
    "minimum_spanning_tree",
    "shortest_path",
]
