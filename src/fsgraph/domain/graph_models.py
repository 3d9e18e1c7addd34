from __future__ import annotations

"""
Graph Domain Data Models.

Defines the result objects and error taxonomy exchanged between the graph
engines (builder, shortest path, spanning tree) and the interface layers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Tuple

from fsgraph.domain.path_identity import PathId

if TYPE_CHECKING:
    from fsgraph.core.graph.store import GraphStore

# -----------------------------------------------------------------------------
# ERROR TAXONOMY
# -----------------------------------------------------------------------------

class GraphError(Exception):
    """Base class for every graph query failure."""


class EmptyGraphError(GraphError):
    """Raised when a query needs at least one vertex and the graph has none."""


class VertexNotFoundError(GraphError, KeyError):
    """Raised when an explicitly requested vertex is not part of the graph."""

    def __init__(self, vertex: PathId) -> None:
        super().__init__(f"Vertex not found in graph: {vertex}")
        self.vertex = vertex

    def __str__(self) -> str:
        return self.args[0]


class NoPathError(GraphError):
    """Raised when a path is demanded between two disconnected vertices."""

    def __init__(self, source: PathId, destination: PathId) -> None:
        super().__init__(f"No path exists from '{source}' to '{destination}'")
        self.source = source
        self.destination = destination

# -----------------------------------------------------------------------------
# BUILD RESULT (TAGGED)
# -----------------------------------------------------------------------------

class BuildStatus(str, Enum):
    """Outcome tag of a graph build."""
    SUCCESS = "success"
    INVALID_ROOT = "invalid_root"


@dataclass(frozen=True)
class EnumerationFailure:
    """
    A directory entry that could not be listed or inspected.

    Attributes:
        path: Path of the entry that failed.
        error: Descriptive exception message.
    """
    path: str
    error: str


@dataclass(frozen=True)
class BuildResult:
    """
    Tagged result of a filesystem graph build.

    Lets callers distinguish an empty-but-valid directory from a root that
    does not exist or is not a directory.

    Attributes:
        status: SUCCESS or INVALID_ROOT.
        root: Identity of the requested root.
        graph: The populated store (empty for INVALID_ROOT).
        errors: Entries skipped because of recoverable enumeration failures.
    """
    status: BuildStatus
    root: PathId
    graph: "GraphStore"
    errors: List[EnumerationFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is BuildStatus.SUCCESS

# -----------------------------------------------------------------------------
# QUERY RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ShortestPathResult:
    """
    Outcome of a minimum-hop path query.

    A missing path is reported with found=False and an empty vertex list,
    never as a truncated sequence.

    Attributes:
        source: Query origin.
        destination: Query target.
        found: Whether destination is reachable from source.
        vertices: Ordered path source -> destination (empty if not found).
    """
    source: PathId
    destination: PathId
    found: bool
    vertices: Tuple[PathId, ...] = ()

    @property
    def hops(self) -> Optional[int]:
        """Number of edges along the path, None when no path exists."""
        if not self.found:
            return None
        return len(self.vertices) - 1

    def require_path(self) -> Tuple[PathId, ...]:
        """Return the vertex sequence or raise NoPathError."""
        if not self.found:
            raise NoPathError(self.source, self.destination)
        return self.vertices


@dataclass(frozen=True)
class SpanningTree:
    """
    Spanning tree over the component reachable from a root vertex.

    Attributes:
        root: Start vertex of the traversal.
        children: Vertex -> tree children. Every reached vertex is a key,
                  in visit order; leaves map to an empty list. A vertex
                  reached over duplicate or converging edges is listed
                  once per recorded edge.
    """
    root: PathId
    children: Dict[PathId, List[PathId]]

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.children

    def __len__(self) -> int:
        return len(self.children)

    @property
    def vertices(self) -> List[PathId]:
        return list(self.children)

    @property
    def edge_count(self) -> int:
        return sum(len(kids) for kids in self.children.values())

    def edges(self) -> Iterator[Tuple[PathId, PathId]]:
        for parent, kids in self.children.items():
            for child in kids:
                yield parent, child

    def parent_of(self, vertex: PathId) -> Optional[PathId]:
        """First recorded parent of a vertex (None for the root or unknown vertices)."""
        for parent, child in self.edges():
            if child == vertex:
                return parent
        return None

# -----------------------------------------------------------------------------
# SERIALIZATION HELPERS
# -----------------------------------------------------------------------------

def path_result_to_dict(result: ShortestPathResult) -> Dict[str, Any]:
    return {
        "source": str(result.source),
        "destination": str(result.destination),
        "found": result.found,
        "hops": result.hops,
        "path": [str(v) for v in result.vertices],
    }


def spanning_tree_to_dict(tree: SpanningTree) -> Dict[str, Any]:
    return {
        "root": str(tree.root),
        "edge_count": tree.edge_count,
        "children": {str(k): [str(c) for c in v] for k, v in tree.children.items()},
    }


def build_result_to_dict(result: BuildResult) -> Dict[str, Any]:
    return {
        "status": result.status.value,
        "root": str(result.root),
        "vertices": len(result.graph),
        "edges": result.graph.edge_count(),
        "errors": [{"path": e.path, "error": e.error} for e in result.errors],
    }
