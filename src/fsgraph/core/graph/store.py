from __future__ import annotations

"""
Graph Store.

Adjacency structure of the filesystem graph. Each distinct path is
assigned a dense integer index on first sight (arena + index), and
neighbor lists are kept as ordered index lists. Insertion order is
preserved everywhere and acts as the tie-break order of the query engines.

The store is not thread-safe: it is populated by a single builder and
read-only afterwards.
"""

from typing import Dict, Iterator, List, Tuple

from fsgraph.domain.path_identity import PathId, PathLike


class GraphStore:
    """Directed multigraph keyed by PathId."""

    def __init__(self) -> None:
        self._vertices: List[PathId] = []
        self._index: Dict[PathId, int] = {}
        self._adjacency: List[List[int]] = []
        self._edge_count: int = 0

    # -------------------------------------------------------------------------
    # MUTATION
    # -------------------------------------------------------------------------

    def add_vertex(self, vertex: PathLike) -> PathId:
        """
        Insert a vertex with no outgoing edges if it is not known yet.

        Idempotent: re-adding an existing vertex is a no-op.

        Returns:
            PathId: The canonical identity stored in the graph.
        """
        vid = PathId.of(vertex)
        if vid not in self._index:
            self._index[vid] = len(self._vertices)
            self._vertices.append(vid)
            self._adjacency.append([])
        return vid

    def add_edge(self, source: PathLike, destination: PathLike) -> None:
        """
        Append destination to the neighbor list of source.

        Both endpoints are created on demand. Duplicate edges are kept.
        """
        src = self._index[self.add_vertex(source)]
        dst = self._index[self.add_vertex(destination)]
        self._adjacency[src].append(dst)
        self._edge_count += 1

    # -------------------------------------------------------------------------
    # READ API
    # -------------------------------------------------------------------------

    def neighbors(self, vertex: PathLike) -> List[PathId]:
        """Ordered direct successors of a vertex; empty for unknown vertices."""
        idx = self._index.get(PathId.of(vertex))
        if idx is None:
            return []
        return [self._vertices[n] for n in self._adjacency[idx]]

    def neighbor_indices(self, index: int) -> List[int]:
        return self._adjacency[index]

    def index_of(self, vertex: PathLike) -> int:
        """Dense index of a vertex. Raises KeyError for unknown vertices."""
        return self._index[PathId.of(vertex)]

    def vertex_at(self, index: int) -> PathId:
        return self._vertices[index]

    def vertices(self) -> List[PathId]:
        """All vertices in insertion order."""
        return list(self._vertices)

    def sorted_vertices(self) -> List[PathId]:
        """All vertices in lexicographic path order."""
        return sorted(self._vertices)

    def edges(self) -> Iterator[Tuple[PathId, PathId]]:
        for src, targets in enumerate(self._adjacency):
            for dst in targets:
                yield self._vertices[src], self._vertices[dst]

    def edge_count(self) -> int:
        return self._edge_count

    def adjacency(self) -> Dict[PathId, List[PathId]]:
        """Snapshot of the full mapping, vertices in lexicographic order."""
        return {v: self.neighbors(v) for v in self.sorted_vertices()}

    def __contains__(self, vertex: object) -> bool:
        try:
            return PathId.of(vertex) in self._index  # type: ignore[arg-type]
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"GraphStore(vertices={len(self)}, edges={self._edge_count})"
