from __future__ import annotations

"""
Spanning Tree Engine.

Prim's algorithm over the unit-weight containment graph. With every edge
weighing 1 the heap only ever holds weights 0 and 1, so the result is the
breadth-first spanning tree of the directed subgraph reachable from the
start vertex. It is a reachable spanning tree, not a general
weight-minimizing MST:

- Only the component reachable from the start vertex is covered; no
  forest is built for disconnected graphs.
- Edges are followed only out of already visited vertices, in their
  stored direction. The graph is never treated as undirected.
- A tree edge is recorded for every neighbor still unvisited when its
  parent is expanded. Duplicate or converging edges therefore add extra
  tree edges; the graph is never deduplicated on the way in.
"""

import heapq
import itertools
import logging
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

from fsgraph.core.graph.store import GraphStore
from fsgraph.domain.graph_models import EmptyGraphError, SpanningTree, VertexNotFoundError
from fsgraph.domain.path_identity import PathId, PathLike

logger = logging.getLogger(__name__)

_UNIT_WEIGHT = 1


class StartPolicy(str, Enum):
    """How the start vertex is chosen when none is given."""
    LEXICOGRAPHIC = "lexicographic"
    INSERTION = "insertion"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def minimum_spanning_tree(
        graph: GraphStore,
        start: Optional[PathLike] = None,
        policy: StartPolicy = StartPolicy.LEXICOGRAPHIC,
) -> SpanningTree:
    """
    Compute the spanning tree reachable from a start vertex.

    Args:
        graph: Store to query (read-only).
        start: Explicit start vertex. When omitted the start is selected
               with `policy`.
        policy: LEXICOGRAPHIC picks the smallest path (for a built graph
                that is the root directory); INSERTION picks the first
                vertex ever added.

    Returns:
        SpanningTree: Mapping of each reached vertex to its tree children.

    Raises:
        EmptyGraphError: If the graph has no vertices.
        VertexNotFoundError: If an explicit start is not in the graph.
    """
    root = _select_start(graph, start, StartPolicy(policy))
    root_idx = graph.index_of(root)

    children: Dict[int, List[int]] = {}
    visited: Set[int] = set()
    sequence = itertools.count()
    frontier: List[Tuple[int, int, int]] = [(0, next(sequence), root_idx)]

    while frontier:
        _, _, current = heapq.heappop(frontier)
        if current in visited:
            continue
        visited.add(current)
        branch = children.setdefault(current, [])

        for neighbor in graph.neighbor_indices(current):
            if neighbor in visited:
                continue
            branch.append(neighbor)
            heapq.heappush(frontier, (_UNIT_WEIGHT, next(sequence), neighbor))

    logger.debug(f"Spanning tree from {root}: {len(children)} vertices")
    return SpanningTree(
        root=root,
        children={
            graph.vertex_at(v): [graph.vertex_at(c) for c in kids]
            for v, kids in children.items()
        },
    )

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _select_start(graph: GraphStore, start: Optional[PathLike], policy: StartPolicy) -> PathId:
    if len(graph) == 0:
        raise EmptyGraphError("Cannot compute a spanning tree of an empty graph")

    if start is not None:
        vid = PathId.of(start)
        if vid not in graph:
            raise VertexNotFoundError(vid)
        return vid

    if policy is StartPolicy.INSERTION:
        return graph.vertex_at(0)
    return min(graph.vertices())
