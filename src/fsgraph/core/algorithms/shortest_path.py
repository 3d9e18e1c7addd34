from __future__ import annotations

"""
Shortest Path Engine.

Minimum-hop path between two vertices using Dijkstra's algorithm over unit
edge weights. The frontier is a binary heap keyed by (distance, vertex
index); since indices follow insertion order, ties on distance always go to
the vertex that entered the graph first.
"""

import heapq
import logging
from typing import List, Optional, Tuple

from fsgraph.core.graph.store import GraphStore
from fsgraph.domain.graph_models import ShortestPathResult
from fsgraph.domain.path_identity import PathId, PathLike

logger = logging.getLogger(__name__)

_UNIT_WEIGHT = 1

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def shortest_path(graph: GraphStore, source: PathLike, destination: PathLike) -> ShortestPathResult:
    """
    Compute the minimum-hop path from source to destination.

    The search stops as soon as the destination is settled. An unreachable
    or unknown destination yields a result with found=False rather than a
    partial path.

    Args:
        graph: Store to query (read-only).
        source: Start vertex.
        destination: Target vertex.

    Returns:
        ShortestPathResult: Path in source -> destination order.
    """
    src = PathId.of(source)
    dst = PathId.of(destination)

    if src == dst:
        return ShortestPathResult(source=src, destination=dst, found=True, vertices=(src,))

    if src not in graph or dst not in graph:
        logger.debug(f"Shortest path query on unknown vertex: {src} -> {dst}")
        return ShortestPathResult(source=src, destination=dst, found=False)

    src_idx = graph.index_of(src)
    dst_idx = graph.index_of(dst)
    predecessors = _dijkstra(graph, src_idx, dst_idx)

    if predecessors[dst_idx] is None:
        logger.debug(f"No path from {src} to {dst}")
        return ShortestPathResult(source=src, destination=dst, found=False)

    vertices = _reconstruct(graph, predecessors, src_idx, dst_idx)
    return ShortestPathResult(source=src, destination=dst, found=True, vertices=vertices)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _dijkstra(graph: GraphStore, source: int, target: int) -> List[Optional[int]]:
    """
    Run the search and return the predecessor table.

    Distance table entries of None stand for "infinity".
    """
    size = len(graph)
    distance: List[Optional[int]] = [None] * size
    predecessor: List[Optional[int]] = [None] * size
    visited = [False] * size

    distance[source] = 0
    frontier: List[Tuple[int, int]] = [(0, source)]

    while frontier:
        dist, current = heapq.heappop(frontier)
        if visited[current]:
            continue
        if current == target:
            break
        visited[current] = True

        candidate = dist + _UNIT_WEIGHT
        for neighbor in graph.neighbor_indices(current):
            if visited[neighbor]:
                continue
            best = distance[neighbor]
            if best is None or candidate < best:
                distance[neighbor] = candidate
                predecessor[neighbor] = current
                heapq.heappush(frontier, (candidate, neighbor))

    return predecessor


def _reconstruct(
        graph: GraphStore,
        predecessor: List[Optional[int]],
        source: int,
        target: int,
) -> Tuple[PathId, ...]:
    """Walk predecessors back from target and return the forward path."""
    chain: List[int] = [target]
    node = target
    while node != source:
        prev = predecessor[node]
        if prev is None:
            # predecessor table is inconsistent
            raise RuntimeError(f"Broken predecessor chain at {graph.vertex_at(node)}")
        chain.append(prev)
        node = prev
    chain.reverse()
    return tuple(graph.vertex_at(i) for i in chain)
