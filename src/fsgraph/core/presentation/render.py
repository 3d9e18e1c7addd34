from __future__ import annotations

"""
Text Renderer.

Converts graphs and query results into human-readable lines. Spanning trees
are drawn with the standard ASCII connectors (├──, └──); adjacency listings
follow the "vertex:" / indented neighbor layout.
"""

from typing import List, Tuple

from fsgraph.core.graph.store import GraphStore
from fsgraph.domain.graph_models import BuildResult, ShortestPathResult, SpanningTree
from fsgraph.domain.path_identity import PathId

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_graph(graph: GraphStore) -> List[str]:
    """
    List every vertex followed by its indented neighbors.

    Vertices appear in lexicographic path order, neighbors in insertion order.
    """
    lines: List[str] = []
    for vertex, neighbors in graph.adjacency().items():
        lines.append(f"{vertex}:")
        for neighbor in neighbors:
            lines.append(f"  {neighbor}")
    return lines


def render_path(result: ShortestPathResult) -> List[str]:
    """Render a shortest-path result as a single arrow-joined line."""
    if not result.found:
        return [f"No path from {result.source} to {result.destination}."]
    chain = " -> ".join(str(v) for v in result.vertices)
    unit = "hop" if result.hops == 1 else "hops"
    return [f"{chain} ({result.hops} {unit})"]


def render_spanning_tree(tree: SpanningTree, short_names: bool = True) -> List[str]:
    """
    Draw a spanning tree with ASCII connectors.

    The root is printed with its full path. Walks with an explicit stack so
    deep directory chains do not hit the recursion limit.

    Args:
        tree: Tree to render.
        short_names: Label children by their final path segment instead of
                     their full path.

    Returns:
        List[str]: Visual lines, root first.
    """
    lines: List[str] = [str(tree.root)]
    stack: List[Tuple[PathId, str, bool]] = _pending(tree, tree.root, prefix="")

    while stack:
        node, prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        label = node.name if short_names else str(node)
        lines.append(f"{prefix}{connector}{label}")
        stack.extend(_pending(tree, node, prefix + ("    " if is_last else "│   ")))

    return lines


def render_build_errors(result: BuildResult) -> List[str]:
    """One line per entry skipped during the build."""
    return [f"ERROR: {failure.path}: {failure.error}" for failure in result.errors]

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _pending(tree: SpanningTree, node: PathId, prefix: str) -> List[Tuple[PathId, str, bool]]:
    """Children of node as stack items, reversed so the first child pops first."""
    kids = tree.children.get(node, [])
    total = len(kids)
    items = [(child, prefix, i == total - 1) for i, child in enumerate(kids)]
    items.reverse()
    return items
