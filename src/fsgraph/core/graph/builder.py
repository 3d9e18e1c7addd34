from __future__ import annotations

"""
Filesystem Graph Builder.

Walks a directory tree through a DirectoryEnumerator and records a
"directory contains entry" edge for every entry found. Traversal is a
pre-order depth-first walk driven by an explicit stack of directory
frames, so edges are emitted in the same order as a recursive descent
without being limited by the interpreter recursion depth.

Enumeration failures are isolated per entry: the failing entry is logged,
reported in the BuildResult and skipped, and the walk continues.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from fsgraph.core.graph.store import GraphStore
from fsgraph.domain.graph_models import BuildResult, BuildStatus, EnumerationFailure
from fsgraph.domain.path_identity import PathId, PathLike
from fsgraph.infra.fs import DirEntry, DirectoryEnumerator, LocalDirectoryEnumerator

logger = logging.getLogger(__name__)

_Frame = Tuple[str, Iterator[DirEntry]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class GraphBuilder:
    """
    Populate a GraphStore from the filesystem.

    Args:
        enumerator: Directory listing service. Defaults to the local
                    filesystem without following symlinks.
    """

    def __init__(self, enumerator: Optional[DirectoryEnumerator] = None) -> None:
        self._enumerator = enumerator or LocalDirectoryEnumerator()

    def build(self, root: PathLike, graph: Optional[GraphStore] = None) -> BuildResult:
        """
        Build the containment graph of everything below root.

        Symlink cycles are not detected; do not point the builder at a tree
        whose traversal loops.

        Args:
            root: Directory to start from.
            graph: Optional existing store to extend. A new one is created
                   when omitted.

        Returns:
            BuildResult: SUCCESS with the populated graph and the list of
                         skipped entries, or INVALID_ROOT when root does not
                         exist or is not a directory (graph left untouched).
        """
        store = graph if graph is not None else GraphStore()
        root_id = PathId.of(root)
        root_path = root_id.value

        if not self._enumerator.exists(root_path) or not self._enumerator.is_dir(root_path):
            logger.debug(f"Build skipped, root is missing or not a directory: {root_path}")
            return BuildResult(status=BuildStatus.INVALID_ROOT, root=root_id, graph=store)

        logger.info(f"Building filesystem graph from: {root_path}")
        store.add_vertex(root_id)
        errors: List[EnumerationFailure] = []
        stack: List[_Frame] = []
        self._open_directory(root_path, stack, errors)

        while stack:
            directory, pending = stack[-1]
            entry = next(pending, None)
            if entry is None:
                stack.pop()
                continue

            if entry.error is not None:
                self._report(entry.path, entry.error, errors)
                continue

            store.add_edge(directory, entry.path)
            if entry.is_dir:
                self._open_directory(entry.path, stack, errors)

        logger.info(
            f"Graph built: {len(store)} vertices, {store.edge_count()} edges, "
            f"{len(errors)} skipped entries"
        )
        return BuildResult(status=BuildStatus.SUCCESS, root=root_id, graph=store, errors=errors)

    # -------------------------------------------------------------------------
    # INTERNAL HELPERS
    # -------------------------------------------------------------------------

    def _open_directory(self, path: str, stack: List[_Frame], errors: List[EnumerationFailure]) -> None:
        """List a directory and push its frame; failures are reported, not raised."""
        try:
            entries = self._enumerator.list_entries(path)
        except OSError as e:
            self._report(path, str(e), errors)
            return
        stack.append((path, iter(entries)))

    @staticmethod
    def _report(path: str, error: str, errors: List[EnumerationFailure]) -> None:
        logger.warning(f"Skipping inaccessible entry '{path}': {error}")
        errors.append(EnumerationFailure(path=path, error=error))


def build_graph(root: PathLike, follow_symlinks: bool = True) -> BuildResult:
    """Convenience wrapper building from the local filesystem."""
    return GraphBuilder(LocalDirectoryEnumerator(follow_symlinks=follow_symlinks)).build(root)
