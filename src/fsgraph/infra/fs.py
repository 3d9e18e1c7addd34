from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the directory enumeration service consumed by the graph builder,
along with cross-platform path resolution helpers. Acts as an abstraction
over the 'os' module so the core never touches the filesystem directly.
"""

import os
from dataclasses import dataclass
from typing import List, Optional, Protocol

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "fsgraph"
UNIX_APP_DIR_NAME = ".fsgraph"

# -----------------------------------------------------------------------------
# ENUMERATION CONTRACT
# -----------------------------------------------------------------------------

class EnumerationError(OSError):
    """
    Recoverable failure while listing or inspecting a filesystem entry.

    Attributes:
        path: The entry that could not be enumerated.
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return f"{self.path}: {self.args[0]}"


@dataclass(frozen=True)
class DirEntry:
    """
    Immediate child of a listed directory.

    Attributes:
        path: Full path of the entry (parent joined with the entry name).
        is_dir: Whether the entry is a directory.
        error: Set when the entry was listed but could not be inspected.
    """
    path: str
    is_dir: bool
    error: Optional[str] = None


class DirectoryEnumerator(Protocol):
    """Service that reports existence, type and children of a path."""

    def exists(self, path: str) -> bool:
        ...

    def is_dir(self, path: str) -> bool:
        ...

    def list_entries(self, path: str) -> List[DirEntry]:
        ...


class LocalDirectoryEnumerator:
    """
    DirectoryEnumerator backed by the local filesystem (os.scandir).

    Entries are returned sorted by name so that graph construction is
    reproducible across platforms.

    Args:
        follow_symlinks: Treat symlinks to directories as directories (default).
                         Symlink cycles are not detected.
    """

    def __init__(self, follow_symlinks: bool = True) -> None:
        self.follow_symlinks = follow_symlinks

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def list_entries(self, path: str) -> List[DirEntry]:
        """
        List the direct children of a directory.

        Raises:
            EnumerationError: If the directory cannot be opened or an entry
                              cannot be inspected (e.g. permission denied).
        """
        entries: List[DirEntry] = []
        try:
            with os.scandir(path) as it:
                for item in it:
                    entries.append(self._describe(path, item))
        except OSError as e:
            raise EnumerationError(path, e.strerror or str(e)) from e

        entries.sort(key=lambda entry: os.path.basename(entry.path))
        return entries

    def _describe(self, parent: str, item: os.DirEntry) -> DirEntry:
        """Inspect one scandir item, capturing per-entry stat failures."""
        full_path = os.path.join(parent, item.name)
        try:
            return DirEntry(path=full_path, is_dir=item.is_dir(follow_symlinks=self.follow_symlinks))
        except OSError as e:
            return DirEntry(path=full_path, is_dir=False, error=e.strerror or str(e))

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/fsgraph
    - Linux/Mac: ~/.fsgraph

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def resolve_query_path(path: str, root: str) -> str:
    """
    Resolve a query path against the graph root.

    Relative paths are interpreted as relative to the root directory,
    absolute paths are only normalized.
    """
    p = os.path.expanduser(path.strip())
    if not os.path.isabs(p):
        p = os.path.join(root, p)
    return os.path.normpath(p)
