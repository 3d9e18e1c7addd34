from __future__ import annotations

"""
Path Identity Value Type.

Defines the canonical, hashable representation of a filesystem path used
as a vertex key throughout the graph subsystem. Canonicalization is purely
lexical (no filesystem access), so identities are stable for paths that
no longer exist.
"""

import os
from dataclasses import dataclass, field
from typing import Tuple, Union

PathLike = Union["PathId", str, "os.PathLike[str]"]

# -----------------------------------------------------------------------------
# VALUE TYPE
# -----------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class PathId:
    """
    Immutable identity of a filesystem path.

    Equality is exact comparison of the canonical string. Ordering is
    segment-wise, so a directory always sorts before its own children and
    siblings sort by name ("a/b" < "a/b/c" < "a/c").

    Attributes:
        value: Canonical path string (normalized separators, no trailing slash).
    """
    value: str
    parts: Tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _canonical(self.value))
        object.__setattr__(self, "parts", _split_parts(self.value))

    @classmethod
    def of(cls, path: PathLike) -> PathId:
        """Coerce any path-like value into a PathId (identity for PathId)."""
        if isinstance(path, PathId):
            return path
        return cls(os.fspath(path))

    @property
    def name(self) -> str:
        """Final path segment (the root itself for a bare root)."""
        return self.parts[-1] if self.parts else self.value

    def __str__(self) -> str:
        return self.value

    def __fspath__(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathId):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: PathId) -> bool:
        if not isinstance(other, PathId):
            return NotImplemented
        return (self.parts, self.value) < (other.parts, other.value)

    def __le__(self, other: PathId) -> bool:
        if not isinstance(other, PathId):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: PathId) -> bool:
        if not isinstance(other, PathId):
            return NotImplemented
        return other < self

    def __ge__(self, other: PathId) -> bool:
        if not isinstance(other, PathId):
            return NotImplemented
        return self == other or other < self

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _canonical(raw: str) -> str:
    """Lexically normalize a path string."""
    if not raw:
        return "."
    return os.path.normpath(raw)


def _split_parts(value: str) -> Tuple[str, ...]:
    """
    Split a canonical path into ordered segments.

    The anchor (drive and/or leading separator) is kept as the first
    segment so that absolute and relative paths never compare equal.
    """
    drive, rest = os.path.splitdrive(value)
    parts = []
    if rest.startswith(os.sep) or (os.altsep and rest.startswith(os.altsep)):
        parts.append(drive + os.sep)
    elif drive:
        parts.append(drive)
    parts.extend(p for p in rest.replace(os.altsep or os.sep, os.sep).split(os.sep) if p)
    return tuple(parts)
