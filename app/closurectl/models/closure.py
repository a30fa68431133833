"""Closure domain models.

This module defines the data structures passed between the seed
builder, the closure walker and the export pipeline.
"""

from dataclasses import dataclass, field
from enum import Enum


class NodeStatus(str, Enum):
    """Resolution status of a path during a closure run.

    Attributes:
        UNVISITED: Path has not been offered to the tracker yet.
        ACCEPTED: Path exists and is part of the closure.
        SKIPPED: Path does not exist (or was offered again after acceptance).
    """

    UNVISITED = "unvisited"
    ACCEPTED = "accepted"
    SKIPPED = "skipped"


class SeedKind(str, Enum):
    """Origin of a seed."""

    PACKAGE = "package"
    FILE = "file"


class EdgeKind(str, Enum):
    """Relation through which a path was discovered.

    Attributes:
        SYMLINK: Target of a symbolic link (including symlinked ancestors).
        LIBRARY: Shared library reported by the linker oracle.
    """

    SYMLINK = "symlink"
    LIBRARY = "library"


@dataclass(frozen=True, slots=True)
class Seed:
    """A starting point for closure computation.

    Attributes:
        kind: Whether value is a package name or a file path.
        value: Package name or filesystem path (never globbed).
    """

    kind: SeedKind
    value: str

    def __post_init__(self) -> None:
        """Validate seed data after initialization."""
        if not self.value:
            msg = f"{self.kind.value.capitalize()} seed cannot be empty"
            raise ValueError(msg)

    @classmethod
    def package(cls, name: str) -> "Seed":
        """Create a package seed."""
        return cls(SeedKind.PACKAGE, name)

    @classmethod
    def file(cls, path: str) -> "Seed":
        """Create an explicit file seed."""
        return cls(SeedKind.FILE, path)


@dataclass(frozen=True, slots=True)
class DependencyEdge:
    """A discovered edge between two closure nodes."""

    source: str
    target: str
    kind: EdgeKind


@dataclass(frozen=True, slots=True)
class NormalizedPath:
    """A path in canonical dedup-key form.

    Attributes:
        path: Absolute path with every symlinked ancestor resolved.
            The final component is left untouched.
        via_links: Symlinked ancestor directories crossed while
            normalizing, in the order they were encountered.
    """

    path: str
    via_links: tuple[str, ...] = ()


@dataclass(slots=True)
class ClosureResult:
    """Output of a single closure run.

    Attributes:
        paths: Accepted paths in acceptance order, each exactly once.
        edges: Edges explored while walking, for diagnostics.
        missing: Paths offered to the tracker that did not exist.
    """

    paths: list[str] = field(default_factory=list)
    edges: list[DependencyEdge] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.paths)

    def __contains__(self, path: object) -> bool:
        return path in self.paths
