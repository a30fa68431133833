"""Path normalizer and visited tracker.

The tracker is the single source of deduplication for a closure run.
Paths are compared in a canonical form where every symlinked ancestor
directory has been resolved but the final component has not, so the
same file reached through ``/lib`` and ``/usr/lib`` is recorded once
while a symlink itself stays a distinct node.
"""

import logging
import os
import threading
from collections.abc import Iterator

from closurectl.models.closure import NodeStatus, NormalizedPath

logger = logging.getLogger(__name__)


def normalize_path(path: str, cwd: str | None = None) -> NormalizedPath:
    """Normalize a path into its dedup-key form.

    Relative paths are anchored at ``cwd`` (the process working
    directory by default). ``.`` and ``..`` components are applied
    after any symlink before them has been resolved, so ``..`` behaves
    as the kernel would.

    Args:
        path: Absolute or relative path.
        cwd: Base directory for relative paths.

    Returns:
        NormalizedPath with the canonical path and the symlinked
        ancestors crossed on the way.
    """
    if not os.path.isabs(path):
        path = os.path.join(cwd or os.getcwd(), path)

    parts = [part for part in path.split("/") if part]
    if not parts:
        return NormalizedPath("/")

    *ancestors, name = parts
    current = "/"
    links: list[str] = []

    for part in ancestors:
        if part == ".":
            continue
        if part == "..":
            current = os.path.dirname(current)
            continue
        candidate = os.path.join(current, part)
        if os.path.islink(candidate):
            links.append(candidate)
            current = os.path.realpath(candidate)
        else:
            current = candidate

    if name == ".":
        return NormalizedPath(current, tuple(links))
    if name == "..":
        return NormalizedPath(os.path.dirname(current), tuple(links))
    return NormalizedPath(os.path.join(current, name), tuple(links))


class VisitedTracker:
    """Records which paths have been accepted into the closure.

    The set is append-only: a path is added at most once and never
    removed. Acceptance order is preserved for iteration.

    Example:
        >>> tracker = VisitedTracker()
        >>> tracker.accept("/etc/passwd")
        True
        >>> tracker.accept("/etc/passwd")
        False
    """

    def __init__(self) -> None:
        self._accepted: dict[str, None] = {}
        self._skipped: set[str] = set()
        self._lock = threading.Lock()

    def normalize(self, path: str) -> NormalizedPath:
        """Normalize a path into its dedup-key form."""
        return normalize_path(path)

    def accept(self, path: str) -> bool:
        """Accept a path into the closure if it is new and exists.

        Check-and-insert is atomic. A non-existent path is not an
        error; it is simply not accepted. A rejected path leaves the
        tracker unchanged.

        Args:
            path: Normalized absolute path.

        Returns:
            True if the path was recorded, False if it does not exist
            or was accepted before.
        """
        with self._lock:
            if path in self._accepted:
                return False
            if not os.path.exists(path):
                return False
            self._accepted[path] = None
            return True

    def skip(self, path: str) -> None:
        """Record that a path was offered but does not exist.

        Only feeds ``status``; skipped paths never enter the closure.
        """
        with self._lock:
            if path not in self._accepted:
                self._skipped.add(path)

    def status(self, path: str) -> NodeStatus:
        """Return the resolution status of a normalized path."""
        if path in self._accepted:
            return NodeStatus.ACCEPTED
        if path in self._skipped:
            return NodeStatus.SKIPPED
        return NodeStatus.UNVISITED

    @property
    def paths(self) -> tuple[str, ...]:
        """Snapshot of accepted paths in acceptance order."""
        return tuple(self._accepted)

    def __contains__(self, path: object) -> bool:
        return path in self._accepted

    def __len__(self) -> int:
        return len(self._accepted)

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)
