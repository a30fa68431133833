"""Closure walker.

Drives the worklist traversal from seed paths to a fixpoint over two
edge relations: symlink targets and dynamic-library dependencies.
"""

import logging
from collections import deque
from collections.abc import Iterable

from closurectl.closure.libraries import LibraryExpander
from closurectl.closure.symlinks import SymlinkExpander
from closurectl.closure.tracker import VisitedTracker
from closurectl.errors import ClosureError
from closurectl.models.closure import ClosureResult, DependencyEdge, EdgeKind
from closurectl.oracles.base import LinkerOracle, SystemOracle

logger = logging.getLogger(__name__)

# (path, discovered from, via edge kind); seeds have no source
_WorkItem = tuple[str, str | None, EdgeKind | None]


class ClosureWalker:
    """Computes the dependency closure of a set of seed paths.

    A walker owns one VisitedTracker and resolves exactly once; build a
    new walker for every run.

    Args:
        oracle: Oracle providing dynamic dependencies.
        tracker: Visited tracker to populate. A fresh one by default.
        symlinks: Symlink expander. Default instance by default.

    Example:
        >>> walker = ClosureWalker(get_system_oracle())
        >>> result = walker.resolve(["/bin/ls", "/etc/passwd"])
        >>> "/etc/passwd" in result.paths
        True
    """

    def __init__(
        self,
        oracle: SystemOracle | LinkerOracle,
        *,
        tracker: VisitedTracker | None = None,
        symlinks: SymlinkExpander | None = None,
    ) -> None:
        self._tracker = tracker if tracker is not None else VisitedTracker()
        self._symlinks = symlinks if symlinks is not None else SymlinkExpander()
        self._libraries = LibraryExpander(oracle)
        self._resolved = False

    @property
    def tracker(self) -> VisitedTracker:
        """The tracker backing this walker."""
        return self._tracker

    def resolve(self, seeds: Iterable[str]) -> ClosureResult:
        """Walk from the seeds until no new path is discovered.

        Each popped path is normalized and offered to the tracker.
        Rejected paths (missing or already accepted) are not expanded.
        Accepted paths contribute their symlink target and their
        library dependencies to the worklist.

        Args:
            seeds: Seed paths, absolute or relative.

        Returns:
            ClosureResult with every accepted path exactly once.

        Raises:
            ClosureError: If this walker has already resolved.
        """
        if self._resolved:
            msg = "ClosureWalker is single-use; create a new walker to resolve again"
            raise ClosureError(msg)
        self._resolved = True

        result = ClosureResult()
        missing: set[str] = set()
        worklist: deque[_WorkItem] = deque((path, None, None) for path in reversed(list(seeds)))

        while worklist:
            raw, source, kind = worklist.pop()
            normalized = self._tracker.normalize(raw)
            path = normalized.path

            if not self._tracker.accept(path):
                if path not in self._tracker and path not in missing:
                    missing.add(path)
                    self._tracker.skip(path)
                    result.missing.append(path)
                    if source is None:
                        logger.info("Seed %s does not exist, skipping", raw)
                    else:
                        logger.debug("%s (from %s) does not exist, skipping", path, source)
                continue

            result.paths.append(path)
            if source is not None and kind is not None:
                result.edges.append(DependencyEdge(source, path, kind))

            for link in normalized.via_links:
                worklist.append((link, path, EdgeKind.SYMLINK))

            target = self._symlinks.expand(path)
            if target is not None:
                worklist.append((target, path, EdgeKind.SYMLINK))

            for library in self._libraries.expand(path):
                worklist.append((library, path, EdgeKind.LIBRARY))

        logger.debug(
            "Closure complete: %d path(s) accepted, %d missing",
            len(result.paths),
            len(result.missing),
        )
        return result
