"""Dependency-closure resolver.

Starting from seed paths, explores symlink and dynamic-library edges
until no new file is discovered.
"""

from closurectl.closure.libraries import LibraryExpander
from closurectl.closure.seeds import build_seeds, expand_seeds
from closurectl.closure.symlinks import SymlinkExpander
from closurectl.closure.tracker import VisitedTracker, normalize_path
from closurectl.closure.walker import ClosureWalker

__all__ = [
    "ClosureWalker",
    "LibraryExpander",
    "SymlinkExpander",
    "VisitedTracker",
    "build_seeds",
    "expand_seeds",
    "normalize_path",
]
