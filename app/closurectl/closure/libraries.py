"""Dynamic-dependency expander.

Asks the linker oracle which shared libraries a binary needs.
"""

import logging
import os

from closurectl.oracles.base import LinkerOracle, SystemOracle

logger = logging.getLogger(__name__)


class LibraryExpander:
    """Yields the shared libraries an accepted path depends on.

    Args:
        oracle: Anything providing ``list_dynamic_dependencies`` or a
            plain LinkerOracle.
    """

    def __init__(self, oracle: SystemOracle | LinkerOracle) -> None:
        if isinstance(oracle, LinkerOracle):
            self._query = oracle.list_dependencies
        else:
            self._query = oracle.list_dynamic_dependencies

    def expand(self, path: str) -> list[str]:
        """Return library paths for a binary.

        Only regular files are handed to the oracle. A symlink yields
        nothing here; its target is expanded when the walker reaches it.
        Anything the oracle reports as not dynamic yields an empty list.

        Args:
            path: Absolute path of an accepted node.

        Returns:
            Absolute library paths.
        """
        if os.path.islink(path) or not os.path.isfile(path):
            return []

        libraries = self._query(path)
        if libraries:
            logger.debug("%s links %d librar(ies)", path, len(libraries))
        return libraries
