"""Symlink expander.

Follows one level of symbolic link. The walker feeds the returned
target back into the worklist, so chains are expanded one hop at a
time.
"""

import logging
import os
import stat

logger = logging.getLogger(__name__)


class SymlinkExpander:
    """Resolves the target of a symbolic link."""

    def expand(self, path: str) -> str | None:
        """Return the target of a symlink, or None.

        Directories and zero-size entries are skipped. A relative
        target is joined to the directory containing the link, not to
        the working directory.

        Args:
            path: Absolute path of an accepted node.

        Returns:
            Absolute (not yet normalized) target path, or None if the
            path is not a symlink.
        """
        try:
            info = os.lstat(path)
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            return None

        if stat.S_ISDIR(info.st_mode) or info.st_size == 0:
            return None
        if not stat.S_ISLNK(info.st_mode):
            return None

        try:
            target = os.readlink(path)
        except OSError as e:
            logger.debug("Cannot read link %s: %s", path, e)
            return None

        if not os.path.isabs(target):
            target = os.path.join(os.path.dirname(path), target)
        return target
