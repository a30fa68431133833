"""Exclusion filters.

Two separate stages with different timing:

- ``OutputFilter`` runs on the closure before archival and drops
  documentation and manual-page trees, which are never needed at
  runtime.
- ``ExtractionFilter`` holds user-supplied removal patterns and runs
  only while unpacking, so the archive stream still contains the
  paths it excludes.
"""

from collections.abc import Iterable
from fnmatch import fnmatchcase

# Subtrees never shipped
DOC_PREFIXES: tuple[str, ...] = (
    "/usr/share/doc",
    "/usr/share/man",
)


class OutputFilter:
    """Closure-time filter producing the final manifest.

    Args:
        prefixes: Path prefixes to drop. Each matches itself and
            everything beneath it.
    """

    def __init__(self, prefixes: Iterable[str] = DOC_PREFIXES) -> None:
        self._prefixes = tuple(prefix.rstrip("/") for prefix in prefixes)

    @property
    def prefixes(self) -> tuple[str, ...]:
        """Prefixes this filter drops."""
        return self._prefixes

    def excludes(self, path: str) -> bool:
        """Check if a path lies under one of the excluded prefixes."""
        return any(path == prefix or path.startswith(prefix + "/") for prefix in self._prefixes)

    def finalize(self, paths: Iterable[str]) -> list[str]:
        """Build the manifest from accepted closure paths.

        Args:
            paths: Accepted paths, in any order, possibly repeated.

        Returns:
            Sorted, unique paths with excluded subtrees removed.
        """
        return sorted({path for path in paths if not self.excludes(path)})


class ExtractionFilter:
    """Unpack-time filter built from user removal patterns.

    Patterns behave like ``tar --exclude``: leading separators are
    stripped, a pattern may match at any directory boundary of a member
    name, wildcards may match ``/``, and excluding a directory excludes
    its contents.

    Args:
        patterns: Shell-style patterns such as ``/usr/lib/python3*``.

    Example:
        >>> ExtractionFilter(["/usr/include"]).excludes("usr/include/stdio.h")
        True
    """

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        cleaned = (pattern.strip().strip("/") for pattern in patterns)
        self._patterns = tuple(dict.fromkeys(pattern for pattern in cleaned if pattern))

    @property
    def patterns(self) -> tuple[str, ...]:
        """Normalized patterns, without leading separators."""
        return self._patterns

    def __bool__(self) -> bool:
        return bool(self._patterns)

    def excludes(self, name: str) -> bool:
        """Check if an archive member should be skipped.

        Args:
            name: Member name, relative to the archive root.

        Returns:
            True if any pattern matches the member or one of its
            parent directories.
        """
        if not self._patterns:
            return False

        parts = [part for part in name.strip("/").split("/") if part and part != "."]
        for start in range(len(parts)):
            for end in range(start + 1, len(parts) + 1):
                candidate = "/".join(parts[start:end])
                if any(fnmatchcase(candidate, pattern) for pattern in self._patterns):
                    return True
        return False
