"""Oracle interfaces.

Oracles are external tools treated as black-box information sources.
The closure core only talks to them through the interfaces defined
here, so tests can substitute fakes for the real system tools.
"""

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Sequence

logger = logging.getLogger(__name__)


class PackageOracle(ABC):
    """Abstract base class for package manager backends.

    A package oracle maps a package name to the file paths the package
    manager recorded for it.

    Example:
        >>> oracle = DpkgOracle()
        >>> if oracle.is_available():
        ...     files = oracle.list_files("coreutils")
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the backend identifier (e.g. "dpkg")."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the backend's tool is installed on this system."""

    @abstractmethod
    def list_files(self, package: str) -> list[str] | None:
        """List the paths owned by a package.

        Args:
            package: Package name.

        Returns:
            Absolute paths (directories included) in the order the tool
            reported them, or None when the lookup failed (unknown
            package, tool error).
        """


class LinkerOracle(ABC):
    """Abstract base class for dynamic-linker introspection."""

    @abstractmethod
    def list_dependencies(self, path: str) -> list[str]:
        """List the libraries a binary is linked against.

        Args:
            path: Executable or shared library path.

        Returns:
            Absolute library paths. Empty when the file is not a dynamic
            binary, which is not an error.
        """


class SystemOracle:
    """Combined oracle capability used by the closure core.

    Wraps an ordered list of package backends and a linker oracle
    behind the two queries the resolver needs.

    Args:
        package_oracles: Package backends in preference order.
        linker: Linker oracle for dynamic dependencies.
    """

    def __init__(self, package_oracles: Sequence[PackageOracle], linker: LinkerOracle) -> None:
        self._package_oracles = list(package_oracles)
        self._linker = linker

    @property
    def package_oracles(self) -> list[PackageOracle]:
        """Package backends in preference order."""
        return list(self._package_oracles)

    def list_package_files(self, package: str) -> list[str]:
        """List the non-directory paths a package owns.

        Backends are tried in preference order. A backend whose tool is
        missing is skipped; a backend whose lookup fails or reports no
        files for this package falls through to the next one.

        Args:
            package: Package name.

        Returns:
            Paths suitable as closure seeds. Empty if no backend knows
            the package.
        """
        for oracle in self._package_oracles:
            if not oracle.is_available():
                logger.debug("Package backend %s not available", oracle.name)
                continue

            files = oracle.list_files(package)
            if not files:
                logger.debug("%s has no files for package %s", oracle.name, package)
                continue

            seeds = [path for path in files if not _is_plain_directory(path)]
            logger.debug(
                "%s lists %d file(s) for %s (%d directories dropped)",
                oracle.name,
                len(seeds),
                package,
                len(files) - len(seeds),
            )
            return seeds

        logger.info("No package backend knows %s, skipping", package)
        return []

    def list_dynamic_dependencies(self, path: str) -> list[str]:
        """List the shared libraries a binary needs."""
        return self._linker.list_dependencies(path)


def _is_plain_directory(path: str) -> bool:
    """Return True for real directories; symlinks to directories are kept."""
    return os.path.isdir(path) and not os.path.islink(path)
