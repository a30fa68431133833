"""dpkg package oracle.

Lists package contents with ``dpkg -L``. This is the preferred
backend on Debian-derived systems.
"""

import logging
import subprocess

from closurectl.errors import OracleError
from closurectl.oracles.base import PackageOracle
from closurectl.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


class DpkgOracle(PackageOracle):
    """Package oracle backed by dpkg.

    Args:
        timeout: Optional subprocess timeout in seconds.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    @property
    def name(self) -> str:
        """Return "dpkg" as the backend identifier."""
        return "dpkg"

    def is_available(self) -> bool:
        """Check if dpkg is available."""
        return command_exists("dpkg")

    def list_files(self, package: str) -> list[str] | None:
        """List paths owned by a package via ``dpkg -L``.

        ``dpkg -L`` also prints the root entry ``/.`` and diversion notes
        such as ``diverted by foo to: /path``; only plain absolute paths
        other than the root are kept.

        Args:
            package: Package name (optionally with ``:arch`` qualifier).

        Returns:
            Owned paths, or None if dpkg does not know the package.

        Raises:
            OracleError: If dpkg exceeds the configured timeout.
        """
        try:
            result = run_command(["dpkg", "-L", package], timeout=self._timeout)
        except subprocess.TimeoutExpired as e:
            msg = f"dpkg timed out after {self._timeout} seconds listing {package}"
            raise OracleError(msg) from e
        except (FileNotFoundError, OSError) as e:
            logger.debug("dpkg could not be executed: %s", e)
            return None

        if not result.success:
            logger.debug("dpkg -L %s failed: %s", package, result.stderr.strip())
            return None

        return [line for line in result.lines() if line.startswith("/") and line != "/."]
