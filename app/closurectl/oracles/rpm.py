"""rpm package oracle.

Lists package contents with ``rpm -ql``. Used when dpkg is absent or
does not know the package.
"""

import logging
import subprocess

from closurectl.errors import OracleError
from closurectl.oracles.base import PackageOracle
from closurectl.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


class RpmOracle(PackageOracle):
    """Package oracle backed by rpm.

    Args:
        timeout: Optional subprocess timeout in seconds.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    @property
    def name(self) -> str:
        """Return "rpm" as the backend identifier."""
        return "rpm"

    def is_available(self) -> bool:
        """Check if rpm is available."""
        return command_exists("rpm")

    def list_files(self, package: str) -> list[str] | None:
        """List paths owned by a package via ``rpm -ql``.

        For a package without files rpm prints ``(contains no files)``,
        and for an unknown one ``package foo is not installed`` on stdout
        with a non-zero exit. Neither is a path.

        Args:
            package: Package name.

        Returns:
            Owned paths, or None if rpm does not know the package.

        Raises:
            OracleError: If rpm exceeds the configured timeout.
        """
        try:
            result = run_command(["rpm", "-ql", package], timeout=self._timeout)
        except subprocess.TimeoutExpired as e:
            msg = f"rpm timed out after {self._timeout} seconds listing {package}"
            raise OracleError(msg) from e
        except (FileNotFoundError, OSError) as e:
            logger.debug("rpm could not be executed: %s", e)
            return None

        if not result.success:
            logger.debug("rpm -ql %s failed: %s", package, result.stdout.strip())
            return None

        return [line for line in result.lines() if line.startswith("/")]
