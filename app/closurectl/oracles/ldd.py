"""ldd linker oracle.

Runs ``ldd`` on a binary and parses its trace. Typical output::

    linux-vdso.so.1 (0x00007ffd3b5f2000)
    libc.so.6 => /lib/x86_64-linux-gnu/libc.so.6 (0x00007f1c2a200000)
    /lib64/ld-linux-x86-64.so.2 (0x00007f1c2a4b3000)

Static binaries produce ``statically linked`` (or ``not a dynamic
executable`` with a non-zero exit), and contribute no dependencies.
"""

import logging
import subprocess

from closurectl.errors import OracleError
from closurectl.oracles.base import LinkerOracle
from closurectl.utils.shell import run_command

logger = logging.getLogger(__name__)

_ARROW = "=>"
_STATIC_MARKERS = ("statically linked", "not a dynamic executable")


def parse_ldd_output(output: str) -> list[str]:
    """Extract absolute library paths from ldd output.

    For ``name => /resolved/path (addr)`` lines the resolved path wins
    over the bare name. Lines without an arrow contribute their first
    token when it is absolute. Marker lines, unresolved libraries and
    virtual objects such as the vdso are dropped.

    Args:
        output: Raw ldd stdout.

    Returns:
        Library paths in the order ldd reported them, without duplicates.
    """
    libraries: list[str] = []
    seen: set[str] = set()

    for raw in output.splitlines():
        line = raw.strip()
        if not line or any(marker in line for marker in _STATIC_MARKERS):
            continue

        if _ARROW in line:
            name, _, resolved = line.partition(_ARROW)
            tokens = resolved.split()
            if not tokens or tokens[0] == "not":
                logger.warning("Library %s not found by the dynamic linker", name.strip())
                continue
            candidate = tokens[0]
        else:
            candidate = line.split()[0]

        if not candidate.startswith("/"):
            continue
        if candidate not in seen:
            seen.add(candidate)
            libraries.append(candidate)

    return libraries


class LddOracle(LinkerOracle):
    """Linker oracle backed by ``ldd``.

    Args:
        timeout: Optional subprocess timeout in seconds.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    def list_dependencies(self, path: str) -> list[str]:
        """Run ldd on a path and return its library paths.

        A non-zero exit means the file is not a dynamic binary (or ldd
        is not installed) and yields an empty list.

        Args:
            path: Executable or shared library path.

        Returns:
            Absolute library paths.

        Raises:
            OracleError: If ldd exceeds the configured timeout.
        """
        try:
            result = run_command(["ldd", path], timeout=self._timeout)
        except subprocess.TimeoutExpired as e:
            msg = f"ldd timed out after {self._timeout} seconds on {path}"
            raise OracleError(msg) from e
        except (FileNotFoundError, OSError) as e:
            logger.debug("ldd could not be executed on %s: %s", path, e)
            return []

        if not result.success:
            logger.debug("%s is not a dynamic binary", path)
            return []

        return parse_ldd_output(result.stdout)
