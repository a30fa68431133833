"""Oracle implementations for closurectl.

Package oracles map a package name to the files it owns; the linker
oracle maps a binary to the shared libraries it needs.
"""

from closurectl.oracles.base import LinkerOracle, PackageOracle, SystemOracle
from closurectl.oracles.dpkg import DpkgOracle
from closurectl.oracles.ldd import LddOracle, parse_ldd_output
from closurectl.oracles.rpm import RpmOracle

PACKAGE_ORACLES: dict[str, type[PackageOracle]] = {
    "dpkg": DpkgOracle,
    "rpm": RpmOracle,
}


def get_system_oracle(
    backends: list[str] | tuple[str, ...] = ("dpkg", "rpm"),
    timeout: float | None = None,
) -> SystemOracle:
    """Build the oracle capability for the host system.

    Args:
        backends: Package backend names in preference order.
        timeout: Optional subprocess timeout applied to every oracle call.

    Returns:
        SystemOracle wired to the real tools.
    """
    package_oracles = [PACKAGE_ORACLES[name](timeout=timeout) for name in backends]
    return SystemOracle(package_oracles, LddOracle(timeout=timeout))


__all__ = [
    "PACKAGE_ORACLES",
    "DpkgOracle",
    "LddOracle",
    "LinkerOracle",
    "PackageOracle",
    "RpmOracle",
    "SystemOracle",
    "get_system_oracle",
    "parse_ldd_output",
]
