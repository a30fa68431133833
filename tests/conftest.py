"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from closurectl.oracles.base import LinkerOracle, PackageOracle, SystemOracle


class FakePackageOracle(PackageOracle):
    """In-memory package backend."""

    def __init__(
        self,
        name: str,
        packages: dict[str, list[str]],
        available: bool = True,
    ) -> None:
        self._name = name
        self._packages = packages
        self._available = available
        self.queries: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    def is_available(self) -> bool:
        return self._available

    def list_files(self, package: str) -> list[str] | None:
        self.queries.append(package)
        return self._packages.get(package)


class FakeLinkerOracle(LinkerOracle):
    """In-memory linker oracle keyed by path."""

    def __init__(self, dependencies: dict[str, list[str]] | None = None) -> None:
        self._dependencies = dependencies or {}
        self.queries: list[str] = []

    def list_dependencies(self, path: str) -> list[str]:
        self.queries.append(path)
        return list(self._dependencies.get(path, []))


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Symlink-free absolute base directory for fake filesystem trees."""
    return tmp_path.resolve()


@pytest.fixture
def make_file(root: Path) -> Callable[..., str]:
    """Create a file below root and return its absolute path."""

    def _make(relative: str, content: bytes = b"\x7fELF fake", mode: int = 0o644) -> str:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        path.chmod(mode)
        return str(path)

    return _make


@pytest.fixture
def make_link(root: Path) -> Callable[[str, str], str]:
    """Create a symlink below root and return its absolute path."""

    def _make(relative: str, target: str) -> str:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        os.symlink(target, path)
        return str(path)

    return _make


@pytest.fixture
def make_oracle() -> Callable[..., SystemOracle]:
    """Build a SystemOracle from plain dictionaries."""

    def _make(
        dependencies: dict[str, list[str]] | None = None,
        packages: dict[str, list[str]] | None = None,
    ) -> SystemOracle:
        return SystemOracle(
            [FakePackageOracle("dpkg", packages or {})],
            FakeLinkerOracle(dependencies),
        )

    return _make


@pytest.fixture
def ldd_dynamic_output() -> str:
    """Sample ldd output for a dynamically linked binary."""
    return (
        "\tlinux-vdso.so.1 (0x00007ffc8a5f3000)\n"
        "\tlibselinux.so.1 => /lib/x86_64-linux-gnu/libselinux.so.1 (0x00007f3b1a6c4000)\n"
        "\tlibc.so.6 => /lib/x86_64-linux-gnu/libc.so.6 (0x00007f3b1a400000)\n"
        "\tlibpcre2-8.so.0 => /lib/x86_64-linux-gnu/libpcre2-8.so.0 (0x00007f3b1a369000)\n"
        "\t/lib64/ld-linux-x86-64.so.2 (0x00007f3b1a72c000)\n"
    )


@pytest.fixture
def ldd_static_output() -> str:
    """Sample ldd output for a statically linked binary."""
    return "\tstatically linked\n"


@pytest.fixture
def dpkg_list_output() -> str:
    """Sample dpkg -L output."""
    return """/.
/bin
/bin/cat
/bin/ls
/usr
/usr/share/doc/coreutils
/usr/share/doc/coreutils/copyright
/usr/share/man/man1/ls.1.gz
package diverts others to: /usr/bin/ls.distrib
"""
