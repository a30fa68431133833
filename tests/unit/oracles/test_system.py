"""Unit tests for SystemOracle and backend selection."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

from closurectl.oracles import DpkgOracle, LddOracle, RpmOracle, get_system_oracle
from closurectl.oracles.base import LinkerOracle, PackageOracle, SystemOracle


def _backend(
    name: str,
    files: list[str] | None,
    available: bool = True,
) -> MagicMock:
    """Create a mock package backend."""
    backend = MagicMock(spec=PackageOracle)
    backend.name = name
    backend.is_available.return_value = available
    backend.list_files.return_value = files
    return backend


class TestListPackageFiles:
    """Tests for SystemOracle.list_package_files."""

    def test_primary_backend_wins(self, make_file: Callable[..., str]) -> None:
        """The first backend that knows the package is used."""
        ls = make_file("bin/ls")
        dpkg = _backend("dpkg", [ls])
        rpm = _backend("rpm", ["/usr/bin/ls"])

        oracle = SystemOracle([dpkg, rpm], MagicMock(spec=LinkerOracle))

        assert oracle.list_package_files("coreutils") == [ls]
        rpm.list_files.assert_not_called()

    def test_falls_back_when_tool_missing(self) -> None:
        """An unavailable backend is skipped without being queried."""
        dpkg = _backend("dpkg", ["/bin/ls"], available=False)
        rpm = _backend("rpm", ["/usr/bin/ls"])

        oracle = SystemOracle([dpkg, rpm], MagicMock(spec=LinkerOracle))

        assert oracle.list_package_files("coreutils") == ["/usr/bin/ls"]
        dpkg.list_files.assert_not_called()

    def test_falls_back_when_lookup_fails(self) -> None:
        """A backend that does not know the package falls through."""
        dpkg = _backend("dpkg", None)
        rpm = _backend("rpm", ["/usr/bin/ls"])

        oracle = SystemOracle([dpkg, rpm], MagicMock(spec=LinkerOracle))

        assert oracle.list_package_files("coreutils") == ["/usr/bin/ls"]
        dpkg.list_files.assert_called_once_with("coreutils")

    def test_falls_back_when_lookup_empty(self) -> None:
        """An empty listing is treated like a failed lookup."""
        dpkg = _backend("dpkg", [])
        rpm = _backend("rpm", ["/usr/bin/ls"])

        oracle = SystemOracle([dpkg, rpm], MagicMock(spec=LinkerOracle))

        assert oracle.list_package_files("coreutils") == ["/usr/bin/ls"]

    def test_unknown_everywhere_is_empty(self) -> None:
        """A package no backend knows contributes nothing."""
        oracle = SystemOracle(
            [_backend("dpkg", None), _backend("rpm", None)],
            MagicMock(spec=LinkerOracle),
        )

        assert oracle.list_package_files("nope") == []

    def test_directories_dropped(
        self,
        root: Path,
        make_file: Callable[..., str],
        make_link: Callable[[str, str], str],
    ) -> None:
        """Real directories are removed; files, links and missing paths stay."""
        ls = make_file("bin/ls")
        link = make_link("lib", "usr/lib")
        (root / "usr" / "lib").mkdir(parents=True)
        missing = str(root / "bin" / "gone")

        backend = _backend("dpkg", [str(root / "bin"), ls, link, missing])
        oracle = SystemOracle([backend], MagicMock(spec=LinkerOracle))

        assert oracle.list_package_files("pkg") == [ls, link, missing]

    def test_dynamic_dependencies_delegate(self) -> None:
        """list_dynamic_dependencies forwards to the linker oracle."""
        linker = MagicMock(spec=LinkerOracle)
        linker.list_dependencies.return_value = ["/lib/libc.so.6"]

        oracle = SystemOracle([], linker)

        assert oracle.list_dynamic_dependencies("/bin/ls") == ["/lib/libc.so.6"]


class TestGetSystemOracle:
    """Tests for get_system_oracle factory."""

    def test_default_order(self) -> None:
        """dpkg is preferred over rpm by default."""
        oracle = get_system_oracle()

        backends = oracle.package_oracles
        assert [type(b) for b in backends] == [DpkgOracle, RpmOracle]

    def test_custom_order(self) -> None:
        """Configured order is respected."""
        oracle = get_system_oracle(["rpm"])

        assert [b.name for b in oracle.package_oracles] == ["rpm"]

    def test_linker_is_ldd(self) -> None:
        """The linker oracle is ldd-backed."""
        oracle = get_system_oracle()

        assert isinstance(oracle._linker, LddOracle)
