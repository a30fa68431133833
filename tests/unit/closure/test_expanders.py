"""Unit tests for the symlink and dynamic-dependency expanders."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

from closurectl.closure.libraries import LibraryExpander
from closurectl.closure.symlinks import SymlinkExpander
from closurectl.oracles.base import LinkerOracle, SystemOracle


class TestSymlinkExpander:
    """Tests for SymlinkExpander."""

    def test_relative_target_joined_to_link_dir(
        self,
        root: Path,
        make_file: Callable[..., str],
        make_link: Callable[[str, str], str],
    ) -> None:
        """Relative targets resolve against the link's directory."""
        make_file("usr/lib/libz.so.1.3")
        link = make_link("usr/lib/libz.so.1", "libz.so.1.3")

        target = SymlinkExpander().expand(link)

        assert target == str(root / "usr" / "lib" / "libz.so.1.3")

    def test_absolute_target(
        self,
        make_file: Callable[..., str],
        make_link: Callable[[str, str], str],
    ) -> None:
        """Absolute targets are returned as-is."""
        real = make_file("usr/bin/python3.12")
        link = make_link("usr/bin/python3", real)

        assert SymlinkExpander().expand(link) == real

    def test_single_level(
        self,
        root: Path,
        make_file: Callable[..., str],
        make_link: Callable[[str, str], str],
    ) -> None:
        """Only one hop of a chain is followed."""
        make_file("c")
        make_link("b", "c")
        a = make_link("a", "b")

        assert SymlinkExpander().expand(a) == str(root / "b")

    def test_regular_file(self, make_file: Callable[..., str]) -> None:
        """Regular files have no symlink edge."""
        assert SymlinkExpander().expand(make_file("etc/passwd")) is None

    def test_directory_skipped(self, root: Path) -> None:
        """Directories are skipped."""
        (root / "etc").mkdir()

        assert SymlinkExpander().expand(str(root / "etc")) is None

    def test_missing_path(self, root: Path) -> None:
        """A path that cannot be stat'ed has no edge."""
        assert SymlinkExpander().expand(str(root / "gone")) is None

    def test_dangling_link_still_expands(
        self, root: Path, make_link: Callable[[str, str], str]
    ) -> None:
        """The expander reports targets regardless of their existence."""
        link = make_link("lib/libx.so", "libx.so.2")

        assert SymlinkExpander().expand(link) == str(root / "lib" / "libx.so.2")


class TestLibraryExpander:
    """Tests for LibraryExpander."""

    def test_queries_linker_oracle(self, make_file: Callable[..., str]) -> None:
        """Regular files are handed to the linker oracle."""
        binary = make_file("bin/ls", mode=0o755)
        linker = MagicMock(spec=LinkerOracle)
        linker.list_dependencies.return_value = ["/lib/libc.so.6"]

        assert LibraryExpander(linker).expand(binary) == ["/lib/libc.so.6"]
        linker.list_dependencies.assert_called_once_with(binary)

    def test_accepts_system_oracle(self, make_file: Callable[..., str]) -> None:
        """A SystemOracle is queried through list_dynamic_dependencies."""
        binary = make_file("bin/cat", mode=0o755)
        oracle = MagicMock(spec=SystemOracle)
        oracle.list_dynamic_dependencies.return_value = ["/lib/libc.so.6"]

        assert LibraryExpander(oracle).expand(binary) == ["/lib/libc.so.6"]

    def test_static_binary_has_no_dependencies(self, make_file: Callable[..., str]) -> None:
        """Not-dynamic answers yield an empty list."""
        binary = make_file("bin/busybox", mode=0o755)
        linker = MagicMock(spec=LinkerOracle)
        linker.list_dependencies.return_value = []

        assert LibraryExpander(linker).expand(binary) == []

    def test_directories_not_queried(self, root: Path) -> None:
        """Directories never reach the oracle."""
        (root / "lib").mkdir()
        linker = MagicMock(spec=LinkerOracle)

        assert LibraryExpander(linker).expand(str(root / "lib")) == []
        linker.list_dependencies.assert_not_called()

    def test_symlinks_not_queried(
        self, make_file: Callable[..., str], make_link: Callable[[str, str], str]
    ) -> None:
        """A symlink to a binary is left for its target to answer."""
        make_file("lib/libz.so.1.3")
        link = make_link("lib/libz.so.1", "libz.so.1.3")
        linker = MagicMock(spec=LinkerOracle)

        assert LibraryExpander(linker).expand(link) == []
        linker.list_dependencies.assert_not_called()
