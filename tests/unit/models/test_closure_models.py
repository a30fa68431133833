"""Unit tests for closure domain models."""

import pytest
from closurectl.models.closure import (
    ClosureResult,
    DependencyEdge,
    EdgeKind,
    NormalizedPath,
    Seed,
    SeedKind,
)


class TestSeed:
    """Tests for Seed."""

    def test_factories(self) -> None:
        """Factory methods set the kind."""
        assert Seed.package("bash").kind == SeedKind.PACKAGE
        assert Seed.file("/etc/hosts").kind == SeedKind.FILE

    def test_frozen(self) -> None:
        """Seeds are immutable."""
        seed = Seed.file("/etc/hosts")
        with pytest.raises(AttributeError):
            seed.value = "/etc/passwd"  # type: ignore[misc]

    @pytest.mark.parametrize("kind", list(SeedKind))
    def test_empty_value(self, kind: SeedKind) -> None:
        """Empty seeds are rejected."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Seed(kind, "")


class TestClosureResult:
    """Tests for ClosureResult."""

    def test_container_protocol(self) -> None:
        """len and in reflect accepted paths."""
        result = ClosureResult(
            paths=["/bin/ls", "/lib/libc.so.6"],
            edges=[DependencyEdge("/bin/ls", "/lib/libc.so.6", EdgeKind.LIBRARY)],
        )

        assert len(result) == 2
        assert "/bin/ls" in result
        assert "/bin/cat" not in result

    def test_normalized_path_default_links(self) -> None:
        """NormalizedPath carries no links by default."""
        assert NormalizedPath("/bin/ls").via_links == ()
