"""Resolve-then-package pipeline.

Connects seed expansion, the closure walker, the output filter and the
archival mechanism. The run is all-or-nothing: any archival failure
propagates to the caller.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from tempfile import SpooledTemporaryFile
from typing import BinaryIO

from closurectl.closure.seeds import expand_seeds
from closurectl.closure.walker import ClosureWalker
from closurectl.export.archive import extract_archive, write_archive
from closurectl.export.filters import ExtractionFilter, OutputFilter
from closurectl.models.closure import ClosureResult, Seed
from closurectl.oracles.base import SystemOracle

logger = logging.getLogger(__name__)

# Archives larger than this are spooled to disk instead of memory
_SPOOL_MAX_BYTES = 64 * 1024 * 1024


@dataclass(slots=True)
class Manifest:
    """Filtered manifest plus the closure it was built from.

    Attributes:
        paths: Sorted, unique paths to archive.
        closure: Raw closure result (before output filtering).
    """

    paths: list[str]
    closure: ClosureResult = field(default_factory=ClosureResult)

    @property
    def filtered_count(self) -> int:
        """Number of accepted paths dropped by the output filter."""
        return len(self.closure.paths) - len(self.paths)


@dataclass(frozen=True, slots=True)
class ExportReport:
    """Outcome of a full export.

    Attributes:
        destination: Directory the closure was unpacked into.
        archived: Members written to the archive stream.
        extracted: Members written to disk.
        excluded: Members skipped by removal patterns at unpack time.
    """

    destination: Path
    archived: int
    extracted: int
    excluded: int


class ExportPipeline:
    """Computes a manifest and materializes it.

    Args:
        oracle: Package and linker oracle capability.
        output_filter: Closure-time filter. Drops doc/man trees by default.
    """

    def __init__(self, oracle: SystemOracle, *, output_filter: OutputFilter | None = None) -> None:
        self._oracle = oracle
        self._output_filter = output_filter if output_filter is not None else OutputFilter()

    def resolve(self, seeds: Iterable[Seed]) -> ClosureResult:
        """Expand seeds and compute their closure with a fresh tracker."""
        seed_paths = expand_seeds(seeds, self._oracle)
        logger.debug("Resolving closure of %d seed path(s)", len(seed_paths))
        return ClosureWalker(self._oracle).resolve(seed_paths)

    def build_manifest(self, seeds: Iterable[Seed]) -> Manifest:
        """Resolve seeds and apply the output filter."""
        closure = self.resolve(seeds)
        manifest = Manifest(paths=self._output_filter.finalize(closure.paths), closure=closure)
        if manifest.filtered_count:
            logger.debug("Output filter dropped %d path(s)", manifest.filtered_count)
        return manifest

    def archive(self, seeds: Iterable[Seed], fileobj: BinaryIO) -> int:
        """Resolve seeds and write the archive stream.

        Returns:
            Number of archive members written.
        """
        return write_archive(self.build_manifest(seeds).paths, fileobj)

    def export(
        self,
        seeds: Iterable[Seed],
        destination: Path,
        exclusion: ExtractionFilter | None = None,
    ) -> ExportReport:
        """Resolve seeds, archive the manifest and unpack it into destination.

        Removal patterns are applied only while unpacking; the
        intermediate stream holds the whole manifest.

        Args:
            seeds: Package and file seeds.
            destination: Existing directory to unpack into.
            exclusion: Removal patterns for the unpack stage.

        Returns:
            ExportReport with member counts.

        Raises:
            ArchiveError: If archiving or extraction fails.
        """
        manifest = self.build_manifest(seeds)
        return self.materialize(manifest.paths, destination, exclusion)

    def materialize(
        self,
        paths: list[str],
        destination: Path,
        exclusion: ExtractionFilter | None = None,
    ) -> ExportReport:
        """Archive a manifest and unpack it into destination."""
        with SpooledTemporaryFile(max_size=_SPOOL_MAX_BYTES) as spool:
            archived = write_archive(paths, spool)
            spool.seek(0)
            report = extract_archive(spool, destination, exclusion)

        return ExportReport(
            destination=destination,
            archived=archived,
            extracted=report.extracted,
            excluded=report.excluded,
        )
