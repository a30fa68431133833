"""Archival mechanism.

Serializes a manifest into a gzip-compressed tar stream and unpacks
such a stream into a destination directory. Entries are stored
relative to ``/`` and written one by one without recursion, so the
stream holds exactly the manifest.
"""

import logging
import os
import tarfile
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from closurectl.errors import ArchiveError
from closurectl.export.filters import ExtractionFilter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtractReport:
    """Outcome of unpacking an archive stream.

    Attributes:
        extracted: Members written into the destination.
        excluded: Members skipped because of removal patterns.
    """

    extracted: int
    excluded: int


def member_name(path: str) -> str:
    """Return the archive member name for an absolute path."""
    return path.lstrip("/") or "."


def write_archive(paths: Iterable[str], fileobj: BinaryIO) -> int:
    """Write a gzip tar stream containing the given paths.

    Hard links are stored as regular files so that a removal pattern
    applied at extraction can never orphan a link member. Sockets and
    other unarchivable entries are skipped.

    Args:
        paths: Absolute paths, typically a sorted manifest.
        fileobj: Binary stream to write to.

    Returns:
        Number of members written.

    Raises:
        ArchiveError: If a path cannot be read or the stream cannot be written.
    """
    count = 0
    try:
        with tarfile.open(fileobj=fileobj, mode="w|gz") as tar:
            for path in paths:
                info = tar.gettarinfo(path, arcname=member_name(path))
                if info is None:
                    logger.debug("Cannot archive %s (unsupported file type)", path)
                    continue

                if info.islnk():
                    info.type = tarfile.REGTYPE
                    info.linkname = ""
                    info.size = os.stat(path).st_size

                if info.isreg():
                    with open(path, "rb") as f:
                        tar.addfile(info, f)
                else:
                    tar.addfile(info)
                count += 1
    except (OSError, tarfile.TarError) as e:
        raise ArchiveError(f"Failed to write archive: {e}") from e

    logger.debug("Archived %d member(s)", count)
    return count


def extract_archive(
    fileobj: BinaryIO,
    destination: Path,
    exclusion: ExtractionFilter | None = None,
) -> ExtractReport:
    """Unpack a gzip tar stream into a destination directory.

    Permissions, timestamps and symlinks are preserved; ownership is
    restored when running as root.

    Args:
        fileobj: Binary stream positioned at the start of the archive.
        destination: Existing directory to unpack into.
        exclusion: Removal patterns to honour.

    Returns:
        ExtractReport with member counts.

    Raises:
        ArchiveError: If the stream is corrupt or a member cannot be written.
    """
    extracted = 0
    excluded = 0
    try:
        with tarfile.open(fileobj=fileobj, mode="r|gz") as tar:
            for member in tar:
                if exclusion is not None and exclusion.excludes(member.name):
                    logger.debug("Excluding %s", member.name)
                    excluded += 1
                    continue
                tar.extract(member, path=destination, filter="fully_trusted")
                extracted += 1
    except (OSError, tarfile.TarError) as e:
        raise ArchiveError(f"Failed to extract archive into {destination}: {e}") from e

    return ExtractReport(extracted=extracted, excluded=excluded)
