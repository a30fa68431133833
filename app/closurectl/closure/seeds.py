"""Seed expansion.

Turns package and file seeds into the initial worklist of paths.
Package seeds are expanded through the package oracle; explicit file
seeds are passed through literally (the shell does any globbing).
"""

import logging
import os
from collections.abc import Iterable, Iterator

from closurectl.models.closure import Seed, SeedKind
from closurectl.oracles.base import SystemOracle

logger = logging.getLogger(__name__)


def build_seeds(packages: Iterable[str] = (), files: Iterable[str] = ()) -> list[Seed]:
    """Build seeds from CLI-style package and file lists.

    Packages come first, matching the order the walker should explore.
    """
    return [Seed.package(name) for name in packages] + [Seed.file(path) for path in files]


def expand_seeds(seeds: Iterable[Seed], oracle: SystemOracle) -> list[str]:
    """Expand seeds into seed paths.

    Args:
        seeds: Package and file seeds.
        oracle: Oracle used to list package contents.

    Returns:
        Seed paths in seed order. Paths that do not exist are kept;
        the tracker drops them.
    """
    paths: list[str] = []
    for seed in seeds:
        if seed.kind == SeedKind.PACKAGE:
            paths.extend(oracle.list_package_files(seed.value))
        else:
            paths.extend(_expand_file_seed(seed.value))
    return paths


def _expand_file_seed(path: str) -> Iterator[str]:
    """Yield an explicit file seed, expanding real directories to their contents.

    The archive is written without recursion, so a directory named on
    the command line is replaced by the files and symlinks beneath it.
    Directory symlinks inside the tree are yielded as links, not
    descended into.
    """
    if not os.path.isdir(path) or os.path.islink(path):
        yield path
        return

    logger.debug("Expanding directory seed %s", path)
    for root, dirnames, filenames in os.walk(path):
        for dirname in sorted(dirnames):
            full = os.path.join(root, dirname)
            if os.path.islink(full):
                yield full
        for filename in sorted(filenames):
            yield os.path.join(root, filename)
