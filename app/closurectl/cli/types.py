"""Shared types and utilities for CLI commands.

This module provides the option declarations and helpers shared by the
export, manifest, archive and extract commands.
"""

from pathlib import Path
from typing import Annotated

import typer

from closurectl.closure.seeds import build_seeds
from closurectl.core.config import ClosurectlConfig, load_config
from closurectl.export.filters import ExtractionFilter
from closurectl.models.closure import Seed
from closurectl.oracles import get_system_oracle
from closurectl.oracles.base import SystemOracle
from closurectl.utils.formatting import print_error

PackagesOption = Annotated[
    list[str] | None,
    typer.Option(
        "--package",
        "-p",
        metavar="PKG",
        help="Installed package to include (repeatable).",
    ),
]
FilesOption = Annotated[
    list[str] | None,
    typer.Option(
        "--file",
        "-f",
        metavar="PATH",
        help="Explicit file to include (repeatable).",
    ),
]
RemoveOption = Annotated[
    list[str] | None,
    typer.Option(
        "--remove",
        "-r",
        metavar="PATTERN",
        help="Pattern excluded when unpacking (repeatable).",
    ),
]
DestinationOption = Annotated[
    Path | None,
    typer.Option(
        "--dest",
        "-d",
        help="Destination directory (default from config, /export).",
    ),
]


def get_config(ctx: typer.Context) -> ClosurectlConfig:
    """Return the configuration loaded by the root callback."""
    obj = ctx.ensure_object(dict)
    config = obj.get("config")
    if config is None:
        config = load_config()
        obj["config"] = config
    return config


def get_oracle(config: ClosurectlConfig) -> SystemOracle:
    """Build the system oracle from configuration."""
    return get_system_oracle(config.package_backends, timeout=config.oracle_timeout)


def require_seeds(
    ctx: typer.Context,
    packages: list[str] | None,
    files: list[str] | None,
) -> list[Seed]:
    """Build seeds, exiting with usage if none were given.

    Raises:
        typer.Exit: With code 1 when neither packages nor files were supplied.
    """
    if not packages and not files:
        print_error("At least one --package or --file is required.")
        typer.echo(ctx.get_usage(), err=True)
        raise typer.Exit(code=1)
    return build_seeds(packages or [], files or [])


def require_destination(ctx: typer.Context, destination: Path) -> Path:
    """Validate the destination directory.

    Raises:
        typer.Exit: With code 1 when the directory does not exist.
    """
    if not destination.is_dir():
        print_error(f"Destination directory does not exist: {destination}")
        typer.echo(ctx.get_usage(), err=True)
        raise typer.Exit(code=1)
    return destination


def get_extraction_filter(config: ClosurectlConfig, remove: list[str] | None) -> ExtractionFilter:
    """Combine configured and command-line removal patterns."""
    return ExtractionFilter([*config.remove, *(remove or [])])
