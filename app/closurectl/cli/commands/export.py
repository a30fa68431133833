"""Export command implementation.

Resolves the closure of the given packages and files and unpacks it
into the destination directory.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from closurectl.cli.types import (
    DestinationOption,
    FilesOption,
    PackagesOption,
    RemoveOption,
    get_config,
    get_extraction_filter,
    get_oracle,
    require_destination,
    require_seeds,
)
from closurectl.errors import ArchiveError, OracleError
from closurectl.export.pipeline import ExportPipeline
from closurectl.utils.formatting import print_error, print_success

app = typer.Typer(
    help="Copy packages, files and their closure into a directory.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def export_closure(
    ctx: typer.Context,
    packages: PackagesOption = None,
    files: FilesOption = None,
    remove: RemoveOption = None,
    destination: DestinationOption = None,
    manifest_out: Annotated[
        Path | None,
        typer.Option(
            "--manifest-out",
            "-m",
            help="Also write the manifest (one path per line) to this file.",
        ),
    ] = None,
) -> None:
    """Export the runtime closure into DEST.

    Every file the package manager records for each package, every
    explicit file and all their symlink targets and shared libraries
    are copied. Documentation and man pages are never copied; paths
    matching --remove are dropped while unpacking.
    """
    config = get_config(ctx)
    seeds = require_seeds(ctx, packages, files)
    dest = require_destination(ctx, destination or config.destination)

    pipeline = ExportPipeline(get_oracle(config))
    try:
        manifest = pipeline.build_manifest(seeds)
    except OracleError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if manifest_out is not None:
        try:
            manifest_out.write_bytes(b"".join(os.fsencode(path) + b"\n" for path in manifest.paths))
        except OSError as e:
            print_error(f"Could not write manifest to {manifest_out}: {e}")
            raise typer.Exit(code=1) from e

    try:
        report = pipeline.materialize(
            manifest.paths,
            dest,
            get_extraction_filter(config, remove),
        )
    except ArchiveError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(
        f"Exported {report.extracted} path(s) to {report.destination}"
        + (f" ({report.excluded} removed)" if report.excluded else "")
    )
