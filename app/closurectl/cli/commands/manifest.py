"""Manifest command implementation.

Prints the filtered, sorted closure without archiving anything.
"""

import json
import os
from enum import Enum
from typing import Annotated

import typer

from closurectl.cli.types import FilesOption, PackagesOption, get_config, get_oracle, require_seeds
from closurectl.errors import OracleError
from closurectl.export.pipeline import ExportPipeline, Manifest
from closurectl.utils.formatting import console, print_error

app = typer.Typer(
    help="Print the manifest of paths an export would copy.",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TEXT = "text"
    JSON = "json"


@app.callback(invoke_without_command=True)
def show_manifest(
    ctx: typer.Context,
    packages: PackagesOption = None,
    files: FilesOption = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TEXT,
) -> None:
    """Resolve the closure and print one path per line."""
    config = get_config(ctx)
    seeds = require_seeds(ctx, packages, files)

    try:
        manifest = ExportPipeline(get_oracle(config)).build_manifest(seeds)
    except OracleError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(_to_json(manifest)))
        return

    stdout = typer.get_binary_stream("stdout")
    for path in manifest.paths:
        stdout.write(os.fsencode(path) + b"\n")
    stdout.flush()


def _to_json(manifest: Manifest) -> dict[str, object]:
    """Serialize a manifest with its discovery edges."""
    return {
        "paths": manifest.paths,
        "filtered": manifest.filtered_count,
        "missing": manifest.closure.missing,
        "edges": [
            {"source": edge.source, "target": edge.target, "kind": edge.kind.value}
            for edge in manifest.closure.edges
        ],
    }
