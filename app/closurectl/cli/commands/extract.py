"""Extract command implementation.

Reads a stream produced by ``closurectl archive`` from stdin and
unpacks it, honouring removal patterns.
"""

import typer

from closurectl.cli.types import (
    DestinationOption,
    RemoveOption,
    get_config,
    get_extraction_filter,
    require_destination,
)
from closurectl.errors import ArchiveError
from closurectl.export.archive import extract_archive
from closurectl.utils.formatting import print_error

app = typer.Typer(
    help="Unpack a closure stream from stdin into a directory.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def read_stream(
    ctx: typer.Context,
    remove: RemoveOption = None,
    destination: DestinationOption = None,
) -> None:
    """Unpack stdin into DEST, skipping paths matching --remove."""
    config = get_config(ctx)
    dest = require_destination(ctx, destination or config.destination)

    try:
        extract_archive(
            typer.get_binary_stream("stdin"),
            dest,
            get_extraction_filter(config, remove),
        )
    except ArchiveError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
