"""Archive command implementation.

Writes the closure as a gzip tar stream on stdout, for piping into
``closurectl extract`` or ``tar xzf -``.
"""

import typer

from closurectl.cli.types import FilesOption, PackagesOption, get_config, get_oracle, require_seeds
from closurectl.errors import ArchiveError, OracleError
from closurectl.export.pipeline import ExportPipeline
from closurectl.utils.formatting import print_error

app = typer.Typer(
    help="Write the closure as a compressed tar stream to stdout.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def write_stream(
    ctx: typer.Context,
    packages: PackagesOption = None,
    files: FilesOption = None,
) -> None:
    """Resolve the closure and stream it to stdout."""
    config = get_config(ctx)
    seeds = require_seeds(ctx, packages, files)

    stdout = typer.get_binary_stream("stdout")
    try:
        ExportPipeline(get_oracle(config)).archive(seeds, stdout)
        stdout.flush()
    except (ArchiveError, OracleError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
