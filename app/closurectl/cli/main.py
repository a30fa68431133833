"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from closurectl import __version__
from closurectl.cli.commands import archive, config, export, extract, manifest
from closurectl.core.config import load_config
from closurectl.errors import ConfigError
from closurectl.utils.formatting import configure_logging, print_error

# Create main Typer app
app = typer.Typer(
    name="closurectl",
    help="Export the runtime closure of packages and files for minimal images.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"closurectl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print diagnostics to stderr.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Configuration file (default ~/.config/closurectl/config.toml).",
        ),
    ] = None,
) -> None:
    """closurectl - copy packages and their shared-library closure.

    Resolves every file a package owns, every explicitly named file and,
    transitively, every symlink target and shared library they need,
    then unpacks the result into a destination directory.
    """
    configure_logging(verbose)

    try:
        loaded = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = loaded
    ctx.obj["config_path"] = config_path


# Register commands
app.add_typer(export.app, name="export")
app.add_typer(manifest.app, name="manifest")
app.add_typer(archive.app, name="archive")
app.add_typer(extract.app, name="extract")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
