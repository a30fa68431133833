"""CLI package for closurectl.

This package contains the Typer application and all subcommands.
"""

from closurectl.cli.main import app

__all__ = ["app"]
