"""CLI commands for closurectl.

This package contains all subcommand implementations.
"""

from closurectl.cli.commands import archive, config, export, extract, manifest

__all__ = ["archive", "config", "export", "extract", "manifest"]
