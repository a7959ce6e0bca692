"""Command-line interface for mediaindex.

This package provides the Typer app for all CLI commands and the Rich console
helpers used for user-facing output.

- app: The Typer application object, used by the ``mediaindex`` entrypoint.
- ConsoleManager: yields a Rich Console configured for the current environment.
"""

from mediaindex.cli.commands import app, main
from mediaindex.cli.console import ConsoleManager

__all__ = ["ConsoleManager", "app", "main"]
