"""Command-line entry points for lwctest."""

from .app import CliError, main

__all__ = ["CliError", "main"]
