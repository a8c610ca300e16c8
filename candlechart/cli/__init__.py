"""CLI commands for candlechart.

This package provides the command-line interface for rendering candle
files and demo series in the terminal.
"""

from candlechart.cli.main import cli, main

__all__ = ["cli", "main"]
