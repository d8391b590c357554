"""Command-line interface for vectorpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Per-contour bounds and winding direction table
- Reversed-direction column
- Verbose/quiet output modes
- Detailed error reporting
"""

from vectorpath.cli.app import cli, main

__all__ = ["cli", "main"]
