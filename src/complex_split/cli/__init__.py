"""Command-line interface for complex-split."""

from complex_split.cli.main import app, main

__all__ = ["app", "main"]
