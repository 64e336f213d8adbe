"""Command line interface package."""

from header.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
