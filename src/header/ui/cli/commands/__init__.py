"""Command execution package for CLI."""

from header.ui.cli.commands.head import HeadCommand

__all__ = ["HeadCommand"]
