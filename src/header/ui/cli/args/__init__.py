"""Command line argument handling package."""

from header.ui.cli.args.parser import ArgumentParser
from header.ui.cli.args.options import HeadArgs

__all__ = ["ArgumentParser", "HeadArgs"]
