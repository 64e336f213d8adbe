"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from typing import NoReturn, final, override

from header.config.settings import (
    APP_DESCRIPTION,
    APP_NAME,
    APP_VERSION,
    DEFAULT_LINE_COUNT,
    STDIN_PLACEHOLDER,
)
from header.features.head import HeadMode, HeadUsageError, resolve_count
from header.platform.logging import setup_logger
from header.ui.cli.args.options import HeadArgs

CONFLICT_MESSAGE = "the argument '--lines <LINES>' cannot be used with '--bytes <BYTES>'"


class _RaisingArgumentParser(argparse.ArgumentParser):
    """Report usage errors as exceptions so the caller owns the exit status."""

    @override
    def error(self, message: str) -> NoReturn:
        raise HeadUsageError(message)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = _RaisingArgumentParser(
            prog=APP_NAME,
            description=APP_DESCRIPTION,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        # Counts stay strings here; validation happens after the conflict check.
        _ = parser.add_argument(
            "-n",
            "--lines",
            type=str,
            default=None,
            metavar="LINES",
            help=f"Number of lines to show (default: {DEFAULT_LINE_COUNT})",
        )
        _ = parser.add_argument(
            "-c",
            "--bytes",
            type=str,
            default=None,
            metavar="BYTES",
            help="Number of bytes to show",
        )
        _ = parser.add_argument(
            "files",
            nargs="*",
            metavar="FILE",
            help=f"Input file(s); '{STDIN_PLACEHOLDER}' reads standard input (default: {STDIN_PLACEHOLDER})",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"{APP_NAME} {APP_VERSION}",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> HeadArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            HeadArgs: Validated command line arguments.

        Raises:
            HeadUsageError: If the arguments are malformed or conflicting.
        """
        _ = setup_logger(console_level=logging.WARNING)

        parser = ArgumentParser.create_parser()
        # Options may follow file names, as in "header a.txt -n 2 b.txt".
        parsed_args = parser.parse_intermixed_args(args_list)

        if parsed_args.lines is not None and parsed_args.bytes is not None:
            raise HeadUsageError(CONFLICT_MESSAGE)

        lines = (
            resolve_count(parsed_args.lines, HeadMode.LINES)
            if parsed_args.lines is not None
            else DEFAULT_LINE_COUNT
        )
        byte_count = (
            resolve_count(parsed_args.bytes, HeadMode.BYTES)
            if parsed_args.bytes is not None
            else None
        )

        return HeadArgs(
            files=list(parsed_args.files) or [STDIN_PLACEHOLDER],
            lines=lines,
            bytes=byte_count,
        )
