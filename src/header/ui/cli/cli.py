"""Command line interface for header."""

import os
import sys
from typing import final

from header.features.head import HeaderError
from header.platform.logging import logger
from header.ui.cli.args import ArgumentParser
from header.ui.cli.commands import HeadCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Open failures on individual files are reported but do not change the
        exit status; only usage and read errors exit non-zero.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            results = HeadCommand(args).execute()
            failed = sum(1 for result in results if not result.success)
            if failed:
                logger.debug("%d of %d input(s) could not be opened", failed, len(results))
            return

        except HeaderError as e:
            logger.error("%s", e)
            sys.exit(e.exit_code)
        except BrokenPipeError:
            # Reader went away (e.g. piped into `head`); nothing left to report.
            _silence_stdout()
            sys.exit(1)
        except KeyboardInterrupt:
            logger.warning("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's exit flush cannot fail again."""

    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through
        ``sys.exit(...)`` inside ``process_command``.
    """
    CommandProcessor.process_command()
    return 0
