"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure the shared application logger and its stderr console.
Why: Separate handler rendering from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
from typing import Final

from rich.console import Console

from header.config.settings import LOGGER_NAME

from .handlers import PlainMessageRichHandler


def setup_logger(console_level: int = logging.WARNING) -> logging.Logger:
    """Set up and configure the application logger."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    # stderr is resolved per write, so redirected streams are honoured.
    console = Console(stderr=True, soft_wrap=True, highlight=False)
    console_handler = PlainMessageRichHandler(console=console)
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    return logger


logger: Final[logging.Logger] = setup_logger()


__all__ = ["setup_logger", "logger"]
