"""Where: src/header/config/settings.py
What: Runtime constants shared by the CLI and the head feature.
Why: Keep defaults in one place; the tool reads no config files or env vars.
"""

from __future__ import annotations

from typing import Final

APP_NAME: Final[str] = "header"
APP_VERSION: Final[str] = "0.1.0"
APP_DESCRIPTION: Final[str] = "Python version of the 'head' command"

LOGGER_NAME: Final[str] = APP_NAME

# Line mode is the default when neither count option is supplied.
DEFAULT_LINE_COUNT: Final[int] = 10

# File name that stands for standard input.
STDIN_PLACEHOLDER: Final[str] = "-"

# Lenient decoding: invalid sequences become U+FFFD instead of failing.
TEXT_ENCODING: Final[str] = "utf-8"
DECODE_ERRORS: Final[str] = "replace"

# Upper bound for a single read in byte mode.
READ_CHUNK_SIZE: Final[int] = 64 * 1024


__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "APP_DESCRIPTION",
    "LOGGER_NAME",
    "DEFAULT_LINE_COUNT",
    "STDIN_PLACEHOLDER",
    "TEXT_ENCODING",
    "DECODE_ERRORS",
    "READ_CHUNK_SIZE",
]
