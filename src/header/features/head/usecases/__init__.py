"""Use cases for the head feature."""

from .copying import copy_bytes, copy_lines, format_file_header
from .ports import InputOpener
from .runner import HeadRunner

__all__ = [
    "HeadRunner",
    "InputOpener",
    "copy_bytes",
    "copy_lines",
    "format_file_header",
]
