"""Filesystem adapter opening named files or standard input."""

from __future__ import annotations

import sys
from contextlib import AbstractContextManager, nullcontext
from pathlib import Path
from typing import BinaryIO

from header.config.settings import STDIN_PLACEHOLDER

from ...usecases.ports import InputOpener


class LocalInputOpener(InputOpener):
    """Open local files in binary mode; the placeholder name maps to stdin."""

    def __init__(self, stdin: BinaryIO | None = None) -> None:
        self._stdin = stdin

    def open(self, name: str) -> AbstractContextManager[BinaryIO]:
        if name == STDIN_PLACEHOLDER:
            # Standard input is shared with the process and must stay open.
            return nullcontext(self._stdin or sys.stdin.buffer)
        return Path(name).open("rb")


__all__ = ["LocalInputOpener"]
