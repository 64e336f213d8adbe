"""Ports for the head feature."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import BinaryIO, Protocol


class InputOpener(Protocol):
    """Open a named input for binary reading."""

    def open(self, name: str) -> AbstractContextManager[BinaryIO]:
        """Return a context manager yielding a readable binary stream.

        Raises ``OSError`` immediately when ``name`` cannot be opened.
        """

        ...


__all__ = ["InputOpener"]
