"""Exceptions raised by the head feature."""

from __future__ import annotations


def describe_os_error(error: OSError) -> str:
    """Return the human readable part of an ``OSError``."""

    return error.strerror or str(error)


class HeaderError(Exception):
    """Base class for errors that end a run with a non-zero exit status."""

    exit_code: int = 1


class HeadUsageError(HeaderError):
    """The command line could not be turned into a valid request."""


class HeadReadError(HeaderError):
    """Reading from an already opened input failed."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason


__all__ = ["HeaderError", "HeadReadError", "HeadUsageError", "describe_os_error"]
