"""Adapters for the head feature."""

from .filesystem.local import LocalInputOpener

__all__ = ["LocalInputOpener"]
