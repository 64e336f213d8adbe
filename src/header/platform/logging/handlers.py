"""
Summary: Rich handler that prints bare log messages to the console.
Why: User-facing errors must read exactly ``<name>: <reason>`` on stderr.
"""

from __future__ import annotations

import logging
from typing import Any, override

from rich.console import ConsoleRenderable
from rich.highlighter import NullHighlighter
from rich.logging import RichHandler
from rich.text import Text
from rich.traceback import Traceback


class PlainMessageRichHandler(RichHandler):
    """Render records as their message only, without time/level/path columns."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        _ = kwargs.setdefault("show_time", False)
        _ = kwargs.setdefault("show_level", False)
        _ = kwargs.setdefault("show_path", False)
        _ = kwargs.setdefault("markup", False)
        _ = kwargs.setdefault("highlighter", NullHighlighter())
        super().__init__(*args, **kwargs)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        text = Text(message)
        if record.levelno >= logging.ERROR:
            text.stylize("red")
        return text

    @override
    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        # No table grid: a table pads every row to the console width.
        del record, traceback
        return message_renderable


__all__ = ["PlainMessageRichHandler"]
