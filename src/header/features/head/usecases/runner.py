"""Use case printing the leading lines or bytes of each requested input."""

from __future__ import annotations

import sys
from logging import Logger, getLogger
from typing import TextIO

from header.config.settings import LOGGER_NAME

from ..domain.errors import describe_os_error
from ..domain.models import FileResult, HeadMode, HeadRequest
from .copying import copy_bytes, copy_lines, format_file_header
from .ports import InputOpener


class HeadRunner:
    """Process inputs in order, isolating open failures per file."""

    _opener: InputOpener
    _stdout: TextIO | None
    _logger: Logger

    def __init__(
        self,
        *,
        opener: InputOpener,
        stdout: TextIO | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._opener = opener
        self._stdout = stdout
        self._logger = logger or getLogger(LOGGER_NAME)

    def run(self, request: HeadRequest) -> list[FileResult]:
        """Copy each input's prefix to stdout and return per-file results.

        Raises:
            HeadReadError: If reading fails after an input was opened.
        """

        self._logger.debug(
            "Running in %s mode with count %d over %d input(s)",
            request.mode.value,
            request.count,
            len(request.files),
        )
        return [
            self._process_file(request, index, name)
            for index, name in enumerate(request.files)
        ]

    def _process_file(self, request: HeadRequest, index: int, name: str) -> FileResult:
        sink = self._stdout or sys.stdout

        try:
            opened = self._opener.open(name)
        except OSError as e:
            reason = describe_os_error(e)
            self._logger.error("%s: %s", name, reason)
            return FileResult(name=name, success=False, error=reason)

        with opened as source:
            self._logger.debug("Opened %s", name)
            if request.show_headers:
                _ = sink.write(format_file_header(name, index))
            if request.mode is HeadMode.BYTES:
                written = copy_bytes(source, sink, request.count, name=name)
            else:
                written = copy_lines(source, sink, request.count, name=name)

        sink.flush()
        return FileResult(name=name, success=True, bytes_written=written)


__all__ = ["HeadRunner"]
