"""Data structures describing a head run and its per-file outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from header.config.settings import DEFAULT_LINE_COUNT, STDIN_PLACEHOLDER


class HeadMode(str, Enum):
    """Which unit bounds the copied prefix."""

    LINES = "lines"
    BYTES = "bytes"


@dataclass(slots=True, frozen=True)
class HeadRequest:
    """Inputs required to run head over a list of files.

    ``byte_count`` wins over ``line_count`` when both are present.
    """

    files: tuple[str, ...] = (STDIN_PLACEHOLDER,)
    line_count: int = DEFAULT_LINE_COUNT
    byte_count: int | None = None

    def __post_init__(self) -> None:
        if self.line_count <= 0:
            raise ValueError(f"line_count must be positive; received {self.line_count}")
        if self.byte_count is not None and self.byte_count <= 0:
            raise ValueError(f"byte_count must be positive; received {self.byte_count}")

    @property
    def mode(self) -> HeadMode:
        return HeadMode.LINES if self.byte_count is None else HeadMode.BYTES

    @property
    def count(self) -> int:
        """Return the bound that applies to the active mode."""

        return self.line_count if self.byte_count is None else self.byte_count

    @property
    def show_headers(self) -> bool:
        return len(self.files) > 1


@dataclass(slots=True)
class FileResult:
    """Capture what happened to a single file argument."""

    name: str
    success: bool
    bytes_written: int = 0
    error: str | None = None
