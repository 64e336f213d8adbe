"""Command line argument options."""

from dataclasses import dataclass
from typing import final


@final
@dataclass(slots=True)
class HeadArgs:
    """Validated command line arguments for a head run."""

    files: list[str]
    lines: int
    bytes: int | None


__all__ = ["HeadArgs"]
