"""
Summary: Parse and validate the line and byte counts given on the command line.
Why: Both options share one positive-integer rule and one error wording.
"""

from __future__ import annotations

import re
from typing import Final

from .errors import HeadUsageError
from .models import HeadMode

_POSITIVE_INT: Final[re.Pattern[str]] = re.compile(r"\+?[0-9]+")

_COUNT_LABELS: Final[dict[HeadMode, str]] = {
    HeadMode.LINES: "line",
    HeadMode.BYTES: "byte",
}


def parse_positive_int(value: str) -> int | None:
    """Return ``value`` as a positive integer, or None when it is not one.

    Only ASCII digits with an optional leading ``+`` are accepted, so
    ``" 5"``, ``"1_000"`` and ``"-3"`` are rejected.
    """

    if not _POSITIVE_INT.fullmatch(value):
        return None
    number = int(value)
    return number if number > 0 else None


def resolve_count(value: str, mode: HeadMode) -> int:
    """Parse a count option, raising ``HeadUsageError`` naming the bad input."""

    number = parse_positive_int(value)
    if number is None:
        raise HeadUsageError(f"illegal {_COUNT_LABELS[mode]} count -- {value}")
    return number


__all__ = ["parse_positive_int", "resolve_count"]
