"""Public surface for the head feature."""

from .domain.counts import parse_positive_int, resolve_count
from .domain.errors import HeadReadError, HeadUsageError, HeaderError
from .domain.models import FileResult, HeadMode, HeadRequest
from .usecases.runner import HeadRunner

__all__ = [
    "FileResult",
    "HeadMode",
    "HeadReadError",
    "HeadRequest",
    "HeadRunner",
    "HeadUsageError",
    "HeaderError",
    "parse_positive_int",
    "resolve_count",
]
