"""Tests for count parsing and request modelling."""

from __future__ import annotations

import pytest

from header.features.head import (
    HeadMode,
    HeadRequest,
    HeadUsageError,
    parse_positive_int,
    resolve_count,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", 1), ("10", 10), ("+7", 7), ("007", 7), ("123456789", 123456789)],
)
def test_parse_positive_int_accepts_positive_decimals(raw: str, expected: int) -> None:
    assert parse_positive_int(raw) == expected


@pytest.mark.parametrize("raw", ["0", "-1", "abc", "", " 5", "5 ", "1_000", "3.5", "٣", "0x10"])
def test_parse_positive_int_rejects_other_input(raw: str) -> None:
    assert parse_positive_int(raw) is None


@pytest.mark.parametrize(
    ("mode", "label"),
    [(HeadMode.LINES, "line"), (HeadMode.BYTES, "byte")],
)
@pytest.mark.parametrize("raw", ["0", "-1", "abc"])
def test_resolve_count_names_offending_input(mode: HeadMode, label: str, raw: str) -> None:
    """Illegal counts fail with a message naming the unit and the input."""

    with pytest.raises(HeadUsageError) as excinfo:
        _ = resolve_count(raw, mode)

    assert str(excinfo.value) == f"illegal {label} count -- {raw}"


def test_request_defaults_to_ten_lines_of_stdin() -> None:
    request = HeadRequest()

    assert request.files == ("-",)
    assert request.mode is HeadMode.LINES
    assert request.count == 10
    assert not request.show_headers


def test_request_byte_count_overrides_line_count() -> None:
    request = HeadRequest(files=("a", "b"), line_count=3, byte_count=5)

    assert request.mode is HeadMode.BYTES
    assert request.count == 5
    assert request.show_headers


@pytest.mark.parametrize(
    "kwargs",
    [{"line_count": 0}, {"line_count": -2}, {"byte_count": 0}],
)
def test_request_rejects_non_positive_counts(kwargs: dict[str, int]) -> None:
    with pytest.raises(ValueError):
        _ = HeadRequest(**kwargs)
