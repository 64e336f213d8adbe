"""Tests for the local filesystem input opener."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from header.features.head.adapters import LocalInputOpener


def test_opens_named_file_in_binary_mode(inputs: dict[str, Path]) -> None:
    opener = LocalInputOpener()

    with opener.open(str(inputs["three.txt"])) as handle:
        assert handle.read() == b"Three\r\nlines,\r\nfour words.\r\n"


def test_placeholder_yields_injected_stdin_without_closing_it() -> None:
    stdin = io.BytesIO(b"piped\n")
    opener = LocalInputOpener(stdin=stdin)

    with opener.open("-") as handle:
        assert handle is stdin

    assert not stdin.closed


def test_missing_file_raises_immediately(tmp_path: Path) -> None:
    opener = LocalInputOpener()

    with pytest.raises(FileNotFoundError):
        _ = opener.open(str(tmp_path / "absent.txt"))


def test_directory_cannot_be_opened(tmp_path: Path) -> None:
    opener = LocalInputOpener()

    with pytest.raises(OSError):
        _ = opener.open(str(tmp_path))
