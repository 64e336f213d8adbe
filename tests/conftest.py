"""Shared pytest fixtures for head tests."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_CONTENTS: dict[str, bytes] = {
    "empty.txt": b"",
    "one.txt": b"Hello\n",
    "two.txt": b"Two lines.\nFour words.\n",
    "three.txt": b"Three\r\nlines,\r\nfour words.\r\n",
    "ten.txt": b"".join(f"{word}\n".encode() for word in (
        "one", "two", "three", "four", "five",
        "six", "seven", "eight", "nine", "ten",
    )),
    "utf8.txt": "Öne line, four words.\n".encode("utf-8"),
}


@pytest.fixture
def inputs(tmp_path: Path) -> dict[str, Path]:
    """Write the sample input files and return their paths by name."""

    paths: dict[str, Path] = {}
    for name, content in SAMPLE_CONTENTS.items():
        path = tmp_path / name
        _ = path.write_bytes(content)
        paths[name] = path
    return paths
