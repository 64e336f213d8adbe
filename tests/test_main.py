"""Smoke tests for unified entry points.

These tests assert that `python -m header` and the console script
both resolve to the CLI's `main` function exposed under `header.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m header` path exposes a `main` callable."""
    m = import_module("header.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `header.ui.cli:main` and is importable."""
    m = import_module("header.ui.cli")
    assert hasattr(m, "main")


def test_package_exposes_version() -> None:
    m = import_module("header")
    assert m.__version__ == "0.1.0"
