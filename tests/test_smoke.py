"""Minimal smoke tests for the comment refresh package."""

import pr_comment_refresh
from pr_comment_refresh import cli


def test_package_exposes_version() -> None:
    assert pr_comment_refresh.__version__ == "0.1.0"


def test_cli_exports_entry_points() -> None:
    assert callable(cli.main)
    assert callable(cli.run)
    assert "main" in cli.__all__
