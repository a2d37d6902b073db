"""Tests for the built-in smoke checks."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from pr_comment_refresh.cli import app
from pr_comment_refresh.cli.smoke import run_smoke_tests


def test_smoke_checks_pass_and_exit_zero(capsys) -> None:
    exit_code = app.main(["smoke"], env={})

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "FAILED" not in output
    assert output.count("PASSED") == 5
    assert "🤖 **Security Issue: SQL injection vulnerability detected**" in output
    assert "*Scanned commit: abcdef1*" in output
    assert "Mock pull request: test/repo#123" in output


def test_smoke_failures_are_printed_but_exit_zero(capsys) -> None:
    exit_code = run_smoke_tests(checks=[("Always broken:", lambda: False)])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "❌ Always broken: FAILED" in output


def test_smoke_module_runs_directly() -> None:
    repo_root = Path(__file__).resolve().parents[2]
    env = dict(os.environ, PYTHONPATH=str(repo_root / "src"), PYTHONIOENCODING="utf-8")

    completed = subprocess.run(
        [sys.executable, "-W", "error::RuntimeWarning", "-m", "pr_comment_refresh.cli.smoke"],
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=env,
        check=False,
    )

    assert completed.returncode == 0, completed.stderr
    assert "RuntimeWarning" not in completed.stderr
    assert completed.stdout.count("PASSED") == 5
