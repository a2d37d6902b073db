"""Integration tests for the ``pr-comment-refresh refresh`` command."""

from __future__ import annotations

import io
import json
from contextlib import redirect_stdout
from pathlib import Path

import pytest

from pr_comment_refresh.adapters import GitHubCommentStore, InMemoryCommentStore
from pr_comment_refresh.cli import app
from pr_comment_refresh.config import GitHubSettings
from pr_comment_refresh.models import AuthorKind, ExistingComment

FINDINGS = [
    {
        "file": "src/test.js",
        "line": 10,
        "severity": "HIGH",
        "category": "sql_injection",
        "description": "SQL injection vulnerability detected",
        "exploit_scenario": "Attacker could execute arbitrary SQL queries",
        "recommendation": "Use parameterized queries",
    }
]


@pytest.fixture
def findings_path(tmp_path: Path) -> Path:
    path = tmp_path / "findings.json"
    path.write_text(json.dumps({"findings": FINDINGS}), encoding="utf-8")
    return path


def invoke_cli(args: list[str], env: dict[str, str] | None = None) -> tuple[int, str]:
    """Execute the CLI with the provided arguments and capture stdout."""

    stdout = io.StringIO()
    with redirect_stdout(stdout):
        exit_code = app.main(args, env=env or {})
    return exit_code, stdout.getvalue()


def test_dry_run_prints_comments(findings_path: Path, tmp_path: Path) -> None:
    summary_path = tmp_path / "summary.md"
    exit_code, output = invoke_cli(
        [
            "refresh",
            "--findings",
            str(findings_path),
            "--head-sha",
            "abcdef123456",
            "--dry-run",
        ],
        env={"GITHUB_STEP_SUMMARY": str(summary_path)},
    )

    assert exit_code == 0, output
    assert "🤖 **Security Issue: SQL injection vulnerability detected**" in output
    assert "**Commit:** abcdef1" in output
    assert "Deleted 0 comments, posted 1 comments for commit abcdef1." in output
    assert "| High | 1 |" in summary_path.read_text(encoding="utf-8")


def test_refresh_uses_configured_store(
    findings_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    store = InMemoryCommentStore(
        [
            ExistingComment(
                id=12345,
                author_kind=AuthorKind.BOT,
                body="🤖 **Security Issue: Previous vulnerability** ...",
            )
        ]
    )
    captured: dict[str, GitHubSettings] = {}

    def factory(settings: GitHubSettings, *, dry_run: bool) -> InMemoryCommentStore:
        captured["settings"] = settings
        return store

    monkeypatch.setattr(app, "create_comment_store", factory)

    exit_code, output = invoke_cli(
        ["refresh", "--findings", str(findings_path), "--repo", "test/repo", "--pr", "123"],
        env={"GITHUB_TOKEN": "t0k3n", "REFRESH_COMMENTS": "true"},
    )

    assert exit_code == 0, output
    assert store.deleted == [12345]
    assert len(store.created) == 1
    assert captured["settings"].repository == "test/repo"
    assert captured["settings"].pull_number == 123
    assert captured["settings"].token == "t0k3n"


def test_refresh_flag_overrides_environment(
    findings_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    store = InMemoryCommentStore(
        [ExistingComment(id=1, author_kind=AuthorKind.BOT, body="🤖 **Security Issue: Old**")]
    )
    monkeypatch.setattr(app, "create_comment_store", lambda settings, *, dry_run: store)

    exit_code, _ = invoke_cli(
        ["refresh", "--findings", str(findings_path), "--refresh", "false"],
        env={"REFRESH_COMMENTS": "true"},
    )

    assert exit_code == 0
    assert store.deleted == []


def test_missing_settings_exit_with_error(findings_path: Path) -> None:
    exit_code, output = invoke_cli(["refresh", "--findings", str(findings_path)])

    assert exit_code == 2
    assert output.startswith("Error: Missing GitHub settings")


def test_invalid_environment_flag_exits_with_error(findings_path: Path) -> None:
    exit_code, output = invoke_cli(
        ["refresh", "--findings", str(findings_path), "--dry-run"],
        env={"REFRESH_COMMENTS": "maybe"},
    )

    assert exit_code == 2
    assert "REFRESH_COMMENTS" in output


def test_unreadable_findings_exit_with_error(tmp_path: Path) -> None:
    exit_code, output = invoke_cli(
        ["refresh", "--findings", str(tmp_path / "missing.json"), "--dry-run"]
    )

    assert exit_code == 2
    assert "Findings report not found" in output


def test_create_comment_store_builds_github_store() -> None:
    settings = GitHubSettings(
        repository="test/repo", pull_number=123, head_sha="abcdef123456", token="t0k3n"
    )

    store = app.create_comment_store(settings, dry_run=False)

    assert isinstance(store, GitHubCommentStore)
    assert isinstance(app.create_comment_store(GitHubSettings(), dry_run=True), InMemoryCommentStore)


def test_no_command_prints_help() -> None:
    exit_code, output = invoke_cli([])

    assert exit_code == 0
    assert "usage: pr-comment-refresh" in output
