"""Command-line interface implementation for the comment refresh tooling."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Mapping, Sequence

from ..adapters import (
    CommentStore,
    FileFindingsProvider,
    FindingsLoadError,
    GitHubApiError,
    GitHubCommentStore,
    InMemoryCommentStore,
    SystemCommitContextProvider,
)
from ..config import ConfigError, GitHubSettings, RefreshConfig, parse_bool
from ..service import CommentRefreshService, RefreshResult
from .github_reporting import write_summary


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""

    parser = argparse.ArgumentParser(
        prog="pr-comment-refresh",
        description="Post security findings as pull request comments and refresh old ones.",
    )
    subparsers = parser.add_subparsers(dest="command")

    refresh_parser = subparsers.add_parser(
        "refresh", help="Replace security comments on a pull request with the latest findings."
    )
    refresh_parser.add_argument(
        "--findings",
        type=Path,
        required=True,
        help="Path to the scanner findings report (JSON or YAML).",
    )
    refresh_parser.add_argument(
        "--repo",
        default=None,
        help="Repository in OWNER/NAME form. Defaults to GITHUB_REPOSITORY.",
    )
    refresh_parser.add_argument(
        "--pr",
        type=int,
        default=None,
        help="Pull request number. Defaults to the number in GITHUB_EVENT_PATH.",
    )
    refresh_parser.add_argument(
        "--head-sha",
        default=None,
        help="Head commit sha. Defaults to the pull request head in GITHUB_EVENT_PATH.",
    )
    refresh_parser.add_argument(
        "--token",
        default=None,
        help="GitHub token used to manage comments. Defaults to GITHUB_TOKEN.",
    )
    refresh_parser.add_argument(
        "--api-url",
        default=None,
        help="GitHub REST API base URL. Defaults to GITHUB_API_URL or api.github.com.",
    )
    refresh_parser.add_argument(
        "--refresh",
        choices=["true", "false"],
        default=None,
        help="Delete previous security comments before posting. Defaults to REFRESH_COMMENTS.",
    )
    refresh_parser.add_argument(
        "--summary-path",
        type=Path,
        default=None,
        help="Optional explicit path for the GitHub job summary output.",
    )
    refresh_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the comments that would be posted instead of calling the GitHub API.",
    )
    refresh_parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")

    subparsers.add_parser(
        "smoke", help="Run the built-in comment refresh smoke checks against mock data."
    )

    return parser


def _resolve_settings(args: argparse.Namespace, env: Mapping[str, str]) -> GitHubSettings:
    defaults = GitHubSettings.from_env(env)
    return GitHubSettings(
        repository=args.repo or defaults.repository,
        pull_number=args.pr or defaults.pull_number,
        head_sha=args.head_sha or defaults.head_sha,
        token=args.token or defaults.token,
        api_url=(args.api_url or defaults.api_url).rstrip("/"),
    )


def _resolve_refresh_config(args: argparse.Namespace, env: Mapping[str, str]) -> RefreshConfig:
    config = RefreshConfig.from_env(env)
    if args.refresh is None:
        return config
    return RefreshConfig(
        refresh_enabled=parse_bool(args.refresh, default=True, name="--refresh"),
        silence_mode=config.silence_mode,
    )


def create_comment_store(settings: GitHubSettings, *, dry_run: bool) -> CommentStore:
    """Create the comment store for a live or dry run."""

    if dry_run:
        return InMemoryCommentStore()

    settings.require()
    return GitHubCommentStore(
        settings.repository,
        settings.pull_number,
        settings.token,
        api_url=settings.api_url,
    )


def _print_dry_run(store: InMemoryCommentStore, result: RefreshResult) -> None:
    for comment_id in result.posted_ids:
        print("---")
        print(store.body(comment_id))
    print("---")


def _handle_refresh(args: argparse.Namespace, env: Mapping[str, str]) -> int:
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = _resolve_settings(args, env)
        config = _resolve_refresh_config(args, env)
        store = create_comment_store(settings, dry_run=args.dry_run)
    except ConfigError as exc:
        print(f"Error: {exc}")
        return 2

    service = CommentRefreshService(
        findings_provider=FileFindingsProvider(args.findings),
        comment_store=store,
        context_provider=SystemCommitContextProvider(settings.head_sha or ""),
        config=config,
    )

    try:
        result = service.refresh()
    except (FindingsLoadError, GitHubApiError) as exc:
        print(f"Error: {exc}")
        return 2

    if args.dry_run and isinstance(store, InMemoryCommentStore):
        _print_dry_run(store, result)

    summary_path = args.summary_path
    if summary_path is None and env.get("GITHUB_STEP_SUMMARY"):
        summary_path = Path(env["GITHUB_STEP_SUMMARY"])
    write_summary(result, summary_path)

    print(
        f"Deleted {len(result.deleted_ids)} comments, posted {len(result.posted_ids)} comments"
        f" for commit {result.context.short_sha}."
    )
    return 0


def main(argv: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> int:
    """Entry point used by tests and the ``python -m`` invocation."""

    parser = build_parser()
    args = parser.parse_args(argv)
    environment = os.environ if env is None else env

    if args.command == "refresh":
        return _handle_refresh(args, environment)
    if args.command == "smoke":
        # Imported here so `python -m pr_comment_refresh.cli.smoke` runs a fresh module.
        from .smoke import run_smoke_tests

        return run_smoke_tests()

    parser.print_help()
    return 0


def run() -> None:  # pragma: no cover - thin wrapper for module execution
    """Execute the CLI and exit with the produced status code."""

    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
