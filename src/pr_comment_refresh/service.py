"""Orchestration layer used by the CLI to refresh pull request comments."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from .adapters import CommentStore, CommitContextProvider, FindingsProvider
from .config import RefreshConfig
from .formatting import (
    finding_header,
    format_posted_comment,
    format_status_message,
    location_marker,
)
from .models import CommitContext, ExistingComment, Finding
from .policy import RefreshDecision, evaluate_refresh

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RefreshResult:
    """Result returned by :class:`CommentRefreshService` runs."""

    decision: RefreshDecision
    context: CommitContext
    findings: List[Finding] = field(default_factory=list)
    deleted_ids: List[int] = field(default_factory=list)
    posted_ids: List[int] = field(default_factory=list)
    skipped: List[Finding] = field(default_factory=list)
    status_posted: bool = False


class CommentRefreshService:
    """Replace the security comments on a pull request with the latest scan results."""

    def __init__(
        self,
        *,
        findings_provider: FindingsProvider,
        comment_store: CommentStore,
        context_provider: CommitContextProvider,
        config: RefreshConfig | None = None,
    ) -> None:
        self._findings_provider = findings_provider
        self._comment_store = comment_store
        self._context_provider = context_provider
        self._config = config or RefreshConfig()

    # ------------------------------------------------------------------
    def refresh(self) -> RefreshResult:
        """Execute a refresh run and return what was deleted and posted."""

        existing = self._comment_store.list_bot_comments()
        findings = self._filter_to_changed_files(self._findings_provider.get_findings())
        context = self._context_provider.get_context()

        decision = evaluate_refresh(existing, findings, self._config)
        logger.info(
            "Refresh decision for commit %s: delete_old=%s post_status=%s "
            "(existing=%d findings=%d silence_mode=%s)",
            context.short_sha,
            decision.should_delete_old_comments,
            decision.should_post_status_message,
            len(existing),
            len(findings),
            self._config.silence_mode,
        )

        result = RefreshResult(decision=decision, context=context, findings=list(findings))

        if decision.should_delete_old_comments:
            for comment in existing:
                self._comment_store.delete_comment(comment.id)
                result.deleted_ids.append(comment.id)
            remaining: Sequence[ExistingComment] = ()
        else:
            remaining = existing

        for finding in findings:
            if _already_posted(finding, remaining):
                logger.debug("Skipping already posted finding at %s:%d", finding.file, finding.line)
                result.skipped.append(finding)
                continue
            comment_id = self._comment_store.create_comment(format_posted_comment(finding, context))
            result.posted_ids.append(comment_id)

        if decision.should_post_status_message:
            result.posted_ids.append(self._comment_store.create_comment(format_status_message(context)))
            result.status_posted = True

        return result

    # ------------------------------------------------------------------
    def _filter_to_changed_files(self, findings: Sequence[Finding]) -> List[Finding]:
        changed_files = self._comment_store.list_changed_files()
        if changed_files is None:
            return list(findings)

        allowed = set(changed_files)
        kept = [finding for finding in findings if finding.file in allowed]
        dropped = len(findings) - len(kept)
        if dropped:
            logger.info("Ignoring %d findings outside the files changed by the pull request", dropped)
        return kept


def _already_posted(finding: Finding, comments: Sequence[ExistingComment]) -> bool:
    header = finding_header(finding)
    marker = location_marker(finding)
    return any(
        comment.body.lstrip().split("\n", 1)[0] == header and marker in comment.body
        for comment in comments
    )


__all__ = ["CommentRefreshService", "RefreshResult"]
