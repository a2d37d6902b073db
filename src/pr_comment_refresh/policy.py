"""Decide what to do with previously posted security comments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .config import RefreshConfig
from .models import ExistingComment, Finding


@dataclass(frozen=True, slots=True)
class RefreshDecision:
    """Outcome of the refresh policy for a single scan."""

    should_delete_old_comments: bool
    should_post_status_message: bool


def evaluate_refresh(
    existing_comments: Sequence[ExistingComment],
    findings: Sequence[Finding],
    config: RefreshConfig,
) -> RefreshDecision:
    """Return whether old comments are replaced and whether a status note is posted.

    Old bot comments are deleted only when refresh is enabled and there is
    something to delete. A status message follows the deletion when the new
    scan produced no findings, so the pull request records that the earlier
    issues are resolved.
    """

    should_delete = bool(existing_comments) and config.refresh_enabled
    return RefreshDecision(
        should_delete_old_comments=should_delete,
        should_post_status_message=should_delete and not findings,
    )
