"""Commit context provider backed by the wall clock."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from ..models import CommitContext
from .base import CommitContextProvider

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SystemCommitContextProvider(CommitContextProvider):
    """Build commit context from the pull request head sha and the current time."""

    def __init__(self, head_sha: str, *, clock: Clock | None = None) -> None:
        self._head_sha = head_sha
        self._clock = clock or _utcnow

    def get_context(self) -> CommitContext:
        return CommitContext.from_head_sha(self._head_sha, now=self._clock())
