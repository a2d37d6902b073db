"""Interfaces for the collaborators of the comment refresh service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..models import CommitContext, ExistingComment, Finding


class FindingsProvider(ABC):
    """Source of scanner findings for the commit under review."""

    @abstractmethod
    def get_findings(self) -> List[Finding]:
        """Return the findings reported for the current scan."""


class CommentStore(ABC):
    """Pull request comment storage."""

    @abstractmethod
    def list_bot_comments(self) -> List[ExistingComment]:
        """Return comments previously posted by the security bot."""

    @abstractmethod
    def delete_comment(self, comment_id: int) -> None:
        """Delete the comment with the given identifier."""

    @abstractmethod
    def create_comment(self, body: str) -> int:
        """Post a new comment and return its identifier."""

    def list_changed_files(self) -> Sequence[str] | None:
        """Return paths touched by the pull request, or ``None`` when unknown."""

        return None


class CommitContextProvider(ABC):
    """Supplies the commit reference and scan time for rendered comments."""

    @abstractmethod
    def get_context(self) -> CommitContext:
        """Return the context for the current scan."""
