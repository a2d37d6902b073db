"""In-memory implementations used for dry runs and the smoke check."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from ..formatting import is_security_comment
from ..models import AuthorKind, CommitContext, ExistingComment, Finding
from .base import CommentStore, CommitContextProvider, FindingsProvider


class StaticFindingsProvider(FindingsProvider):
    """Return a fixed list of findings."""

    def __init__(self, findings: Iterable[Finding] = ()) -> None:
        self._findings = list(findings)

    def get_findings(self) -> List[Finding]:
        return list(self._findings)


class StaticCommitContextProvider(CommitContextProvider):
    def __init__(self, context: CommitContext) -> None:
        self._context = context

    def get_context(self) -> CommitContext:
        return self._context


class InMemoryCommentStore(CommentStore):
    """Comment store holding comments in a dictionary keyed by id.

    Comments created through the store are attributed to the bot, and new
    identifiers continue after the highest seeded one.
    """

    def __init__(
        self,
        comments: Iterable[ExistingComment] = (),
        *,
        changed_files: Sequence[str] | None = None,
    ) -> None:
        self.comments: Dict[int, ExistingComment] = {comment.id: comment for comment in comments}
        self.deleted: List[int] = []
        self.created: List[int] = []
        self._changed_files = list(changed_files) if changed_files is not None else None
        self._next_id = max(self.comments, default=0) + 1

    def list_bot_comments(self) -> List[ExistingComment]:
        return [comment for comment in self.comments.values() if is_security_comment(comment)]

    def delete_comment(self, comment_id: int) -> None:
        if comment_id not in self.comments:
            raise KeyError(f"Unknown comment id: {comment_id}")
        del self.comments[comment_id]
        self.deleted.append(comment_id)

    def create_comment(self, body: str) -> int:
        comment_id = self._next_id
        self._next_id += 1
        self.comments[comment_id] = ExistingComment(
            id=comment_id, author_kind=AuthorKind.BOT, body=body
        )
        self.created.append(comment_id)
        return comment_id

    def list_changed_files(self) -> Sequence[str] | None:
        return self._changed_files

    def body(self, comment_id: int) -> str:
        return self.comments[comment_id].body
