"""Models for comments already posted on a pull request."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class AuthorKind(str, Enum):
    """Account type of a comment author, as reported by GitHub."""

    BOT = "Bot"
    USER = "User"


@dataclass(frozen=True, slots=True)
class ExistingComment:
    """A comment previously posted on the pull request."""

    id: int
    author_kind: AuthorKind
    body: str

    @property
    def is_bot(self) -> bool:
        return self.author_kind is AuthorKind.BOT

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "ExistingComment":
        """Build a comment from a GitHub issue comment payload."""

        user = payload.get("user") or {}
        author_kind = AuthorKind.BOT if user.get("type") == AuthorKind.BOT.value else AuthorKind.USER
        return cls(
            id=int(payload["id"]),
            author_kind=author_kind,
            body=str(payload.get("body") or ""),
        )
