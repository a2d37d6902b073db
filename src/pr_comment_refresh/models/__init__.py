"""Data models for scanner findings, pull request comments and commit context."""

from .comment import AuthorKind, ExistingComment
from .context import CommitContext
from .finding import Finding, FindingFormatError, FindingSeverity

__all__ = [
    "AuthorKind",
    "CommitContext",
    "ExistingComment",
    "Finding",
    "FindingFormatError",
    "FindingSeverity",
]
