"""Adapter layer package for findings, comment stores and commit context."""

from .base import CommentStore, CommitContextProvider, FindingsProvider
from .commit import SystemCommitContextProvider
from .findings import FileFindingsProvider, FindingsLoadError
from .github import GitHubApiError, GitHubCommentStore
from .memory import InMemoryCommentStore, StaticCommitContextProvider, StaticFindingsProvider

__all__ = [
    "CommentStore",
    "CommitContextProvider",
    "FileFindingsProvider",
    "FindingsLoadError",
    "FindingsProvider",
    "GitHubApiError",
    "GitHubCommentStore",
    "InMemoryCommentStore",
    "StaticCommitContextProvider",
    "StaticFindingsProvider",
    "SystemCommitContextProvider",
]
