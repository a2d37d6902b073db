from datetime import datetime, timezone

import pytest

from pr_comment_refresh.adapters import InMemoryCommentStore, SystemCommitContextProvider
from pr_comment_refresh.models import AuthorKind, ExistingComment


def test_in_memory_store_tracks_created_and_deleted_comments():
    store = InMemoryCommentStore(
        [
            ExistingComment(id=5, author_kind=AuthorKind.BOT, body="🤖 **Security Issue: Old**"),
            ExistingComment(id=9, author_kind=AuthorKind.USER, body="thanks"),
        ]
    )

    assert [comment.id for comment in store.list_bot_comments()] == [5]

    store.delete_comment(5)
    new_id = store.create_comment("✅ **Security Scan Update**")

    assert new_id == 10
    assert store.deleted == [5]
    assert store.created == [10]
    assert [comment.id for comment in store.list_bot_comments()] == [10]
    assert store.list_changed_files() is None


def test_in_memory_store_rejects_unknown_ids():
    with pytest.raises(KeyError):
        InMemoryCommentStore().delete_comment(1)


def test_system_context_provider_uses_clock():
    provider = SystemCommitContextProvider(
        "abcdef123456",
        clock=lambda: datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc),
    )

    context = provider.get_context()

    assert context.short_sha == "abcdef1"
    assert context.timestamp == "2024-05-01T08:00:00.000Z"
