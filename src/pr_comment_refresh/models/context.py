"""Commit context attached to every rendered comment."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

SHORT_SHA_LENGTH = 7


def isoformat_utc(moment: datetime) -> str:
    """Render ``moment`` as an ISO-8601 UTC string with millisecond precision."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


@dataclass(frozen=True, slots=True)
class CommitContext:
    """Short commit reference and scan timestamp."""

    short_sha: str
    timestamp: str

    @classmethod
    def from_head_sha(cls, head_sha: str, now: datetime | None = None) -> "CommitContext":
        moment = now or datetime.now(timezone.utc)
        return cls(short_sha=head_sha[:SHORT_SHA_LENGTH], timestamp=isoformat_utc(moment))
