"""Configuration read from the GitHub Actions environment."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

DEFAULT_API_URL = "https://api.github.com"

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off", ""}


class ConfigError(ValueError):
    """Raised when configuration values are missing or malformed."""


def parse_bool(value: str | None, *, default: bool, name: str = "value") -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {value!r}")


@dataclass(frozen=True, slots=True)
class RefreshConfig:
    """Options controlling how previously posted comments are handled."""

    refresh_enabled: bool = True
    # Carried through for callers; no behavior is attached to it.
    silence_mode: bool = False

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "RefreshConfig":
        return cls(
            refresh_enabled=parse_bool(
                env.get("REFRESH_COMMENTS"), default=True, name="REFRESH_COMMENTS"
            ),
            silence_mode=parse_bool(
                env.get("SILENCE_CLAUDECODE_COMMENTS"),
                default=False,
                name="SILENCE_CLAUDECODE_COMMENTS",
            ),
        )


@dataclass(frozen=True, slots=True)
class GitHubSettings:
    """Pull request coordinates and API access for the comment store."""

    repository: str | None = None
    pull_number: int | None = None
    head_sha: str | None = None
    token: str | None = None
    api_url: str = DEFAULT_API_URL

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "GitHubSettings":
        event = _load_event(env.get("GITHUB_EVENT_PATH"))
        pull_request: Mapping[str, Any] = event.get("pull_request") or {}
        head: Mapping[str, Any] = pull_request.get("head") or {}

        raw_number = pull_request.get("number") or event.get("number")
        try:
            pull_number = int(raw_number) if raw_number else None
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Pull request number must be an integer: {raw_number!r}") from exc

        return cls(
            repository=env.get("GITHUB_REPOSITORY") or None,
            pull_number=pull_number,
            head_sha=head.get("sha") or None,
            token=env.get("GITHUB_TOKEN") or None,
            api_url=(env.get("GITHUB_API_URL") or DEFAULT_API_URL).rstrip("/"),
        )

    def require(self) -> None:
        """Raise :class:`ConfigError` when a value needed for a live run is missing."""

        missing = [
            name
            for name, value in (
                ("repository", self.repository),
                ("pull request number", self.pull_number),
                ("head commit sha", self.head_sha),
                ("token", self.token),
            )
            if not value
        ]
        if missing:
            raise ConfigError(f"Missing GitHub settings: {', '.join(missing)}")
        if self.repository and self.repository.count("/") != 1:
            raise ConfigError(f"Repository must be in OWNER/NAME form: {self.repository}")


def _load_event(path: str | None) -> Mapping[str, Any]:
    if not path:
        return {}

    event_path = Path(path)
    if not event_path.exists():
        return {}

    try:
        data = json.loads(event_path.read_text(encoding="utf-8") or "{}")
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse GitHub event payload '{event_path}': {exc.msg}.") from exc

    if not isinstance(data, Mapping):
        raise ConfigError("GitHub event payload must be an object.")
    return data
