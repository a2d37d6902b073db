"""Finding models produced by the security scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class FindingFormatError(ValueError):
    """Raised when a scanner payload cannot be turned into a finding."""


class FindingSeverity(str, Enum):
    """Severity levels reported by the scanner."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @classmethod
    def parse(cls, value: object) -> "FindingSeverity":
        if isinstance(value, FindingSeverity):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as exc:
            raise FindingFormatError(f"Unknown finding severity: {value!r}") from exc


_REQUIRED_FIELDS = ("file", "line", "severity", "category", "description")


@dataclass(frozen=True, slots=True)
class Finding:
    """A single security issue reported against a file in the pull request."""

    file: str
    line: int
    severity: FindingSeverity
    category: str
    description: str
    exploit_scenario: Optional[str] = None
    recommendation: Optional[str] = None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Finding":
        """Build a finding from a scanner JSON object."""

        if not isinstance(payload, Mapping):
            raise FindingFormatError("Finding entries must be objects.")

        missing = [key for key in _REQUIRED_FIELDS if payload.get(key) in (None, "")]
        if missing:
            raise FindingFormatError(f"Finding is missing required fields: {', '.join(missing)}")

        raw_line = payload["line"]
        if isinstance(raw_line, bool) or (isinstance(raw_line, float) and not raw_line.is_integer()):
            raise FindingFormatError(f"Finding line must be an integer: {raw_line!r}")
        try:
            line = int(raw_line)
        except (TypeError, ValueError) as exc:
            raise FindingFormatError(f"Finding line must be an integer: {raw_line!r}") from exc
        if line < 1:
            raise FindingFormatError(f"Finding line must be positive: {line}")

        return cls(
            file=str(payload["file"]).strip(),
            line=line,
            severity=FindingSeverity.parse(payload["severity"]),
            category=str(payload["category"]).strip(),
            description=str(payload["description"]).strip(),
            exploit_scenario=_optional_text(payload.get("exploit_scenario")),
            recommendation=_optional_text(payload.get("recommendation")),
        )


def _optional_text(value: object | None) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
