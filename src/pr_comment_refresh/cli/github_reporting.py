"""Helpers for publishing refresh results to GitHub Actions surfaces."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ..models import Finding, FindingSeverity
from ..service import RefreshResult

SEVERITY_ORDER = [
    FindingSeverity.CRITICAL,
    FindingSeverity.HIGH,
    FindingSeverity.MEDIUM,
    FindingSeverity.LOW,
]


def _count_by_severity(findings: Sequence[Finding]) -> dict[FindingSeverity, int]:
    counts = {severity: 0 for severity in SEVERITY_ORDER}
    for finding in findings:
        counts[finding.severity] += 1
    return counts


def format_summary(result: RefreshResult) -> str:
    """Render a Markdown job summary for a refresh run."""

    decision = result.decision
    lines: list[str] = [
        "# Security Comment Refresh",
        "",
        f"**Commit:** {result.context.short_sha}",
        f"**Scan time:** {result.context.timestamp}",
        f"**Findings:** {len(result.findings)}",
        "",
        "| Severity | Findings |",
        "| --- | ---: |",
    ]

    counts = _count_by_severity(result.findings)
    for severity in SEVERITY_ORDER:
        lines.append(f"| {severity.value.title()} | {counts[severity]} |")

    lines.extend(
        [
            "",
            "## Comments",
            "",
            f"- **Old comments deleted:** {len(result.deleted_ids)}"
            + ("" if decision.should_delete_old_comments else " (refresh skipped)"),
            f"- **Finding comments posted:** {len(result.posted_ids) - int(result.status_posted)}",
        ]
    )
    if result.skipped:
        lines.append(f"- **Already posted, skipped:** {len(result.skipped)}")
    if result.status_posted:
        lines.append("- **Status update posted:** all previously reported issues are resolved")

    if result.findings:
        lines.extend(["", "## Findings", ""])
        display_limit = 10
        for finding in result.findings[:display_limit]:
            lines.append(
                f"- **{finding.severity.value.title()}** `{finding.category}` "
                f"{finding.description} _(`{finding.file}:{finding.line}`)_"
            )

        remaining = len(result.findings) - display_limit
        if remaining > 0:
            lines.append(f"- ...and {remaining} more findings.")

    lines.append("")
    return "\n".join(lines)


def write_summary(result: RefreshResult, destination: Path | None) -> None:
    if destination is None:
        return

    content = format_summary(result)
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("a", encoding="utf-8") as handle:
        handle.write(content)
