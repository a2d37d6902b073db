"""Render findings and status updates as pull request comment bodies."""

from __future__ import annotations

from .models import CommitContext, ExistingComment, Finding

TOOL_LABEL = "ClaudeCode AI Security Analysis"
FINDING_MARKER = "🤖 **Security Issue:"
STATUS_MARKER = "✅ **Security Scan Update**"


def finding_header(finding: Finding) -> str:
    return f"{FINDING_MARKER} {finding.description}**"


def format_finding_comment(finding: Finding, context: CommitContext) -> str:
    """Render a Markdown comment body for ``finding``."""

    lines = [
        finding_header(finding),
        "",
        f"**Severity:** {finding.severity.value}",
        f"**Category:** {finding.category}",
        f"**Tool:** {TOOL_LABEL}",
        f"**Scan Time:** {context.timestamp}",
        f"**Commit:** {context.short_sha}",
    ]

    if finding.exploit_scenario:
        lines.extend(["", f"**Exploit Scenario:** {finding.exploit_scenario}"])
    if finding.recommendation:
        lines.extend(["", f"**Recommendation:** {finding.recommendation}"])

    lines.append("")
    return "\n".join(lines)


def location_marker(finding: Finding) -> str:
    """Hidden HTML comment identifying where a finding was reported."""

    return f"<!-- security-finding: {finding.file}:{finding.line}:{finding.category} -->"


def format_posted_comment(finding: Finding, context: CommitContext) -> str:
    """Render the finding comment followed by its location marker."""

    return f"{format_finding_comment(finding, context)}\n{location_marker(finding)}\n"


def format_status_message(context: CommitContext) -> str:
    """Render the comment posted once every earlier finding is resolved."""

    return "\n".join(
        [
            STATUS_MARKER,
            "",
            "Latest scan found no security issues in the recent changes!",
            "",
            f"*Scanned commit: {context.short_sha}*",
            f"*Scan time: {context.timestamp}*",
        ]
    )


def is_security_comment(comment: ExistingComment) -> bool:
    """Return ``True`` for bot comments previously posted by this tool."""

    if not comment.is_bot:
        return False
    body = comment.body.lstrip()
    return body.startswith(FINDING_MARKER) or body.startswith(STATUS_MARKER)
