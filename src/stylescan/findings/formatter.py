"""Human-readable diagnostic text for findings."""

from __future__ import annotations

from stylescan.findings.models import Finding

DEFAULT_MAX_SHOWN = 3


def format_lines(lines: list[int], max_shown: int = DEFAULT_MAX_SHOWN) -> str:
    """Render 1-based line numbers, capped for student focus.

    Example: ``[3, 8, 12, 40]`` → ``lines 3, 8, 12, etc``
    """
    if len(lines) == 1:
        return f"line {lines[0]}"
    max_shown = max(max_shown, 1)
    shown = ", ".join(str(n) for n in lines[:max_shown])
    suffix = ", etc" if len(lines) > max_shown else ""
    return f"lines {shown}{suffix}"


def format_finding(finding: Finding, max_shown: int = DEFAULT_MAX_SHOWN) -> str:
    """``Line is too long (lines 3, 8, 12, etc).`` — file rules print bare."""
    if finding.is_file_rule or not finding.lines:
        return finding.message
    return f"{finding.message} ({format_lines(finding.display_lines, max_shown)})."
