"""Finding grouping, de-duplication, and severity gating."""

from __future__ import annotations

from typing import Dict, List

from stylescan.config.schema import severity_at_or_above
from stylescan.findings.models import Finding, RawFinding


def aggregate(raw_findings: List[RawFinding], fail_on: str) -> List[Finding]:
    """Group raw findings per rule and apply the severity gate.

    Rules keep the order in which they first reported; each rule's lines are
    de-duplicated and sorted.
    """
    grouped: Dict[str, Finding] = {}

    for raw in raw_findings:
        existing = grouped.get(raw.rule_id)
        if existing is None:
            grouped[raw.rule_id] = Finding(
                rule_id=raw.rule_id,
                rule_name=raw.rule_name,
                message=raw.message,
                severity=raw.severity,
                category=raw.category,
                file=raw.file,
                lines=[raw.line_no],
                is_file_rule=raw.is_file_rule,
                is_blocking=severity_at_or_above(raw.severity, fail_on),
            )
        elif raw.line_no not in existing.lines:
            existing.lines.append(raw.line_no)

    findings = list(grouped.values())
    for finding in findings:
        finding.lines.sort()
    return findings
