"""JSON reporter for CI pipelines and graders."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from stylescan.findings.formatter import format_finding
from stylescan.findings.models import CheckResult


def to_dict(result: CheckResult) -> Dict[str, Any]:
    """Convert CheckResult to a JSON-serialisable dict."""
    findings_list: List[Dict[str, Any]] = []
    for f in result.findings:
        findings_list.append({
            "rule": f.rule_id,
            "rule_name": f.rule_name,
            "severity": f.severity,
            "category": f.category,
            "message": f.message,
            "text": format_finding(f, max_shown=len(f.lines)),
            "is_blocking": f.is_blocking,
            **({} if f.is_file_rule else {"lines": f.display_lines}),
        })

    return {
        "version": "1.0",
        "file": result.file,
        "lines_scanned": result.lines_scanned,
        "rules_run": result.rules_run,
        "total_findings": result.total_findings,
        "blocked": result.blocked,
        "findings": findings_list,
        "declared_types": sorted(result.type_names),
        "check_duration_ms": result.check_duration_ms,
    }


def render(result: CheckResult) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=2)
