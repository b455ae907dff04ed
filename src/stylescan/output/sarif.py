"""SARIF v2.1.0 reporter — code scanning annotations, one result per line."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from stylescan import __version__
from stylescan.findings.models import CheckResult

_SEVERITY_MAP = {
    "high": "error",
    "medium": "warning",
    "low": "note",
}


def to_dict(result: CheckResult) -> Dict[str, Any]:
    """Convert CheckResult to a SARIF v2.1.0 dict."""
    rules: List[Dict[str, Any]] = []
    results: List[Dict[str, Any]] = []

    for f in result.findings:
        level = _SEVERITY_MAP.get(f.severity, "warning")
        rules.append({
            "id": f.rule_id,
            "name": f.rule_name,
            "shortDescription": {"text": f.message},
            "defaultConfiguration": {"level": level},
            "properties": {"category": f.category},
        })

        # File rules point at line 1
        for line_no in f.display_lines or [1]:
            results.append({
                "ruleId": f.rule_id,
                "level": level,
                "message": {"text": f.message},
                "locations": [
                    {
                        "physicalLocation": {
                            "artifactLocation": {"uri": result.file},
                            "region": {"startLine": max(line_no, 1)},
                        }
                    }
                ],
            })

    sarif = {
        "$schema": "https://json.schemastore.org/sarif-2.1.0.json",
        "version": "2.1.0",
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": "stylescan",
                        "version": __version__,
                        "rules": rules,
                    }
                },
                "results": results,
            }
        ],
    }
    return sarif


def render(result: CheckResult) -> str:
    """Return SARIF JSON string."""
    return json.dumps(to_dict(result), indent=2)
