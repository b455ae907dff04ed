"""Core check engine — orchestrates read, annotate, rules, and aggregation."""

from __future__ import annotations

import time
from pathlib import Path
from typing import List

from stylescan.config.schema import StyleScanConfig
from stylescan.findings.aggregator import aggregate
from stylescan.findings.models import CheckResult, RawFinding
from stylescan.rules.registry import RuleRegistry
from stylescan.source.annotator import annotate
from stylescan.source.facts import AnnotatedFile
from stylescan.source.reader import read_source


class CheckError(Exception):
    """Raised when a rule fails internally."""


def check(
    source: AnnotatedFile,
    config: StyleScanConfig,
    registry: RuleRegistry,
    *,
    path: str = "",
) -> CheckResult:
    """Run every enabled rule over *source*. Returns a CheckResult."""
    start = time.perf_counter()

    rules = registry.enabled_rules()
    raw_findings: List[RawFinding] = []

    for rule in rules:
        try:
            lines = rule.run(source, config.style)
        except Exception as exc:
            raise CheckError(f"Rule {rule.id} failed on {path or '<source>'}: {exc}") from exc

        for line_no in lines:
            raw_findings.append(
                RawFinding(
                    rule_id=rule.id,
                    rule_name=rule.name,
                    message=rule.message,
                    severity=rule.severity,
                    category=rule.category,
                    file=path,
                    line_no=line_no,
                    is_file_rule=rule.is_file_rule,
                )
            )

    findings = aggregate(raw_findings, config.scan.fail_on)
    blocked = any(f.is_blocking for f in findings)

    elapsed = (time.perf_counter() - start) * 1000

    return CheckResult(
        file=path,
        findings=findings,
        lines_scanned=len(source),
        rules_run=len(rules),
        type_names=source.type_names,
        blocked=blocked,
        check_duration_ms=round(elapsed, 2),
    )


def annotate_file(path: Path, config: StyleScanConfig) -> AnnotatedFile:
    """Read and annotate *path*. Raises SourceError on read failure."""
    lines = read_source(path, max_size_kb=config.scan.max_file_size_kb)
    return annotate(lines, extra_types=config.style.extra_types)


def check_file(path: Path, config: StyleScanConfig, registry: RuleRegistry) -> CheckResult:
    """Read, annotate, and check one source file."""
    source = annotate_file(path, config)
    return check(source, config, registry, path=str(path))
