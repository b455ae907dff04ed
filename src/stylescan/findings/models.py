"""Finding data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List


@dataclass
class RawFinding:
    """A single flagged line produced by the check engine (before grouping)."""

    rule_id: str
    rule_name: str
    message: str
    severity: str
    category: str
    file: str
    line_no: int  # 0-based index; file rules report 0
    is_file_rule: bool = False


@dataclass
class Finding:
    """All the lines one rule flagged, severity-gated for output."""

    rule_id: str
    rule_name: str
    message: str
    severity: str
    category: str
    file: str
    lines: List[int] = field(default_factory=list)  # 0-based, in file order
    is_file_rule: bool = False
    is_blocking: bool = True  # does this finding cause exit code 1?

    @property
    def display_lines(self) -> List[int]:
        """1-based line numbers for people."""
        return [n + 1 for n in self.lines]


@dataclass
class CheckResult:
    """Complete result of checking one file."""

    file: str = ""
    findings: List[Finding] = field(default_factory=list)
    lines_scanned: int = 0
    rules_run: int = 0
    type_names: FrozenSet[str] = frozenset()
    blocked: bool = False
    check_duration_ms: float = 0.0

    @property
    def total_findings(self) -> int:
        return len(self.findings)

    @property
    def flagged_lines(self) -> int:
        return sum(len(f.lines) for f in self.findings if not f.is_file_rule)

    @property
    def blocking_findings(self) -> List[Finding]:
        return [f for f in self.findings if f.is_blocking]

    @property
    def informational_findings(self) -> List[Finding]:
        return [f for f in self.findings if not f.is_blocking]

    def by_category(self, category: str) -> List[Finding]:
        return [f for f in self.findings if f.category == category]
