"""Tests for finding aggregation, message formatting, and output reporters."""

import io
import json

from rich.console import Console

from stylescan.findings.aggregator import aggregate
from stylescan.findings.formatter import format_finding, format_lines
from stylescan.findings.models import CheckResult, Finding, RawFinding
from stylescan.output import json_report, sarif, terminal


def _finding(rule_id="LINE_LENGTH", lines=None, severity="low", category="readability",
             message="Line is too long", is_file_rule=False, is_blocking=False) -> Finding:
    return Finding(
        rule_id=rule_id,
        rule_name=rule_id.title(),
        message=message,
        severity=severity,
        category=category,
        file="main.cpp",
        lines=[2, 7, 11, 40] if lines is None else lines,
        is_file_rule=is_file_rule,
        is_blocking=is_blocking,
    )


def _make_result(findings=None) -> CheckResult:
    """Build a CheckResult with sample data."""
    if findings is None:
        findings = [
            _finding(),
            _finding(
                rule_id="ANY_COMMENTS", lines=[0], severity="high",
                category="documentation", message="File lacks any comment lines!",
                is_file_rule=True, is_blocking=True,
            ),
        ]
    return CheckResult(
        file="main.cpp",
        findings=findings,
        lines_scanned=50,
        rules_run=22,
        type_names=frozenset({"Point"}),
        blocked=any(f.is_blocking for f in findings),
        check_duration_ms=1.5,
    )


def _raw(rule_id, line_no, severity="low"):
    return RawFinding(
        rule_id=rule_id, rule_name=rule_id, message=rule_id, severity=severity,
        category="readability", file="main.cpp", line_no=line_no,
    )


class TestAggregate:
    def test_groups_per_rule_in_first_report_order(self):
        raw = [_raw("B", 4), _raw("A", 1), _raw("B", 2)]
        findings = aggregate(raw, "high")
        assert [f.rule_id for f in findings] == ["B", "A"]
        assert findings[0].lines == [2, 4]

    def test_deduplicates_lines(self):
        findings = aggregate([_raw("A", 3), _raw("A", 3)], "high")
        assert findings[0].lines == [3]

    def test_severity_gate(self):
        findings = aggregate([_raw("A", 0, "medium"), _raw("B", 0, "high")], "high")
        assert [f.is_blocking for f in findings] == [False, True]

    def test_empty(self):
        assert aggregate([], "low") == []


class TestFormatter:
    def test_single_line(self):
        assert format_lines([5]) == "line 5"

    def test_up_to_cap(self):
        assert format_lines([3, 8, 12]) == "lines 3, 8, 12"

    def test_over_cap(self):
        assert format_lines([3, 8, 12, 40]) == "lines 3, 8, 12, etc"
        assert format_lines([3, 8, 12, 40], max_shown=2) == "lines 3, 8, etc"

    def test_cap_of_zero_still_shows_a_line(self):
        assert format_lines([3, 8], max_shown=0) == "lines 3, etc"

    def test_finding_message_is_one_based(self):
        assert format_finding(_finding(lines=[4])) == "Line is too long (line 5)."
        assert format_finding(_finding()) == "Line is too long (lines 3, 8, 12, etc)."

    def test_file_rule_is_bare(self):
        finding = _finding(message="File lacks any comment lines!", lines=[0], is_file_rule=True)
        assert format_finding(finding) == "File lacks any comment lines!"


class TestJsonReport:
    def test_valid_json(self):
        data = json.loads(json_report.render(_make_result()))
        assert data["version"] == "1.0"
        assert data["file"] == "main.cpp"
        assert data["total_findings"] == 2
        assert data["blocked"] is True
        assert data["declared_types"] == ["Point"]

    def test_line_numbers_one_based(self):
        data = json.loads(json_report.render(_make_result()))
        first = data["findings"][0]
        assert first["rule"] == "LINE_LENGTH"
        assert first["lines"] == [3, 8, 12, 41]
        assert first["text"] == "Line is too long (lines 3, 8, 12, 41)."

    def test_file_rule_has_no_lines(self):
        data = json.loads(json_report.render(_make_result()))
        assert "lines" not in data["findings"][1]
        assert data["findings"][1]["is_blocking"] is True

    def test_empty_result(self):
        data = json.loads(json_report.render(CheckResult()))
        assert data["total_findings"] == 0
        assert data["blocked"] is False
        assert data["findings"] == []


class TestSarifReport:
    def test_valid_sarif(self):
        data = json.loads(sarif.render(_make_result()))
        assert data["version"] == "2.1.0"
        assert len(data["runs"]) == 1
        assert data["runs"][0]["tool"]["driver"]["name"] == "stylescan"

    def test_one_result_per_line(self):
        data = json.loads(sarif.render(_make_result()))
        results = data["runs"][0]["results"]
        # 4 flagged lines + 1 file-level finding
        assert len(results) == 5
        lines = [r["locations"][0]["physicalLocation"]["region"]["startLine"] for r in results]
        assert lines == [3, 8, 12, 41, 1]

    def test_severity_mapping(self):
        data = json.loads(sarif.render(_make_result()))
        levels = {r["ruleId"]: r["level"] for r in data["runs"][0]["results"]}
        assert levels == {"LINE_LENGTH": "note", "ANY_COMMENTS": "error"}


class TestTerminalReport:
    def _render(self, result, **kwargs) -> str:
        buf = io.StringIO()
        terminal.render(result, console=Console(file=buf, width=120), **kwargs)
        return buf.getvalue()

    def test_sections_and_messages(self):
        text = self._render(_make_result())
        assert "# Readability #" in text
        assert "# Documentation #" in text
        assert "Line is too long (lines 3, 8, 12, etc)." in text
        assert "File lacks any comment lines!" in text
        assert "FAILED" in text

    def test_max_shown(self):
        text = self._render(_make_result(), max_shown=4)
        assert "(lines 3, 8, 12, 41)." in text

    def test_clean_result(self):
        text = self._render(_make_result(findings=[]))
        assert "No style problems found." in text

    def test_non_blocking_verdict(self):
        text = self._render(_make_result(findings=[_finding()]), show_summary=False)
        assert "below the fail threshold" in text
        assert "Lines scanned" not in text
