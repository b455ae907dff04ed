"""Finding models, aggregation, and formatting."""

from stylescan.findings.aggregator import aggregate
from stylescan.findings.formatter import format_finding, format_lines
from stylescan.findings.models import CheckResult, Finding, RawFinding

__all__ = [
    "CheckResult",
    "Finding",
    "RawFinding",
    "aggregate",
    "format_finding",
    "format_lines",
]
