"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

Severity = Literal["low", "medium", "high"]
Category = Literal["readability", "documentation"]

SEVERITY_ORDER: dict[str, int] = {
    "low": 0,
    "medium": 1,
    "high": 2,
}

DEFAULT_HEADER_FIELDS = [
    "/*",
    "\tName:",
    "\tCopyright:",
    "\tAuthor:",
    "\tDate:",
    "\tDescription:",
]


def severity_at_or_above(finding_sev: str, threshold: str) -> bool:
    """Return True if *finding_sev* is at or above *threshold*."""
    return SEVERITY_ORDER.get(finding_sev, 0) >= SEVERITY_ORDER.get(threshold, 0)


@dataclass
class ScanConfig:
    fail_on: Severity = "high"  # exit 1 on findings at or above this level
    function_checks: bool = True  # function length + lead-in comment rules
    max_file_size_kb: int = 512


@dataclass
class OutputConfig:
    format: Literal["terminal", "json", "sarif"] = "terminal"
    show_summary: bool = True
    max_shown: int = 3  # line numbers listed per finding before "etc"


@dataclass
class RulesConfig:
    enable: List[str] = field(default_factory=list)  # empty = all enabled
    disable: List[str] = field(default_factory=list)


@dataclass
class StyleConfig:
    max_line_length: int = 80
    max_function_lines: int = 25
    max_inline_function_lines: int = 5  # member functions defined in a class body
    comment_stretch: int = 25  # longest run of lines without a comment
    header_fields: List[str] = field(default_factory=lambda: list(DEFAULT_HEADER_FIELDS))
    extra_types: List[str] = field(default_factory=list)  # treated like int/double/...


@dataclass
class StyleScanConfig:
    version: str = "1.0"
    scan: ScanConfig = field(default_factory=ScanConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
    style: StyleConfig = field(default_factory=StyleConfig)
