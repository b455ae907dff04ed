"""Rule data model — a check callable or a regex pattern, compiled lazily."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, List, Literal, Optional

from stylescan.config.schema import Category, Severity, StyleConfig
from stylescan.source.facts import AnnotatedFile

# Returns the 0-based indices of the offending lines.
CheckFn = Callable[[AnnotatedFile, StyleConfig], List[int]]


@dataclass
class Rule:
    """A single style rule.

    Built-in rules carry a ``check`` callable over the fact base.  Custom
    rules carry a raw ``pattern`` string so they stay serialisable; the
    compiled regex is built lazily on first access via ``compiled_pattern``.
    """

    id: str
    name: str
    message: str  # printed as "<message> (lines 3, 9, etc)."
    category: Category
    severity: Severity
    check: Optional[CheckFn] = None
    pattern: Optional[str] = None
    scope: Literal["line", "file"] = "line"  # file rules report no line numbers
    include_comments: bool = False  # pattern rules only
    enabled: bool = True

    # --- cached compiled objects (not serialised) ---
    _compiled_pattern: Optional[re.Pattern[str]] = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def compiled_pattern(self) -> Optional[re.Pattern[str]]:
        if self.pattern is None:
            return None
        if self._compiled_pattern is None:
            self._compiled_pattern = re.compile(self.pattern)
        return self._compiled_pattern

    @property
    def is_file_rule(self) -> bool:
        """True if this rule judges the file as a whole."""
        return self.scope == "file"

    @property
    def is_pattern_rule(self) -> bool:
        return self.check is None and self.pattern is not None

    def run(self, source: AnnotatedFile, style: StyleConfig) -> List[int]:
        """Return the offending line indices for *source*."""
        if not self.is_pattern_rule:
            return self.check(source, style) if self.check is not None else []
        cp = self.compiled_pattern
        return [
            record.index
            for record in source
            if (self.include_comments or not record.is_comment)
            and cp.search(record.text)
        ]
