"""Read-only fact base over an annotated source file.

Every style rule asks its questions here, so that structural answers (is this
a function header, is this a continuation line, ...) are identical across
rules.  Line arguments are 0-based indices; an out-of-range index is a caller
error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterator, Optional, Tuple

from stylescan.source.models import CommentTag, LineRecord
from stylescan.source.scopes import (
    is_label,
    starts_with_close_brace,
    starts_with_open_brace,
)
from stylescan.source.tokenizer import first_token, last_nonspace, last_token, next_token
from stylescan.source.typenames import BUILTIN_TYPES, TYPE_INTRODUCERS

STATEMENT_END = ";"
POINTER = "*"
SCOPE_QUALIFIER = "::"
TEMPLATE_PREFIX = "template"
CASE_LABELS = frozenset({"case", "default"})


def ends_with_semicolon(line: str) -> bool:
    pos = last_nonspace(line)
    return pos >= 0 and line[pos] == STATEMENT_END


def parse_function_header(line: str, is_type: Callable[[str], bool]) -> Optional[str]:
    """Return the function name if *line* reads like a function header.

    Shape: ``<type> [*...] [Qualifier ::] name (``, not ending in ``;``.
    """
    type_name, pos = next_token(line, 0)
    if not is_type(type_name) or ends_with_semicolon(line):
        return None
    name, pos = next_token(line, pos)
    while name == POINTER:
        name, pos = next_token(line, pos)
    symbol, pos = next_token(line, pos)
    if symbol == SCOPE_QUALIFIER:
        name, pos = next_token(line, pos)
        symbol, pos = next_token(line, pos)
    if symbol.startswith("("):
        return name
    return None


@dataclass(frozen=True)
class AnnotatedFile:
    """Lines with their comment tags and effective scope depths, plus the
    names of the types the file declares."""

    records: Tuple[LineRecord, ...] = ()
    type_names: FrozenSet[str] = frozenset()
    builtin_types: FrozenSet[str] = BUILTIN_TYPES

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[LineRecord]:
        return iter(self.records)

    # ---- per-line facts ----

    def text(self, line: int) -> str:
        return self.records[line].text

    def comment(self, line: int) -> CommentTag:
        return self.records[line].comment

    def depth(self, line: int) -> int:
        return self.records[line].depth

    def is_comment(self, line: int) -> bool:
        return self.records[line].is_comment

    def is_blank(self, line: int) -> bool:
        return self.records[line].is_blank

    def first_token(self, line: int) -> str:
        return first_token(self.records[line].text)

    def last_token(self, line: int) -> str:
        return last_token(self.records[line].text)

    def starts_with_open_brace(self, line: int) -> bool:
        return starts_with_open_brace(self.records[line].text)

    def starts_with_close_brace(self, line: int) -> bool:
        return starts_with_close_brace(self.records[line].text)

    def ends_with_semicolon(self, line: int) -> bool:
        return ends_with_semicolon(self.records[line].text)

    # ---- types ----

    def declares_type(self, name: str) -> bool:
        """True if the file itself declares *name* via class/struct."""
        return name in self.type_names

    def is_type_name(self, name: str) -> bool:
        return name in self.builtin_types or name in self.type_names

    # ---- composite predicates ----

    def is_label_line(self, line: int) -> bool:
        return not self.is_comment(line) and is_label(self.text(line))

    def is_mid_block_comment(self, line: int) -> bool:
        """A block-comment line with block-comment lines on both sides."""
        last = len(self.records) - 1
        return (
            self.comment(line) is CommentTag.BLOCK
            and 0 < line < last
            and self.comment(line - 1) is CommentTag.BLOCK
            and self.comment(line + 1) is CommentTag.BLOCK
        )

    def is_continuation(self, line: int) -> bool:
        """True if *line* may continue a statement begun on the line before."""
        if line <= 0 or self.depth(line) != self.depth(line - 1):
            return False
        if self.is_comment(line - 1) or self.is_blank(line - 1):
            return False
        return not self.ends_with_semicolon(line - 1)

    def function_header(self, line: int) -> Optional[str]:
        """Function name declared on *line*, or None if it is not a header."""
        return parse_function_header(self.text(line), self.is_type_name)

    def is_function_header(self, line: int) -> bool:
        return self.function_header(line) is not None

    def is_class_header(self, line: int) -> bool:
        return self.first_token(line) == "class"

    def in_class_body(self, line: int) -> bool:
        """True if *line* sits directly inside a class or struct body.

        Walks upward past comments, blanks, labels, lone opening braces and
        anything at the same depth or deeper; the first line left over is the
        scope opener.
        """
        depth = self.depth(line)
        cursor = line - 1
        while cursor >= 0:
            record = self.records[cursor]
            if (
                record.is_comment
                or record.is_blank
                or record.depth >= depth
                or self.is_label_line(cursor)
                or starts_with_open_brace(record.text)
            ):
                cursor -= 1
                continue
            return first_token(record.text) in TYPE_INTRODUCERS
        return False

    def is_comment_before_case(self, line: int) -> bool:
        """A comment whose next code line is a ``case``/``default`` label."""
        if not self.is_comment(line):
            return False
        for cursor in range(line + 1, len(self.records)):
            if self.is_comment(cursor):
                continue
            return self.first_token(cursor) in CASE_LABELS
        return False

    def is_same_scope(self, start: int, count: int) -> bool:
        """True if the *count* lines after *start* all share its depth."""
        if start < 0 or start + count >= len(self.records):
            return False
        level = self.depth(start)
        return all(self.depth(start + i) == level for i in range(1, count + 1))

    def first_comment_line(self) -> int:
        """Index of the first comment line, or -1 if there is none."""
        for record in self.records:
            if record.is_comment:
                return record.index
        return -1

    def has_lead_in_comment(self, line: int) -> bool:
        """True if a comment (optionally followed by one blank) precedes
        *line*, looking past any ``template <...>`` prefix lines."""
        start = line
        while start > 0 and self.first_token(start - 1) == TEMPLATE_PREFIX:
            start -= 1
        if start < 2:
            return False
        return self.is_comment(start - 1) or (
            self.is_blank(start - 1) and self.is_comment(start - 2)
        )
