"""Documentation rules — file header, comment placement and density."""

from __future__ import annotations

from typing import List

from stylescan.config.schema import StyleConfig
from stylescan.rules.models import Rule
from stylescan.source.comments import BLOCK_CLOSE, BLOCK_OPEN, LINE_MARKER
from stylescan.source.facts import AnnotatedFile
from stylescan.source.tokenizer import first_nonspace, is_space, next_token


def check_any_comments(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    return [0] if source.first_comment_line() == -1 else []


def check_header_start(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    """The file should open with its comment header."""
    return [0] if source.first_comment_line() != 0 else []


def check_header_format(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    hits: List[int] = []
    current = source.first_comment_line()
    if current < 0:
        return hits
    for prefix in style.header_fields:
        if current >= len(source):
            # Header cut short by the end of the file
            hits.append(len(source) - 1)
            break
        if not source.text(current).startswith(prefix):
            hits.append(current)
        current += 1
    return hits


def check_endline_runon_comments(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    """A block comment opened after code and left open would derail the
    comment classifier for every following line."""
    hits: List[int] = []
    for record in source.records[1:]:
        if (
            not record.is_comment
            and BLOCK_OPEN in record.text
            and BLOCK_CLOSE not in record.text
        ):
            hits.append(record.index)
    return hits


def check_endline_comments(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    return [
        r.index
        for r in source
        if not r.is_comment and (LINE_MARKER in r.text or BLOCK_OPEN in r.text)
    ]


def check_function_lead_comments(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    return [
        r.index
        for r in source
        if not r.is_comment
        and r.depth == 0
        and source.is_function_header(r.index)
        and not source.has_lead_in_comment(r.index)
    ]


def check_blanks_before_comments(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    hits: List[int] = []
    for i in range(1, len(source)):
        if not source.is_comment(i):
            continue
        prior = i - 1
        if (
            not source.is_blank(prior)
            and not source.is_comment(prior)
            and not source.starts_with_open_brace(prior)
        ):
            hits.append(i)
    return hits


def check_too_few_comments(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    """Flag the middle of any stretch longer than ``comment_stretch`` lines
    that follows a comment without another one."""
    stretch = style.comment_stretch
    total = len(source)
    hits: List[int] = []
    for i in range(total):
        if not source.is_comment(i):
            continue
        end = i + 1
        while end < total:
            end += 1
            if source.is_comment(end - 1):
                break
        if end - i > stretch:
            hits.append(i + stretch // 2)
    return hits


def check_too_many_comments(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    """Comment, statement, blank — twice in a row at one scope level reads as
    commenting every single-line statement."""
    hits: List[int] = []
    for i in range(len(source) - 5):
        if (
            source.is_comment(i)
            and not source.is_comment(i + 1)
            and source.is_blank(i + 2)
            and source.is_comment(i + 3)
            and not source.is_comment(i + 4)
            and source.is_blank(i + 5)
            and source.is_same_scope(i, 5)
        ):
            hits.append(i + 3)
    return hits


def check_start_space_comments(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    hits: List[int] = []
    for record in source:
        text = record.text
        token, pos = next_token(text, 0)
        if token == LINE_MARKER and pos < len(text) and not is_space(text[pos]):
            hits.append(record.index)
    return hits


ANY_COMMENTS = Rule(
    id="ANY_COMMENTS",
    name="Any Comments",
    message="File lacks any comment lines!",
    category="documentation",
    severity="high",
    check=check_any_comments,
    scope="file",
)

HEADER_START = Rule(
    id="HEADER_START",
    name="Header Start",
    message="Misplaced file comment header",
    category="documentation",
    severity="medium",
    check=check_header_start,
)

HEADER_FORMAT = Rule(
    id="HEADER_FORMAT",
    name="Header Format",
    message="Invalid comment header",
    category="documentation",
    severity="medium",
    check=check_header_format,
)

ENDLINE_RUNON_COMMENTS = Rule(
    id="ENDLINE_RUNON_COMMENTS",
    name="End-line Run-on Comments",
    message="End-line run-on comments used!",
    category="documentation",
    severity="high",
    check=check_endline_runon_comments,
)

ENDLINE_COMMENTS = Rule(
    id="ENDLINE_COMMENTS",
    name="End-line Comments",
    message="End-line comments shouldn't be used",
    category="documentation",
    severity="low",
    check=check_endline_comments,
)

FUNCTION_LEAD_COMMENTS = Rule(
    id="FUNCTION_LEAD_COMMENTS",
    name="Function Lead-in Comments",
    message="Functions should have a lead-in comment",
    category="documentation",
    severity="medium",
    check=check_function_lead_comments,
)

BLANKS_BEFORE_COMMENTS = Rule(
    id="BLANKS_BEFORE_COMMENTS",
    name="Blank Before Comment",
    message="Missing blank line before comment",
    category="documentation",
    severity="low",
    check=check_blanks_before_comments,
)

TOO_FEW_COMMENTS = Rule(
    id="TOO_FEW_COMMENTS",
    name="Too Few Comments",
    message="Too few comments",
    category="documentation",
    severity="medium",
    check=check_too_few_comments,
)

TOO_MANY_COMMENTS = Rule(
    id="TOO_MANY_COMMENTS",
    name="Too Many Comments",
    message="Too many comments",
    category="documentation",
    severity="low",
    check=check_too_many_comments,
)

START_SPACE_COMMENTS = Rule(
    id="START_SPACE_COMMENTS",
    name="Comment Spacing",
    message="Comments need space after slashes",
    category="documentation",
    severity="low",
    check=check_start_space_comments,
)

ALL_DOCUMENTATION_RULES = [
    ANY_COMMENTS,
    HEADER_START,
    HEADER_FORMAT,
    ENDLINE_RUNON_COMMENTS,
    ENDLINE_COMMENTS,
    FUNCTION_LEAD_COMMENTS,
    BLANKS_BEFORE_COMMENTS,
    TOO_FEW_COMMENTS,
    TOO_MANY_COMMENTS,
    START_SPACE_COMMENTS,
]
