"""Readability rules — lengths, indentation, naming, and spacing."""

from __future__ import annotations

from typing import List

from stylescan.config.schema import StyleConfig
from stylescan.rules.models import Rule
from stylescan.source.facts import POINTER, SCOPE_QUALIFIER, AnnotatedFile
from stylescan.source.scopes import is_label
from stylescan.source.tokenizer import (
    first_nonspace,
    is_space,
    is_word,
    iter_tokens,
    leading_tabs,
    next_token,
)

# Operators that expect a space on both sides.  Not included:
# "<"/">" (includes, templates), "++"/"--", unary "-", "*" (pointers), and
# "/" (units such as ft/sec).
SPACED_OPERATORS = frozenset(
    {"+", "%", "<<", ">>", "<=", ">=", "==", "!=", "&&", "||", "=", "+=", "-=", "*=", "/="}
)

# Colons are left out: they appear in times and the scope operator.
PUNCTUATION = frozenset(",;?")
# Characters allowed right after punctuation (quotes and escapes occur in
# string literals).
PUNCTUATION_CHASERS = frozenset(" \n\t\"\\")


# ---- name shapes ----


def is_ok_variable(name: str) -> bool:
    """camelCase: lower-case start, alphanumeric, no two capitals in a row."""
    if len(name) < 2 or not name[0].islower():
        return False
    for prev, ch in zip(name, name[1:]):
        if not (ch.isascii() and ch.isalnum()) or (ch.isupper() and prev.isupper()):
            return False
    return True


def is_ok_function(name: str) -> bool:
    return is_ok_variable(name)


def is_ok_structure(name: str) -> bool:
    """CapsCamelCase: upper-case start, alphanumeric, no two capitals in a row."""
    if len(name) < 2 or not name[0].isupper():
        return False
    for prev, ch in zip(name, name[1:]):
        if not (ch.isascii() and ch.isalnum()) or (ch.isupper() and prev.isupper()):
            return False
    return True


def is_ok_class(name: str) -> bool:
    return is_ok_structure(name)


def is_ok_constant(name: str) -> bool:
    """ALL_CAPS: at least two characters, upper-case letters and underscores."""
    return len(name) >= 2 and all(ch.isupper() or ch == "_" for ch in name)


# ---- indentation helpers ----


def is_indent_tabs(source: AnnotatedFile, line: int) -> bool:
    """True if the line's indent is made of tabs only.

    Continuation lines may be aligned with spaces past the scope level, so
    only the first ``depth`` characters are checked for them.
    """
    text = source.text(line)
    check_to = first_nonspace(text)
    if source.is_continuation(line):
        check_to = min(check_to, source.depth(line))
    return all(text[i] == "\t" for i in range(check_to))


def is_okay_indent_level(source: AnnotatedFile, line: int) -> bool:
    if (
        source.is_blank(line)
        or source.is_mid_block_comment(line)
        or not is_indent_tabs(source, line)
    ):
        return True

    depth = source.depth(line)
    tabs = leading_tabs(source.text(line))

    # Comments before a case may sit at the case's level
    if source.is_comment_before_case(line):
        return tabs in (depth, depth - 1)
    if source.is_continuation(line):
        return tabs >= depth
    return tabs == depth


# ---- checks ----


def check_function_length(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    hits: List[int] = []
    i = 0
    total = len(source)
    while i < total:
        if source.is_comment(i) or not source.is_function_header(i):
            i += 1
            continue
        start = i
        start_depth = source.depth(start)
        i += 1
        while i < total and (source.starts_with_open_brace(i) or source.depth(i) > start_depth):
            i += 1
        limit = (
            style.max_inline_function_lines
            if source.in_class_body(start)
            else style.max_function_lines
        )
        if i - start > limit:
            hits.append(start)
    return hits


def check_line_length(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    return [r.index for r in source if len(r.text) > style.max_line_length]


def check_indent_levels(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    return [r.index for r in source if not is_okay_indent_level(source, r.index)]


def check_tab_usage(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    return [r.index for r in source if not is_indent_tabs(source, r.index)]


def _check_introduced_names(source: AnnotatedFile, keyword: str, is_ok) -> List[int]:
    hits: List[int] = []
    for record in source:
        if record.is_comment:
            continue
        prefix, pos = next_token(record.text, 0)
        if prefix == keyword:
            name, _ = next_token(record.text, pos)
            if not is_ok(name):
                hits.append(record.index)
    return hits


def check_class_names(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    return _check_introduced_names(source, "class", is_ok_class)


def check_structure_names(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    return _check_introduced_names(source, "struct", is_ok_structure)


def check_function_names(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    hits: List[int] = []
    for record in source:
        if record.is_comment:
            continue
        name = source.function_header(record.index)
        if name is not None and not is_ok_function(name):
            hits.append(record.index)
    return hits


def check_constant_names(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    hits: List[int] = []
    for record in source:
        if record.is_comment:
            continue
        prefix, pos = next_token(record.text, 0)
        if prefix != "const":
            continue
        type_name, pos = next_token(record.text, pos)
        if source.is_type_name(type_name):
            name, _ = next_token(record.text, pos)
            if not is_ok_constant(name):
                hits.append(record.index)
    return hits


def check_variable_names(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    """Only the first variable declared on a line is checked."""
    hits: List[int] = []
    for record in source:
        if record.is_comment:
            continue
        text = record.text
        type_name, pos = next_token(text, 0)
        if not source.is_type_name(type_name):
            continue
        name, pos = next_token(text, pos)
        while name == POINTER:
            name, pos = next_token(text, pos)
        # References, qualified names and constructors are not declarations
        if not is_word(name):
            continue
        symbol, _ = next_token(text, pos)
        if symbol.startswith("(") or symbol in (SCOPE_QUALIFIER, "<"):
            continue
        if not is_ok_variable(name):
            hits.append(record.index)
    return hits


def check_extraneous_blanks(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    """Blank lines belong only before a comment, label, function or class."""
    hits: List[int] = []
    for i in range(len(source) - 2):
        if not source.is_blank(i):
            continue
        nxt = i + 1
        if (
            not source.is_comment(nxt)
            and not is_label(source.text(nxt))
            and not source.is_function_header(nxt)
            and not source.is_class_header(nxt)
        ):
            hits.append(i)
    return hits


def check_punctuation_spacing(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    hits: List[int] = []
    for record in source:
        text = record.text
        last = len(text) - 1
        for j, ch in enumerate(text):
            if ch not in PUNCTUATION:
                continue
            if (j > 1 and is_space(text[j - 1])) or (
                j < last and text[j + 1] not in PUNCTUATION_CHASERS
            ):
                hits.append(record.index)
                break
    return hits


def check_spaced_operators(source: AnnotatedFile, style: StyleConfig) -> List[int]:
    hits: List[int] = []
    for record in source:
        if record.is_comment:
            continue
        text = record.text
        for tok in iter_tokens(text):
            if tok.text not in SPACED_OPERATORS:
                continue
            if (tok.start > 0 and not is_space(text[tok.start - 1])) or (
                tok.end < len(text) and not is_space(text[tok.end])
            ):
                hits.append(record.index)
                break
    return hits


FUNCTION_LENGTH = Rule(
    id="FUNCTION_LENGTH",
    name="Function Length",
    message="Function is too long!",
    category="readability",
    severity="medium",
    check=check_function_length,
)

LINE_LENGTH = Rule(
    id="LINE_LENGTH",
    name="Line Length",
    message="Line is too long",
    category="readability",
    severity="low",
    check=check_line_length,
)

INDENT_LEVEL = Rule(
    id="INDENT_LEVEL",
    name="Indent Level",
    message="Indent level errors",
    category="readability",
    severity="high",
    check=check_indent_levels,
)

TAB_USAGE = Rule(
    id="TAB_USAGE",
    name="Tab Indents",
    message="Tabs should be used for indents",
    category="readability",
    severity="medium",
    check=check_tab_usage,
)

CLASS_NAMES = Rule(
    id="CLASS_NAMES",
    name="Class Names",
    message="Classes should start caps camel-case",
    category="readability",
    severity="medium",
    check=check_class_names,
)

STRUCT_NAMES = Rule(
    id="STRUCT_NAMES",
    name="Structure Names",
    message="Structures should start caps camel-case",
    category="readability",
    severity="medium",
    check=check_structure_names,
)

FUNCTION_NAMES = Rule(
    id="FUNCTION_NAMES",
    name="Function Names",
    message="Functions should be camel-case name",
    category="readability",
    severity="medium",
    check=check_function_names,
)

CONSTANT_NAMES = Rule(
    id="CONSTANT_NAMES",
    name="Constant Names",
    message="Constants should be all-caps name",
    category="readability",
    severity="medium",
    check=check_constant_names,
)

VARIABLE_NAMES = Rule(
    id="VARIABLE_NAMES",
    name="Variable Names",
    message="Variables should be camel-case name",
    category="readability",
    severity="medium",
    check=check_variable_names,
)

EXTRANEOUS_BLANKS = Rule(
    id="EXTRANEOUS_BLANKS",
    name="Extraneous Blanks",
    message="Extraneous blank lines",
    category="readability",
    severity="low",
    check=check_extraneous_blanks,
)

PUNCTUATION_SPACING = Rule(
    id="PUNCTUATION_SPACING",
    name="Punctuation Spacing",
    message="Punctuation should have space afterward",
    category="readability",
    severity="low",
    check=check_punctuation_spacing,
)

SPACED_OPERATORS_RULE = Rule(
    id="SPACED_OPERATORS",
    name="Operator Spacing",
    message="Operators should have surrounding spaces",
    category="readability",
    severity="low",
    check=check_spaced_operators,
)

ALL_READABILITY_RULES = [
    FUNCTION_LENGTH,
    LINE_LENGTH,
    INDENT_LEVEL,
    TAB_USAGE,
    CLASS_NAMES,
    STRUCT_NAMES,
    FUNCTION_NAMES,
    CONSTANT_NAMES,
    VARIABLE_NAMES,
    EXTRANEOUS_BLANKS,
    PUNCTUATION_SPACING,
    SPACED_OPERATORS_RULE,
]
