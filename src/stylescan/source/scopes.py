"""Scope depth tracking — brace counting plus label pseudo-scopes.

Two passes, each a left-to-right fold returning a fresh tuple:

1. ``track_scopes`` counts braces outside comment lines.  A line whose first
   non-space character is ``}`` is recorded one level shallower, at the
   level the brace returns to; the running counter is not affected.
2. ``adjust_labels`` pushes the lines under a ``case``/``default``/access
   label one level deeper than the label, for as long as the depth stays at
   or above the label's own depth.

Unbalanced input may yield negative depths; they are reported, not clamped.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from stylescan.source.models import CommentTag
from stylescan.source.tokenizer import first_nonspace, first_token

OPEN_BRACE = "{"
CLOSE_BRACE = "}"

LABELS = frozenset({"case", "default", "public", "private", "protected"})


def starts_with_open_brace(line: str) -> bool:
    pos = first_nonspace(line)
    return pos >= 0 and line[pos] == OPEN_BRACE


def starts_with_close_brace(line: str) -> bool:
    pos = first_nonspace(line)
    return pos >= 0 and line[pos] == CLOSE_BRACE


def is_label(line: str) -> bool:
    """True if the line starts with one of the label keywords."""
    return first_token(line) in LABELS


def _brace_balance(line: str) -> int:
    return line.count(OPEN_BRACE) - line.count(CLOSE_BRACE)


def track_scopes(lines: Sequence[str], tags: Sequence[CommentTag]) -> Tuple[int, ...]:
    """Return the brace depth of every line (before label adjustment)."""
    counter = 0
    depths: List[int] = []
    for line, tag in zip(lines, tags):
        depth = counter
        if tag is CommentTag.NONE:
            counter += _brace_balance(line)
            if starts_with_close_brace(line):
                depth -= 1
        depths.append(depth)
    return tuple(depths)


def adjust_labels(
    lines: Sequence[str],
    tags: Sequence[CommentTag],
    depths: Sequence[int],
) -> Tuple[int, ...]:
    """Return *depths* with label regions pushed one level deeper.

    ``label_level`` 0 means "not in a label region"; labels are never legal
    at file level, so 0 is free to act as the sentinel.
    """
    label_level = 0
    adjusted: List[int] = []
    for line, tag, depth in zip(lines, tags, depths):
        label_line = tag is CommentTag.NONE and is_label(line)
        if label_level == 0:
            if label_line:
                label_level = depth
        elif depth < label_level:
            label_level = 0
        elif not label_line:
            depth += 1
        adjusted.append(depth)
    return tuple(adjusted)
