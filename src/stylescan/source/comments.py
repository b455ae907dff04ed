"""Whole-line comment classification.

Works on first/last token heuristics, not a character-exact scan: a block
comment closed mid-line after other code, or a comment marker inside a
string literal, is taken at face value.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple

from stylescan.source.models import CommentTag
from stylescan.source.tokenizer import first_token, last_token

BLOCK_OPEN = "/*"
BLOCK_CLOSE = "*/"
LINE_MARKER = "//"


class _State(Enum):
    CODE = "code"
    IN_BLOCK = "in_block"


def _step(state: _State, line: str) -> Tuple[_State, CommentTag]:
    """Advance the classifier over one line."""
    first = first_token(line)
    last = last_token(line)

    tag = CommentTag.NONE
    if first.startswith(BLOCK_OPEN):
        state = _State.IN_BLOCK
    if state is _State.IN_BLOCK:
        tag = CommentTag.BLOCK
    if last.endswith(BLOCK_CLOSE):
        state = _State.CODE

    if first.startswith(LINE_MARKER):
        tag = CommentTag.LINE
    return state, tag


def classify_comments(lines: Iterable[str]) -> Tuple[CommentTag, ...]:
    """Tag every line as code, block comment, or line comment.

    An unterminated block comment tags every remaining line ``BLOCK``.
    """
    state = _State.CODE
    tags: List[CommentTag] = []
    for line in lines:
        state, tag = _step(state, line)
        tags.append(tag)
    return tuple(tags)
