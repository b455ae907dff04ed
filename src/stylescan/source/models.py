"""Data models for source annotation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Same set as C isspace() in the "C" locale.
WHITESPACE = " \t\n\r\f\v"


class TokenKind(str, Enum):
    WORD = "word"
    NUMBER = "number"
    PUNCTUATION = "punctuation"


class CommentTag(str, Enum):
    NONE = "none"
    BLOCK = "block-comment"
    LINE = "line-comment"


@dataclass(frozen=True, slots=True)
class Token:
    """A contiguous run of one line's text."""

    text: str
    kind: TokenKind
    start: int  # 0-based column of the first character

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass(frozen=True, slots=True)
class LineRecord:
    """One physical line with the structural facts derived for it."""

    index: int  # 0-based position in the file
    text: str  # raw text, no trailing newline
    comment: CommentTag
    depth: int  # effective scope depth (braces + label regions)

    @property
    def is_comment(self) -> bool:
        return self.comment is not CommentTag.NONE

    @property
    def is_blank(self) -> bool:
        return self.text.strip(WHITESPACE) == ""
