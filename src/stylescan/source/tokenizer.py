"""Whitespace-delimited line tokenizer.

A token is a word (identifier or keyword), a number, or
a maximal run of punctuation, so composite operators such as ``==``, ``::``
and ``<<`` arrive as single tokens and can be matched as exact strings.

Known limitation: string and character literals are not understood, so
punctuation or comment markers inside quotes tokenize like real code.
"""

from __future__ import annotations

import string
from typing import Iterator, List, Tuple

from stylescan.source.models import WHITESPACE, Token, TokenKind

_WORD_START = frozenset(string.ascii_letters + "_")
_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_DIGITS = frozenset(string.digits)
_NUMBER_CHARS = frozenset(string.digits + ".")
_SPACES = frozenset(WHITESPACE)


def _is_punct(ch: str) -> bool:
    return ch not in _SPACES and ch not in _WORD_CHARS


def next_token(line: str, pos: int) -> Tuple[str, int]:
    """Return the token starting at or after *pos* and the position past it.

    An empty token (with the end-of-line position) means no tokens remain.
    """
    end = len(line)
    while pos < end and line[pos] in _SPACES:
        pos += 1
    start = pos
    if pos >= end:
        return "", pos

    ch = line[pos]
    if ch in _WORD_START:
        while pos < end and line[pos] in _WORD_CHARS:
            pos += 1
    elif ch in _DIGITS:
        while pos < end and line[pos] in _NUMBER_CHARS:
            pos += 1
    else:
        while pos < end and _is_punct(line[pos]):
            pos += 1
    return line[start:pos], pos


def classify(text: str) -> TokenKind:
    """Return the kind of a non-empty token string."""
    if text[0] in _WORD_START:
        return TokenKind.WORD
    if text[0] in _DIGITS:
        return TokenKind.NUMBER
    return TokenKind.PUNCTUATION


def iter_tokens(line: str) -> Iterator[Token]:
    """Lazily yield the tokens of *line* left to right."""
    pos = 0
    while True:
        text, pos = next_token(line, pos)
        if not text:
            return
        yield Token(text=text, kind=classify(text), start=pos - len(text))


def tokenize(line: str) -> List[str]:
    """Return the token strings of *line*."""
    return [tok.text for tok in iter_tokens(line)]


def first_token(line: str) -> str:
    return next_token(line, 0)[0]


def last_token(line: str) -> str:
    last = ""
    for tok in iter_tokens(line):
        last = tok.text
    return last


def is_word(token: str) -> bool:
    return bool(token) and token[0] in _WORD_START


# ---- character-level helpers ----


def first_nonspace(line: str) -> int:
    """Index of the first non-whitespace character, or -1 for a blank line."""
    for i, ch in enumerate(line):
        if ch not in _SPACES:
            return i
    return -1


def last_nonspace(line: str) -> int:
    """Index of the last non-whitespace character, or -1 for a blank line."""
    for i in range(len(line) - 1, -1, -1):
        if line[i] not in _SPACES:
            return i
    return -1


def is_space(ch: str) -> bool:
    return ch in _SPACES


def leading_tabs(line: str) -> int:
    count = 0
    while count < len(line) and line[count] == "\t":
        count += 1
    return count
