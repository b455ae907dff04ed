"""User-defined type names declared with ``class`` / ``struct``."""

from __future__ import annotations

from typing import FrozenSet, Sequence, Set

from stylescan.source.models import CommentTag
from stylescan.source.tokenizer import next_token

TYPE_INTRODUCERS = frozenset({"class", "struct"})

BUILTIN_TYPES = frozenset({"int", "float", "double", "char", "bool", "string", "void"})


def collect_type_names(lines: Sequence[str], tags: Sequence[CommentTag]) -> FrozenSet[str]:
    """Return the type names introduced by non-comment lines."""
    names: Set[str] = set()
    for line, tag in zip(lines, tags):
        if tag is not CommentTag.NONE:
            continue
        keyword, pos = next_token(line, 0)
        if keyword not in TYPE_INTRODUCERS:
            continue
        name, _ = next_token(line, pos)
        if name:
            names.add(name)
    return frozenset(names)
