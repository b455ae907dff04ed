"""Annotation pipeline — raw lines in, AnnotatedFile out."""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from stylescan.source.comments import classify_comments
from stylescan.source.facts import AnnotatedFile
from stylescan.source.models import LineRecord
from stylescan.source.scopes import adjust_labels, track_scopes
from stylescan.source.typenames import BUILTIN_TYPES, collect_type_names


def annotate(lines: Sequence[str], *, extra_types: Iterable[str] = ()) -> AnnotatedFile:
    """Run every annotation pass over *lines*.

    Order matters: comment tags feed both the type collector and the scope
    tracker, and label adjustment needs the finished brace depths.
    """
    texts: Tuple[str, ...] = tuple(lines)
    tags = classify_comments(texts)
    type_names = collect_type_names(texts, tags)
    depths = adjust_labels(texts, tags, track_scopes(texts, tags))

    records = tuple(
        LineRecord(index=i, text=text, comment=tag, depth=depth)
        for i, (text, tag, depth) in enumerate(zip(texts, tags, depths))
    )
    return AnnotatedFile(
        records=records,
        type_names=type_names,
        builtin_types=BUILTIN_TYPES | frozenset(extra_types),
    )
