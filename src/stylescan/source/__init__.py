"""Source annotation layer — tokenizer, comment and scope passes, fact base."""

from stylescan.source.annotator import annotate
from stylescan.source.comments import classify_comments
from stylescan.source.facts import AnnotatedFile
from stylescan.source.models import CommentTag, LineRecord, Token, TokenKind
from stylescan.source.reader import SourceError, read_source, split_lines
from stylescan.source.scopes import adjust_labels, track_scopes
from stylescan.source.tokenizer import first_token, iter_tokens, last_token, next_token, tokenize
from stylescan.source.typenames import BUILTIN_TYPES, collect_type_names

__all__ = [
    "BUILTIN_TYPES",
    "AnnotatedFile",
    "CommentTag",
    "LineRecord",
    "SourceError",
    "Token",
    "TokenKind",
    "adjust_labels",
    "annotate",
    "classify_comments",
    "collect_type_names",
    "first_token",
    "iter_tokens",
    "last_token",
    "next_token",
    "read_source",
    "split_lines",
    "tokenize",
    "track_scopes",
]
