"""Source file reading — the whole file is loaded before annotation."""

from __future__ import annotations

from pathlib import Path
from typing import List


class SourceError(Exception):
    """Raised when a source file is missing, unreadable, or too large."""


def _strip_bom(text: str) -> str:
    """Remove UTF-8 BOM if present."""
    return text[1:] if text.startswith("\ufeff") else text


def split_lines(text: str) -> List[str]:
    """Split file content into lines without their terminators.

    CRLF is normalised; a trailing partial line is kept as-is, and the empty
    segment after a final newline is not a line.
    """
    if not text:
        return []
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines[-1] == "":
        lines.pop()
    return lines


def read_source(path: Path, *, max_size_kb: int = 512) -> List[str]:
    """Read *path* and return its lines. Raises SourceError on failure."""
    if not path.is_file():
        raise SourceError(f"File not found: {path}")
    size_kb = path.stat().st_size / 1024
    if size_kb > max_size_kb:
        raise SourceError(
            f"{path} is {size_kb:.0f} KB, above the {max_size_kb} KB limit"
        )
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise SourceError(f"Failed to read {path}: {exc}") from exc
    return split_lines(_strip_bom(text))
