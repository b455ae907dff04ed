"""Scanner — the check engine."""

from stylescan.scanner.engine import CheckError, annotate_file, check, check_file

__all__ = [
    "CheckError",
    "annotate_file",
    "check",
    "check_file",
]
