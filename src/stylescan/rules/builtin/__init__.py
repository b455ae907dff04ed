"""Built-in rules — readability first, then documentation (report order)."""

from stylescan.rules.builtin.documentation import ALL_DOCUMENTATION_RULES
from stylescan.rules.builtin.readability import ALL_READABILITY_RULES
from stylescan.rules.models import Rule

ALL_BUILTIN_RULES: list[Rule] = [
    *ALL_READABILITY_RULES,
    *ALL_DOCUMENTATION_RULES,
]

__all__ = ["ALL_BUILTIN_RULES"]
