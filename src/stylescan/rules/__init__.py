"""Rule engine — models, registry, built-in rules."""

from stylescan.rules.models import Rule
from stylescan.rules.registry import RuleRegistry, build_registry

__all__ = ["Rule", "RuleRegistry", "build_registry"]
