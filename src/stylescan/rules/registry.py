"""Rule registry — loads built-in and custom rules, applies config filters."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Optional, get_args

import yaml

from stylescan.config.loader import ConfigError
from stylescan.config.schema import SEVERITY_ORDER, Category, StyleScanConfig
from stylescan.rules.models import Rule

CUSTOM_RULES_DIRNAME = ".stylescan-rules"

# Rules switched off together by scan.function_checks = false (the -f flag).
FUNCTION_RULE_IDS = ("FUNCTION_LENGTH", "FUNCTION_LEAD_COMMENTS")


class RuleRegistry:
    """Central store for all style rules, kept in report order."""

    def __init__(self) -> None:
        self._rules: Dict[str, Rule] = {}

    # ---- registration ----

    def register(self, rule: Rule) -> None:
        self._rules[rule.id] = rule

    def register_many(self, rules: list[Rule]) -> None:
        for r in rules:
            self.register(r)

    # ---- queries ----

    @property
    def all_rules(self) -> List[Rule]:
        return list(self._rules.values())

    def get(self, rule_id: str) -> Optional[Rule]:
        return self._rules.get(rule_id)

    def enabled_rules(self) -> List[Rule]:
        return [r for r in self._rules.values() if r.enabled]

    def by_category(self, category: str) -> List[Rule]:
        return [r for r in self.enabled_rules() if r.category == category]

    # ---- config filtering ----

    def apply_config(self, config: StyleScanConfig) -> None:
        """Enable / disable rules based on config.rules and config.scan."""
        enable_list = config.rules.enable
        disable_list = config.rules.disable

        for rule in self._rules.values():
            # If an explicit enable-list exists, only those are enabled
            if enable_list:
                rule.enabled = rule.id in enable_list
            # Disable list always takes precedence
            if rule.id in disable_list:
                rule.enabled = False
            if not config.scan.function_checks and rule.id in FUNCTION_RULE_IDS:
                rule.enabled = False

    # ---- custom rule loading ----

    def load_custom_rules(self, directory: Path) -> int:
        """Load YAML rule files from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_rules(path)
        return count

    def _load_yaml_rules(self, path: Path) -> int:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Failed to load rules from {path}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            try:
                rule = Rule(
                    id=entry["id"],
                    name=entry.get("name", entry["id"]),
                    message=entry.get("message", entry.get("name", entry["id"])),
                    category=entry.get("category", "readability"),
                    severity=entry.get("severity", "low"),
                    pattern=entry["pattern"],
                    include_comments=bool(entry.get("include_comments", False)),
                )
            except (KeyError, TypeError, AttributeError) as exc:
                raise ConfigError(f"Invalid rule in {path}: missing {exc}") from exc
            _validate_custom_rule(rule, path)
            self.register(rule)
            count += 1
        return count


def build_registry(config: StyleScanConfig, base_dir: Path) -> RuleRegistry:
    """Create a fully populated, config-filtered rule registry."""
    from stylescan.rules.builtin import ALL_BUILTIN_RULES

    registry = RuleRegistry()
    # Fresh copies so config filtering never leaks between registries
    registry.register_many([_copy(rule) for rule in ALL_BUILTIN_RULES])

    # Custom rules from .stylescan-rules/
    registry.load_custom_rules(base_dir / CUSTOM_RULES_DIRNAME)

    # Apply enable/disable from config
    registry.apply_config(config)

    # Force-compile patterns now (not inside the line loop)
    for rule in registry.enabled_rules():
        _ = rule.compiled_pattern

    return registry


def _copy(rule: Rule) -> Rule:
    import dataclasses

    return dataclasses.replace(rule)


def _validate_custom_rule(rule: Rule, path: Path) -> None:
    if rule.category not in get_args(Category):
        raise ConfigError(
            f"Invalid category '{rule.category}' for rule {rule.id} in {path}"
        )
    if rule.severity not in tuple(SEVERITY_ORDER):
        raise ConfigError(
            f"Invalid severity '{rule.severity}' for rule {rule.id} in {path}"
        )
    if not isinstance(rule.pattern, str):
        raise ConfigError(f"Invalid pattern for rule {rule.id} in {path}: not a string")
    try:
        _ = rule.compiled_pattern
    except (re.error, TypeError) as exc:
        raise ConfigError(f"Invalid pattern in {path}: {exc}") from exc
