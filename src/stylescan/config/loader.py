"""Load and merge configuration from .stylescan.toml, CLI flags, and env vars."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from stylescan.config.schema import (
    OutputConfig,
    RulesConfig,
    ScanConfig,
    StyleConfig,
    StyleScanConfig,
)

CONFIG_FILENAME = ".stylescan.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: StyleScanConfig) -> None:
    """Apply STYLESCAN_* environment variable overrides."""
    if val := os.environ.get("STYLESCAN_FAIL_ON"):
        if val in ("low", "medium", "high"):
            cfg.scan.fail_on = val  # type: ignore[assignment]
    if val := os.environ.get("STYLESCAN_FORMAT"):
        if val in ("terminal", "json", "sarif"):
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("STYLESCAN_DISABLE_RULES"):
        cfg.rules.disable.extend(r.strip() for r in val.split(",") if r.strip())
    if val := os.environ.get("STYLESCAN_MAX_LINE_LENGTH"):
        try:
            cfg.style.max_line_length = int(val)
        except ValueError:
            pass


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    import dataclasses

    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.get(section, {}).items() if k in valid_fields}
    return cls(**filtered)


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> StyleScanConfig:
    """Load, validate, and return a StyleScanConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = StyleScanConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = StyleScanConfig(
            version=raw.get("version", "1.0"),
            scan=_build_section(raw, ScanConfig, "scan"),
            output=_build_section(raw, OutputConfig, "output"),
            rules=_build_section(raw, RulesConfig, "rules"),
            style=_build_section(raw, StyleConfig, "style"),
        )

    _merge_env_overrides(cfg)
    return cfg
