"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from stylescan.config.defaults import DEFAULT_TOML
from stylescan.config.loader import ConfigError, load_config
from stylescan.config.schema import DEFAULT_HEADER_FIELDS, severity_at_or_above


class TestSeverityComparison:
    def test_at_or_above(self):
        assert severity_at_or_above("high", "high") is True
        assert severity_at_or_above("medium", "high") is False
        assert severity_at_or_above("low", "high") is False

    def test_all_levels(self):
        assert severity_at_or_above("low", "low") is True
        assert severity_at_or_above("medium", "low") is True
        assert severity_at_or_above("high", "medium") is True
        assert severity_at_or_above("low", "medium") is False


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.scan.fail_on == "high"
        assert cfg.scan.function_checks is True
        assert cfg.output.format == "terminal"
        assert cfg.output.max_shown == 3
        assert cfg.style.max_line_length == 80
        assert cfg.style.max_function_lines == 25
        assert cfg.style.comment_stretch == 25
        assert cfg.style.header_fields == DEFAULT_HEADER_FIELDS

    def test_custom_toml(self, tmp_path: Path):
        toml_path = tmp_path / ".stylescan.toml"
        toml_path.write_text(
            'version = "1.0"\n'
            '[scan]\n'
            'fail_on = "medium"\n'
            'function_checks = false\n'
            '[style]\n'
            'max_line_length = 100\n'
            'extra_types = ["long", "size_t"]\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.scan.fail_on == "medium"
        assert cfg.scan.function_checks is False
        assert cfg.style.max_line_length == 100
        assert cfg.style.extra_types == ["long", "size_t"]

    def test_unknown_keys_ignored(self, tmp_path: Path):
        (tmp_path / ".stylescan.toml").write_text(
            '[style]\nmax_line_length = 90\nfancy = true\n[extra]\nx = 1\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.style.max_line_length == 90

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text('[scan]\nfail_on = "low"\n')
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.scan.fail_on == "low"

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        bad_toml = tmp_path / ".stylescan.toml"
        bad_toml.write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_starter_template_loads(self, tmp_path: Path):
        (tmp_path / ".stylescan.toml").write_text(DEFAULT_TOML)
        cfg = load_config(tmp_path)
        assert cfg.scan.fail_on == "high"
        assert cfg.style.max_inline_function_lines == 5
        assert cfg.rules.enable == []


class TestEnvOverrides:
    def test_fail_on(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("STYLESCAN_FAIL_ON", "low")
        cfg = load_config(tmp_path)
        assert cfg.scan.fail_on == "low"

    def test_invalid_value_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("STYLESCAN_FAIL_ON", "critical")
        monkeypatch.setenv("STYLESCAN_MAX_LINE_LENGTH", "wide")
        cfg = load_config(tmp_path)
        assert cfg.scan.fail_on == "high"
        assert cfg.style.max_line_length == 80

    def test_format(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("STYLESCAN_FORMAT", "json")
        assert load_config(tmp_path).output.format == "json"

    def test_disable_rules(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("STYLESCAN_DISABLE_RULES", "LINE_LENGTH, TAB_USAGE")
        cfg = load_config(tmp_path)
        assert cfg.rules.disable == ["LINE_LENGTH", "TAB_USAGE"]

    def test_env_beats_file(self, tmp_path: Path, monkeypatch):
        (tmp_path / ".stylescan.toml").write_text("[style]\nmax_line_length = 100\n")
        monkeypatch.setenv("STYLESCAN_MAX_LINE_LENGTH", "120")
        assert load_config(tmp_path).style.max_line_length == 120
