"""Tests for settings loading."""

from pathlib import Path

import pytest

from create_roblox_ts.cli.errors import ConfigurationError
from create_roblox_ts.config import ENV_VARS, ConfigLoader, ScaffoldConfig
from create_roblox_ts.constants import RBXTS_SCOPE, TEMPLATES_DIR


class TestScaffoldConfig:
    """Tests for the ScaffoldConfig model."""

    def test_defaults(self):
        config = ScaffoldConfig()
        assert config.templates_dir == TEMPLATES_DIR
        assert config.package_scope == RBXTS_SCOPE
        assert config.log_format == "text"
        assert config.log_file is None

    @pytest.mark.parametrize("scope", ["rbxts", "@", "@org/name"])
    def test_invalid_scope_rejected(self, scope: str):
        with pytest.raises(ValueError):
            ScaffoldConfig(package_scope=scope)

    def test_templates_dir_expands_user(self):
        config = ScaffoldConfig(templates_dir="~/templates")
        assert "~" not in str(config.templates_dir)


class TestConfigLoader:
    """Tests for ConfigLoader precedence."""

    def test_empty_environment_gives_defaults(self):
        assert ConfigLoader(environ={}).load() == ScaffoldConfig()

    def test_environment_applied(self, tmp_path: Path):
        environ = {
            ENV_VARS["templates_dir"]: str(tmp_path),
            ENV_VARS["package_scope"]: "@acme",
            ENV_VARS["log_format"]: "json",
            ENV_VARS["log_file"]: str(tmp_path / "run.log"),
        }
        config = ConfigLoader(environ=environ).load()
        assert config.templates_dir == tmp_path
        assert config.package_scope == "@acme"
        assert config.log_format == "json"
        assert config.log_file == tmp_path / "run.log"

    def test_overrides_beat_environment(self):
        environ = {ENV_VARS["package_scope"]: "@acme"}
        config = ConfigLoader(environ=environ).load(package_scope="@other")
        assert config.package_scope == "@other"

    def test_none_override_ignored(self):
        environ = {ENV_VARS["package_scope"]: "@acme"}
        config = ConfigLoader(environ=environ).load(package_scope=None)
        assert config.package_scope == "@acme"

    def test_empty_env_value_ignored(self):
        config = ConfigLoader(environ={ENV_VARS["package_scope"]: ""}).load()
        assert config.package_scope == RBXTS_SCOPE

    def test_invalid_value_raises_configuration_error(self):
        """Validation failures name the offending field."""
        environ = {ENV_VARS["log_format"]: "xml"}
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader(environ=environ).load()
        assert "log_format" in exc_info.value.message
