"""Tests for loading and validating config.toml."""

from __future__ import annotations

import tomllib

import pytest

from unity_template.config import (
    Configuration,
    ConfigurationError,
    ConfigValidationResult,
    EssentialsConfig,
    SerializationError,
    ValidationError,
    load_config,
    render_default_config,
)
from unity_template.constants import DEFAULT_DEPENDENCIES, DEFAULT_HUB_PATH
from unity_template.domain import Editor_Version
from unity_template.exceptions import ParseFailureError, TemplateToolError


@pytest.fixture(autouse=True)
def no_hub_override(monkeypatch):
    monkeypatch.delenv("UNITY_HUB_PATH", raising=False)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        '[essentials]\nunity_hub_path = "/opt/unity/editors"\ndefault_dependencies = ["com.unity.ugui"]\n',
        encoding="utf-8",
    )
    return path


class TestLoadConfig:
    """Test how config.toml is read from disk."""

    def test_missing_file_writes_default_and_fails(self, tmp_path):
        """A first run writes a default config and stops so it can be edited."""
        path = tmp_path / "config.toml"

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)

        assert exc_info.value.path == path
        assert exc_info.value.error_code == "CONFIGURATION_ERROR"
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        assert data["essentials"]["unity_hub_path"] == DEFAULT_HUB_PATH
        assert data["essentials"]["default_dependencies"] == list(DEFAULT_DEPENDENCIES)

    def test_default_config_loads_after_it_is_written(self, tmp_path):
        path = tmp_path / "config.toml"
        with pytest.raises(ConfigurationError):
            load_config(path)

        config = load_config(path)
        assert config.unity_hub_path == DEFAULT_HUB_PATH

    def test_valid_file(self, config_file):
        config = load_config(config_file)
        assert config.unity_hub_path == "/opt/unity/editors"
        assert config.default_dependencies == ["com.unity.ugui"]

    def test_environment_overrides_hub_path(self, config_file, monkeypatch):
        monkeypatch.setenv("UNITY_HUB_PATH", "/srv/editors")
        config = load_config(config_file)
        assert config.unity_hub_path == "/srv/editors"
        assert config.default_dependencies == ["com.unity.ugui"]

    def test_malformed_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[essentials\nunity_hub_path = ", encoding="utf-8")
        with pytest.raises(ParseFailureError) as exc_info:
            load_config(path)
        assert exc_info.value.path == path

    def test_missing_essentials_table(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[other]\nvalue = 1\n', encoding="utf-8")
        with pytest.raises(SerializationError):
            load_config(path)

    def test_empty_hub_path(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[essentials]\nunity_hub_path = ""\n', encoding="utf-8")
        with pytest.raises(ValidationError, match="unity_hub_path"):
            load_config(path)


class TestEssentialsConfig:
    """Test folder helpers and (de)serialization."""

    def test_folder_helpers(self, tmp_path):
        config = EssentialsConfig(unity_hub_path=str(tmp_path))
        version = Editor_Version("2022.3", "10f1")
        package_manager = tmp_path / "2022.3.10f1" / "Editor" / "Data" / "Resources" / "PackageManager"

        assert config.get_template_folder("2022.3.10f1") == package_manager / "ProjectTemplates"
        assert config.get_editor_folder(version) == package_manager / "Editor"

    def test_round_trip_through_dict(self):
        config = EssentialsConfig(unity_hub_path="/opt/unity", default_dependencies=["com.unity.ugui"])
        restored = EssentialsConfig.from_dict(config.to_dict())
        assert restored.to_dict() == config.to_dict()

    def test_wrong_dependency_shape(self):
        with pytest.raises(SerializationError):
            EssentialsConfig.from_dict({"essentials": {"unity_hub_path": "/x", "default_dependencies": "ugui"}})

    def test_blank_dependency_is_invalid(self):
        config = EssentialsConfig(unity_hub_path="/x", default_dependencies=["com.unity.ugui", " "])
        result = config.validate()
        assert not result.success
        assert len(result.errors) == 1
        with pytest.raises(ValidationError, match="invalid entry"):
            config.validate_or_raise()

    def test_default_config_is_valid_toml(self):
        data = tomllib.loads(render_default_config())
        assert EssentialsConfig.from_dict(data).validate().success


class TestConfigurationFramework:
    def test_abstract_configuration_class_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Configuration()

    def test_validation_result_states(self):
        result = ConfigValidationResult.success_result()
        assert result.success
        result.add_error("broken")
        assert not result.success
        assert result.errors == ["broken"]

    def test_configuration_errors_are_tool_errors(self):
        assert issubclass(ValidationError, ConfigurationError)
        assert issubclass(SerializationError, ConfigurationError)
        assert issubclass(ConfigurationError, TemplateToolError)
