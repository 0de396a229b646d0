"""Tool configuration loaded from ``config.toml``.

This module provides EssentialsConfig, which handles:
- The editor installation root ("Hub" editor folder)
- The dependencies preselected when prompting
- Environment variable override (UNITY_HUB_PATH)
- Writing a default config file on first run

Example config.toml:

    [essentials]
    unity_hub_path = "C:\\\\Program Files\\\\Unity\\\\Hub\\\\Editor"
    default_dependencies = ["com.unity.ugui"]
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from ..constants import DEFAULT_DEPENDENCIES, DEFAULT_HUB_PATH
from ..domain import Editor_Version
from ..exceptions import ParseFailureError, filesystem_errors
from .base import Configuration, ConfigurationError, ConfigValidationResult, SerializationError

logger = logging.getLogger(__name__)

PACKAGE_MANAGER_SEGMENTS = ("Editor", "Data", "Resources", "PackageManager")

DEFAULT_CONFIG_TOML = """\
[essentials]
# path to the unity hub editor folder
unity_hub_path = {hub_path}
# all default dependencies to select
default_dependencies = [
{dependencies}
]
"""


def _toml_string(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def render_default_config() -> str:
    return DEFAULT_CONFIG_TOML.format(
        hub_path=_toml_string(DEFAULT_HUB_PATH),
        dependencies="\n".join(f"    {_toml_string(dep)}," for dep in DEFAULT_DEPENDENCIES),
    )


class EssentialsConfig(Configuration):
    """Editor installation root and default dependency selection.

    Example usage:
        config = load_config("config.toml")
        versions_root = config.hub_path
        target = config.get_template_folder("2022.3.10f1")
    """

    def __init__(self, unity_hub_path: Optional[str] = None, default_dependencies: Optional[Sequence[str]] = None):
        self.unity_hub_path = unity_hub_path
        self.default_dependencies: List[str] = list(default_dependencies or [])

    @property
    def hub_path(self) -> Path:
        return Path(self.unity_hub_path or "")

    def _package_manager_folder(self, version_folder: str) -> Path:
        return self.hub_path.joinpath(version_folder, *PACKAGE_MANAGER_SEGMENTS)

    def get_template_folder(self, full_version: str) -> Path:
        """Folder the editor reads project templates from."""
        return self._package_manager_folder(full_version) / "ProjectTemplates"

    def get_editor_folder(self, version: Editor_Version) -> Path:
        """Folder holding the editor's bundled package tarballs."""
        return self._package_manager_folder(version.full) / "Editor"

    def validate(self) -> ConfigValidationResult:
        result = ConfigValidationResult.success_result()

        if not self.unity_hub_path or not str(self.unity_hub_path).strip():
            result.add_error("essentials.unity_hub_path is required")

        for dependency in self.default_dependencies:
            if not isinstance(dependency, str) or not dependency.strip():
                result.add_error(f"essentials.default_dependencies contains an invalid entry: {dependency!r}")

        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "essentials": {
                "unity_hub_path": self.unity_hub_path,
                "default_dependencies": list(self.default_dependencies),
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> EssentialsConfig:
        """Create configuration from a parsed config.toml document.

        Raises:
            SerializationError: If the [essentials] table has the wrong shape
        """
        essentials = data.get("essentials")
        if not isinstance(essentials, dict):
            raise SerializationError("config.toml must contain an [essentials] table")

        dependencies = essentials.get("default_dependencies", [])
        if not isinstance(dependencies, list):
            raise SerializationError("essentials.default_dependencies must be a list of strings")

        hub_path = essentials.get("unity_hub_path")
        if hub_path is not None and not isinstance(hub_path, str):
            raise SerializationError("essentials.unity_hub_path must be a string")

        return cls(unity_hub_path=hub_path, default_dependencies=dependencies)

    @classmethod
    def from_environment(cls, base: Optional[EssentialsConfig] = None) -> EssentialsConfig:
        """Apply UNITY_HUB_PATH from the environment over ``base``."""
        base = base or cls()
        hub_path = os.getenv("UNITY_HUB_PATH") or base.unity_hub_path
        return cls(unity_hub_path=hub_path, default_dependencies=base.default_dependencies)

    def __repr__(self) -> str:
        return (
            f"EssentialsConfig(unity_hub_path={self.unity_hub_path!r}, "
            f"default_dependencies={self.default_dependencies!r})"
        )


def load_config(path: Union[str, Path]) -> EssentialsConfig:
    """Load and validate the tool configuration.

    A missing file is replaced with the default configuration and reported
    as an error, so the user can edit it before the next run.

    Raises:
        ConfigurationError: If the file was missing (a default was written)
        ParseFailureError: If the file is not valid TOML
        ValidationError: If required values are missing
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.warning("Could not read config file at %s, writing a default one", config_path)
        with filesystem_errors(config_path, "write default config file"):
            config_path.write_text(render_default_config(), encoding="utf-8")
        raise ConfigurationError(
            "New config created, please open it and modify it with correct information.",
            path=config_path,
        )

    with filesystem_errors(config_path, "read config file"):
        with open(config_path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ParseFailureError(f"Could not load config: {e}", path=config_path) from e

    config = EssentialsConfig.from_environment(EssentialsConfig.from_dict(data))
    config.validate_or_raise()
    return config
