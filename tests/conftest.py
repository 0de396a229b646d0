"""Test configuration for pytest."""

import json
from pathlib import Path
from typing import Callable

import pytest

from unity_template.domain import Build_Descriptor, Dependency_Set, Project_Location


def _write(path: Path, content) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def make_project(tmp_path) -> Callable[..., Project_Location]:
    """Factory for a source project on disk.

    The project contains nested assets, a manifest, a lock file and a
    version marker, so every transplant rule has something to act on.
    """

    def factory(name: str = "MyGame", parent: Path = None, with_assets: bool = True) -> Project_Location:
        root = (parent or tmp_path / "projects") / name
        if with_assets:
            _write(root / "Assets" / "Scenes" / "Main.unity", "%YAML 1.1\n--- !u!29 &1\n")
            _write(root / "Assets" / "Textures" / "logo.png", b"\x89PNG\r\n\x1a\n\x00\x01binary")
        _write(
            root / "Packages" / "manifest.json",
            json.dumps({"dependencies": {"com.unity.ugui": "1.0.0", "com.unity.timeline": "1.7.4"}}),
        )
        _write(root / "Packages" / "packages-lock.json", '{"dependencies": {}}')
        _write(root / "ProjectSettings" / "ProjectVersion.txt", "m_EditorVersion: 2022.3.10f1\n")
        _write(root / "ProjectSettings" / "ProjectSettings.asset", "PlayerSettings:\n")
        return Project_Location(root)

    return factory


@pytest.fixture
def descriptor() -> Build_Descriptor:
    return Build_Descriptor(
        name="mytemplate",
        display_name="My Template",
        version="0.0.1",
        unity="2022.3",
        unity_full="2022.3.10f1",
        keywords=("starter", "2d"),
        category="2D",
        description="A starter template",
        dependencies=Dependency_Set.from_mapping({"com.unity.ugui": "1.0.0"}),
    )


@pytest.fixture
def builds_dir(tmp_path) -> Path:
    return tmp_path / "builds"


@pytest.fixture
def outputs_dir(tmp_path) -> Path:
    return tmp_path / "outputs"
