"""Tests for dependency manifest synthesis."""

import json

import pytest

from unity_template.bundle.manifest import build_manifest, render_manifest, write_manifests
from unity_template.bundle.scaffold import scaffold_tree
from unity_template.domain import Dependency_Set
from unity_template.exceptions import PathNotFoundError, ValidationFailureError


class TestRenderManifest:
    def test_manifest_wraps_dependencies(self):
        deps = Dependency_Set.from_mapping({"com.unity.ugui": "1.0.0"})
        assert build_manifest(deps) == {"dependencies": {"com.unity.ugui": "1.0.0"}}

    def test_rendering_is_stable(self):
        deps = {"com.unity.timeline": "1.7.4", "com.unity.ugui": "1.0.0"}
        expected = json.dumps({"dependencies": deps}, indent=2).encode("utf-8")

        assert render_manifest(deps) == expected
        assert render_manifest(deps) == render_manifest(dict(deps))

    def test_empty_dependencies(self):
        assert json.loads(render_manifest({})) == {"dependencies": {}}

    def test_plain_mapping_is_validated(self):
        with pytest.raises(ValidationFailureError):
            render_manifest({"com.unity.ugui": ""})


class TestWriteManifests:
    def test_both_copies_are_byte_identical(self, builds_dir, descriptor):
        root = builds_dir / "b"
        scaffold_tree(root, descriptor)

        packages_copy, assets_copy = write_manifests(root, descriptor.dependencies)

        assert packages_copy == root / "package" / "ProjectData~" / "Packages" / "manifest.json"
        assert assets_copy == root / "package" / "ProjectData~" / "Assets" / "manifest.json"
        assert packages_copy.read_bytes() == assets_copy.read_bytes()
        assert json.loads(assets_copy.read_text()) == {"dependencies": {"com.unity.ugui": "1.0.0"}}

    def test_missing_skeleton_is_fatal(self, tmp_path, descriptor):
        with pytest.raises(PathNotFoundError):
            write_manifests(tmp_path / "not-scaffolded", descriptor.dependencies)
