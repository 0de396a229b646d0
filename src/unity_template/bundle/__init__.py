"""Template build and pack pipeline."""

from .archive import PackResult, PackStage, pack_skeleton, render_override_script
from .builder import (
    BuildResult,
    BuildStage,
    build_template,
    editor_version_of,
    list_builds,
    pack_template,
    read_package_metadata,
)
from .manifest import render_manifest, write_manifests
from .paths import build_root_for, build_root_name, relocation_suffix, split_segments
from .scaffold import prepare_build_root, scaffold_tree
from .transplant import remove_ephemeral_files, transplant_project

__all__ = [
    "BuildResult",
    "BuildStage",
    "PackResult",
    "PackStage",
    "build_root_for",
    "build_root_name",
    "build_template",
    "editor_version_of",
    "list_builds",
    "pack_skeleton",
    "pack_template",
    "prepare_build_root",
    "read_package_metadata",
    "relocation_suffix",
    "remove_ephemeral_files",
    "render_manifest",
    "render_override_script",
    "scaffold_tree",
    "split_segments",
    "transplant_project",
    "write_manifests",
]
