"""Build and pack orchestration.

A build runs Preflight -> Scaffolding -> Transplanting -> ManifestWriting ->
Done. Packing is a separate, later invocation over a finished build. Stages
only move forward; the first error ends the run.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Union

from ..constants import PACKAGE_METADATA_FILE
from ..domain import Build_Descriptor, Project_Location
from ..exceptions import ParseFailureError, PathNotFoundError, filesystem_errors
from .archive import PackResult, pack_skeleton
from .manifest import write_manifests
from .paths import build_root_for, render_segments
from .scaffold import scaffold_tree
from .transplant import transplant_project

logger = logging.getLogger(__name__)


class BuildStage(str, Enum):
    START = "start"
    PREFLIGHT = "preflight"
    SCAFFOLDING = "scaffolding"
    TRANSPLANTING = "transplanting"
    MANIFEST_WRITING = "manifest_writing"
    DONE = "done"


@dataclass
class BuildResult:
    """Outcome of a successful build.

    Attributes:
        build_root: The build root that now holds the skeleton
        destinations: Content root name to its copied location
        manifests: Both manifest copies, Packages first
        stages: Stages passed through, in order
    """

    build_root: Path
    destinations: Dict[str, Path] = field(default_factory=dict)
    manifests: List[Path] = field(default_factory=list)
    stages: List[BuildStage] = field(default_factory=list)

    def enter(self, stage: BuildStage) -> None:
        logger.info("Build %s: %s", self.build_root.name, stage.value)
        self.stages.append(stage)


def build_template(
    project: Project_Location,
    descriptor: Build_Descriptor,
    builds_dir: Union[str, Path],
) -> BuildResult:
    """Build a template skeleton for ``project`` under ``builds_dir``.

    The project and its content roots are checked before anything is
    written, so a missing Assets folder leaves no package.json or manifest
    behind.

    Raises:
        PathNotFoundError: If the project or one of its content roots is missing
        ValidationFailureError: If a content root cannot be relocated
        IOFailureError: On any filesystem failure while building
    """
    result = BuildResult(build_root=build_root_for(builds_dir, descriptor))
    result.enter(BuildStage.START)

    result.enter(BuildStage.PREFLIGHT)
    project.ensure_exists()

    result.enter(BuildStage.SCAFFOLDING)
    scaffold_tree(result.build_root, descriptor)

    result.enter(BuildStage.TRANSPLANTING)
    result.destinations = transplant_project(project, result.build_root)

    result.enter(BuildStage.MANIFEST_WRITING)
    result.manifests = write_manifests(result.build_root, descriptor.dependencies)

    result.enter(BuildStage.DONE)
    return result


def pack_template(build_root: Union[str, Path], outputs_dir: Union[str, Path]) -> PackResult:
    """Pack a finished build into ``<outputs_dir>/<build name>.tgz``."""
    return pack_skeleton(Path(build_root), outputs_dir)


def list_builds(builds_dir: Union[str, Path]) -> List[Path]:
    """Return the build roots under ``builds_dir``, sorted by name.

    Raises:
        PathNotFoundError: If ``builds_dir`` does not exist
    """
    builds = Path(builds_dir)
    if not builds.is_dir():
        raise PathNotFoundError("No builds folder found; run `new` first", path=builds)
    with filesystem_errors(builds, "list builds"):
        return sorted((p for p in builds.iterdir() if p.is_dir()), key=lambda p: p.name)


def read_package_metadata(build_root: Union[str, Path]) -> Dict[str, Any]:
    """Load ``package/package.json`` from a build.

    Raises:
        PathNotFoundError: If the file is missing
        ParseFailureError: If it is not a JSON object
    """
    path = render_segments(PACKAGE_METADATA_FILE, base=build_root)
    with filesystem_errors(path, "read package metadata"):
        text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseFailureError(f"Malformed package metadata: {e}", path=path) from e
    if not isinstance(data, dict):
        raise ParseFailureError("Package metadata must be a JSON object", path=path)
    return data


def editor_version_of(build_root: Union[str, Path]) -> str:
    """The ``unityFull`` value recorded in a build's package.json."""
    data = read_package_metadata(build_root)
    version = data.get("unityFull")
    if not isinstance(version, str) or not version:
        path = render_segments(PACKAGE_METADATA_FILE, base=build_root)
        raise ParseFailureError("Package metadata has no unityFull version", path=path)
    return version

