"""Relocation of project content roots into the build skeleton.

Paths are compared as lists of segments, so both ``/`` and ``\\`` separated
inputs resolve the same way. Segments are turned back into a host path only
when something touches the filesystem.
"""

from __future__ import annotations

import re
from pathlib import Path, PurePath
from typing import Iterable, Tuple, Union

from ..constants import PROJECT_DATA_DIR, TEMPLATE_NAMESPACE
from ..domain import Build_Descriptor, Project_Location
from ..exceptions import ValidationFailureError

_SEPARATORS = re.compile(r"[\\/]+")

Segments = Tuple[str, ...]


def split_segments(path: Union[str, PurePath]) -> Segments:
    """Split a path into its non-empty segments, whatever the separator."""
    return tuple(part for part in _SEPARATORS.split(str(path)) if part)


def render_segments(segments: Iterable[str], base: Union[str, Path, None] = None) -> Path:
    """Join segments into a host path, optionally under ``base``."""
    path = Path(base) if base is not None else Path()
    for segment in segments:
        path = path / segment
    return path


def relocation_suffix(content_root: Union[str, PurePath], project: Union[Project_Location, str]) -> Segments:
    """Return the segments of ``content_root`` that follow the project root.

    Given a Project_Location, the project root's own segments are stripped
    from the front of the content root, so the suffix is empty only for the
    project root itself. Given just a name, the name is looked up among the
    ancestors of the content root, rightmost first; the content root's own
    final segment never counts as a match.

    Args:
        content_root: Path of Assets, Packages or ProjectSettings
        project: The project location, or just its name

    Returns:
        Segments to append under ``package/ProjectData~``, e.g. ``("Assets",)``

    Raises:
        ValidationFailureError: If the project name is not a segment of the path
    """
    segments = split_segments(content_root)
    if isinstance(project, Project_Location):
        root_segments = split_segments(project.root)
        if segments[: len(root_segments)] == root_segments:
            return segments[len(root_segments) :]
        project_name = project.name
    else:
        project_name = project

    for index in range(len(segments) - 2, -1, -1):
        if segments[index] == project_name:
            return segments[index + 1 :]

    raise ValidationFailureError(
        f"Project name {project_name!r} is not a segment of the content path",
        path=str(content_root),
    )


def transplant_destination(build_root: Path, suffix: Segments) -> Path:
    """Where a content root with the given suffix lands inside the skeleton."""
    return render_segments(("package", PROJECT_DATA_DIR, *suffix), base=build_root)


def build_root_name(descriptor: Build_Descriptor) -> str:
    return f"{TEMPLATE_NAMESPACE}.{descriptor.name}-{descriptor.version}"


def build_root_for(builds_dir: Union[str, Path], descriptor: Build_Descriptor) -> Path:
    """Deterministic build root for a descriptor: ``<builds_dir>/<namespace>.<name>-<version>``."""
    return Path(builds_dir) / build_root_name(descriptor)
