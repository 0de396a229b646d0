"""Copying of the source project's content roots into the skeleton."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Dict, List

from ..constants import EPHEMERAL_FILES
from ..domain import Project_Location
from ..exceptions import PathNotFoundError, filesystem_errors
from .paths import relocation_suffix, render_segments, transplant_destination

logger = logging.getLogger(__name__)


def copy_tree(source: Path, destination: Path) -> None:
    """Recursively copy ``source`` into ``destination``, keeping bytes and layout.

    Raises:
        PathNotFoundError: If ``source`` is not a directory
        IOFailureError: On any copy failure
    """
    if not source.is_dir():
        raise PathNotFoundError("Content folder does not exist", path=source)
    with filesystem_errors(source, f"copy into {destination}"):
        shutil.copytree(source, destination, dirs_exist_ok=True)


def remove_ephemeral_files(build_root: Path) -> List[Path]:
    """Delete files the editor regenerates on import.

    Files that were never copied are skipped.

    Returns:
        The files that were actually removed
    """
    removed: List[Path] = []
    for segments in EPHEMERAL_FILES:
        path = render_segments(segments, base=build_root)
        if not path.exists():
            logger.debug("Nothing to remove at %s", path)
            continue
        with filesystem_errors(path, "remove file"):
            path.unlink()
        removed.append(path)
    return removed


def transplant_project(project: Project_Location, build_root: Path) -> Dict[str, Path]:
    """Copy Assets, Packages and ProjectSettings under ``package/ProjectData~``.

    Nothing is rolled back on failure; rerunning the build wipes the build
    root first.

    Returns:
        Mapping of content root name to its destination inside the skeleton
    """
    destinations: Dict[str, Path] = {}
    for content_root in project.content_roots():
        suffix = relocation_suffix(content_root, project)
        destination = transplant_destination(build_root, suffix)
        logger.info("Copying %s -> %s", content_root, destination)
        copy_tree(content_root, destination)
        destinations[content_root.name] = destination

    removed = remove_ephemeral_files(build_root)
    logger.debug("Removed %d ephemeral file(s)", len(removed))
    return destinations
