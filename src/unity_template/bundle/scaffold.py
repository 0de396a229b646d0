"""Creation of the fixed template skeleton under a fresh build root."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List

from ..constants import PACKAGE_METADATA_FILE, SKELETON_DIRECTORIES, SKELETON_FILES
from ..domain import Build_Descriptor
from ..exceptions import ValidationFailureError, filesystem_errors
from .paths import Segments, render_segments

logger = logging.getLogger(__name__)


def prepare_build_root(build_root: Path) -> bool:
    """Delete any previous build at ``build_root`` and create it empty.

    Builds are never incremental: an existing build root is always removed,
    whatever it contains.

    Returns:
        True if a previous build was removed
    """
    wiped = False
    if build_root.exists():
        logger.info("Removing previous build at %s", build_root)
        with filesystem_errors(build_root, "remove build directory"):
            if build_root.is_dir() and not build_root.is_symlink():
                shutil.rmtree(build_root)
            else:
                build_root.unlink()
        wiped = True

    with filesystem_errors(build_root, "create build directory"):
        build_root.mkdir(parents=True)
    return wiped


def placeholder_content(segments: Segments, descriptor: Build_Descriptor) -> str:
    """Initial content of a skeleton file, chosen by the file's role."""
    file_name = segments[-1]
    if segments == PACKAGE_METADATA_FILE:
        return descriptor.render_package_json()
    if file_name.endswith(".json"):
        return "{}"
    if file_name.endswith(".md"):
        return ""
    raise ValidationFailureError(f"No placeholder content defined for {file_name!r}")


def scaffold_tree(build_root: Path, descriptor: Build_Descriptor) -> List[Path]:
    """Create the skeleton directories and placeholder files.

    Args:
        build_root: Build root to (re)create
        descriptor: Serialized into package/package.json

    Returns:
        Every path created, directories first

    Raises:
        IOFailureError: If any directory or file cannot be created
    """
    prepare_build_root(build_root)
    created: List[Path] = []

    for segments in SKELETON_DIRECTORIES:
        directory = render_segments(segments, base=build_root)
        with filesystem_errors(directory, "create build directory"):
            directory.mkdir(parents=True, exist_ok=True)
        created.append(directory)

    for segments in SKELETON_FILES:
        path = render_segments(segments, base=build_root)
        content = placeholder_content(segments, descriptor)
        with filesystem_errors(path, "write to file"):
            path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s (%d bytes)", path, len(content))
        created.append(path)

    return created
