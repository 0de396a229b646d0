"""Packing of a finished build into a gzip-compressed tar archive.

Every entry is rooted at ``package/`` no matter what the build root is
called. One extra entry, the manifest override script, exists only inside the
archive: it is rendered to a scratch file, appended, and the scratch file is
removed again before packing returns.
"""

from __future__ import annotations

import logging
import os
import tarfile
import tempfile
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Tuple, Union

import jinja2

from ..constants import ARCHIVE_ROOT, ARCHIVE_SUFFIX, OVERRIDE_SCRIPT_ARCNAME, OVERRIDE_SCRIPT_NAME
from ..exceptions import IOFailureError, PathNotFoundError, filesystem_errors

logger = logging.getLogger(__name__)

SCRIPT_FILE_MODE = 0o644

OVERRIDE_SCRIPT_TEMPLATE = """\
using System.IO;
using UnityEditor;
using UnityEngine;

public static class {{ class_name }}
{
    private static readonly string InputPath = $"{Application.dataPath}/{{ staged_manifest }}";

    [InitializeOnLoadMethod]
    private static void OnLoad()
    {
        if (!File.Exists(InputPath))
        {
            Debug.LogWarning($"Input path does not exist at: {InputPath}");
            Debug.LogWarning("{{ script_name }} is most likely completed. Remove this file if so.");
            return;
        }

        var targetPath = Path.Combine(Application.dataPath, "{{ target_manifest }}");

        File.Copy(InputPath, targetPath, true);

        // delete this file
        AssetDatabase.DeleteAsset("Assets/{{ script_name }}");
        AssetDatabase.DeleteAsset("Assets/{{ staged_manifest }}");
        AssetDatabase.SaveAssets();
        AssetDatabase.Refresh();
    }
}
"""


class PackStage(str, Enum):
    START = "start"
    ARCHIVING = "archiving"
    INJECTING_SCRIPT = "injecting_script"
    CLEANUP = "cleanup"
    DONE = "done"


@dataclass
class PackResult:
    """Outcome of a successful pack.

    Attributes:
        archive_path: The written .tgz file
        entries: Archive member names in write order
        stages: Stages passed through, in order
    """

    archive_path: Path
    entries: List[str] = field(default_factory=list)
    stages: List[PackStage] = field(default_factory=list)


def render_override_script() -> str:
    """Render the manifest override script.

    The script has no per-build parameters; the template only names the files
    it works on.
    """
    env = jinja2.Environment(autoescape=False, undefined=jinja2.StrictUndefined, keep_trailing_newline=True)
    template = env.from_string(OVERRIDE_SCRIPT_TEMPLATE)
    return template.render(
        class_name=Path(OVERRIDE_SCRIPT_NAME).stem,
        script_name=OVERRIDE_SCRIPT_NAME,
        staged_manifest="manifest.json",
        target_manifest="../Packages/manifest.json",
    )


def archive_path_for(build_root: Path, outputs_dir: Union[str, Path]) -> Path:
    """Output archive path, named after the build root's directory."""
    return Path(outputs_dir) / f"{build_root.name}{ARCHIVE_SUFFIX}"


def iter_skeleton(package_root: Path) -> Iterator[Tuple[Path, str]]:
    """Yield ``(path, arcname)`` for the package root and everything below it.

    Directories come before their contents and siblings are sorted, so the
    same tree always produces the same entry order.
    """
    yield package_root, ARCHIVE_ROOT
    for current, dirs, files in os.walk(package_root):
        dirs.sort()
        current_path = Path(current)
        relative = current_path.relative_to(package_root)
        for name in dirs + sorted(files):
            arc_parts = (ARCHIVE_ROOT, *relative.parts, name)
            yield current_path / name, "/".join(arc_parts)


def _script_member(info: tarfile.TarInfo) -> tarfile.TarInfo:
    # mkstemp creates the scratch file as 0600
    info.mode = SCRIPT_FILE_MODE
    return info


def _inject_override_script(tar: tarfile.TarFile, scratch_dir: Path) -> str:
    with filesystem_errors(scratch_dir, "create packer class file"):
        fd, scratch_name = tempfile.mkstemp(prefix=Path(OVERRIDE_SCRIPT_NAME).stem, suffix=".cs", dir=scratch_dir)
    scratch = Path(scratch_name)
    try:
        with filesystem_errors(scratch, "write packer class file"):
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(render_override_script())
            tar.add(scratch, arcname=OVERRIDE_SCRIPT_ARCNAME, recursive=False, filter=_script_member)
    finally:
        with filesystem_errors(scratch, "delete packer class file"):
            scratch.unlink(missing_ok=True)
    return OVERRIDE_SCRIPT_ARCNAME


def pack_skeleton(build_root: Path, outputs_dir: Union[str, Path]) -> PackResult:
    """Write ``build_root/package`` into ``<outputs_dir>/<build_root.name>.tgz``.

    Args:
        build_root: A finished build, containing a ``package`` directory
        outputs_dir: Directory for the archive, created if missing

    Returns:
        PackResult describing the archive

    Raises:
        PathNotFoundError: If the build has no package directory
        IOFailureError: If writing the archive or the scratch script fails
    """
    build_root = Path(build_root)
    package_root = build_root / ARCHIVE_ROOT
    if not package_root.is_dir():
        raise PathNotFoundError("Build has no package folder", path=package_root)

    outputs = Path(outputs_dir)
    with filesystem_errors(outputs, "create output directory"):
        outputs.mkdir(parents=True, exist_ok=True)

    result = PackResult(archive_path=archive_path_for(build_root, outputs))
    result.stages.append(PackStage.START)
    try:
        with filesystem_errors(result.archive_path, "pack tar file"):
            with tarfile.open(result.archive_path, "w:gz") as tar:
                result.stages.append(PackStage.ARCHIVING)
                logger.info("Archiving %s", package_root)
                for path, arcname in iter_skeleton(package_root):
                    tar.add(path, arcname=arcname, recursive=False)
                    result.entries.append(arcname)

                result.stages.append(PackStage.INJECTING_SCRIPT)
                result.entries.append(_inject_override_script(tar, outputs))
                result.stages.append(PackStage.CLEANUP)
    except tarfile.TarError as e:
        raise IOFailureError(f"Failed to pack tar file: {e}", path=result.archive_path) from e

    result.stages.append(PackStage.DONE)
    logger.info("Packed %d entries into %s", len(result.entries), result.archive_path)
    return result
