"""Discovery of installed editors and candidate dependencies."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Union

from .config import EssentialsConfig
from .domain import Built_In_Package, Editor_Version
from .exceptions import ParseFailureError, PathNotFoundError, ValidationFailureError, filesystem_errors

logger = logging.getLogger(__name__)


def load_versions(config: EssentialsConfig) -> List[Editor_Version]:
    """List installed editor versions under the hub path.

    Folder names that do not look like versions are skipped.

    Raises:
        PathNotFoundError: If the hub path does not exist
    """
    hub = config.hub_path
    if not hub.is_dir():
        raise PathNotFoundError("Could not load directories from the editor folder", path=hub)

    versions = set()
    with filesystem_errors(hub, "list editor versions"):
        for entry in hub.iterdir():
            if not entry.is_dir():
                continue
            try:
                versions.add(Editor_Version.parse(entry.name))
            except ValidationFailureError:
                logger.debug("Skipping non-version folder %s", entry)
    return sorted(versions)


def load_dependencies(config: EssentialsConfig, version: Editor_Version) -> List[Built_In_Package]:
    """List the packages bundled with one editor version.

    Raises:
        PathNotFoundError: If the editor's package folder does not exist
    """
    folder = config.get_editor_folder(version)
    if not folder.is_dir():
        raise PathNotFoundError("Could not load packages from the editor folder", path=folder)

    packages: List[Built_In_Package] = []
    with filesystem_errors(folder, "list editor packages"):
        for entry in sorted(folder.iterdir()):
            package = Built_In_Package.from_file_name(entry.name)
            if package is None:
                logger.debug("Skipping %s, not a <name>-<version> entry", entry.name)
                continue
            packages.append(package)
    return packages


def load_dependencies_from(project_path: Union[str, Path]) -> List[Built_In_Package]:
    """Read the dependencies declared by a source project's manifest.

    Raises:
        PathNotFoundError: If Packages/manifest.json is missing
        ParseFailureError: If it is not JSON or has no ``dependencies`` object
    """
    manifest_path = Path(project_path) / "Packages" / "manifest.json"
    with filesystem_errors(manifest_path, "load manifest.json"):
        text = manifest_path.read_text(encoding="utf-8-sig")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseFailureError(f"Could not load manifest.json: {e}", path=manifest_path) from e

    dependencies = data.get("dependencies") if isinstance(data, dict) else None
    if not isinstance(dependencies, dict):
        raise ParseFailureError("Could not load [dependencies] from manifest.json", path=manifest_path)

    packages = []
    for name, version in dependencies.items():
        if not isinstance(version, str):
            raise ParseFailureError(f"Dependency {name!r} has a non-string version", path=manifest_path)
        packages.append(Built_In_Package(name=name, version=version))
    return packages


def merge_candidates(*groups: Iterable[Built_In_Package]) -> List[Built_In_Package]:
    """Combine candidate lists, sorted by name and version, one entry per name."""
    merged = sorted(package for group in groups for package in group)
    unique: List[Built_In_Package] = []
    seen = set()
    for package in merged:
        if package.name in seen:
            continue
        seen.add(package.name)
        unique.append(package)
    return unique
