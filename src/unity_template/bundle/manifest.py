"""Dependency manifest synthesis.

The manifest is written twice. The Packages copy is read by the package
manager on first import. The Assets copy is staged for the override script
injected at pack time, which promotes it over the real manifest on a later
import.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping

from ..constants import MANIFEST_LOCATIONS
from ..domain import Dependency_Set
from ..exceptions import filesystem_errors
from .paths import render_segments

logger = logging.getLogger(__name__)


def build_manifest(dependencies: Mapping[str, str]) -> Dict[str, Any]:
    if not isinstance(dependencies, Dependency_Set):
        dependencies = Dependency_Set.from_mapping(dependencies)
    return {"dependencies": dependencies.to_dict()}


def render_manifest(dependencies: Mapping[str, str]) -> bytes:
    """Serialize the manifest with stable formatting."""
    return json.dumps(build_manifest(dependencies), indent=2, ensure_ascii=False).encode("utf-8")


def write_manifests(build_root: Path, dependencies: Mapping[str, str]) -> List[Path]:
    """Write the same manifest bytes to both manifest locations.

    Returns:
        The written paths, Packages copy first

    Raises:
        IOFailureError: If either write fails
    """
    content = render_manifest(dependencies)
    written: List[Path] = []
    for segments in MANIFEST_LOCATIONS:
        path = render_segments(segments, base=build_root)
        with filesystem_errors(path, "write manifest file"):
            path.write_bytes(content)
        written.append(path)
    logger.info("Wrote dependency manifest (%d bytes) to %d locations", len(content), len(written))
    return written
