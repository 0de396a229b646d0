"""Built_In_Package domain object for dependency candidates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

ARCHIVE_SUFFIXES = (".tgz", ".tar.gz")


@dataclass(frozen=True, order=True)
class Built_In_Package:
    """A package that can be offered as a template dependency.

    Attributes:
        name: Package identifier (e.g., "com.unity.ugui")
        version: Version specifier as it will appear in the manifest
    """

    name: str
    version: str

    @classmethod
    def from_file_name(cls, file_name: str) -> Optional[Built_In_Package]:
        """Parse ``<name>-<version>`` entries from the editor's package folder.

        Returns None for entries without a dash.
        """
        for suffix in ARCHIVE_SUFFIXES:
            if file_name.endswith(suffix):
                file_name = file_name[: -len(suffix)]
                break

        name, sep, version = file_name.rpartition("-")
        if not sep or not name or not version:
            return None
        return cls(name=name, version=version)
