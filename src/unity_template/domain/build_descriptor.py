"""Build_Descriptor domain object.

The descriptor holds everything a build needs to know about the template
being produced. It is created once per build from collected input, never
changes afterwards, and is serialized verbatim into ``package/package.json``.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple

from ..constants import CATEGORIES
from ..exceptions import ValidationFailureError
from .dependencies import Dependency_Set

_IDENTIFIER_RE = re.compile(r"^[a-z0-9_.]+$")
_SEMVER_RE = re.compile(r"^\d+\.\d+\.\d+(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?$")


def normalize_identifier(raw: str) -> str:
    """Lowercase the raw name and strip dashes and whitespace.

    >>> normalize_identifier("My-Cool Template")
    'mycooltemplate'
    """
    return "".join(ch for ch in raw.lower().replace("-", "") if not ch.isspace())


def display_name_from(raw: str) -> str:
    """Turn a dashed name into a title-cased display name.

    Only the first letter of each dash-separated word is uppercased; the rest
    of the word is left alone.

    >>> display_name_from("my-cool-template")
    'My Cool Template'
    """
    words = [word[:1].upper() + word[1:] for word in raw.split("-")]
    return " ".join(word for word in words if word).strip()


def normalize_keywords(keywords: Iterable[str]) -> Tuple[str, ...]:
    """Trim keywords and drop blanks and repeats, keeping first occurrences."""
    seen: Dict[str, None] = {}
    for keyword in keywords:
        keyword = keyword.strip()
        if keyword and keyword not in seen:
            seen[keyword] = None
    return tuple(seen)


def parse_keywords(text: str) -> Tuple[str, ...]:
    """Split comma-separated keyword input."""
    return normalize_keywords(text.split(","))


@dataclass(frozen=True)
class Build_Descriptor:
    """Metadata for one template build.

    Attributes:
        name: Normalized identifier (lowercase, no dashes, no whitespace)
        display_name: Human readable name shown by the editor
        version: Semantic version of the template package (e.g., "0.0.1")
        unity: Editor major version (e.g., "2022.3")
        unity_full: Full editor version (e.g., "2022.3.10f1")
        keywords: Ordered, de-duplicated keywords
        category: One of CATEGORIES
        description: Free text description (may be empty)
        dependencies: Package identifier to version specifier mapping
    """

    name: str
    display_name: str
    version: str
    unity: str
    unity_full: str
    keywords: Tuple[str, ...] = ()
    category: str = CATEGORIES[0]
    description: str = ""
    dependencies: Dependency_Set = field(default_factory=Dependency_Set)

    def __post_init__(self) -> None:
        """Validate descriptor fields after initialization."""
        object.__setattr__(self, "keywords", normalize_keywords(self.keywords))
        if isinstance(self.dependencies, dict):
            object.__setattr__(self, "dependencies", Dependency_Set.from_mapping(self.dependencies))

        self._validate_name()
        self._validate_version()
        self._validate_editor_versions()
        if not self.display_name or not self.display_name.strip():
            raise ValidationFailureError("Display name cannot be empty")
        if self.category not in CATEGORIES:
            raise ValidationFailureError(
                f"Category must be one of {', '.join(CATEGORIES)}, got {self.category!r}"
            )

    def _validate_name(self) -> None:
        if not self.name:
            raise ValidationFailureError("Template name cannot be empty")
        if self.name != normalize_identifier(self.name) or not _IDENTIFIER_RE.match(self.name):
            raise ValidationFailureError(
                f"Template name must be lowercase without dashes or whitespace, got {self.name!r}"
            )

    def _validate_version(self) -> None:
        if not _SEMVER_RE.match(self.version or ""):
            raise ValidationFailureError(f"Package version must be a semantic version, got {self.version!r}")

    def _validate_editor_versions(self) -> None:
        if not self.unity:
            raise ValidationFailureError("Editor major version cannot be empty")
        if not self.unity_full.startswith(f"{self.unity}."):
            raise ValidationFailureError(
                f"Full editor version {self.unity_full!r} does not extend major version {self.unity!r}"
            )

    def to_package_json(self) -> Dict[str, Any]:
        """Return package.json content with the external field names, in order."""
        return {
            "name": self.name,
            "displayName": self.display_name,
            "version": self.version,
            "unity": self.unity,
            "unityFull": self.unity_full,
            "keywords": list(self.keywords),
            "category": self.category,
            "description": self.description,
            "dependencies": self.dependencies.to_dict(),
        }

    def render_package_json(self) -> str:
        return json.dumps(self.to_package_json(), indent=2, ensure_ascii=False)
