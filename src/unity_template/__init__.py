"""create-unity-template - build and pack Unity project templates.

A build turns a source project plus collected metadata into a template
skeleton under ``builds/``; packing turns that skeleton into a ``.tgz`` the
Unity Hub can load from its ProjectTemplates folder.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .bundle import build_template, pack_template
from .domain import Build_Descriptor, Dependency_Set, Project_Location
from .exceptions import (
    IOFailureError,
    ParseFailureError,
    PathNotFoundError,
    TemplateToolError,
    ValidationFailureError,
)

__all__ = [
    "__version__",
    # Pipeline
    "build_template",
    "pack_template",
    # Domain
    "Build_Descriptor",
    "Dependency_Set",
    "Project_Location",
    # Errors
    "TemplateToolError",
    "PathNotFoundError",
    "IOFailureError",
    "ParseFailureError",
    "ValidationFailureError",
]
