"""Domain objects for template builds.

Plain, validated data structures shared by the bundle pipeline, discovery
and prompt modules.
"""

from .build_descriptor import Build_Descriptor
from .built_in_package import Built_In_Package
from .dependencies import Dependency_Set
from .editor_version import Editor_Version
from .project import Project_Location

__all__ = ["Build_Descriptor", "Built_In_Package", "Dependency_Set", "Editor_Version", "Project_Location"]
