"""Project_Location domain object for source projects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from ..constants import CONTENT_ROOTS
from ..exceptions import PathNotFoundError, ValidationFailureError


@dataclass(frozen=True)
class Project_Location:
    """Absolute path to the root of a source project."""

    root: Path

    def __post_init__(self) -> None:
        root = Path(self.root).expanduser()
        if not root.is_absolute():
            root = root.resolve()
        if not root.name:
            raise ValidationFailureError("Project path has no final segment to use as its name", path=root)
        object.__setattr__(self, "root", root)

    @property
    def name(self) -> str:
        """The project's own name, i.e. its final path segment."""
        return self.root.name

    def content_root(self, folder: str) -> Path:
        return self.root / folder

    def content_roots(self) -> Tuple[Path, ...]:
        return tuple(self.content_root(folder) for folder in CONTENT_ROOTS)

    def ensure_exists(self) -> None:
        """Check the project root and all three content roots are directories.

        Raises:
            PathNotFoundError: For the first missing directory
        """
        if not self.root.is_dir():
            raise PathNotFoundError("Project directory does not exist", path=self.root)
        for content_root in self.content_roots():
            if not content_root.is_dir():
                raise PathNotFoundError(f"Project is missing its {content_root.name} folder", path=content_root)
