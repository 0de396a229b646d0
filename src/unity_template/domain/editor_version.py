"""Editor_Version domain object for installed editor releases."""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import ValidationFailureError


@dataclass(frozen=True, order=True)
class Editor_Version:
    """An installed editor release, split at the last dot of its folder name.

    ``2022.3.10f1`` becomes major ``2022.3`` and minor ``10f1``.
    """

    major: str
    minor: str

    @classmethod
    def parse(cls, folder_name: str) -> Editor_Version:
        """Parse an editor installation folder name.

        Raises:
            ValidationFailureError: If the name has no dot to split on
        """
        major, sep, minor = folder_name.rpartition(".")
        if not sep or not major or not minor:
            raise ValidationFailureError(f"Not an editor version folder: {folder_name!r}")
        return cls(major=major, minor=minor)

    @property
    def full(self) -> str:
        return f"{self.major}.{self.minor}"

    def __str__(self) -> str:
        return self.full
