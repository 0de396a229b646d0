"""Dependency_Set domain object.

An ordered, validated mapping of package identifiers to version specifiers.
It is what ends up under ``dependencies`` in both package.json and the
dependency manifest.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

from ..exceptions import ValidationFailureError

_WHITESPACE_OR_CONTROL = re.compile(r"[\s\x00-\x1f\x7f]")


@dataclass(frozen=True)
class Dependency_Set(Mapping):
    """Ordered mapping of package identifier to version specifier.

    Specifiers are kept verbatim, so registry versions ("1.0.0"), git URLs and
    ``file:`` references are all accepted as long as they are non-empty and
    contain no whitespace.

    Attributes:
        entries: (identifier, specifier) pairs in insertion order
    """

    entries: Tuple[Tuple[str, str], ...] = ()
    _index: Dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: Dict[str, str] = {}
        for identifier, specifier in self.entries:
            self._validate_entry(identifier, specifier)
            if identifier in index:
                raise ValidationFailureError(f"Duplicate dependency identifier: {identifier!r}")
            index[identifier] = specifier
        object.__setattr__(self, "_index", index)

    @staticmethod
    def _validate_entry(identifier: str, specifier: str) -> None:
        if not isinstance(identifier, str) or not identifier.strip():
            raise ValidationFailureError("Dependency identifier cannot be empty")
        if _WHITESPACE_OR_CONTROL.search(identifier):
            raise ValidationFailureError(f"Dependency identifier contains whitespace: {identifier!r}")
        if not isinstance(specifier, str) or not specifier:
            raise ValidationFailureError(f"Version specifier for {identifier!r} cannot be empty")
        if _WHITESPACE_OR_CONTROL.search(specifier):
            raise ValidationFailureError(f"Malformed version specifier for {identifier!r}: {specifier!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]) -> Dependency_Set:
        return cls(tuple((k, v) for k, v in data.items()))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> Dependency_Set:
        return cls(tuple(pairs))

    def __getitem__(self, identifier: str) -> str:
        return self._index[identifier]

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def to_dict(self) -> Dict[str, str]:
        """Plain dict in insertion order, ready for json.dumps."""
        return dict(self._index)
