"""Shared exception types for create-unity-template.

Every failure in a build or pack run is fatal to that run. Errors carry the
failing path (when there is one) and propagate to the CLI, which reports them
once and exits with a non-zero status.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

PathLike = Union[str, Path]


class TemplateToolError(RuntimeError):
    """Base exception for create-unity-template errors."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[PathLike] = None,
        error_code: str = "template_tool_error",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.error_code = error_code
        self.context = context or {}


class PathNotFoundError(TemplateToolError):
    """An expected file or directory is absent."""

    def __init__(self, message: str, *, path: Optional[PathLike] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, path=path, error_code="PATH_NOT_FOUND", context=context)


class IOFailureError(TemplateToolError):
    """A create, copy, delete or write operation failed."""

    def __init__(self, message: str, *, path: Optional[PathLike] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, path=path, error_code="IO_FAILURE", context=context)


class ParseFailureError(TemplateToolError):
    """External JSON or TOML input is malformed."""

    def __init__(self, message: str, *, path: Optional[PathLike] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, path=path, error_code="PARSE_FAILURE", context=context)


class ValidationFailureError(TemplateToolError):
    """A required value is missing or invalid.

    Raised for unresolvable project name segments, empty selections from a
    required single-choice prompt, and invalid descriptor fields.
    """

    def __init__(self, message: str, *, path: Optional[PathLike] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, path=path, error_code="VALIDATION_FAILURE", context=context)


@contextmanager
def filesystem_errors(path: PathLike, action: str) -> Iterator[None]:
    """Translate ``OSError`` raised inside the block into tool errors.

    Args:
        path: Path being operated on, reported with the error
        action: Short description such as ``"create directory"``

    Raises:
        PathNotFoundError: If the block raised ``FileNotFoundError``
        IOFailureError: If the block raised any other ``OSError``
    """
    try:
        yield
    except FileNotFoundError as e:
        raise PathNotFoundError(f"Failed to {action}: {e.strerror or e}", path=path) from e
    except OSError as e:
        raise IOFailureError(f"Failed to {action}: {e.strerror or e}", path=path) from e
