"""Base configuration classes and validation framework.

This module defines the abstract base class and validation result type that
configuration objects build on:

- Abstract Configuration base class with validation interface
- ConfigValidationResult for structured validation responses
- Error hierarchy for configuration failures, rooted in the tool's own
  TemplateToolError so the CLI reports them like any other fatal error
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List

from ..exceptions import TemplateToolError


class ConfigurationError(TemplateToolError):
    """Base exception for all configuration-related errors."""

    def __init__(self, message: str, *, path=None) -> None:
        super().__init__(message, path=path, error_code="CONFIGURATION_ERROR")


class ValidationError(ConfigurationError):
    """Exception raised when configuration validation fails.

    Used for missing required values or format violations, such as an empty
    editor installation path.
    """

    pass


class SerializationError(ConfigurationError):
    """Exception raised when configuration data has the wrong shape.

    Used during from_dict when a section or value has an unsupported type.
    """

    pass


@dataclass
class ConfigValidationResult:
    """Result of configuration validation with success state and error details.

    Attributes:
        success: True if validation passed, False otherwise
        errors: List of error messages describing validation failures
    """

    success: bool
    errors: List[str]

    def add_error(self, error: str) -> None:
        """Add an error message and mark validation as failed."""
        self.errors.append(error)
        self.success = False

    @classmethod
    def success_result(cls) -> ConfigValidationResult:
        """Create a successful validation result."""
        return cls(success=True, errors=[])


class Configuration(ABC):
    """Abstract base class for configuration types.

    Subclasses must implement:
    - validate(): Perform configuration-specific validation
    - to_dict(): Convert configuration to dictionary
    - from_dict(): Create configuration from dictionary (class method)
    """

    @abstractmethod
    def validate(self) -> ConfigValidationResult:
        """Validate this configuration and return detailed results."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary.

        The result must be accepted by from_dict() to recreate the
        configuration.
        """

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> Configuration:
        """Create configuration instance from dictionary data.

        Raises:
            SerializationError: If data cannot be deserialized
        """

    def validate_or_raise(self) -> None:
        """Validate configuration and raise ValidationError if invalid.

        Raises:
            ValidationError: If configuration validation fails
        """
        result = self.validate()
        if not result.success:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in result.errors)
            raise ValidationError(error_msg)
