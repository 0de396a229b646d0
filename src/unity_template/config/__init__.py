"""Configuration helpers for create-unity-template."""

from .base import ConfigurationError, ConfigValidationResult, Configuration, SerializationError, ValidationError
from .essentials import EssentialsConfig, load_config, render_default_config

__all__ = [
    "ConfigValidationResult",
    "Configuration",
    "ConfigurationError",
    "EssentialsConfig",
    "SerializationError",
    "ValidationError",
    "load_config",
    "render_default_config",
]
