"""
Configuration error classifications.

These exceptions signal a caller or configuration bug rather than an
environmental failure.
"""

from typing import Optional, Dict, Any


class ConfigurationError(Exception):
    """Base class for invalid caller input or configuration."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class UnsupportedBuildToolError(ConfigurationError):
    """No rewrite plugin version is known for the requested build tool."""

    def __init__(self, message: str, build_tool: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.build_tool = build_tool


class InvalidConfigurationError(ConfigurationError):
    """Loaded configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
