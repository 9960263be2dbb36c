"""
Error classification for recipe fetching.

This module provides the structured exception hierarchy for failures
encountered while resolving, mounting and scanning a recipe bundle.
Every error here is terminal for the fetch call.
"""

from .fetch_failures import (
    RecipeFetchError,
    ArtifactResolutionError,
    ResourceLoadError,
    TreeTraversalError,
)
from .configuration import (
    ConfigurationError,
    UnsupportedBuildToolError,
    InvalidConfigurationError,
)

__all__ = [
    # Fetch Failures
    "RecipeFetchError",
    "ArtifactResolutionError",
    "ResourceLoadError",
    "TreeTraversalError",
    # Configuration Errors
    "ConfigurationError",
    "UnsupportedBuildToolError",
    "InvalidConfigurationError",
]
