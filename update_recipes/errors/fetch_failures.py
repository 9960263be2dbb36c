"""
Fetch failure classifications for recipe resolution.

These exceptions represent failures to obtain or read the recipe bundle.
None of them are retried internally; a partially read recipe set is never
reported as complete.
"""

from typing import Optional, Dict, Any


class RecipeFetchError(Exception):
    """Base class for unrecoverable recipe fetch failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ArtifactResolutionError(RecipeFetchError):
    """Recipe bundle coordinates could not be resolved to a local file."""

    def __init__(self, message: str, coordinates: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.coordinates = coordinates


class ResourceLoadError(RecipeFetchError):
    """Mounting the bundle or reading one of its resources failed."""

    def __init__(self, message: str, location: Optional[str] = None,
                 path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.location = location
        self.path = path


class TreeTraversalError(RecipeFetchError):
    """Walking a directory of the recipe tree failed."""

    def __init__(self, message: str, directory: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.directory = directory
