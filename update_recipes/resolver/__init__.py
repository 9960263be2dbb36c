"""
Resolution of artifact coordinates to local files.
"""
from .artifacts import ArtifactResolver, LocalRepositoryArtifactResolver

__all__ = ["ArtifactResolver", "LocalRepositoryArtifactResolver"]
