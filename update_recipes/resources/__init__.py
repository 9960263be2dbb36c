"""
Access to the resources of a resolved recipe bundle.
"""
from .loader import (
    ArchiveResourceLoader,
    DirectoryResourceLoader,
    ResourceLoader,
    resolve_file_resource_loader,
)

__all__ = [
    "ArchiveResourceLoader",
    "DirectoryResourceLoader",
    "ResourceLoader",
    "resolve_file_resource_loader",
]
