"""Resource loaders exposing bundle content as filesystem paths."""

import tempfile
import zipfile
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, ContextManager, Iterator, TypeVar, Union

import structlog

from ..errors import ResourceLoadError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _normalize_location(location: str) -> str:
    return location.replace("\\", "/").strip("/")


def _check_member(name: str, archive: Path) -> None:
    """Refuse entries that would land outside the extraction directory."""
    parts = name.replace("\\", "/").split("/")
    if name.startswith(("/", "\\")) or ".." in parts or ":" in parts[0]:
        raise ResourceLoadError(
            f"Refusing to extract entry escaping the bundle: {name}",
            path=str(archive),
        )


class ResourceLoader(ABC):
    """Base class for loaders of bundle resources."""

    @abstractmethod
    def open_resource_path(self, location: str) -> ContextManager[Path]:
        """
        Expose a location of the bundle as a directory path.

        The path is only valid inside the returned context.

        Raises:
            ResourceLoadError: if the location does not exist or cannot be read
        """
        pass

    def load_resource_as_path(self, location: str, visitor: Callable[[Path], T]) -> T:
        """
        Run a visitor over a location of the bundle.

        Resources backing the path are released once the visitor returns or
        raises.
        """
        with self.open_resource_path(location) as path:
            return visitor(path)


class DirectoryResourceLoader(ResourceLoader):
    """Loader for a bundle that is an exploded directory."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    @contextmanager
    def open_resource_path(self, location: str) -> Iterator[Path]:
        relative = _normalize_location(location)
        path = self.root / relative if relative else self.root
        if not path.is_dir():
            raise ResourceLoadError(
                f"Resource not found: {location} in {self.root}",
                location=location,
                path=str(path),
            )
        yield path

    def __repr__(self) -> str:
        return f"DirectoryResourceLoader({str(self.root)!r})"


class ArchiveResourceLoader(ResourceLoader):
    """Loader for a bundle packaged as a zip or jar archive."""

    def __init__(self, archive: Union[str, Path]):
        self.archive = Path(archive)

    @contextmanager
    def open_resource_path(self, location: str) -> Iterator[Path]:
        prefix = _normalize_location(location)

        with tempfile.TemporaryDirectory(prefix="update-recipes-") as tmp:
            try:
                with zipfile.ZipFile(self.archive) as zf:
                    members = [
                        name for name in zf.namelist()
                        if not prefix or name == prefix or name.startswith(prefix + "/")
                    ]
                    for name in members:
                        _check_member(name, self.archive)
                    if not members:
                        raise ResourceLoadError(
                            f"Resource not found: {location} in {self.archive}",
                            location=location,
                            path=str(self.archive),
                        )
                    zf.extractall(tmp, members=members)
            except (OSError, zipfile.BadZipFile) as e:
                raise ResourceLoadError(
                    f"Failed to open archive: {self.archive}",
                    location=location,
                    path=str(self.archive),
                ) from e

            logger.debug(
                "Extracted bundle resources",
                archive=str(self.archive),
                location=location,
                entry_count=len(members),
            )

            path = Path(tmp) / prefix if prefix else Path(tmp)
            if not path.is_dir():
                raise ResourceLoadError(
                    f"Resource is not a directory: {location} in {self.archive}",
                    location=location,
                    path=str(self.archive),
                )
            yield path

    def __repr__(self) -> str:
        return f"ArchiveResourceLoader({str(self.archive)!r})"


def resolve_file_resource_loader(path: Union[str, Path]) -> ResourceLoader:
    """
    Pick the loader matching what the artifact resolved to.

    Raises:
        ResourceLoadError: if the path is neither a directory nor a file
    """
    path = Path(path)
    if path.is_dir():
        return DirectoryResourceLoader(path)
    if path.is_file():
        return ArchiveResourceLoader(path)
    raise ResourceLoadError(f"Resource root does not exist: {path}", path=str(path))
