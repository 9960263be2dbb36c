"""Artifact resolvers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

import structlog

from ..errors import ArtifactResolutionError
from ..models import ArtifactCoords, ResolvedArtifact
from ..versioning import ComparableVersion

logger = structlog.get_logger(__name__)

LATEST = "LATEST"
RELEASE = "RELEASE"
SNAPSHOT_SUFFIX = "-SNAPSHOT"


class ArtifactResolver(ABC):
    """Base class for resolving coordinates to a local artifact file."""

    @abstractmethod
    def resolve(self, coords: ArtifactCoords) -> ResolvedArtifact:
        """
        Resolve coordinates to a file on the local filesystem.

        Args:
            coords: Artifact coordinates, the version may be LATEST or RELEASE

        Returns:
            The artifact with its concrete version and local path

        Raises:
            ArtifactResolutionError: if the artifact cannot be resolved
        """
        pass


class LocalRepositoryArtifactResolver(ArtifactResolver):
    """
    Resolver reading a Maven layout repository on the local filesystem.

    Artifacts are expected at
    ``<repository>/<group as path>/<artifact>/<version>/<artifact>-<version>.<extension>``.
    The LATEST and RELEASE meta versions select the highest available
    version, RELEASE ignoring snapshots.
    """

    def __init__(self, repository_dir: Union[str, Path], extension: str = "jar"):
        self.repository_dir = Path(repository_dir)
        self.extension = extension

    def _artifact_dir(self, coords: ArtifactCoords) -> Path:
        return self.repository_dir.joinpath(*coords.group_id.split("."), coords.artifact_id)

    def _select_version(self, coords: ArtifactCoords) -> Optional[str]:
        artifact_dir = self._artifact_dir(coords)
        if not artifact_dir.is_dir():
            return None

        candidates = []
        for version_dir in artifact_dir.iterdir():
            version = version_dir.name
            if not self._artifact_file(coords.with_version(version)).is_file():
                continue
            if coords.version == RELEASE and version.endswith(SNAPSHOT_SUFFIX):
                continue
            candidates.append(version)

        if not candidates:
            return None
        return max(candidates, key=ComparableVersion)

    def _artifact_file(self, coords: ArtifactCoords) -> Path:
        filename = f"{coords.artifact_id}-{coords.version}.{self.extension}"
        return self._artifact_dir(coords) / coords.version / filename

    def resolve(self, coords: ArtifactCoords) -> ResolvedArtifact:
        version: Optional[str] = coords.version
        try:
            if coords.version in (LATEST, RELEASE):
                version = self._select_version(coords)
        except OSError as e:
            raise ArtifactResolutionError(
                f"Failed to list versions of {coords.key} in {self.repository_dir}",
                coordinates=str(coords),
            ) from e

        if version is None:
            raise ArtifactResolutionError(
                f"No {coords.version} version of {coords.key} found in {self.repository_dir}",
                coordinates=str(coords),
            )

        path = self._artifact_file(coords.with_version(version))
        if not path.is_file():
            raise ArtifactResolutionError(
                f"Artifact {coords.with_version(version)} not found in {self.repository_dir}",
                coordinates=str(coords),
            )

        logger.debug(
            "Resolved artifact",
            coordinates=str(coords),
            resolved_version=version,
            path=str(path),
        )
        return ResolvedArtifact(
            group_id=coords.group_id,
            artifact_id=coords.artifact_id,
            version=version,
            path=path,
        )
