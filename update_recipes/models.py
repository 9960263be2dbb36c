"""
Data models for recipe fetching.

This module defines the immutable records passed between the fetch
orchestrator, the recipe scanner and the artifact resolver.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

CORE_KEY = "core"


class BuildTool(Enum):
    """Build tools a project can be managed with."""
    MAVEN = "maven"
    GRADLE = "gradle"
    GRADLE_KOTLIN_DSL = "gradle-kotlin-dsl"
    JBANG = "jbang"


@dataclass(frozen=True)
class ArtifactCoords:
    """Maven style group:artifact:version coordinates."""
    group_id: str
    artifact_id: str
    version: str

    @classmethod
    def parse(cls, coordinates: str) -> "ArtifactCoords":
        """Parse a ``group:artifact:version`` string."""
        parts = coordinates.strip().split(":")
        if len(parts) != 3 or not all(part.strip() for part in parts):
            raise ValueError(f"Expected group:artifact:version, got: {coordinates!r}")
        group_id, artifact_id, version = (part.strip() for part in parts)
        return cls(group_id=group_id, artifact_id=artifact_id, version=version)

    @property
    def key(self) -> str:
        """The version-less ``group:artifact`` key."""
        return f"{self.group_id}:{self.artifact_id}"

    def with_version(self, version: str) -> "ArtifactCoords":
        return ArtifactCoords(self.group_id, self.artifact_id, version)

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


@dataclass(frozen=True)
class DependencyUpdate:
    """A dependency of the project together with its recommended update."""
    current: ArtifactCoords
    recommended: ArtifactCoords


@dataclass(frozen=True)
class UpgradeRequest:
    """Range of versions to collect recipes for, keyed by recipe directory."""
    key: str            # "core" or "group:artifact"
    from_version: str   # Exclusive lower bound
    to_version: str     # Inclusive upper bound

    @classmethod
    def core(cls, current_version: str, target_version: str) -> "UpgradeRequest":
        return cls(CORE_KEY, current_version, target_version)

    @classmethod
    def for_dependency(cls, update: DependencyUpdate) -> "UpgradeRequest":
        """Key by the current coordinates, range current -> recommended."""
        return cls(update.current.key, update.current.version, update.recommended.version)


@dataclass(frozen=True)
class ResolvedArtifact:
    """An artifact resolved to a file on the local filesystem."""
    group_id: str
    artifact_id: str
    version: str
    path: Path

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


@dataclass(frozen=True)
class RecipeFile:
    """A recipe file selected from the bundle."""
    key: str                # Directory key the recipe was found under
    path: str               # Path relative to the scan root, '/' separated
    filename: str
    version: str            # Filename without its final extension
    content: str


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a recipe fetch."""
    recipes_coordinate: str         # group:artifact:version of the bundle
    recipes: tuple[str, ...]        # Raw recipe contents, in selection order
    rewrite_plugin_version: str

    @property
    def recipe_count(self) -> int:
        return len(self.recipes)
