"""
Recipe fetch coordinator.

Resolves the recipe bundle, selects the recipes applicable to the requested
core and dependency updates, and resolves the rewrite plugin version to run
them with.
"""

from pathlib import Path
from typing import Callable, Iterable, Optional

import structlog

from .config.defaults import DefaultConfig, get_default_config
from .errors import (
    ArtifactResolutionError,
    ConfigurationError,
    RecipeFetchError,
    ResourceLoadError,
)
from .logging.config import get_fetch_logger, log_recipe_fetch
from .models import (
    ArtifactCoords,
    BuildTool,
    DependencyUpdate,
    FetchResult,
    ResolvedArtifact,
    UpgradeRequest,
)
from .plugins.properties import load_recipe_properties
from .plugins.resolver import resolve_plugin_version
from .recipes.scanner import KeyedRanges, fetch_recipes_as_list
from .resolver.artifacts import ArtifactResolver
from .resources.loader import ResourceLoader, resolve_file_resource_loader

logger = structlog.get_logger(__name__)
fetch_logger = get_fetch_logger(__name__)


def build_keyed_ranges(requests: Iterable[UpgradeRequest]) -> dict[str, tuple[str, str]]:
    """Map each request key to its (from, to) range; later requests win."""
    keyed_ranges: dict[str, tuple[str, str]] = {}
    for request in requests:
        keyed_ranges[request.key] = (request.from_version, request.to_version)
    return keyed_ranges


def upgrade_requests(
    current_version: str,
    target_version: str,
    dependency_updates: Iterable[DependencyUpdate] = (),
) -> list[UpgradeRequest]:
    """Core request followed by one request per dependency update."""
    requests = [UpgradeRequest.core(current_version, target_version)]
    requests.extend(UpgradeRequest.for_dependency(update) for update in dependency_updates)
    return requests


class RecipeFetcher:
    """
    Coordinator for fetching update recipes.

    Manages the fetch pipeline:
    Upgrade requests → Bundle resolution → Tree scan → Plugin version → Result
    """

    def __init__(
        self,
        artifact_resolver: ArtifactResolver,
        config: Optional[DefaultConfig] = None,
        resource_loader_factory: Optional[Callable[[Path], ResourceLoader]] = None,
    ) -> None:
        self.logger = logger
        self.fetch_logger = fetch_logger

        self.artifact_resolver = artifact_resolver
        self.config = config or get_default_config()
        self.resource_loader_factory = resource_loader_factory or resolve_file_resource_loader

    def recipes_coords(self, recipe_version: Optional[str] = None) -> ArtifactCoords:
        """Coordinates of the recipe bundle for the requested version."""
        recipes = self.config.recipes
        return ArtifactCoords(
            group_id=recipes.group_id,
            artifact_id=recipes.artifact_id,
            version=recipe_version or recipes.default_version,
        )

    def resolve_bundle(self, coords: ArtifactCoords) -> ResolvedArtifact:
        """Resolve the recipe bundle, reporting any failure as a resolution error."""
        try:
            return self.artifact_resolver.resolve(coords)
        except ArtifactResolutionError:
            raise
        except OSError as e:
            raise ArtifactResolutionError(
                f"Failed to resolve artifact: {coords}",
                coordinates=str(coords),
            ) from e

    def fetch_recipes(
        self,
        build_tool: BuildTool,
        recipe_version: Optional[str],
        current_version: str,
        target_version: str,
        dependency_updates: Iterable[DependencyUpdate] = (),
    ) -> FetchResult:
        """
        Fetch the recipes for a core update and its dependency updates.

        Args:
            build_tool: Build tool of the project being updated
            recipe_version: Version of the recipe bundle, default when None
            current_version: Current core version
            target_version: Target core version
            dependency_updates: Dependencies with their recommended versions

        Returns:
            Resolved bundle coordinates, selected recipes and plugin version

        Raises:
            ArtifactResolutionError: if the bundle cannot be resolved
            ResourceLoadError: if the bundle cannot be mounted or read
            TreeTraversalError: if the recipe tree cannot be walked
            UnsupportedBuildToolError: if the build tool cannot run recipes
        """
        coords = self.recipes_coords(recipe_version)
        keyed_ranges = build_keyed_ranges(
            upgrade_requests(current_version, target_version, dependency_updates)
        )

        try:
            artifact = self.resolve_bundle(coords)
            recipes, properties = self.load_bundle(artifact, keyed_ranges)
            plugin_version = resolve_plugin_version(properties, build_tool, self.config.plugins)
        except (RecipeFetchError, ConfigurationError) as e:
            e.context.setdefault("recipes_coordinate", str(coords))
            self.logger.error(
                "Failed to fetch update recipes",
                recipes_coordinate=str(coords),
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

        log_recipe_fetch(
            self.fetch_logger,
            recipes_coordinate=artifact.coordinates,
            recipe_count=len(recipes),
            current_version=current_version,
            target_version=target_version,
            build_tool=build_tool.name,
            plugin_version=plugin_version,
        )

        return FetchResult(
            recipes_coordinate=artifact.coordinates,
            recipes=tuple(recipes),
            rewrite_plugin_version=plugin_version,
        )

    def load_bundle(
        self,
        artifact: ResolvedArtifact,
        keyed_ranges: KeyedRanges,
    ) -> tuple[list[str], dict[str, str]]:
        """
        Mount the bundle once and read both the recipes and their properties.

        Raises:
            ResourceLoadError: if mounting or reading the bundle fails
            TreeTraversalError: if the recipe tree cannot be walked
        """
        recipes_params = self.config.recipes

        def visit(path: Path) -> tuple[list[str], dict[str, str]]:
            recipes = fetch_recipes_as_list(path, keyed_ranges)
            properties = load_recipe_properties(path, recipes_params.properties_file)
            return recipes, properties

        try:
            loader = self.resource_loader_factory(artifact.path)
            return loader.load_resource_as_path(recipes_params.location, visit)
        except OSError as e:
            raise ResourceLoadError(
                f"Failed to load recipes in artifact: {artifact.coordinates}",
                location=recipes_params.location,
                path=str(artifact.path),
            ) from e


def fetch_recipes(
    artifact_resolver: ArtifactResolver,
    build_tool: BuildTool,
    recipe_version: Optional[str],
    current_version: str,
    target_version: str,
    dependency_updates: Iterable[DependencyUpdate] = (),
    config: Optional[DefaultConfig] = None,
) -> FetchResult:
    """Fetch update recipes with a one-off :class:`RecipeFetcher`."""
    fetcher = RecipeFetcher(artifact_resolver, config=config)
    return fetcher.fetch_recipes(
        build_tool,
        recipe_version,
        current_version,
        target_version,
        dependency_updates,
    )
