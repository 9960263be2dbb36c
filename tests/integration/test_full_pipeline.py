"""Integration tests for the full recipe fetch pipeline."""

from pathlib import Path

import pytest

from update_recipes.config.loader import ConfigLoader
from update_recipes.errors import ArtifactResolutionError
from update_recipes.fetcher import RecipeFetcher, fetch_recipes
from update_recipes.models import ArtifactCoords, BuildTool, DependencyUpdate
from update_recipes.resolver.artifacts import LocalRepositoryArtifactResolver


@pytest.mark.integration
class TestFullPipeline:
    """Integration tests from coordinates to selected recipes."""

    def test_core_and_dependency_recipes(
        self, local_repository: Path, sample_dependency_update: DependencyUpdate
    ) -> None:
        """Core 1.0 -> 1.2 and g:a 3.0 -> 3.1 select exactly two recipes."""
        resolver = LocalRepositoryArtifactResolver(local_repository)

        result = fetch_recipes(
            resolver,
            BuildTool.MAVEN,
            None,
            "1.0",
            "1.2",
            [sample_dependency_update],
        )

        assert result.recipes_coordinate == "io.quarkus:quarkus-update-recipes:1.2.0"
        assert result.recipes == ("recipe: core-1.1\n", "recipe: g-a-3.1\n")
        assert "recipe: g-a-4.0\n" not in result.recipes
        assert result.rewrite_plugin_version == "9.9.9"

    def test_pinned_bundle_version(self, local_repository: Path) -> None:
        """A pinned bundle version is used instead of the latest one."""
        resolver = LocalRepositoryArtifactResolver(local_repository)

        result = fetch_recipes(resolver, BuildTool.GRADLE, "1.0.0", "1.0", "1.2")

        assert result.recipes_coordinate == "io.quarkus:quarkus-update-recipes:1.0.0"
        assert result.recipes == ("recipe: old-core-1.1\n",)
        # the old bundle ships no properties
        assert result.rewrite_plugin_version == "5.38.0"

    def test_core_range_from_archive(self, local_repository: Path) -> None:
        """The core range selects 1.5 and 2.0 but not 1.0."""
        resolver = LocalRepositoryArtifactResolver(local_repository)

        result = fetch_recipes(resolver, BuildTool.MAVEN, "1.2.0", "1.0", "2.0")

        assert result.recipes == (
            "recipe: core-1.1\n",
            "recipe: core-1.5\n",
            "recipe: core-2.0\n",
        )

    def test_unrelated_dependencies_select_nothing(self, local_repository: Path) -> None:
        """Dependencies without a recipe directory add no recipes."""
        resolver = LocalRepositoryArtifactResolver(local_repository)
        update = DependencyUpdate(
            current=ArtifactCoords("org.other", "lib", "1.0"),
            recommended=ArtifactCoords("org.other", "lib", "9.0"),
        )

        result = fetch_recipes(resolver, BuildTool.MAVEN, None, "2.0", "2.0", [update])

        assert result.recipes == ()
        assert result.recipe_count == 0

    def test_configured_fetcher(self, local_repository: Path, tmp_path: Path) -> None:
        """Configuration files drive the bundle coordinates."""
        config_file = tmp_path / "update-recipes.yaml"
        config_file.write_text("recipes:\n  default_version: 1.0.0\n", encoding="utf-8")
        config = ConfigLoader.create(config_file).load()
        fetcher = RecipeFetcher(LocalRepositoryArtifactResolver(local_repository), config=config)

        result = fetcher.fetch_recipes(BuildTool.MAVEN, None, "1.0", "1.2")

        assert result.recipes_coordinate == "io.quarkus:quarkus-update-recipes:1.0.0"

    def test_missing_bundle(self, tmp_path: Path) -> None:
        """An empty repository cannot provide recipes."""
        resolver = LocalRepositoryArtifactResolver(tmp_path / "empty")

        with pytest.raises(ArtifactResolutionError):
            fetch_recipes(resolver, BuildTool.MAVEN, None, "1.0", "2.0")
