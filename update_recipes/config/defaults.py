"""Default configuration parameters for recipe fetching."""

from dataclasses import dataclass


DEFAULT_MAVEN_REWRITE_PLUGIN_VERSION = "4.46.0"
DEFAULT_GRADLE_REWRITE_PLUGIN_VERSION = "5.38.0"


@dataclass(frozen=True)
class RecipeRepositoryParams:
    """Where the recipe bundle lives and how it is laid out."""
    group_id: str = "io.quarkus"                     # Recipe bundle group
    artifact_id: str = "quarkus-update-recipes"      # Recipe bundle artifact
    default_version: str = "LATEST"                  # Used when no version requested
    location: str = "quarkus-updates"                # Scan root inside the bundle
    properties_file: str = "recipes.properties"      # Relative to location

    @property
    def ga(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


@dataclass(frozen=True)
class PluginVersionParams:
    """Rewrite plugin versions used when the bundle does not declare one."""
    maven_rewrite_plugin_version: str = DEFAULT_MAVEN_REWRITE_PLUGIN_VERSION
    gradle_rewrite_plugin_version: str = DEFAULT_GRADLE_REWRITE_PLUGIN_VERSION


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    recipes: RecipeRepositoryParams
    plugins: PluginVersionParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        recipes=RecipeRepositoryParams(),
        plugins=PluginVersionParams(),
    )
