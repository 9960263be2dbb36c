"""Rewrite plugin version selection per build tool."""

from typing import Mapping, NamedTuple, Optional

from ..config.defaults import PluginVersionParams
from ..errors import UnsupportedBuildToolError
from ..models import BuildTool

PROP_REWRITE_MAVEN_PLUGIN_VERSION = "rewrite-maven-plugin-version"
PROP_REWRITE_GRADLE_PLUGIN_VERSION = "rewrite-gradle-plugin-version"


class PluginVersionSource(NamedTuple):
    """Property holding the plugin version and the default to use without it."""
    property_key: str
    default_field: str


PLUGIN_VERSION_SOURCES: dict[BuildTool, PluginVersionSource] = {
    BuildTool.MAVEN: PluginVersionSource(
        PROP_REWRITE_MAVEN_PLUGIN_VERSION, "maven_rewrite_plugin_version"),
    BuildTool.GRADLE: PluginVersionSource(
        PROP_REWRITE_GRADLE_PLUGIN_VERSION, "gradle_rewrite_plugin_version"),
    BuildTool.GRADLE_KOTLIN_DSL: PluginVersionSource(
        PROP_REWRITE_GRADLE_PLUGIN_VERSION, "gradle_rewrite_plugin_version"),
}


def resolve_plugin_version(
    properties: Mapping[str, str],
    build_tool: BuildTool,
    defaults: Optional[PluginVersionParams] = None,
) -> str:
    """
    Rewrite plugin version to run the recipes with.

    Args:
        properties: Properties shipped with the recipe bundle
        build_tool: Build tool of the project being updated
        defaults: Fallback versions, built-in defaults when omitted

    Raises:
        UnsupportedBuildToolError: if the build tool cannot run update recipes
    """
    source = PLUGIN_VERSION_SOURCES.get(build_tool)
    if source is None:
        raise UnsupportedBuildToolError(
            f"This build tool does not support update {build_tool}",
            build_tool=build_tool,
        )

    version = properties.get(source.property_key)
    if version is not None and version.strip():
        return version.strip()

    return getattr(defaults or PluginVersionParams(), source.default_field)
