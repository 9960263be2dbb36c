"""
Rewrite plugin version resolution.
"""
from .properties import load_recipe_properties, parse_properties
from .resolver import resolve_plugin_version

__all__ = ["load_recipe_properties", "parse_properties", "resolve_plugin_version"]
