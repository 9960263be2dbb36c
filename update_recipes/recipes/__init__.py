"""
Recipe directory matching, version-range filtering and tree scanning.
"""
from .filters import is_recipe_filename, recipe_version, should_apply_recipe
from .keys import normalize_key
from .scanner import fetch_recipes_as_list, scan_recipe_files

__all__ = [
    "fetch_recipes_as_list",
    "is_recipe_filename",
    "normalize_key",
    "recipe_version",
    "scan_recipe_files",
    "should_apply_recipe",
]
