"""Recipe file recognition and version-range selection."""

import re

from ..versioning import ComparableVersion

RECIPE_FILENAME_PATTERN = re.compile(r"\d\S*\.ya?ml")
_EXTENSION = re.compile(r"[.][^.]+\Z")


def is_recipe_filename(filename: str) -> bool:
    """Recipe files start with a digit, have no whitespace and a YAML extension."""
    return RECIPE_FILENAME_PATTERN.fullmatch(filename) is not None


def recipe_version(filename: str) -> str:
    """Version tag of a recipe file: its name without the final extension."""
    return _EXTENSION.sub("", filename, count=1)


def should_apply_recipe(filename: str, from_version: str, to_version: str) -> bool:
    """
    Whether a recipe belongs to the (from_version, to_version] range.

    Recipes introduced after the current version and up to and including the
    target version apply. A version tag that cannot be compared never applies.
    """
    try:
        version = ComparableVersion(recipe_version(filename))
        current = ComparableVersion(from_version)
        target = ComparableVersion(to_version)
    except ValueError:
        return False
    return current.compare_to(version) < 0 and target.compare_to(version) >= 0
