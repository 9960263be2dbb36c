"""
Recipe tree scanning.

Walks a recipe bundle directory once, matches directories against the
requested recipe keys and collects the recipes whose version falls in the
requested range. Directories are visited in lexicographic pre-order and the
recipes of one matched directory are returned in ascending version order,
so the output is stable across platforms.
"""

import os
from pathlib import Path
from typing import Iterator, Mapping, Union

from ..errors import ResourceLoadError, TreeTraversalError
from ..logging.config import get_fetch_logger, log_recipe_decision
from ..models import RecipeFile
from ..versioning import ComparableVersion
from .filters import is_recipe_filename, recipe_version, should_apply_recipe
from .keys import normalize_key

logger = get_fetch_logger(__name__)

KeyedRanges = Mapping[str, tuple[str, str]]


def _raise_traversal_error(error: OSError) -> None:
    raise TreeTraversalError(
        f"Error traversing directory: {error.filename}",
        directory=str(error.filename) if error.filename is not None else None,
    ) from error


def _walk(top: Path) -> Iterator[tuple[Path, list[str]]]:
    """Depth-first pre-order walk yielding (directory, sorted file names)."""
    for dirpath, dirnames, filenames in os.walk(top, onerror=_raise_traversal_error):
        dirnames.sort()
        yield Path(dirpath), sorted(filenames)


def _relative(root: Path, path: Path) -> str:
    relative = path.relative_to(root)
    return "" if relative == Path(".") else relative.as_posix()


def _version_order(root: Path, path: Path) -> tuple[ComparableVersion, str]:
    return ComparableVersion(recipe_version(path.name)), _relative(root, path)


def _read_recipe(root: Path, path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ResourceLoadError(
            f"Error reading file: {path}",
            path=_relative(root, path),
        ) from e


def _collect_directory(
    root: Path,
    directory: Path,
    key: str,
    from_version: str,
    to_version: str,
) -> list[RecipeFile]:
    """Collect the in-range recipes anywhere below a matched directory."""
    matched = []
    for subdirectory, filenames in _walk(directory):
        for filename in filenames:
            if not is_recipe_filename(filename):
                continue
            applied = should_apply_recipe(filename, from_version, to_version)
            log_recipe_decision(logger, key, filename, applied, from_version, to_version)
            if applied:
                matched.append(subdirectory / filename)

    matched.sort(key=lambda path: _version_order(root, path))

    return [
        RecipeFile(
            key=key,
            path=_relative(root, path),
            filename=path.name,
            version=recipe_version(path.name),
            content=_read_recipe(root, path),
        )
        for path in matched
    ]


def scan_recipe_files(root: Union[str, Path], keyed_ranges: KeyedRanges) -> list[RecipeFile]:
    """
    Select the recipe files applicable to the requested version ranges.

    Args:
        root: Directory holding the recipe tree
        keyed_ranges: Recipe key -> (current version, target version)

    Returns:
        Selected recipes, grouped by matched directory

    Raises:
        TreeTraversalError: if a directory cannot be listed
        ResourceLoadError: if a selected recipe cannot be read
    """
    root = Path(root)
    recipes: list[RecipeFile] = []

    for directory, _ in _walk(root):
        key = normalize_key(_relative(root, directory))
        versions = keyed_ranges.get(key)
        if not versions:
            continue
        from_version, to_version = versions
        found = _collect_directory(root, directory, key, from_version, to_version)
        logger.debug(
            "Matched recipe directory",
            recipe_key=key,
            directory=_relative(root, directory),
            recipe_count=len(found),
        )
        recipes.extend(found)

    return recipes


def fetch_recipes_as_list(root: Union[str, Path], keyed_ranges: KeyedRanges) -> list[str]:
    """Contents of the recipes selected by :func:`scan_recipe_files`."""
    return [recipe.content for recipe in scan_recipe_files(root, keyed_ranges)]
