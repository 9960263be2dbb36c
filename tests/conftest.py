"""Pytest configuration and shared fixtures."""

import zipfile
from pathlib import Path
from typing import Callable, Dict

import pytest

from update_recipes.models import ArtifactCoords, DependencyUpdate


def write_tree(root: Path, files: Dict[str, str]) -> Path:
    """Create files (with parent directories) below root."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def write_jar(archive: Path, files: Dict[str, str]) -> Path:
    """Create a zip archive holding the given files."""
    archive.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(archive, "w") as zf:
        for relative, content in files.items():
            zf.writestr(relative, content)
    return archive


@pytest.fixture
def tree_factory(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """Build a directory tree from a {relative path: content} mapping."""
    def factory(files: Dict[str, str], name: str = "tree") -> Path:
        return write_tree(tmp_path / name, files)
    return factory


@pytest.fixture
def sample_recipe_files() -> Dict[str, str]:
    """Recipe bundle layout with core and one extension directory."""
    return {
        "quarkus-updates/core/1.0.yml": "recipe: core-1.0\n",
        "quarkus-updates/core/1.1.yaml": "recipe: core-1.1\n",
        "quarkus-updates/core/1.5.yml": "recipe: core-1.5\n",
        "quarkus-updates/core/2.0.yml": "recipe: core-2.0\n",
        "quarkus-updates/core/README.md": "not a recipe\n",
        "quarkus-updates/g/a/3.1.yml": "recipe: g-a-3.1\n",
        "quarkus-updates/g/a/4.0.yml": "recipe: g-a-4.0\n",
        "quarkus-updates/recipes.properties": (
            "# plugin versions used to build these recipes\n"
            "rewrite-maven-plugin-version=9.9.9\n"
            "rewrite-gradle-plugin-version = 8.8.8\n"
        ),
    }


@pytest.fixture
def local_repository(tmp_path: Path, sample_recipe_files: Dict[str, str]) -> Path:
    """Maven layout repository holding two versions of the recipe bundle."""
    repository = tmp_path / "repository"
    bundle_dir = repository / "io" / "quarkus" / "quarkus-update-recipes"
    write_jar(bundle_dir / "1.0.0" / "quarkus-update-recipes-1.0.0.jar", {
        "quarkus-updates/core/1.1.yaml": "recipe: old-core-1.1\n",
    })
    write_jar(bundle_dir / "1.2.0" / "quarkus-update-recipes-1.2.0.jar", sample_recipe_files)
    return repository


@pytest.fixture
def sample_dependency_update() -> DependencyUpdate:
    """Dependency g:a moving from 3.0 to 3.1."""
    return DependencyUpdate(
        current=ArtifactCoords("g", "a", "3.0"),
        recommended=ArtifactCoords("g", "a", "3.1"),
    )


@pytest.fixture
def jar_factory(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """Build a zip archive from a {entry name: content} mapping."""
    def factory(files: Dict[str, str], name: str = "bundle.jar") -> Path:
        return write_jar(tmp_path / name, files)
    return factory
