"""Tests for recipe directory keys."""

import pytest

from update_recipes.recipes.keys import normalize_key


class TestNormalizeKey:
    """Test suite for normalize_key."""

    @pytest.mark.parametrize("path,expected", [
        ("core", "core"),
        ("io.quarkus.http/io.quarkus.http", "io.quarkus.http:io.quarkus.http"),
        ("/a/b/", "a:b"),
        ("\\a\\b\\", "a:b"),
        ("a\\b/c", "a:b:c"),
        ("", ""),
        ("/", ""),
    ])
    def test_normalize(self, path: str, expected: str) -> None:
        """Separators become ':' after trimming one at each edge."""
        assert normalize_key(path) == expected

    def test_trailing_newline_is_not_a_separator(self) -> None:
        """Only a separator at the very end of the path is trimmed."""
        assert normalize_key("a/\n") == "a:\n"

    def test_strips_only_one_separator_per_edge(self) -> None:
        """Only a single leading and trailing separator is removed."""
        assert normalize_key("//a//") == ":a:"

    @pytest.mark.parametrize("path", ["core", "/a/b/", "g/a", "x\\y\\z"])
    def test_idempotent(self, path: str) -> None:
        """Normalizing a key again leaves it unchanged."""
        key = normalize_key(path)
        assert normalize_key(key) == key
