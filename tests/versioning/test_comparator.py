"""Tests for artifact version ordering."""

import pytest

from update_recipes.versioning import ComparableVersion, compare_versions


class TestCompareVersions:
    """Test suite for compare_versions."""

    @pytest.mark.parametrize("lower,higher", [
        ("1.0", "1.1"),
        ("1.9", "1.10"),
        ("1.0.1", "1.1"),
        ("2.16", "3.0"),
        ("3.0.0.alpha1", "3.0.0.beta1"),
        ("3.0.0.beta1", "3.0.0.CR1"),
        ("3.0.0.CR1", "3.0.0"),
        ("1-SNAPSHOT", "1"),
        ("1", "1-sp1"),
        ("1-sp", "1-foo"),
        ("1.0-alpha-1", "1.0-alpha-2"),
        ("1-1", "1.1"),
        ("3.2", "3.2.1.Final"),
    ])
    def test_ordering(self, lower: str, higher: str) -> None:
        """Lower version compares below higher and vice versa."""
        assert compare_versions(lower, higher) == -1
        assert compare_versions(higher, lower) == 1

    @pytest.mark.parametrize("a,b", [
        ("1", "1.0"),
        ("1.0", "1.0.0"),
        ("1.0.0", "1.0.0.Final"),
        ("1-ga", "1"),
        ("1.0-RELEASE", "1"),
        ("1.0.CR1", "1.0.rc1"),
        ("1.a1", "1.alpha1"),
        ("3.0.0.FINAL", "3.0.0.final"),
    ])
    def test_equivalent_versions(self, a: str, b: str) -> None:
        """Trailing zeros, release aliases and case are insignificant."""
        assert compare_versions(a, b) == 0
        assert ComparableVersion(a) == ComparableVersion(b)
        assert hash(ComparableVersion(a)) == hash(ComparableVersion(b))

    def test_unknown_qualifiers_are_ordered_lexically(self) -> None:
        """Unknown qualifiers sort after known ones and among themselves."""
        assert compare_versions("1-sp", "1-abc") < 0
        assert compare_versions("1-abc", "1-abd") < 0

    def test_numbers_beat_qualifiers(self) -> None:
        """A numeric segment is newer than a qualifier in the same position."""
        assert compare_versions("1.1", "1.beta") > 0

    def test_large_numbers(self) -> None:
        """Numeric segments are not limited in size."""
        assert compare_versions("1.20240101000000", "1.20240101000001") < 0

    def test_blank_version_rejected(self) -> None:
        """Blank versions cannot be compared."""
        with pytest.raises(ValueError):
            ComparableVersion("  ")
        with pytest.raises(ValueError):
            compare_versions("", "1.0")


class TestComparableVersion:
    """Test suite for ComparableVersion."""

    def test_rich_comparisons(self) -> None:
        """Derived comparison operators follow compare_to."""
        a = ComparableVersion("1.0")
        b = ComparableVersion("2.0")
        assert a < b
        assert a <= b
        assert b >= a
        assert b > a
        assert a != b

    def test_sorting(self) -> None:
        """Versions sort in artifact order rather than string order."""
        versions = ["1.10", "1.2", "1.2-rc1", "1.1.1", "1.2-SNAPSHOT"]
        ordered = sorted(versions, key=ComparableVersion)
        assert ordered == ["1.1.1", "1.2-rc1", "1.2-SNAPSHOT", "1.2", "1.10"]

    def test_canonical_form(self) -> None:
        """Canonical form drops insignificant parts."""
        assert ComparableVersion("1.0.0.Final").canonical == "1"
        assert ComparableVersion("1.2.0-RC1").canonical == "1.2-rc-1"

    def test_str_keeps_original(self) -> None:
        """String form is the version as written."""
        assert str(ComparableVersion("3.0.0.CR1")) == "3.0.0.CR1"

    def test_comparing_with_other_type(self) -> None:
        """Equality with unrelated types is False."""
        assert ComparableVersion("1.0") != "1.0"
