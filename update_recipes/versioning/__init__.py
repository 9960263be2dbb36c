"""
Version ordering for recipe selection.
"""
from .comparator import ComparableVersion, compare_versions

__all__ = ["ComparableVersion", "compare_versions"]
