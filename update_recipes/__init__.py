"""
Update Recipes - Version-ranged migration recipe resolution

Selects, from a versioned recipe bundle artifact, the migration recipes that
apply when moving the core platform or a dependency from its current version
to a target version, and resolves the rewrite plugin version to run them with.
"""

__version__ = "0.1.0"
__author__ = "Update Recipes Team"
