"""Recipe directory keys."""

import re

_EDGE_SEPARATORS = re.compile(r"(\A[/\\])|([/\\]\Z)")
_SEPARATORS = re.compile(r"[/\\]")


def normalize_key(relative_path: str) -> str:
    """
    Turn a directory path relative to the scan root into a recipe key.

    One leading and one trailing separator are dropped and the remaining
    separators become ':', so "io.quarkus/quarkus-resteasy/" maps to
    "io.quarkus:quarkus-resteasy".
    """
    return _SEPARATORS.sub(":", _EDGE_SEPARATORS.sub("", relative_path))
