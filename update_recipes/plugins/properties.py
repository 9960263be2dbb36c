"""
Reader for ``.properties`` resources.

Supports the usual layout of such files: '#' and '!' comment lines,
'=', ':' or whitespace between key and value, backslash line continuation
and the standard escapes including \\uXXXX.
"""

from pathlib import Path
from typing import Union

from ..errors import ResourceLoadError

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_SEPARATORS = "=:"
_WHITESPACE = " \t\f"


def _logical_lines(text: str) -> list[str]:
    lines = []
    pending = None
    for raw in text.splitlines():
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in "#!":
                continue
        else:
            line = pending + line

        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending = line[:-1]
            continue

        pending = None
        lines.append(line)

    if pending is not None:
        lines.append(pending)
    return lines


def _unescape(value: str) -> str:
    result = []
    i = 0
    while i < len(value):
        c = value[i]
        if c != "\\" or i + 1 == len(value):
            result.append(c)
            i += 1
            continue
        nxt = value[i + 1]
        if nxt == "u":
            digits = value[i + 2:i + 6]
            if len(digits) != 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: \\u{digits}")
            result.append(chr(int(digits, 16)))
            i += 6
            continue
        result.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(result)


def _split(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        c = line[i]
        if c == "\\":
            i += 2
            continue
        if c in _SEPARATORS or c in _WHITESPACE:
            break
        i += 1

    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def parse_properties(text: str) -> dict[str, str]:
    """Parse the text of a properties file; later keys win."""
    properties = {}
    for line in _logical_lines(text):
        key, value = _split(line)
        properties[_unescape(key)] = _unescape(value)
    return properties


def load_recipe_properties(root: Union[str, Path],
                           filename: str = "recipes.properties") -> dict[str, str]:
    """
    Load the properties file shipped next to the recipes.

    A missing file yields an empty mapping.

    Raises:
        ResourceLoadError: if the file exists but cannot be read or parsed
    """
    path = Path(root) / filename
    if not path.is_file():
        return {}

    try:
        text = path.read_text(encoding="latin-1")
        return parse_properties(text)
    except (OSError, ValueError) as e:
        raise ResourceLoadError(
            f"Error reading properties: {path}",
            path=filename,
        ) from e
