"""
Artifact version ordering.

Versions are compared the way Maven repositories order them: the string is
split into numeric and qualifier tokens at '.', '-' and digit/letter
boundaries, numbers compare numerically, and well-known qualifiers follow

    alpha < beta < milestone < rc < snapshot < "" (release) < sp

Unknown qualifiers sort after all known ones, lexicographically. Trailing
zero and release tokens are insignificant, so "1", "1.0" and "1.0.0-final"
are equal. Any non-blank string parses; the ordering is total.
"""

import functools
from typing import Union

_QUALIFIERS = ("alpha", "beta", "milestone", "rc", "snapshot", "", "sp")
_ALIASES = {"ga": "", "final": "", "release": "", "cr": "rc"}
_RELEASE_INDEX = str(_QUALIFIERS.index(""))

_INT = 0
_STRING = 1
_LIST = 2


class _IntItem:
    kind = _INT

    def __init__(self, value: int) -> None:
        self.value = value

    def is_null(self) -> bool:
        return self.value == 0

    def compare_to(self, other) -> int:
        if other is None:
            return 0 if self.value == 0 else 1
        if other.kind == _INT:
            return (self.value > other.value) - (self.value < other.value)
        # 1.1 > 1-sp and 1.1 > 1-1
        return 1

    def __str__(self) -> str:
        return str(self.value)


class _StringItem:
    kind = _STRING

    def __init__(self, value: str, followed_by_digit: bool) -> None:
        if followed_by_digit and len(value) == 1:
            value = {"a": "alpha", "b": "beta", "m": "milestone"}.get(value, value)
        self.value = _ALIASES.get(value, value)

    @staticmethod
    def _comparable(qualifier: str) -> str:
        if qualifier in _QUALIFIERS:
            return str(_QUALIFIERS.index(qualifier))
        return f"{len(_QUALIFIERS)}-{qualifier}"

    def is_null(self) -> bool:
        return self._comparable(self.value) == _RELEASE_INDEX

    def compare_to(self, other) -> int:
        mine = self._comparable(self.value)
        if other is None:
            # 1-rc < 1, 1-ga == 1, 1-sp > 1
            return (mine > _RELEASE_INDEX) - (mine < _RELEASE_INDEX)
        if other.kind == _STRING:
            theirs = self._comparable(other.value)
            return (mine > theirs) - (mine < theirs)
        return -1

    def __str__(self) -> str:
        return self.value


class _ListItem(list):
    kind = _LIST

    def is_null(self) -> bool:
        return len(self) == 0

    def normalize(self) -> None:
        for i in range(len(self) - 1, -1, -1):
            item = self[i]
            if item.is_null():
                del self[i]
            elif item.kind != _LIST:
                break

    def compare_to(self, other) -> int:
        if other is None:
            if not self:
                return 0
            return self[0].compare_to(None)
        if other.kind == _INT:
            return -1
        if other.kind == _STRING:
            return 1

        for i in range(max(len(self), len(other))):
            left = self[i] if i < len(self) else None
            right = other[i] if i < len(other) else None
            if left is None:
                result = 0 if right is None else -right.compare_to(None)
            else:
                result = left.compare_to(right)
            if result != 0:
                return result
        return 0

    def __str__(self) -> str:
        parts = []
        for item in self:
            if parts:
                parts.append("-" if item.kind == _LIST else ".")
            parts.append(str(item))
        return "".join(parts)


def _parse_item(is_digit: bool, token: str):
    return _IntItem(int(token)) if is_digit else _StringItem(token, False)


def _parse(version: str) -> _ListItem:
    version = version.lower()
    items = _ListItem()
    current = items
    stack = [current]

    is_digit = False
    start = 0

    for i, c in enumerate(version):
        if c == ".":
            if i == start:
                current.append(_IntItem(0))
            else:
                current.append(_parse_item(is_digit, version[start:i]))
            start = i + 1
        elif c == "-":
            if i == start:
                current.append(_IntItem(0))
            else:
                current.append(_parse_item(is_digit, version[start:i]))
            start = i + 1
            sub = _ListItem()
            current.append(sub)
            current = sub
            stack.append(current)
        elif c.isdigit() and c.isascii():
            if not is_digit and i > start:
                # qualifier immediately followed by a number, e.g. "alpha1"
                current.append(_StringItem(version[start:i], True))
                start = i
                sub = _ListItem()
                current.append(sub)
                current = sub
                stack.append(current)
            is_digit = True
        else:
            if is_digit and i > start:
                current.append(_parse_item(True, version[start:i]))
                start = i
                sub = _ListItem()
                current.append(sub)
                current = sub
                stack.append(current)
            is_digit = False

    if len(version) > start:
        current.append(_parse_item(is_digit, version[start:]))

    while stack:
        stack.pop().normalize()

    return items


@functools.total_ordering
class ComparableVersion:
    """A version string with a total artifact-version ordering."""

    def __init__(self, version: str) -> None:
        if not isinstance(version, str) or not version.strip():
            raise ValueError(f"Not a comparable version: {version!r}")
        self.original = version
        self._items = _parse(version.strip())
        self.canonical = str(self._items)

    def compare_to(self, other: "ComparableVersion") -> int:
        return self._items.compare_to(other._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: "ComparableVersion") -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash(self.canonical)

    def __str__(self) -> str:
        return self.original

    def __repr__(self) -> str:
        return f"ComparableVersion({self.original!r})"


VersionLike = Union[str, ComparableVersion]


def _coerce(version: VersionLike) -> ComparableVersion:
    if isinstance(version, ComparableVersion):
        return version
    return ComparableVersion(version)


def compare_versions(a: VersionLike, b: VersionLike) -> int:
    """
    Compare two versions.

    Returns:
        -1 if a < b, 0 if they are equal, 1 if a > b

    Raises:
        ValueError: if either version is not a non-blank string
    """
    result = _coerce(a).compare_to(_coerce(b))
    return (result > 0) - (result < 0)
