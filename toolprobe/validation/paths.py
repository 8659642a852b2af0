"""
Path expressions for addressing values inside JSON-like data.

A path is a dotted string with optional bracketed indices:

    user.address.zip
    results[0].id        (same as results.0.id)
    .items..name         (empty segments are dropped)

Two traversals are provided:
    - resolve_path(): lenient lookup that returns MISSING when any step fails
    - has_path(): strict existence check used by the hasProperty rule

Usage:
    ```python
    from toolprobe.validation.paths import resolve_path, has_path, MISSING

    data = {"user": {"tags": ["a", "b"], "zip": None}}

    resolve_path(data, "user.tags[1]")     # "b"
    resolve_path(data, "user.phone")       # MISSING
    has_path(data, "user.zip")             # True (present, even though null)
    ```
"""

import re
from typing import Any, List, Optional

_BRACKET_INDEX = re.compile(r"\[(\w+)\]", re.ASCII)
_CANONICAL_INDEX = re.compile(r"0|[1-9][0-9]*")


class _Missing:
    """Marker for a path that does not resolve to anything."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def parse_path(path: str) -> List[str]:
    """
    Split a path expression into segments.

    Args:
        path: Dotted/bracketed path (e.g., "a.b[0].c")

    Returns:
        List[str]: Segments with empty entries removed (e.g., ["a", "b", "0", "c"])
    """
    normalized = _BRACKET_INDEX.sub(r".\1", path)
    return [segment for segment in normalized.split(".") if segment != ""]


def _list_index(segment: str, length: int) -> Optional[int]:
    """Return the list index named by segment, or None if it is not a valid index."""
    # ASCII decimal only: "01", "²" and "١" are property names, not indices
    if not _CANONICAL_INDEX.fullmatch(segment):
        return None
    index = int(segment)
    return index if index < length else None


def _step(current: Any, segment: str) -> Any:
    """Descend one segment, returning MISSING if the step is impossible."""
    if isinstance(current, dict):
        return current.get(segment, MISSING)

    if isinstance(current, (list, tuple)):
        index = _list_index(segment, len(current))
        return MISSING if index is None else current[index]

    return MISSING


def resolve_path(data: Any, path: Optional[str] = None) -> Any:
    """
    Resolve a path against data.

    Args:
        data: Any JSON-like value
        path: Path expression; None or "" addresses the root

    Returns:
        The value at the path, or MISSING if any step cannot be taken.
        Never raises.
    """
    if not path:
        return data

    current = data
    for segment in parse_path(path):
        if current is None or current is MISSING:
            return MISSING
        current = _step(current, segment)

    return current


def has_path(data: Any, path: Optional[str]) -> bool:
    """
    Check that every segment of path exists as a key or index.

    Unlike resolve_path(), a key whose value is None counts as present,
    and the root itself (empty path) is never considered a property.

    Args:
        data: Any JSON-like value
        path: Path expression

    Returns:
        bool: True if the full path exists
    """
    if not path:
        return False

    current = data
    for segment in parse_path(path):
        if isinstance(current, dict):
            if segment not in current:
                return False
            current = current[segment]
        elif isinstance(current, (list, tuple)):
            index = _list_index(segment, len(current))
            if index is None:
                return False
            current = current[index]
        else:
            return False

    return True
