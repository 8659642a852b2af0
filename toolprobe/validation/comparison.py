"""
Structural equality for JSON-like values.

deep_equal() compares values the way JSON sees them:
    - objects are equal when they have the same keys and equal values (key order ignored)
    - arrays are equal element by element, in order
    - booleans never equal numbers, even though True == 1 in Python
    - int and float compare by value (1 == 1.0), as JSON has a single number type
"""

from typing import Any

from toolprobe.validation.paths import MISSING


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def deep_equal(left: Any, right: Any) -> bool:
    """
    Compare two JSON-like values structurally.

    Args:
        left: First value
        right: Second value

    Returns:
        bool: True if the values are structurally equal

    Example:
        ```python
        deep_equal({"a": 1, "b": [1, 2]}, {"b": [1, 2], "a": 1})  # True
        deep_equal([1, 2], [2, 1])                                # False
        deep_equal(True, 1)                                       # False
        ```
    """
    if left is MISSING or right is MISSING:
        return left is right

    if left is None or right is None:
        return left is right

    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right

    if _is_number(left) or _is_number(right):
        return _is_number(left) and _is_number(right) and left == right

    if isinstance(left, str) or isinstance(right, str):
        return isinstance(left, str) and isinstance(right, str) and left == right

    if isinstance(left, dict) and isinstance(right, dict):
        if left.keys() != right.keys():
            return False
        return all(deep_equal(left[key], right[key]) for key in left)

    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(deep_equal(a, b) for a, b in zip(left, right))

    return False
