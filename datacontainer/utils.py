# datacontainer/utils.py
"""
datacontainer.utils
-------------------

Key classification helpers used by the merge algorithm.
Available for downstream consumers as well.
"""

from collections.abc import Mapping
from typing import Any


def is_associative(value: Any) -> bool:
    """Tell whether a value is an associative (dictionary-style) mapping.

    A mapping is *sequential* when its keys, in iteration order, are exactly
    the integers ``0, 1, ..., n-1``. Every other mapping is associative.
    Lists and tuples are always sequential, and an empty mapping counts as
    sequential too. Booleans are not integers here, so ``{False: .., True: ..}``
    is associative.

    Args:
        value: The value to classify.

    Returns:
        True for associative mappings, False for sequential mappings,
        lists, tuples and anything that is not a mapping at all.

    Examples:
        >>> is_associative({"yeah": "assoc"})
        True
        >>> is_associative({1: "assoc", 0: "yeah"})
        True
        >>> is_associative({0: "assoc", 1: "yeah"})
        False
        >>> is_associative(["assoc", "yeah"])
        False
    """
    if not isinstance(value, Mapping):
        return False
    return any(type(k) is not int or k != i for i, k in enumerate(value.keys()))


def is_sequential(value: Any) -> bool:
    """Tell whether a value is list-like: a list, a tuple or a sequential mapping."""
    if isinstance(value, (list, tuple)):
        return True
    return isinstance(value, Mapping) and not is_associative(value)
