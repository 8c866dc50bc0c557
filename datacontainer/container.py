# datacontainer/container.py
"""
datacontainer.container
-----------------------

Generic data container addressable through dot-notation key paths.

`DataContainer` owns a nested mapping and offers deep get/set/has/delete via
dotted keys (``"database.host"``), a togglable read-only guard, recursive
merging of several sources and mapping-style indexed access.

The path and merge algorithms are exposed as free functions so they can be
applied to plain dictionaries too.
"""

import copy
import json
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Dict, List, Optional, Union

from .exceptions import InvalidArgument, KeyNotFound, ReadOnlyViolation
from .utils import is_associative, is_sequential

log = logging.getLogger(__name__)


class _Missing:
    """Sentinel type for 'no value supplied'."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()
# Returned internally for lookups that must not raise
_NOT_FOUND = _Missing()

# --- Path Helpers ---

def _split_key(key: Any) -> List[Any]:
    """Split a dotted key into path segments. Non-string keys are a single segment."""
    if isinstance(key, str):
        return key.split('.')
    return [key]


def _list_index(node: list, segment: Any) -> Optional[int]:
    """Return the in-range list index `segment` addresses in `node`, or None."""
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        index = segment
    elif isinstance(segment, str) and segment.isascii() and segment.isdigit():
        index = int(segment)
    else:
        return None
    return index if 0 <= index < len(node) else None


def _child(node: Any, segment: Any) -> Any:
    """Step one segment down from `node`; _NOT_FOUND if it can't be traversed."""
    if isinstance(node, Mapping):
        return node[segment] if segment in node else _NOT_FOUND
    if isinstance(node, list):
        index = _list_index(node, segment)
        return _NOT_FOUND if index is None else node[index]
    return _NOT_FOUND


def _assign(node: Union[MutableMapping, list], segment: Any, value: Any) -> None:
    if isinstance(node, list):
        node[_list_index(node, segment)] = value
    else:
        node[segment] = value


def get_by_dot(data: Mapping, key: Any, default: Any = MISSING) -> Any:
    """
    Retrieve a nested value from a Mapping using a dot-notated key.

    Mappings are traversed by key and lists by in-range index (``"items.0"``).
    If any segment before the last resolves to anything else, the path is
    treated as absent.

    Args:
        data: The mapping to read from.
        key: The dot-notation key (e.g., "database.host").
        default: Returned when the path does not exist. When omitted a miss
                 raises KeyError instead.

    Returns:
        The value found at the specified path, or `default`.

    Raises:
        KeyError: If the path does not exist and no default was given.
    """
    d = data
    parts = _split_key(key)
    for i, p in enumerate(parts):
        d = _child(d, p)
        if d is _NOT_FOUND:
            if default is MISSING:
                found_path = '.'.join(str(s) for s in parts[:i])
                raise KeyError(f"Key path '{key}' not found (missing part: '{p}' at path '{found_path}')")
            return default
    return d


def has_by_dot(data: Mapping, key: Any) -> bool:
    """Check whether a dot-notated key path is present (a stored None counts as present)."""
    return get_by_dot(data, key, _NOT_FOUND) is not _NOT_FOUND


def set_by_dot(data: Dict, key: Any, value: Any) -> None:
    """
    Set a nested value using a dot-notated key string.

    Creates intermediate dictionaries along the path if they do not exist and
    descends into lists through in-range indexes. An immutable mapping on the
    path is replaced by a dict copy of itself. Any other intermediate value
    (a scalar, or a list the next segment doesn't index) is overwritten with
    a new empty dictionary and a warning is logged; whatever was stored there
    is lost.

    Args:
        data: The dictionary to modify.
        key: The dot-notation key (e.g., "database.host").
        value: The value to set at the specified path.
    """
    parts = _split_key(key)
    d = data
    for p, next_p in zip(parts[:-1], parts[1:]):
        current_val = _child(d, p)
        if isinstance(current_val, Mapping) and not isinstance(current_val, MutableMapping):
            log.debug("Copying immutable mapping at '%s' in path '%s'", p, key)
            current_val = dict(current_val)
            _assign(d, p, current_val)
        elif not isinstance(current_val, Mapping) and not (
                isinstance(current_val, list) and _list_index(current_val, next_p) is not None):
            if current_val is not _NOT_FOUND:
                log.warning(
                    "Overwriting non-mapping key '%s' (type: %s) in path '%s'",
                    p, type(current_val).__name__, key,
                )
            current_val = {}
            _assign(d, p, current_val)
        d = current_val
    _assign(d, parts[-1], value)


def delete_by_dot(data: Dict, key: Any) -> bool:
    """
    Delete a nested value using a dot-notated key string.

    Deleting a list element shifts the elements after it down by one. Parents
    left empty by the deletion are kept.

    Returns:
        True if the key was removed, False if the path did not exist.
    """
    parts = _split_key(key)
    d = data
    for p in parts[:-1]:
        d = _child(d, p)
        if d is _NOT_FOUND:
            return False
    final = parts[-1]
    if isinstance(d, list):
        index = _list_index(d, final)
        if index is None:
            return False
        del d[index]
        return True
    if not isinstance(d, Mapping) or final not in d:
        return False
    del d[final]
    return True

# --- Merge Helpers ---

def _concat(existing: Any, incoming: Any) -> Union[list, dict]:
    """Concatenate two list-like values, reindexing from zero."""
    items = list(existing.values()) if isinstance(existing, Mapping) else list(existing)
    values = incoming.values() if isinstance(incoming, Mapping) else incoming
    items.extend(copy.deepcopy(v) for v in values)
    if isinstance(existing, Mapping) and isinstance(incoming, Mapping):
        return dict(enumerate(items))
    return items


def _merge_into(target: Dict, updates: Mapping) -> Dict:
    """
    Recursively merge `updates` into `target` *in-place* and return `target`.

    - Both values associative mappings: merged recursively.
    - Both values list-like (lists, tuples or sequential mappings): concatenated.
    - Otherwise the value from `updates` (deep-copied) replaces the existing one.
    """
    for key, value_updates in updates.items():
        if key not in target:
            target[key] = copy.deepcopy(value_updates)
            continue

        value_base = target[key]
        if is_associative(value_base) and is_associative(value_updates):
            if not isinstance(value_base, dict):
                value_base = dict(value_base)
            target[key] = _merge_into(value_base, value_updates)
        elif is_sequential(value_base) and is_sequential(value_updates):
            target[key] = _concat(value_base, value_updates)
        else:
            target[key] = copy.deepcopy(value_updates)
    return target


def deep_merge(base: Mapping, updates: Mapping) -> dict:
    """
    Recursively merge the `updates` mapping into the `base` mapping.

    Creates a deep copy of `base`, so neither argument is modified. Nested
    associative mappings merge key by key, list-like values are concatenated
    and every other value from `updates` overwrites the one in `base`.

    Args:
        base: The base mapping.
        updates: The mapping with updates to merge into `base`.

    Returns:
        A new dictionary representing the merged result.
    """
    return _merge_into(copy.deepcopy(dict(base)), updates)

# --- DataContainer Class ---

class DataContainer:
    """
    Mutable key-value store over a nested mapping, addressed with dotted keys.

    ``container.get("a.b")`` reads ``data["a"]["b"]``; ``container.set("a.b", 1)``
    creates ``data["a"]`` when needed. Mutating operations raise
    `ReadOnlyViolation` while the container is read-only.

    Indexed access mirrors the named methods: ``"a.b" in container`` is
    `has`, ``container["a.b"]`` is `get` but raises `KeyNotFound` on a miss,
    ``container["a.b"] = v`` is `set` and ``del container["a.b"]`` is `delete`
    (a missing key is not an error).

    The read-only guard covers the container's own methods only. `all()`,
    `get_contents()` and `get()` hand out the live nested objects, so editing
    those in place bypasses it; copy them first if they go to untrusted code.
    """

    def __init__(self, data: Optional[Mapping] = None, read_only: bool = False):
        if data is None:
            data = {}
        elif not isinstance(data, dict):
            data = dict(data)
        self._data = data
        self._read_only = bool(read_only)

    def _guard(self) -> None:
        if self._read_only:
            raise ReadOnlyViolation()

    # --- Contents ---
    def set_contents(self, data: Mapping) -> "DataContainer":
        """Replace the container's data."""
        self._guard()
        if not isinstance(data, Mapping):
            raise InvalidArgument(data)
        self._data = data if isinstance(data, dict) else dict(data)
        return self

    def get_contents(self) -> dict:
        """
        Return the container's data.

        This is the live mapping, not a copy: editing it bypasses the read-only guard.
        """
        return self._data

    def all(self) -> dict:
        return self.get_contents()

    # --- Read-only Flag ---
    def set_read_only(self, read_only: bool = True) -> "DataContainer":
        """Set whether the container is read-only. Always allowed."""
        self._read_only = bool(read_only)
        return self

    def is_read_only(self) -> bool:
        return self._read_only

    @property
    def read_only(self) -> bool:
        return self._read_only

    # --- Dot-notation Access ---
    def has(self, key: Any) -> bool:
        """Check whether `key` (dot-notation) is set, even if its value is None."""
        return has_by_dot(self._data, key)

    def get(self, key: Any, default: Any = None, *,
            default_factory: Optional[Callable[[], Any]] = None) -> Any:
        """
        Retrieve a value using dot-notation.

        On a miss returns `default`, or the result of calling `default_factory`
        when one is given. A callable passed as `default` is returned as-is.
        Mappings and lists are returned live, not copied.
        """
        value = get_by_dot(self._data, key, _NOT_FOUND)
        if value is not _NOT_FOUND:
            return value
        if default_factory is not None:
            return default_factory()
        return default

    def set(self, key: Any, value: Any) -> "DataContainer":
        """
        Set a value using dot-notation, creating intermediate mappings.

        List elements are addressed by index (``"items.0"``). An intermediate
        value that can't be traversed is replaced by an empty mapping.
        """
        self._guard()
        set_by_dot(self._data, key, value)
        return self

    def delete(self, key: Any) -> bool:
        """Delete a value using dot-notation. Returns False if it wasn't there."""
        self._guard()
        return delete_by_dot(self._data, key)

    def merge(self, *sources: Union[Mapping, "DataContainer"]) -> "DataContainer":
        """
        Merge mappings or other containers into this one, left to right.

        Sources are checked one at a time as they are applied, so those before
        an invalid source have already been merged when `InvalidArgument` is raised.
        """
        self._guard()
        for source in sources:
            if isinstance(source, DataContainer):
                source = source.all()
            elif not isinstance(source, Mapping):
                raise InvalidArgument(source)
            log.debug("Merging %d top-level key(s) into container", len(source))
            _merge_into(self._data, source)
        return self

    # --- Indexed Access ---
    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __getitem__(self, key: Any) -> Any:
        value = get_by_dot(self._data, key, _NOT_FOUND)
        if value is _NOT_FOUND:
            raise KeyNotFound(key)
        return value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: Any) -> None:
        self.delete(key)

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, DataContainer):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == other
        return NotImplemented

    # --- Standard Representation Methods ---
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r}, read_only={self._read_only})"

    def __str__(self) -> str:
        """Return a JSON representation of the container's data."""
        try:
            return json.dumps(self._data, indent=2)
        except (TypeError, ValueError):
            # Opaque values or non-string keys JSON can't handle
            return repr(self)
