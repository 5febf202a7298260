"""Dot-path primitives over nested dicts and lists.

Every function takes the root mapping as its first argument and works on it
in place. A path is split on ``.`` on each call; empty segments are kept as
empty-string keys. A segment holding a canonical non-negative integer (``"0"``,
``"12"``, not ``"012"``) addresses a list position.

Missing paths are never errors: reads fall back to a default and removals
are no-ops. Writes replace anything in their way that is not a container.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

from dotaccess.errors import InvalidPathError

__all__ = [
    "SEPARATOR",
    "split_path",
    "get_value",
    "set_value",
    "add_value",
    "has_value",
    "delete_value",
    "clear_value",
]

logger = logging.getLogger(__name__)

SEPARATOR = "."

_MISSING = object()


def split_path(path: str) -> list[str]:
    """Split a dot path into its segments."""
    return path.split(SEPARATOR)


def _as_index(segment: str) -> int | None:
    if segment.isascii() and segment.isdigit() and segment == str(int(segment)):
        return int(segment)
    return None


def _is_container(value: Any) -> bool:
    return isinstance(value, (MutableMapping, list))


def _lookup(container: Any, segment: str, default: Any = _MISSING) -> Any:
    if isinstance(container, Mapping):
        return container[segment] if segment in container else default
    if isinstance(container, list):
        index = _as_index(segment)
        if index is not None and index < len(container):
            return container[index]
    return default


def _storable(container: MutableMapping[str, Any] | list[Any], segment: str) -> bool:
    if isinstance(container, MutableMapping):
        return True
    index = _as_index(segment)
    return index is not None and index <= len(container)


def _store(container: MutableMapping[str, Any] | list[Any], segment: str, value: Any) -> None:
    if isinstance(container, MutableMapping):
        container[segment] = value
        return
    index = _as_index(segment)
    if index == len(container):
        container.append(value)
    else:
        container[index] = value  # type: ignore[index]


def _next_key(mapping: Mapping[Any, Any]) -> str:
    indices = [_as_index(str(key)) for key in mapping]
    return str(max((i for i in indices if i is not None), default=-1) + 1)


def _walk_for_write(root: MutableMapping[str, Any], segments: list[str]) -> Any:
    """Descend to the container holding the last segment, creating mappings on the way.

    The returned container is always able to store ``segments[-1]``.
    """
    current: Any = root
    for segment, following in zip(segments, segments[1:]):
        child = _lookup(current, segment)
        if not _is_container(child):
            if child is not _MISSING:
                logger.debug(f"Replacing {type(child).__name__} at segment '{segment}' with a mapping")
            child = {}
            _store(current, segment, child)
        elif not _storable(child, following):
            logger.debug(f"Converting list at segment '{segment}' to a mapping for key '{following}'")
            child = {str(i): item for i, item in enumerate(child)}
            _store(current, segment, child)
        current = child
    return current


def get_value(data: Mapping[str, Any], path: str | None = None, default: Any = None) -> Any:
    """Get the value at a path.

    Args:
        data: Root mapping.
        path: Dot path, or None for the whole structure.
        default: Returned as soon as a segment is missing.

    Returns:
        The value found, ``default`` when the path does not resolve, or
        ``data`` itself when ``path`` is None.

    Raises:
        InvalidPathError: If ``path`` is neither None nor a string.
    """
    if path is None:
        return data
    if not isinstance(path, str):
        raise InvalidPathError(path, "get")
    current: Any = data
    for segment in split_path(path):
        current = _lookup(current, segment)
        if current is _MISSING:
            return default
    return current


def set_value(data: MutableMapping[str, Any], path: str | Mapping[str, Any], value: Any = None) -> None:
    """Set a value at a path, or every ``path -> value`` pair of a mapping.

    Intermediate segments that are missing or hold a non-container are
    replaced with empty mappings.

    Raises:
        InvalidPathError: If ``path`` is neither a string nor a mapping.
    """
    if isinstance(path, str):
        segments = split_path(path)
        parent = _walk_for_write(data, segments)
        _store(parent, segments[-1], value)
    elif isinstance(path, Mapping):
        for key, item in path.items():
            set_value(data, key, item)
    else:
        raise InvalidPathError(path, "set")


def add_value(
    data: MutableMapping[str, Any],
    path: str | Mapping[str, Any],
    value: Any = None,
    pop: bool = False,
) -> None:
    """Append a value to the sequence at a path.

    A list at the path is appended to. A missing, scalar or empty location
    becomes ``[value]``. A non-empty mapping receives ``value`` under its
    next free integer key.

    Args:
        data: Root mapping.
        path: Dot path, or a mapping of paths to values (``pop`` is ignored
            for the bulk form).
        value: Value to append.
        pop: Drop the last segment of ``path`` before walking it.

    Raises:
        InvalidPathError: If ``path`` is neither a string nor a mapping.
    """
    if isinstance(path, Mapping):
        for key, item in path.items():
            add_value(data, key, item)
        return
    if not isinstance(path, str):
        raise InvalidPathError(path, "add")

    segments = split_path(path)
    if pop:
        segments.pop()
    if not segments:
        data[_next_key(data)] = value
        return

    parent = _walk_for_write(data, segments)
    leaf = _lookup(parent, segments[-1])
    if isinstance(leaf, list):
        leaf.append(value)
    elif isinstance(leaf, MutableMapping) and leaf:
        leaf[_next_key(leaf)] = value
    else:
        _store(parent, segments[-1], [value])


def has_value(data: Mapping[str, Any], path: str) -> bool:
    """Check whether a path resolves, whatever the value stored there."""
    if not isinstance(path, str):
        raise InvalidPathError(path, "has")
    current: Any = data
    for segment in split_path(path):
        current = _lookup(current, segment)
        if current is _MISSING:
            return False
    return True


def delete_value(data: MutableMapping[str, Any], path: str | Iterable[str]) -> None:
    """Remove the entry at a path, or at each path of an iterable.

    Removing a list position shifts the following items down.
    """
    if isinstance(path, str):
        *parents, last = split_path(path)
        current: Any = data
        for segment in parents:
            current = _lookup(current, segment)
            if current is _MISSING:
                return
        if isinstance(current, MutableMapping):
            current.pop(last, None)
        elif isinstance(current, list):
            index = _as_index(last)
            if index is not None and index < len(current):
                del current[index]
    elif isinstance(path, Iterable):
        for item in path:
            delete_value(data, item)
    else:
        raise InvalidPathError(path, "delete")


def clear_value(
    data: MutableMapping[str, Any],
    path: str | Iterable[str] | None = None,
    format: bool = False,
) -> None:
    """Replace the container at a path with an empty mapping.

    Args:
        data: Root mapping.
        path: Dot path, an iterable of paths, or None to empty ``data`` in place.
        format: Create missing or non-container segments (the target included)
            instead of giving up on them.
    """
    if path is None:
        data.clear()
    elif isinstance(path, str):
        segments = split_path(path)
        if format:
            _store(_walk_for_write(data, segments), segments[-1], {})
            return
        current: Any = data
        for segment in segments[:-1]:
            current = _lookup(current, segment)
            if not _is_container(current):
                return
        if _is_container(_lookup(current, segments[-1])):
            _store(current, segments[-1], {})
    elif isinstance(path, Iterable):
        for item in path:
            clear_value(data, item, format)
    else:
        raise InvalidPathError(path, "clear")
