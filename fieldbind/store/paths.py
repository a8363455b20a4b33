"""Conversion between nested submissions and delimiter-joined flat names.

A nested submission such as ``{"address": {"city": "Utrecht"}}`` is
addressed through the flat name ``address:city`` (with the default ``:``
delimiter). Both functions here are pure; they never mutate their input.

>>> flatten_nested({"address": {"city": "Utrecht", "zip": "3511"}}, ":")
{'address:city': 'Utrecht', 'address:zip': '3511'}
>>> expand_flat({"address:city": "Utrecht", "name": "Ada"}, ":")
{'address': {'city': 'Utrecht'}, 'name': 'Ada'}
"""

from collections.abc import Mapping
from typing import Any

MISSING = object()


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _iter_children(container: Any) -> list[tuple[str, Any]]:
    if isinstance(container, Mapping):
        return [(str(key), value) for key, value in container.items()]
    return [(str(index), value) for index, value in enumerate(container)]


def flatten_nested(nested: Mapping[str, Any], delimiter: str) -> dict[str, Any]:
    """Flatten a nested structure into delimiter-joined names.

    Traversal is depth-first and follows each level's iteration order, so
    when two paths produce the same flat name the one visited last wins.
    Lists and tuples are walked like mappings keyed by their index. Empty
    containers produce no names.

    Args:
        nested: The nested mapping to flatten.
        delimiter: The string used to join path segments.

    Returns:
        A new flat dict in traversal order.
    """
    flat: dict[str, Any] = {}
    # One (path, remaining children) entry per open nesting level.
    stack: list[tuple[list[str], Any]] = [([], iter(_iter_children(nested)))]

    while stack:
        path, children = stack[-1]
        child = next(children, MISSING)
        if child is MISSING:
            stack.pop()
            continue

        name, value = child
        if _is_container(value):
            stack.append((path + [name], iter(_iter_children(value))))
        else:
            flat[delimiter.join(path + [name])] = value

    return flat


def expand_flat(flat: Mapping[str, Any], delimiter: str) -> dict[str, Any]:
    """Expand delimiter-joined names back into a nested dict.

    Intermediate levels are created on demand. If a name needs a level where
    a plain value was already stored (or the other way around), the name that
    comes later in ``flat`` wins.

    Args:
        flat: Mapping of flat names to values.
        delimiter: The string separating path segments.

    Returns:
        A new nested dict.
    """
    nested: dict[str, Any] = {}
    for name, value in flat.items():
        *parents, leaf = name.split(delimiter)
        level = nested
        for segment in parents:
            child = level.get(segment)
            if not isinstance(child, dict):
                child = {}
                level[segment] = child
            level = child
        level[leaf] = value
    return nested


def lookup_path(nested: Mapping[str, Any], name: str, delimiter: str) -> Any:
    """Walk ``nested`` along the delimiter-split ``name``.

    Returns:
        The leaf value or subtree at that path, or ``MISSING`` if any segment
        is absent.
    """
    current: Any = nested
    for segment in name.split(delimiter):
        if not isinstance(current, Mapping) or segment not in current:
            return MISSING
        current = current[segment]
    return current
