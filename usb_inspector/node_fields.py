"""Typed accessors over raw system_profiler nodes.

A node is a decoded JSON object whose values may be strings, numbers, nested
lists of nodes or anything else the producer felt like emitting. Every
accessor here is best-effort: a missing or unusable value is ``None`` (or an
empty list), never an exception.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from usb_inspector.field_aliases import CHILDREN_KEYS

RawNode = Mapping[str, Any]


def scalar_text(value: object) -> str | None:
    """Render a string or number as text; anything else is not scalar text."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return None


def first_string(node: RawNode, keys: Sequence[str]) -> str | None:
    """Return the first alias whose value is non-empty scalar text."""
    for key in keys:
        text = scalar_text(node.get(key))
        if text is not None:
            return text
    return None


def first_int(node: RawNode, keys: Sequence[str]) -> int | None:
    """Return the first alias holding an integer, clamped to be non-negative."""
    for key in keys:
        value = node.get(key)
        if isinstance(value, bool):
            continue
        if isinstance(value, int):
            return max(value, 0)
        if isinstance(value, float) and value.is_integer():
            return max(int(value), 0)
        if isinstance(value, str):
            try:
                return max(int(value.strip()), 0)
            except ValueError:
                continue
    return None


def string_list(node: RawNode, keys: Sequence[str]) -> list[str]:
    """Return the first alias usable as a list of strings.

    A list keeps its scalar elements in order (duplicates included); a single
    string is wrapped as a one-element list.
    """
    for key in keys:
        value = node.get(key)
        if isinstance(value, list):
            values = [t for t in (scalar_text(v) for v in value) if t is not None]
            if values:
                return values
        elif isinstance(value, str) and value.strip():
            return [value.strip()]
    return []


def has_any_key(node: RawNode, keys: Sequence[str]) -> bool:
    """Check whether any of the keys is present on the node, whatever its value."""
    return any(node.get(key) is not None for key in keys)


def children_of(node: RawNode) -> list[RawNode]:
    """Return the child nodes listed under the first children key present."""
    for key in CHILDREN_KEYS:
        nested = node.get(key)
        if isinstance(nested, list):
            return [child for child in nested if isinstance(child, Mapping)]
    return []
