"""Field keys and error paths.

Schema keys and input keys both pass through field_key(), so a field declared
as "name" matches an input keyed by "name" or by any Enum member whose value is
"name". When two input keys collapse onto the same canonical key, which value
is seen is unspecified.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Sequence

PathSegment = str | int
Path = tuple[PathSegment, ...]


def field_key(key: Any) -> str:
    """Canonical string form of an object field key."""
    if isinstance(key, Enum):
        return field_key(key.value)
    if isinstance(key, str):
        return str.__str__(key)
    return str(key)


def index_mapping(value: Mapping[Any, Any]) -> dict[str, Any]:
    """Re-key a mapping by canonical field keys."""
    return {field_key(k): v for k, v in value.items()}


def format_path(path: Sequence[PathSegment]) -> str:
    """Format a path as a JSON-style field path, e.g. users[1].profile.name."""
    if not path:
        return "$"
    parts: list[str] = []
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif parts:
            parts.append(f".{segment}")
        else:
            parts.append(str(segment))
    return "".join(parts)
