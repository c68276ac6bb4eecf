"""Property-path resolution against row objects.

A row may be a mapping (``{"id": 1}``), a dataclass, a pydantic model, or
any object exposing attributes.  Paths use dots to descend into nested
objects: ``"address.city"``.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bindql.errors import PropertyAccessError


def resolve_property(row: Any, path: str) -> Any:
    """Return the value found at ``path`` inside ``row``.

    Args:
        row: The object the path is relative to.
        path: Dotted property path.

    Returns:
        The resolved value (may be ``None`` if the property holds ``None``).

    Raises:
        PropertyAccessError: If any segment is missing.
    """
    current = row
    for segment in path.split("."):
        if isinstance(current, Mapping):
            if segment not in current:
                raise PropertyAccessError(path, segment)
            current = current[segment]
        elif hasattr(current, segment):
            current = getattr(current, segment)
        else:
            raise PropertyAccessError(path, segment)
    return current
