"""Dot-path resolution into parsed JSON documents.

Paths are plain dot-separated key lists such as ``fieldType.type``. There is
no wildcard, array-index or escape syntax, so a key that itself contains a
dot cannot be addressed.
"""

from typing import Any, List, Optional

from .json_value import JsonKind, kind_of


def split_path(path: Optional[str]) -> List[str]:
    """Split a dot path into its literal key segments.

    An empty or ``None`` path has no segments.
    """
    if not path:
        return []
    return path.split(".")


def resolve(value: Any, path: Optional[str]) -> Any:
    """Resolve ``path`` against ``value``.

    Returns the nested value, or ``None`` when the path is empty, a segment is
    missing, or an intermediate value is not a MAPPING. A JSON ``null`` found
    at the end of the path is indistinguishable from absence.
    """
    segments = split_path(path)
    if not segments:
        return None

    current = value
    for segment in segments:
        if kind_of(current) is not JsonKind.MAPPING:
            return None
        if segment not in current:
            return None
        current = current[segment]

    return current
