"""Tagged view over parsed JSON values.

``json.loads`` produces plain Python objects. Extraction code never inspects
those objects with ad-hoc ``isinstance`` checks; it classifies them once via
``kind_of`` and branches on the resulting ``JsonKind``.
"""

from enum import Enum
from typing import Any


class JsonKind(str, Enum):
    """The six shapes a parsed JSON value can take."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    NULL = "null"


def kind_of(value: Any) -> JsonKind:
    """Classify a parsed JSON value.

    ``bool`` is checked before ``int`` because it is an ``int`` subclass.

    Raises:
        TypeError: if ``value`` is not something ``json.loads`` can produce
    """
    if value is None:
        return JsonKind.NULL
    elif isinstance(value, bool):
        return JsonKind.BOOLEAN
    elif isinstance(value, (int, float)):
        return JsonKind.NUMBER
    elif isinstance(value, str):
        return JsonKind.STRING
    elif isinstance(value, dict):
        return JsonKind.MAPPING
    elif isinstance(value, (list, tuple)):
        return JsonKind.SEQUENCE
    else:
        raise TypeError(f"Not a JSON value: {type(value).__name__}")


def is_string_sequence(value: Any) -> bool:
    """True when ``value`` is a SEQUENCE whose items are all STRINGs."""
    if kind_of(value) is not JsonKind.SEQUENCE:
        return False
    return all(kind_of(item) is JsonKind.STRING for item in value)
