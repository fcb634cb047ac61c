"""Value model shared by the decoder, encoder and input projector.

JSON values are carried as their native Python analogs: ``None``, ``bool``,
``int``, ``float``, ``str``, ``list`` and ``dict``. Objects rely on ``dict``
insertion order, which is significant for output.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, List, Union

Value = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
JsonObject = Dict[str, Value]


class ValueKind(Enum):
    NULL = "null"
    BOOL = "bool"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    SEQUENCE = "sequence"
    OBJECT = "object"
    OTHER = "other"


def value_kind(value: Any) -> ValueKind:
    """Classify ``value`` into the closed set of JSON value kinds."""
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, numbers.Integral):
        return ValueKind.INTEGER
    if isinstance(value, numbers.Real):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER


def render_text(value: Any) -> str:
    """Canonical textual form of a scalar value.

    Booleans become ``true``/``false``, integers have no decimal point and
    floats use their shortest round-tripping representation.
    """
    kind = value_kind(value)
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if kind is ValueKind.INTEGER:
        return str(int(value))
    if kind is ValueKind.FLOAT:
        return repr(float(value))
    return str(value)
