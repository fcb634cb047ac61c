"""Structural JSON encoder for response documents.

Only ``\\`` and ``"`` are escaped inside strings; control characters such
as newlines are emitted as-is.
"""

from __future__ import annotations

import math
from typing import Any

from .values import ValueKind, value_kind


def escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def encode(value: Any) -> str:
    """Serialize ``value`` to JSON text. Never fails.

    Values that are not structurally recognized are encoded as the JSON
    string of ``str(value)``.
    """
    kind = value_kind(value)
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if kind is ValueKind.INTEGER:
        return str(int(value))
    if kind is ValueKind.FLOAT:
        number = float(value)
        if not math.isfinite(number):
            return "null"
        return repr(number)
    if kind is ValueKind.STRING:
        return f'"{escape(value)}"'
    if kind is ValueKind.OBJECT:
        fields = ",".join(
            f'"{escape(str(key))}":{encode(item)}' for key, item in value.items()
        )
        return "{" + fields + "}"
    if kind is ValueKind.SEQUENCE:
        return "[" + ",".join(encode(item) for item in value) + "]"
    return f'"{escape(str(value))}"'
