"""Projection of decoded request objects onto the engine's input record."""

from __future__ import annotations

from typing import Dict

from ..codec.values import JsonObject, render_text

InputRecord = Dict[str, str]


def project(obj: JsonObject) -> InputRecord:
    """Render every non-null field as text, preserving field order.

    Null fields are dropped so the engine treats them as missing.
    """
    return {key: render_text(value) for key, value in obj.items() if value is not None}
