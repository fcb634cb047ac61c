"""Minimal JSON codec for flat request objects and response documents."""

from .decoder import decode
from .encoder import encode
from .values import JsonObject, Value, ValueKind, render_text, value_kind

__all__ = [
    "decode",
    "encode",
    "JsonObject",
    "Value",
    "ValueKind",
    "render_text",
    "value_kind",
]
