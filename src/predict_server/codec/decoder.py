"""Decoder for flat JSON objects.

Only a single top-level object whose values are scalars or quoted strings
is supported. Nested objects and arrays are rejected rather than split at
their inner commas.
"""

from __future__ import annotations

import logging
import re
from typing import List, Tuple

from ..errors import MalformedJsonError
from .values import JsonObject, Value

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_ESCAPE_RE = re.compile(r'\\(["\\])')

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_NESTING_CHARS = frozenset("{}[]")


def decode(text: str) -> JsonObject:
    """Parse ``text`` into an ordered mapping of field name to value.

    Raises:
        MalformedJsonError: if the text is not a brace-delimited object, a
            field has no key/value separator, a key is not a quoted string,
            a string is left open, or a value is a nested object or array.
    """
    text = text.strip()
    if not (text.startswith("{") and text.endswith("}")) or len(text) < 2:
        raise MalformedJsonError(
            "JSON must be an object starting with { and ending with }"
        )

    body = text[1:-1].strip()
    result: JsonObject = {}
    if not body:
        return result

    for segment in _split_fields(body):
        key_text, value_text = _split_key_value(segment)
        key = _parse_key(key_text.strip())
        # Duplicate keys keep their first position and take the last value.
        result[key] = _parse_value(value_text.strip())
    return result


def _split_fields(body: str) -> List[str]:
    segments: List[str] = []
    current: List[str] = []
    in_quotes = False
    escaped = False

    for char in body:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == '"':
            in_quotes = not in_quotes
        elif not in_quotes:
            if char == ",":
                segments.append("".join(current).strip())
                current = []
                continue
            if char in _NESTING_CHARS:
                raise MalformedJsonError(
                    "Nested objects and arrays are not supported"
                )
        current.append(char)

    if in_quotes:
        raise MalformedJsonError("Unterminated string literal")

    tail = "".join(current).strip()
    if tail:
        segments.append(tail)
    return segments


def _split_key_value(segment: str) -> Tuple[str, str]:
    in_quotes = False
    escaped = False
    for idx, char in enumerate(segment):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == '"':
            in_quotes = not in_quotes
        elif char == ":" and not in_quotes:
            return segment[:idx], segment[idx + 1 :]
    raise MalformedJsonError(f"Expected 'key:value' but found: {segment!r}")


def _is_quoted(text: str) -> bool:
    return len(text) >= 2 and text.startswith('"') and text.endswith('"')


def _unescape(text: str) -> str:
    return _ESCAPE_RE.sub(r"\1", text)


def _parse_key(text: str) -> str:
    if not _is_quoted(text):
        raise MalformedJsonError(f"Field name must be a quoted string: {text!r}")
    return _unescape(text[1:-1])


def _parse_value(text: str) -> Value:
    if text == "null":
        return None
    if text == "true":
        return True
    if text == "false":
        return False
    if _is_quoted(text):
        return _unescape(text[1:-1])
    if _INT_RE.fullmatch(text):
        number = int(text)
        if _INT64_MIN <= number <= _INT64_MAX:
            return number
    if _FLOAT_RE.fullmatch(text):
        return float(text)
    logger.debug("Keeping unparsed value %r as a string", text)
    return text
