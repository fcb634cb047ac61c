"""Exception hierarchy shared by the codec, scoring and HTTP layers."""

from __future__ import annotations


class PredictServerError(Exception):
    """Base class for all errors raised by the prediction server."""


class RequestError(PredictServerError):
    """A request that cannot be served; rendered as ``{"error": message}``."""

    status_code: int = 400
    default_message: str = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MalformedJsonError(RequestError):
    default_message = "Malformed JSON"


class UnsupportedContentTypeError(RequestError):
    default_message = "Content-Type must be application/json"


class EmptyBodyError(RequestError):
    default_message = "No JSON input provided in request body"


class EmptyObjectError(RequestError):
    default_message = "Empty JSON object provided"


class MethodNotAllowedError(RequestError):
    status_code = 405
    default_message = "Method not allowed"


class ScoringError(PredictServerError):
    """The scoring engine rejected the input or failed to produce a result."""


class ConfigurationError(PredictServerError):
    """Invalid process configuration detected during startup."""
