"""FastAPI application exposing health, metadata and prediction endpoints.

The request body of ``/predict`` is read raw and parsed by the flat-object
decoder in :mod:`predict_server.codec`; every response body is rendered by
the matching encoder rather than FastAPI's JSON serializer.

Pipeline for ``POST /predict``::

    body -> decode -> project -> engine.score -> normalize -> encode
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from predict_server import __version__
from predict_server.codec import decode, encode
from predict_server.errors import (
    EmptyBodyError,
    EmptyObjectError,
    MalformedJsonError,
    MethodNotAllowedError,
    RequestError,
    ScoringError,
    UnsupportedContentTypeError,
)
from predict_server.scoring import ScoringEngine, normalize, project

from .schemas import ErrorResponse, HealthResponse, MetadataResponse, PredictionResponse

logger = logging.getLogger(__name__)

SERVICE_NAME = "predict-server"
JSON_MEDIA_TYPE = "application/json; charset=utf-8"


def json_response(status_code: int, payload: Any) -> Response:
    return Response(
        content=encode(payload).encode("utf-8"),
        status_code=status_code,
        media_type=JSON_MEDIA_TYPE,
    )


def error_response(status_code: int, message: str) -> Response:
    return json_response(status_code, {"error": message})


def _read_json_object(body: bytes, content_type: str) -> Dict[str, Any]:
    text = body.decode("utf-8", errors="replace")
    if not text.strip():
        raise EmptyBodyError()
    if "application/json" not in content_type.lower():
        raise UnsupportedContentTypeError()
    try:
        data = decode(text)
    except MalformedJsonError as exc:
        raise MalformedJsonError(f"Invalid JSON: {exc.message}") from exc
    if not data:
        raise EmptyObjectError()
    return data


def create_app(engine: ScoringEngine) -> FastAPI:
    """
    Build the application around an already loaded engine.

    The engine is shared read-only by every request through ``app.state``.
    """
    app = FastAPI(title=SERVICE_NAME, version=__version__)
    app.state.engine = engine

    @app.exception_handler(RequestError)
    async def request_error_handler(request: Request, exc: RequestError) -> Response:
        logger.info("%s %s rejected (%d): %s", request.method, request.url.path,
                    exc.status_code, exc.message)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        if exc.status_code == 405:
            return error_response(405, MethodNotAllowedError.default_message)
        return error_response(exc.status_code, str(exc.detail))

    @app.get("/health", response_model=HealthResponse, tags=["meta"])
    async def health() -> Response:
        return json_response(200, {"status": "ok"})

    @app.get(
        "/metadata",
        response_model=MetadataResponse,
        responses={405: {"model": ErrorResponse}},
        tags=["meta"],
    )
    async def metadata(request: Request) -> Response:
        scoring: ScoringEngine = request.app.state.engine
        return json_response(200, scoring.get_model_info())

    @app.post(
        "/predict",
        response_model=PredictionResponse,
        responses={
            400: {"model": ErrorResponse},
            405: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
        tags=["inference"],
    )
    async def predict(request: Request) -> Response:
        scoring: ScoringEngine = request.app.state.engine
        body = await request.body()
        data = _read_json_object(body, request.headers.get("content-type", ""))
        record = project(data)
        logger.debug("Scoring record with fields=%s", list(record))

        try:
            result = scoring.score(record)
            document = normalize(
                scoring.category, result, data, scoring.response_names
            )
        except ScoringError as exc:
            logger.warning("Prediction failed: %s", exc)
            return error_response(500, f"Prediction error: {exc}")
        except Exception as exc:  # noqa: BLE001
            logger.exception("Scoring engine raised an unexpected error")
            return error_response(500, f"Prediction error: {exc or type(exc).__name__}")
        return json_response(200, document)

    return app
