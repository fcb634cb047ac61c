"""
Command-line bootstrap for the prediction server.

Usage:
    python -m predict_server --model-path models/model.joblib --port 8080
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from predict_server.api import create_app
from predict_server.config import ServerSettings, load_settings
from predict_server.errors import ConfigurationError, PredictServerError
from predict_server.scoring import ArtifactScoringEngine

logger = logging.getLogger("predict_server")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve a scoring model over HTTP")
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument("--model-path", help="Path to the joblib model artifact")
    parser.add_argument("--host", help="Interface to bind")
    parser.add_argument("--port", type=int, help="Port to listen on")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> ServerSettings:
    return load_settings(
        config_file=args.config,
        overrides={
            "model_path": args.model_path,
            "host": args.host,
            "port": args.port,
            "log_level": args.log_level,
        },
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = resolve_settings(args)
    except ConfigurationError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.error("Invalid configuration: %s", exc)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    # The model is loaded once, before the port is bound.
    try:
        engine = ArtifactScoringEngine.load(settings.model_path)
    except (FileNotFoundError, PredictServerError) as exc:
        logger.error("Failed to load model: %s", exc)
        return 1

    app = create_app(engine)
    logger.info("Prediction server running on http://%s:%d", settings.host, settings.port)
    logger.info("Endpoints: /health, /metadata, /predict")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
