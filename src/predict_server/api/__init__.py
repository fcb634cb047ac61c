"""HTTP surface of the prediction server.

Exposes ``/health``, ``/metadata`` and ``/predict`` through a FastAPI
application built around a loaded :class:`ScoringEngine`.
"""

from .app import create_app

__all__ = ["create_app"]
