"""Shared fixtures: a configurable in-memory scoring engine and HTTP client."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, List, Optional

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "src"))

from predict_server.api import create_app  # noqa: E402
from predict_server.scoring import (  # noqa: E402
    BinomialPrediction,
    InputRecord,
    ModelCategory,
    PredictionResult,
    ScoringEngine,
)


class StubEngine(ScoringEngine):
    """Returns a fixed result (or raises) and remembers the records it saw."""

    def __init__(
        self,
        category: ModelCategory,
        result: Optional[PredictionResult] = None,
        response_names: Optional[List[str]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self._category = category
        self._result = result
        self._response_names = response_names
        self._error = error
        self.records: List[InputRecord] = []

    @property
    def category(self) -> ModelCategory:
        return self._category

    @property
    def response_names(self) -> Optional[List[str]]:
        return self._response_names

    def score(self, record: InputRecord) -> PredictionResult:
        self.records.append(dict(record))
        if self._error is not None:
            raise self._error
        assert self._result is not None
        return self._result


@pytest.fixture
def binomial_engine() -> StubEngine:
    return StubEngine(
        ModelCategory.BINOMIAL,
        result=BinomialPrediction(label="No", class_probabilities=(0.3, 0.7)),
        response_names=["No", "Yes"],
    )


@pytest.fixture
def make_client() -> Callable[[ScoringEngine], TestClient]:
    def _make(engine: ScoringEngine) -> TestClient:
        return TestClient(create_app(engine))

    return _make


@pytest.fixture
def client(binomial_engine: StubEngine, make_client) -> TestClient:
    return make_client(binomial_engine)
