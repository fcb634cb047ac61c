"""
Scoring engines: the abstract interface and a joblib artifact implementation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import joblib
import numpy as np
import pandas as pd

from ..errors import ScoringError
from .categories import ModelCategory
from .projector import InputRecord
from .results import (
    AnomalyDetectionPrediction,
    AutoEncoderPrediction,
    BinomialPrediction,
    ClusteringPrediction,
    DimReductionPrediction,
    MultinomialPrediction,
    OrdinalPrediction,
    PredictionResult,
    RegressionPrediction,
    SurvivalPrediction,
    UnhandledPrediction,
)

logger = logging.getLogger(__name__)


class ScoringEngine(ABC):
    """
    A loaded, read-only model that scores one input record at a time.

    Implementations are shared by all in-flight requests and must not
    mutate state in :meth:`score`.
    """

    @property
    @abstractmethod
    def category(self) -> ModelCategory:
        """Outcome category of every result this engine produces."""

    @property
    def response_names(self) -> Optional[List[str]]:
        """Class names of the response column, or ``None`` if the model has none."""
        return None

    @abstractmethod
    def score(self, record: InputRecord) -> PredictionResult:
        """
        Score a single record.

        Args:
            record: Field name to textual value; absent fields are unknown.

        Returns:
            The result variant matching :attr:`category`.

        Raises:
            ScoringError: if the record cannot be scored.
        """

    def get_model_info(self) -> Dict[str, Any]:
        return {
            "model_category": str(self.category),
            "response_names": self.response_names,
        }


@dataclass
class ModelArtifact:
    """Container persisted by :func:`save_artifact`."""

    estimator: Any
    category: ModelCategory
    feature_names: List[str]
    response_names: Optional[List[str]] = None
    categorical_levels: Dict[str, List[str]] = field(default_factory=dict)
    convert_unknown_categorical_levels_to_na: bool = True
    convert_invalid_numbers_to_na: bool = True


def save_artifact(artifact: ModelArtifact, file_path: Union[str, Path]) -> Path:
    """Persist ``artifact`` with joblib and return the written path."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    joblib.dump(artifact, path)
    logger.info("Model artifact saved to %s", path)
    return path


class ArtifactScoringEngine(ScoringEngine):
    """Scores records with a scikit-learn estimator from a :class:`ModelArtifact`."""

    def __init__(self, artifact: ModelArtifact) -> None:
        self._artifact = artifact
        self._category = ModelCategory.parse(artifact.category)
        self._response_names = self._resolve_response_names(artifact)
        self._categorical_levels = {
            name: frozenset(str(level) for level in levels)
            for name, levels in artifact.categorical_levels.items()
        }

    @classmethod
    def load(cls, file_path: Union[str, Path]) -> "ArtifactScoringEngine":
        """
        Load an engine from a joblib artifact.

        Raises:
            FileNotFoundError: if ``file_path`` does not exist.
            ScoringError: if the file cannot be unpickled, does not contain a
                :class:`ModelArtifact`, or declares an unknown category.
        """
        path = Path(file_path).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Model artifact not found at {path}")
        logger.info("Loading model artifact from %s", path)
        try:
            payload = joblib.load(path)
        except Exception as exc:  # noqa: BLE001
            raise ScoringError(f"Unable to read model artifact {path}: {exc}") from exc
        if not isinstance(payload, ModelArtifact):
            raise ScoringError(
                f"{path} does not contain a model artifact "
                f"(found {type(payload).__name__})"
            )
        try:
            engine = cls(payload)
        except ValueError as exc:
            raise ScoringError(f"Invalid model artifact {path}: {exc}") from exc
        logger.info("Model loaded. Category: %s", engine.category)
        return engine

    @staticmethod
    def _resolve_response_names(artifact: ModelArtifact) -> Optional[List[str]]:
        if artifact.response_names is not None:
            return [str(name) for name in artifact.response_names]
        classes = getattr(artifact.estimator, "classes_", None)
        if classes is None:
            return None
        return [str(name) for name in classes]

    @property
    def category(self) -> ModelCategory:
        return self._category

    @property
    def response_names(self) -> Optional[List[str]]:
        return list(self._response_names) if self._response_names is not None else None

    @property
    def feature_names(self) -> List[str]:
        return list(self._artifact.feature_names)

    # ------------------------------------------------------------------
    # Input conversion
    # ------------------------------------------------------------------
    def _categorical_value(self, name: str, text: str) -> Any:
        if text in self._categorical_levels[name]:
            return text
        if self._artifact.convert_unknown_categorical_levels_to_na:
            return np.nan
        raise ScoringError(f"Unknown categorical level ({name},{text})")

    def _numeric_value(self, text: str) -> float:
        try:
            return float(text)
        except ValueError:
            if self._artifact.convert_invalid_numbers_to_na:
                return np.nan
            raise ScoringError(f"Unable to parse value: {text}") from None

    def _build_frame(self, record: InputRecord) -> pd.DataFrame:
        columns = self._artifact.feature_names or list(record)
        row: Dict[str, Any] = {}
        for name in columns:
            text = record.get(name)
            if text is None:
                row[name] = np.nan
            elif name in self._categorical_levels:
                row[name] = self._categorical_value(name, text)
            else:
                row[name] = self._numeric_value(text)
        frame = pd.DataFrame([row], columns=columns)
        for name in self._categorical_levels:
            if name in frame.columns:
                frame[name] = frame[name].astype(object)
        return frame

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------
    def score(self, record: InputRecord) -> PredictionResult:
        frame = self._build_frame(record)
        try:
            return self._predict(frame)
        except ScoringError:
            raise
        except Exception as exc:  # noqa: BLE001
            logger.debug("Estimator failed on %s", list(record), exc_info=True)
            raise ScoringError(str(exc) or type(exc).__name__) from exc

    def _predict(self, frame: pd.DataFrame) -> PredictionResult:
        estimator = self._artifact.estimator
        category = self._category

        if category in (ModelCategory.BINOMIAL, ModelCategory.MULTINOMIAL):
            label = str(estimator.predict(frame)[0])
            proba = _row(estimator.predict_proba(frame))
            if category is ModelCategory.BINOMIAL:
                return BinomialPrediction(label=label, class_probabilities=proba)
            return MultinomialPrediction(label=label, class_probabilities=proba)
        if category is ModelCategory.ORDINAL:
            label = str(estimator.predict(frame)[0])
            return OrdinalPrediction(label=label, label_index=self._label_index(label))
        if category is ModelCategory.REGRESSION:
            return RegressionPrediction(value=float(estimator.predict(frame)[0]))
        if category is ModelCategory.COX_PH:
            return SurvivalPrediction(value=float(estimator.predict(frame)[0]))
        if category is ModelCategory.CLUSTERING:
            return ClusteringPrediction(cluster=int(estimator.predict(frame)[0]))
        if category is ModelCategory.AUTO_ENCODER:
            encoded = estimator.transform(frame)
            return AutoEncoderPrediction(
                reconstructed=_row(estimator.inverse_transform(encoded))
            )
        if category is ModelCategory.DIM_REDUCTION:
            return DimReductionPrediction(dimensions=_row(estimator.transform(frame)))
        if category is ModelCategory.ANOMALY_DETECTION:
            score = -float(estimator.score_samples(frame)[0])
            normalized = -float(estimator.decision_function(frame)[0])
            is_anomaly = bool(estimator.predict(frame)[0] == -1)
            return AnomalyDetectionPrediction(
                normalized_score=normalized, score=score, is_anomaly=is_anomaly
            )
        return UnhandledPrediction(category_name=str(category))

    def _label_index(self, label: str) -> int:
        names = self._response_names or []
        try:
            return names.index(label)
        except ValueError:
            raise ScoringError(f"Predicted label {label!r} not in response domain") from None


def _row(values: Sequence[Any]) -> tuple:
    return tuple(float(v) for v in np.asarray(values)[0])
