"""Prediction result variants, one per outcome category."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class BinomialPrediction:
    label: str
    class_probabilities: Tuple[float, ...]


@dataclass(frozen=True)
class MultinomialPrediction:
    label: str
    class_probabilities: Tuple[float, ...]


@dataclass(frozen=True)
class RegressionPrediction:
    value: float


@dataclass(frozen=True)
class OrdinalPrediction:
    label: str
    label_index: int


@dataclass(frozen=True)
class ClusteringPrediction:
    cluster: int


@dataclass(frozen=True)
class AutoEncoderPrediction:
    reconstructed: Tuple[float, ...]


@dataclass(frozen=True)
class AnomalyDetectionPrediction:
    normalized_score: float
    score: float
    is_anomaly: bool


@dataclass(frozen=True)
class SurvivalPrediction:
    """Survival (CoxPH) model output."""

    value: float


@dataclass(frozen=True)
class DimReductionPrediction:
    dimensions: Tuple[float, ...]


@dataclass(frozen=True)
class UnhandledPrediction:
    category_name: str


PredictionResult = Union[
    BinomialPrediction,
    MultinomialPrediction,
    RegressionPrediction,
    OrdinalPrediction,
    ClusteringPrediction,
    AutoEncoderPrediction,
    AnomalyDetectionPrediction,
    SurvivalPrediction,
    DimReductionPrediction,
    UnhandledPrediction,
]
