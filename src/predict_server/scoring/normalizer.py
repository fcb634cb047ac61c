"""Shaping of polymorphic prediction results into one response document."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..codec.values import JsonObject
from ..errors import ScoringError
from .categories import ModelCategory
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
)

UNHANDLED_WARNING = "Model category not explicitly handled."


def _class_probabilities(
    class_names: Optional[Sequence[str]], probabilities: Sequence[float]
) -> Dict[str, float]:
    names = list(class_names or [])
    if len(names) != len(probabilities):
        raise ScoringError(
            f"Model declares {len(names)} classes but returned "
            f"{len(probabilities)} probabilities"
        )
    return {str(name): prob for name, prob in zip(names, probabilities)}


def normalize(
    category: ModelCategory,
    result: PredictionResult,
    echoed_input: JsonObject,
    class_names: Optional[Sequence[str]] = None,
) -> Dict[str, Any]:
    """Build the response document for a single prediction.

    Args:
        category: Category declared by the scoring engine.
        result: Prediction produced for this request.
        echoed_input: The decoded request object, returned unmodified.
        class_names: Engine-declared response domain, index-aligned with
            classification probabilities.

    Raises:
        ScoringError: if classification probabilities and class names do not
            line up.
    """
    out: Dict[str, Any] = {
        "model_category": str(category),
        "input": echoed_input,
    }

    if isinstance(result, (BinomialPrediction, MultinomialPrediction)):
        out["predicted_label"] = result.label
        out["class_probabilities"] = _class_probabilities(
            class_names, result.class_probabilities
        )
    elif isinstance(result, RegressionPrediction):
        out["predicted_value"] = result.value
    elif isinstance(result, OrdinalPrediction):
        out["predicted_label"] = result.label
        out["label_index"] = result.label_index
    elif isinstance(result, ClusteringPrediction):
        out["cluster"] = result.cluster
    elif isinstance(result, AutoEncoderPrediction):
        out["reconstructed"] = list(result.reconstructed)
    elif isinstance(result, AnomalyDetectionPrediction):
        out["normalized_score"] = result.normalized_score
        out["score"] = result.score
        out["is_anomaly"] = result.is_anomaly
    elif isinstance(result, SurvivalPrediction):
        out["value"] = result.value
    elif isinstance(result, DimReductionPrediction):
        out["dimensions"] = list(result.dimensions)
    else:
        # UnhandledPrediction
        out["warning"] = UNHANDLED_WARNING
    return out
