"""Scoring engine interface and the request/result shaping around it."""

from .categories import ModelCategory
from .engine import ArtifactScoringEngine, ModelArtifact, ScoringEngine, save_artifact
from .normalizer import UNHANDLED_WARNING, normalize
from .projector import InputRecord, project
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

__all__ = [
    "ModelCategory",
    "ScoringEngine",
    "ArtifactScoringEngine",
    "ModelArtifact",
    "save_artifact",
    "InputRecord",
    "project",
    "normalize",
    "UNHANDLED_WARNING",
    "PredictionResult",
    "BinomialPrediction",
    "MultinomialPrediction",
    "RegressionPrediction",
    "OrdinalPrediction",
    "ClusteringPrediction",
    "AutoEncoderPrediction",
    "AnomalyDetectionPrediction",
    "SurvivalPrediction",
    "DimReductionPrediction",
    "UnhandledPrediction",
]
