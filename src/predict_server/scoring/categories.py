"""Outcome categories a scoring model can declare."""

from __future__ import annotations

from enum import Enum


class ModelCategory(str, Enum):
    """Names match the category text reported in ``model_category``."""

    UNKNOWN = "Unknown"
    BINOMIAL = "Binomial"
    MULTINOMIAL = "Multinomial"
    ORDINAL = "Ordinal"
    REGRESSION = "Regression"
    CLUSTERING = "Clustering"
    AUTO_ENCODER = "AutoEncoder"
    DIM_REDUCTION = "DimReduction"
    COX_PH = "CoxPH"
    ANOMALY_DETECTION = "AnomalyDetection"
    TARGET_ENCODER = "TargetEncoder"
    WORD_EMBEDDING = "WordEmbedding"
    BINOMIAL_UPLIFT = "BinomialUplift"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: "str | ModelCategory") -> "ModelCategory":
        """Look up a category by its textual name, case-insensitively."""
        if isinstance(name, ModelCategory):
            return name
        for member in cls:
            if member.value.lower() == str(name).strip().lower():
                return member
        raise ValueError(f"Unknown model category: {name!r}")
