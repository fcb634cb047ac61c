"""Tests for shaping prediction results into response documents."""

import pytest

from predict_server.errors import ScoringError
from predict_server.scoring import (
    UNHANDLED_WARNING,
    AnomalyDetectionPrediction,
    AutoEncoderPrediction,
    BinomialPrediction,
    ClusteringPrediction,
    DimReductionPrediction,
    ModelCategory,
    MultinomialPrediction,
    OrdinalPrediction,
    RegressionPrediction,
    SurvivalPrediction,
    UnhandledPrediction,
    normalize,
)

INPUT = {"age": 42, "segment": "retail", "flag": None}


def test_binomial_zips_probabilities_with_class_names_by_index():
    # The engine picked the lower-probability label; it is passed through.
    result = BinomialPrediction(label="No", class_probabilities=(0.3, 0.7))
    doc = normalize(ModelCategory.BINOMIAL, result, INPUT, ["No", "Yes"])
    assert list(doc) == ["model_category", "input", "predicted_label", "class_probabilities"]
    assert doc["model_category"] == "Binomial"
    assert doc["input"] is INPUT
    assert doc["predicted_label"] == "No"
    assert doc["class_probabilities"] == {"No": 0.3, "Yes": 0.7}
    assert list(doc["class_probabilities"]) == ["No", "Yes"]


def test_multinomial():
    result = MultinomialPrediction(label="b", class_probabilities=(0.2, 0.5, 0.3))
    doc = normalize(ModelCategory.MULTINOMIAL, result, INPUT, ["a", "b", "c"])
    assert doc["model_category"] == "Multinomial"
    assert doc["class_probabilities"] == {"a": 0.2, "b": 0.5, "c": 0.3}


@pytest.mark.parametrize("names", [["No"], None])
def test_class_name_mismatch_is_a_scoring_error(names):
    result = BinomialPrediction(label="No", class_probabilities=(0.3, 0.7))
    with pytest.raises(ScoringError):
        normalize(ModelCategory.BINOMIAL, result, INPUT, names)


@pytest.mark.parametrize(
    "category, result, expected",
    [
        (ModelCategory.REGRESSION, RegressionPrediction(value=3.5), {"predicted_value": 3.5}),
        (
            ModelCategory.ORDINAL,
            OrdinalPrediction(label="mid", label_index=1),
            {"predicted_label": "mid", "label_index": 1},
        ),
        (ModelCategory.CLUSTERING, ClusteringPrediction(cluster=2), {"cluster": 2}),
        (
            ModelCategory.AUTO_ENCODER,
            AutoEncoderPrediction(reconstructed=(0.1, 0.2)),
            {"reconstructed": [0.1, 0.2]},
        ),
        (
            ModelCategory.ANOMALY_DETECTION,
            AnomalyDetectionPrediction(normalized_score=0.8, score=0.6, is_anomaly=True),
            {"normalized_score": 0.8, "score": 0.6, "is_anomaly": True},
        ),
        (ModelCategory.COX_PH, SurvivalPrediction(value=1.25), {"value": 1.25}),
        (
            ModelCategory.DIM_REDUCTION,
            DimReductionPrediction(dimensions=(1.0, -2.0)),
            {"dimensions": [1.0, -2.0]},
        ),
    ],
)
def test_category_specific_fields(category, result, expected):
    doc = normalize(category, result, INPUT)
    assert doc == {"model_category": category.value, "input": INPUT, **expected}


def test_unhandled_category_only_adds_warning():
    doc = normalize(
        ModelCategory.WORD_EMBEDDING, UnhandledPrediction(category_name="WordEmbedding"), INPUT
    )
    assert doc == {
        "model_category": "WordEmbedding",
        "input": INPUT,
        "warning": UNHANDLED_WARNING,
    }
