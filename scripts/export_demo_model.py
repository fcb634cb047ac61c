"""Train a small scikit-learn model on synthetic data and export it as a
model artifact that ``python -m predict_server`` can serve.

Usage:
    python scripts/export_demo_model.py --category Binomial --output models/model.joblib
"""

import sys
import logging
import argparse
from pathlib import Path

import numpy as np
import pandas as pd
from sklearn.cluster import KMeans
from sklearn.compose import ColumnTransformer
from sklearn.datasets import make_classification
from sklearn.decomposition import PCA
from sklearn.ensemble import IsolationForest
from sklearn.impute import SimpleImputer
from sklearn.linear_model import LinearRegression, LogisticRegression
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OneHotEncoder, StandardScaler

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))

from predict_server.scoring import ModelArtifact, ModelCategory, save_artifact  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("export_demo_model")

NUMERIC = ["age", "income", "tenure"]
CATEGORICAL = ["segment"]
SEGMENTS = ["retail", "business", "premium"]


def make_frame(n_samples: int, random_state: int) -> tuple:
    X, y = make_classification(
        n_samples=n_samples,
        n_features=len(NUMERIC),
        n_informative=len(NUMERIC),
        n_redundant=0,
        random_state=random_state,
    )
    rng = np.random.default_rng(random_state)
    df = pd.DataFrame(X, columns=NUMERIC)
    df["segment"] = rng.choice(SEGMENTS, size=n_samples)
    return df, y


def preprocessor(with_categorical: bool = True) -> ColumnTransformer:
    transformers = [
        (
            "num",
            Pipeline([("impute", SimpleImputer(strategy="median")), ("scale", StandardScaler())]),
            NUMERIC,
        )
    ]
    if with_categorical:
        transformers.append(
            (
                "cat",
                Pipeline(
                    [
                        ("impute", SimpleImputer(strategy="constant", fill_value="missing")),
                        ("onehot", OneHotEncoder(handle_unknown="ignore")),
                    ]
                ),
                CATEGORICAL,
            )
        )
    return ColumnTransformer(transformers)


def build_artifact(category: ModelCategory, random_state: int = 7) -> ModelArtifact:
    df, y = make_frame(300, random_state)
    levels = {"segment": list(SEGMENTS)}

    if category is ModelCategory.BINOMIAL:
        labels = np.where(y == 1, "Yes", "No")
        model = Pipeline([("prep", preprocessor()), ("clf", LogisticRegression(max_iter=500))])
        model.fit(df, labels)
    elif category is ModelCategory.REGRESSION:
        target = df["income"] * 3.0 + df["age"] + y
        model = Pipeline([("prep", preprocessor()), ("reg", LinearRegression())])
        model.fit(df, target)
    elif category is ModelCategory.CLUSTERING:
        model = Pipeline(
            [("prep", preprocessor()), ("km", KMeans(n_clusters=3, n_init=10, random_state=random_state))]
        )
        model.fit(df)
    elif category is ModelCategory.ANOMALY_DETECTION:
        model = Pipeline(
            [("prep", preprocessor()), ("iso", IsolationForest(random_state=random_state))]
        )
        model.fit(df)
    elif category is ModelCategory.DIM_REDUCTION:
        df = df[NUMERIC]
        levels = {}
        model = PCA(n_components=2, random_state=random_state)
        model.fit(df)
    else:
        raise ValueError(f"No demo model for category {category}")

    return ModelArtifact(
        estimator=model,
        category=category,
        feature_names=list(df.columns),
        categorical_levels=levels,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--category", default="Binomial", help="Model category to export")
    parser.add_argument("--output", default="models/model.joblib", help="Artifact path")
    parser.add_argument("--random-state", type=int, default=7)
    args = parser.parse_args()

    category = ModelCategory.parse(args.category)
    artifact = build_artifact(category, random_state=args.random_state)
    path = save_artifact(artifact, args.output)
    logger.info("Exported %s demo model to %s", category, path)


if __name__ == "__main__":
    main()
