"""
Prediction server for pretrained scoring models.

Accepts flat JSON records over HTTP, scores them with a persisted model
artifact and renders the category-specific result as a normalized JSON
document.
"""

__version__ = "0.1.0"

from .codec import decode, encode
from .scoring import ModelCategory, ScoringEngine

__all__ = ["decode", "encode", "ModelCategory", "ScoringEngine"]
