"""Pydantic schemas documenting API responses."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class HealthResponse(BaseModel):
    status: str = Field(..., description="Overall service status")


class MetadataResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_category: str = Field(..., description="Outcome category of the model")
    response_names: Optional[List[str]] = Field(
        None, description="Class names of the response, null if the model has none"
    )


class PredictionResponse(BaseModel):
    # Category-specific fields (predicted_label, cluster, ...) sit alongside.
    model_config = ConfigDict(extra="allow", protected_namespaces=())

    model_category: str
    input: Dict[str, Any] = Field(..., description="Decoded request, echoed back")


class ErrorResponse(BaseModel):
    error: str
