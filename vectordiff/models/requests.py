"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from vectordiff.config import ScaleCenterMode
from vectordiff.models.vector_object import VectorObject


class TransformRequest(BaseModel):
    object: VectorObject = Field(..., description="Object to transform")
    # Raw mappings so unknown kinds reach the engine instead of failing validation
    transformations: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Transformations in application order",
    )
    scale_center: ScaleCenterMode | None = Field(
        default=None,
        description="Override the configured center-of-scale mode",
    )


class DetectRequest(BaseModel):
    previous: VectorObject = Field(..., description="Earlier state of the object")
    current: VectorObject = Field(..., description="Later state of the same object")
