"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from vectordiff.models.vector_object import VectorObject


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transformation_kinds: list[str] = []


class TransformResponse(BaseModel):
    object: VectorObject
    fragments: int = 0
    # Folded descriptor as SVG matrix(a b c d e f); None if it cannot be folded
    matrix: list[float] | None = None


class DetectResponse(BaseModel):
    transformation: dict[str, Any] | None = None
