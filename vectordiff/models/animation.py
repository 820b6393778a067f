"""Animation document model: base scene objects plus a keyframed timeline."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from vectordiff.models.transformations import Transformation
from vectordiff.models.vector_object import VectorObject


class Canvas(BaseModel):
    width: float
    height: float


class ObjectChange(BaseModel):
    object_id: str
    transformation: Transformation


class Keyframe(BaseModel):
    timestamp: float  # milliseconds from the start of the animation
    changes: list[ObjectChange] = Field(default_factory=list)


class Animation(BaseModel):
    """Objects are the untransformed base scene; the timeline is applied on top."""

    canvas: Canvas
    objects: dict[str, VectorObject] = Field(default_factory=dict)
    timeline: list[Keyframe] = Field(default_factory=list)  # sorted by timestamp
    duration: float = 0.0

    @field_validator("timeline")
    @classmethod
    def _sort_timeline(cls, timeline: list[Keyframe]) -> list[Keyframe]:
        # Stable, so keyframes sharing a timestamp keep payload order
        return sorted(timeline, key=lambda k: k.timestamp)
