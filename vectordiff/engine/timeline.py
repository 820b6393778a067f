"""Schedule transformations on keyframes and resolve object state at a time."""

from __future__ import annotations

import bisect
import logging

from vectordiff.config import ScaleCenterMode
from vectordiff.engine.transformer import apply_transformation
from vectordiff.models.animation import Animation, Keyframe, ObjectChange
from vectordiff.models.transformations import Transformation
from vectordiff.models.vector_object import VectorObject

logger = logging.getLogger(__name__)


def add_transformation(
    animation: Animation,
    object_id: str,
    timestamp: float,
    transformation: Transformation,
) -> None:
    """Schedule a transformation for an object at ``timestamp``.

    A second transformation for the same object at the same timestamp replaces
    the first. Keyframes stay sorted and ``duration`` grows to cover the
    latest keyframe.
    """
    if object_id not in animation.objects:
        raise KeyError(f"Object with id {object_id!r} does not exist")
    if timestamp < 0:
        raise ValueError("Timestamp cannot be negative")

    keyframe = _keyframe_at(animation, timestamp)
    change = ObjectChange(object_id=object_id, transformation=transformation)

    for i, existing in enumerate(keyframe.changes):
        if existing.object_id == object_id:
            logger.warning(
                "Overwriting existing transformation for object %s at time %s", object_id, timestamp
            )
            keyframe.changes[i] = change
            break
    else:
        keyframe.changes.append(change)

    if timestamp > animation.duration:
        animation.duration = timestamp


def objects_at(
    animation: Animation,
    timestamp: float,
    *,
    scale_center: ScaleCenterMode | None = None,
) -> dict[str, VectorObject]:
    """Every object with all changes up to and including ``timestamp`` applied."""
    state = {oid: obj.model_copy(deep=True) for oid, obj in animation.objects.items()}

    for keyframe in sorted(animation.timeline, key=lambda k: k.timestamp):
        if keyframe.timestamp > timestamp:
            break
        for change in keyframe.changes:
            if change.object_id not in state:
                logger.warning("Keyframe %s references unknown object %s", keyframe.timestamp, change.object_id)
                continue
            state[change.object_id] = apply_transformation(
                state[change.object_id], change.transformation, scale_center=scale_center
            )

    return state


def _keyframe_at(animation: Animation, timestamp: float) -> Keyframe:
    timestamps = [k.timestamp for k in animation.timeline]
    idx = bisect.bisect_left(timestamps, timestamp)
    if idx < len(timestamps) and timestamps[idx] == timestamp:
        return animation.timeline[idx]
    keyframe = Keyframe(timestamp=timestamp)
    animation.timeline.insert(idx, keyframe)
    return keyframe
