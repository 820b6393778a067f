"""VectorDiff transform engine."""

from vectordiff.engine.descriptor import TransformFragment, append_transform, parse_descriptor
from vectordiff.engine.detection import detect_transformation
from vectordiff.engine.registry import get_registry, renders
from vectordiff.engine.timeline import add_transformation, objects_at
from vectordiff.engine.transformer import apply_transformation, apply_transformations

__all__ = [
    "TransformFragment",
    "append_transform",
    "parse_descriptor",
    "detect_transformation",
    "get_registry",
    "renders",
    "add_transformation",
    "objects_at",
    "apply_transformation",
    "apply_transformations",
]
