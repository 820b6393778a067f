"""Transform accumulator — applies transformation requests to vector objects.

Every kind goes through the same path: deep-copy the object, render the
kind's fragment(s), append them to ``attributes["transform"]``. Base geometry
in ``data`` is never modified, so the descriptor is the only record of what
has been applied.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from vectordiff.config import ScaleCenterMode, settings
from vectordiff.engine import renderers  # noqa: F401  (registers built-in kinds)
from vectordiff.engine.descriptor import append_transform, render_descriptor
from vectordiff.engine.registry import RenderOptions, get_registry
from vectordiff.models.vector_object import VectorObject

logger = logging.getLogger(__name__)


def apply_transformation(
    obj: VectorObject,
    transformation: BaseModel | Mapping[str, Any],
    *,
    scale_center: ScaleCenterMode | None = None,
) -> VectorObject:
    """Return a new object with the transformation appended to its descriptor.

    ``transformation`` is a Transformation model or a plain mapping with a
    ``type`` key. Mappings of a known kind are validated into its model
    (pydantic ValidationError on missing or non-finite fields). Unknown kinds
    are not an error: a warning is logged and an unmodified copy returned.
    """
    result = obj.model_copy(deep=True)

    kind = _kind_of(transformation)
    registry = get_registry()
    if not isinstance(kind, str) or kind not in registry:
        logger.warning("Unknown transformation type %r, returning unmodified copy", kind)
        return result

    spec = registry.get(kind)
    if isinstance(transformation, spec.model):
        request = transformation
    else:
        payload = transformation.model_dump() if isinstance(transformation, BaseModel) else transformation
        request = spec.model.model_validate(payload)

    options = RenderOptions(scale_center=scale_center or settings.scale_center_mode)
    fragment = render_descriptor(spec.fn(request, options))

    attributes = dict(result.attributes)
    attributes["transform"] = append_transform(attributes.get("transform"), fragment)
    return result.model_copy(update={"attributes": attributes})


def apply_transformations(
    obj: VectorObject,
    transformations: Iterable[BaseModel | Mapping[str, Any]],
    *,
    scale_center: ScaleCenterMode | None = None,
) -> VectorObject:
    """Apply transformations in order; the first one is leftmost in the descriptor."""
    result = obj.model_copy(deep=True)
    for transformation in transformations:
        result = apply_transformation(result, transformation, scale_center=scale_center)
    return result


def _kind_of(transformation: BaseModel | Mapping[str, Any]) -> Any:
    if isinstance(transformation, Mapping):
        return transformation.get("type")
    return getattr(transformation, "type", None)
