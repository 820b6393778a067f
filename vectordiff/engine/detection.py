"""Recover the change between two states of one object.

Two sources are tried in order:
1. The transform descriptor: if the current descriptor is the previous one
   plus exactly one fragment, that fragment is the transformation.
2. The base geometry of rects and ellipses: moved position means translate,
   changed size means scale.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from vectordiff.engine.descriptor import TransformFragment, parse_descriptor
from vectordiff.models.transformations import (
    AffineTransformation,
    RotateTransformation,
    ScaleTransformation,
    Transformation,
    TranslateTransformation,
)
from vectordiff.models.vector_object import VectorObject

logger = logging.getLogger(__name__)

# Changes below this are treated as noise
_EPSILON = 0.001

_KEY_VALUE_RE = re.compile(r"([A-Za-z]+)=([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)(?![\w.])")

# (position keys, size keys) per object type
_GEOMETRY_KEYS: dict[str, tuple[tuple[str, str], tuple[str, str]]] = {
    "rect": (("x", "y"), ("width", "height")),
    "ellipse": (("cx", "cy"), ("rx", "ry")),
}


def detect_transformation(prev: VectorObject, current: VectorObject) -> Transformation | None:
    """Return the single transformation that turns ``prev`` into ``current``, or None."""
    if prev.id != current.id or prev.type != current.type:
        return None

    detected = _detect_from_descriptor(prev.transform, current.transform)
    if detected is not None:
        return detected

    return _detect_translation(prev, current) or _detect_scaling(prev, current)


def fragment_to_transformation(fragment: TransformFragment) -> Transformation | None:
    """Map a rendered fragment back to its request model (None if not expressible)."""
    name, args = fragment.name, fragment.args
    if not all(math.isfinite(a) for a in args):
        return None
    if name == "translate" and len(args) in (1, 2):
        return TranslateTransformation(x=args[0], y=args[1] if len(args) == 2 else 0.0)
    if name == "rotate" and len(args) == 1:
        return RotateTransformation(angle=args[0])
    if name == "rotate" and len(args) == 3:
        return RotateTransformation(angle=args[0], center_x=args[1], center_y=args[2])
    if name == "scale" and len(args) in (1, 2):
        return ScaleTransformation(sx=args[0], sy=args[-1])
    if name == "matrix" and len(args) == 6:
        return AffineTransformation(matrix=list(args))
    return None


def _detect_from_descriptor(prev_text: str, current_text: str) -> Transformation | None:
    if prev_text.strip() == current_text.strip():
        return None
    try:
        before = parse_descriptor(prev_text)
        after = parse_descriptor(current_text)
    except ValueError as e:
        logger.debug("Descriptor detection skipped: %s", e)
        return None

    if len(after) != len(before) + 1 or after[: len(before)] != before:
        return None
    return fragment_to_transformation(after[-1])


def _geometry(obj: VectorObject) -> dict[str, float]:
    """Numeric fields of the base geometry, from a mapping or a "k=v k=v" string."""
    data = obj.data
    if isinstance(data, str):
        pairs = [(k, float(v)) for k, v in _KEY_VALUE_RE.findall(data)]
    elif isinstance(data, Mapping):
        pairs = []
        for k, v in data.items():
            if not isinstance(v, (int, float)) or isinstance(v, bool):
                continue
            try:
                pairs.append((str(k), float(v)))
            except OverflowError:
                continue
    else:
        return {}
    # Overflowing literals such as 1e999 parse to inf
    return {k: v for k, v in pairs if math.isfinite(v)}


def _keys_for(obj: VectorObject) -> tuple[tuple[str, str], tuple[str, str]] | None:
    return _GEOMETRY_KEYS.get(obj.type)


def _pair(values: dict[str, float], keys: tuple[str, str]) -> tuple[float, float] | None:
    if keys[0] in values and keys[1] in values:
        return (values[keys[0]], values[keys[1]])
    return None


def _detect_translation(prev: VectorObject, current: VectorObject) -> TranslateTransformation | None:
    keys = _keys_for(prev)
    if keys is None:
        return None
    before = _pair(_geometry(prev), keys[0])
    after = _pair(_geometry(current), keys[0])
    if before is None or after is None:
        return None

    dx = after[0] - before[0]
    dy = after[1] - before[1]
    if not (math.isfinite(dx) and math.isfinite(dy)):
        return None
    if abs(dx) > _EPSILON or abs(dy) > _EPSILON:
        return TranslateTransformation(x=dx, y=dy)
    return None


def _detect_scaling(prev: VectorObject, current: VectorObject) -> ScaleTransformation | None:
    keys = _keys_for(prev)
    if keys is None:
        return None
    before = _pair(_geometry(prev), keys[1])
    after = _pair(_geometry(current), keys[1])
    if before is None or after is None:
        return None
    if before[0] == 0 or before[1] == 0:
        return None

    sx = after[0] / before[0]
    sy = after[1] / before[1]
    if not (math.isfinite(sx) and math.isfinite(sy)):
        return None
    if abs(sx - 1) > _EPSILON or abs(sy - 1) > _EPSILON:
        return ScaleTransformation(sx=sx, sy=sy)
    return None
