"""Affine helpers: fold transform fragments into 3x3 homogeneous matrices.

Composition only. List order follows the SVG convention: for a descriptor
``f1 f2 ... fn`` the folded matrix is ``M1 @ M2 @ ... @ Mn``, so the last
fragment is applied to the geometry first.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from vectordiff.engine.descriptor import TransformFragment


def translation(tx: float, ty: float = 0.0) -> NDArray[np.float64]:
    m = np.eye(3, dtype=np.float64)
    m[0, 2] = tx
    m[1, 2] = ty
    return m


def rotation(angle_deg: float, cx: float = 0.0, cy: float = 0.0) -> NDArray[np.float64]:
    """Rotation by angle_deg about (cx, cy); positive angles turn x toward y."""
    rad = math.radians(angle_deg)
    cos_a, sin_a = math.cos(rad), math.sin(rad)
    r = np.array([
        [cos_a, -sin_a, 0.0],
        [sin_a, cos_a, 0.0],
        [0.0, 0.0, 1.0],
    ], dtype=np.float64)
    if cx == 0.0 and cy == 0.0:
        return r
    return translation(cx, cy) @ r @ translation(-cx, -cy)


def scaling(sx: float, sy: float | None = None) -> NDArray[np.float64]:
    if sy is None:
        sy = sx
    return np.diag([sx, sy, 1.0]).astype(np.float64)


def skew_x(angle_deg: float) -> NDArray[np.float64]:
    m = np.eye(3, dtype=np.float64)
    m[0, 1] = math.tan(math.radians(angle_deg))
    return m


def skew_y(angle_deg: float) -> NDArray[np.float64]:
    m = np.eye(3, dtype=np.float64)
    m[1, 0] = math.tan(math.radians(angle_deg))
    return m


def from_svg_matrix(a: float, b: float, c: float, d: float, e: float, f: float) -> NDArray[np.float64]:
    return np.array([
        [a, c, e],
        [b, d, f],
        [0.0, 0.0, 1.0],
    ], dtype=np.float64)


def to_svg_matrix(m: NDArray[np.float64]) -> tuple[float, float, float, float, float, float]:
    """Inverse of from_svg_matrix: (a, b, c, d, e, f)."""
    return (
        float(m[0, 0]), float(m[1, 0]),
        float(m[0, 1]), float(m[1, 1]),
        float(m[0, 2]), float(m[1, 2]),
    )


def fragment_matrix(fragment: TransformFragment) -> NDArray[np.float64]:
    """Matrix for a single fragment. Raises ValueError on unknown names or arity."""
    name, args = fragment.name, fragment.args
    n = len(args)

    if name == "translate" and n in (1, 2):
        return translation(*args)
    if name == "rotate" and n in (1, 3):
        return rotation(*args)
    if name == "scale" and n in (1, 2):
        return scaling(*args)
    if name == "matrix" and n == 6:
        return from_svg_matrix(*args)
    if name == "skewX" and n == 1:
        return skew_x(args[0])
    if name == "skewY" and n == 1:
        return skew_y(args[0])

    raise ValueError(f"Cannot build matrix for {fragment.render()!r}")


def fold(fragments: list[TransformFragment]) -> NDArray[np.float64]:
    """Compose fragments left-to-right into one matrix (identity when empty)."""
    m = np.eye(3, dtype=np.float64)
    for fragment in fragments:
        m = m @ fragment_matrix(fragment)
    return m


def fold_descriptor(text: str | None) -> NDArray[np.float64]:
    from vectordiff.engine.descriptor import parse_descriptor

    return fold(parse_descriptor(text))


def apply_to_point(m: NDArray[np.float64], x: float, y: float) -> tuple[float, float]:
    p = m @ np.array([x, y, 1.0], dtype=np.float64)
    return (float(p[0]), float(p[1]))
