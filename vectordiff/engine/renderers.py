"""Fragment renderers for the four built-in transformation kinds."""

from __future__ import annotations

import logging

from vectordiff.engine.descriptor import TransformFragment
from vectordiff.engine.registry import RenderOptions, renders
from vectordiff.models.transformations import (
    AffineTransformation,
    RotateTransformation,
    ScaleTransformation,
    TranslateTransformation,
)

logger = logging.getLogger(__name__)


def _warn_asymmetric_center(kind: str, center_x: float | None, center_y: float | None) -> None:
    if (center_x is None) != (center_y is None):
        logger.debug(
            "%s: only one center coordinate given (centerX=%r, centerY=%r), ignoring center",
            kind, center_x, center_y,
        )


@renders(kind="translate", model=TranslateTransformation, description="translate(x y)")
def render_translate(t: TranslateTransformation, options: RenderOptions) -> list[TransformFragment]:
    return [TransformFragment("translate", (t.x, t.y))]


@renders(kind="rotate", model=RotateTransformation, description="rotate(angle[ cx cy])")
def render_rotate(t: RotateTransformation, options: RenderOptions) -> list[TransformFragment]:
    _warn_asymmetric_center("rotate", t.center_x, t.center_y)
    if t.center is None:
        return [TransformFragment("rotate", (t.angle,))]
    cx, cy = t.center
    return [TransformFragment("rotate", (t.angle, cx, cy))]


@renders(kind="scale", model=ScaleTransformation, description="scale(sx sy)")
def render_scale(t: ScaleTransformation, options: RenderOptions) -> list[TransformFragment]:
    """Scale, optionally about a center.

    In "raw" mode the center is left to the renderer and only scale(sx sy) is
    emitted. In "compose" mode a center produces the three-step
    translate(cx cy) scale(sx sy) translate(-cx -cy).
    """
    _warn_asymmetric_center("scale", t.center_x, t.center_y)
    scale = TransformFragment("scale", (t.sx, t.sy))
    if t.center is None or options.scale_center == "raw":
        return [scale]
    cx, cy = t.center
    return [
        TransformFragment("translate", (cx, cy)),
        scale,
        TransformFragment("translate", (-cx, -cy)),
    ]


@renders(kind="affine", model=AffineTransformation, description="matrix(a b c d e f)")
def render_affine(t: AffineTransformation, options: RenderOptions) -> list[TransformFragment]:
    return [TransformFragment("matrix", tuple(t.matrix))]
