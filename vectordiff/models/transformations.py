"""Transformation request models: a closed set of kinds tagged by ``type``.

Numeric fields are finite floats: NaN and +/-Infinity are rejected with a
pydantic ValidationError when the request is built, never coerced.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, FiniteFloat, TypeAdapter


class _TransformationBase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


def _aliased(*names: str, default: Any = ...) -> Any:
    # First name is the wire spelling, the rest are accepted on input
    return Field(default, validation_alias=AliasChoices(*names), serialization_alias=names[0])


class TranslateTransformation(_TransformationBase):
    type: Literal["translate"] = "translate"
    x: FiniteFloat
    y: FiniteFloat


class _CenteredTransformation(_TransformationBase):
    center_x: FiniteFloat | None = _aliased("centerX", "center_x", "cx", default=None)
    center_y: FiniteFloat | None = _aliased("centerY", "center_y", "cy", default=None)

    @property
    def center(self) -> tuple[float, float] | None:
        """Both center coordinates, or None when either is missing."""
        if self.center_x is None or self.center_y is None:
            return None
        return (self.center_x, self.center_y)


class RotateTransformation(_CenteredTransformation):
    """Rotation in degrees, optionally about (centerX, centerY)."""

    type: Literal["rotate"] = "rotate"
    angle: FiniteFloat


class ScaleTransformation(_CenteredTransformation):
    type: Literal["scale"] = "scale"
    sx: FiniteFloat = _aliased("sx", "scaleX", "scale_x")
    sy: FiniteFloat = _aliased("sy", "scaleY", "scale_y")


class AffineTransformation(_TransformationBase):
    """2D affine matrix [a, b, c, d, e, f] in SVG ``matrix()`` order."""

    type: Literal["affine"] = "affine"
    matrix: list[FiniteFloat] = Field(min_length=6, max_length=6)


Transformation = Annotated[
    Union[
        TranslateTransformation,
        RotateTransformation,
        ScaleTransformation,
        AffineTransformation,
    ],
    Field(discriminator="type"),
]

_transformation_adapter: TypeAdapter[Transformation] = TypeAdapter(Transformation)


def parse_transformation(data: Any) -> Transformation:
    """Validate a plain mapping (e.g. decoded JSON) into a Transformation."""
    return _transformation_adapter.validate_python(data)
