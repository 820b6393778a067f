"""Vector object model: opaque base geometry plus string attributes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VectorObject(BaseModel):
    """A vector graphics object as supplied by the format module.

    ``data`` is the untransformed base geometry; the engine copies it but never
    reads or writes it. ``attributes["transform"]`` holds the accumulated
    transform descriptor.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    type: str = "path"  # path, rect, ellipse, circle, text, group, ...
    data: Any = None
    attributes: dict[str, str] = Field(default_factory=dict)

    @property
    def transform(self) -> str:
        return self.attributes.get("transform", "")
