"""Renderer registry — every transformation kind is a fragment renderer registered via decorator.

Usage:
    @renders(kind="translate", model=TranslateTransformation)
    def render_translate(t: TranslateTransformation, options: RenderOptions) -> list[TransformFragment]:
        return [TransformFragment("translate", (t.x, t.y))]

Adding a new kind = one decorated renderer plus its request model. The
dispatcher in transformer.py never changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from pydantic import BaseModel

from vectordiff.config import ScaleCenterMode

if TYPE_CHECKING:
    from vectordiff.engine.descriptor import TransformFragment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    scale_center: ScaleCenterMode = "raw"


Renderer = Callable[[BaseModel, RenderOptions], "list[TransformFragment]"]


@dataclass
class RendererSpec:
    kind: str
    model: type[BaseModel]
    fn: Renderer
    description: str = ""


class RendererRegistry:
    """Registry of fragment renderers keyed by transformation kind."""

    def __init__(self) -> None:
        self._renderers: dict[str, RendererSpec] = {}

    def register(self, spec: RendererSpec) -> None:
        if spec.kind in self._renderers:
            raise ValueError(f"Duplicate transformation kind: {spec.kind}")
        self._renderers[spec.kind] = spec
        logger.debug("Registered renderer for %s (%s)", spec.kind, spec.model.__name__)

    def get(self, kind: str) -> RendererSpec:
        return self._renderers[kind]

    def kinds(self) -> list[str]:
        return list(self._renderers)

    def __contains__(self, kind: object) -> bool:
        return kind in self._renderers

    @property
    def count(self) -> int:
        return len(self._renderers)


# Module-level singleton
_registry = RendererRegistry()


def get_registry() -> RendererRegistry:
    return _registry


def renders(*, kind: str, model: type[BaseModel], description: str = ""):
    """Decorator to register a fragment renderer."""

    def decorator(fn: Renderer):
        _registry.register(RendererSpec(kind=kind, model=model, fn=fn, description=description))
        return fn

    return decorator
