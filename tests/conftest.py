"""Shared test fixtures."""

from __future__ import annotations

import pytest

from vectordiff.models.vector_object import VectorObject


# Sample objects in the shapes the format module produces

PATH_DATA = {
    "d": "M10 10 L90 10 L50 80 Z",
    "points": [[10.0, 10.0], [90.0, 10.0], [50.0, 80.0]],
    "meta": {"closed": True, "tags": ["triangle"]},
}

RECT_STRING_DATA = "x=10 y=20 width=100 height=50"

ELLIPSE_DATA = {"cx": 50.0, "cy": 50.0, "rx": 20.0, "ry": 10.0}


def make_path(**attributes: str) -> VectorObject:
    return VectorObject(
        id="path-1",
        type="path",
        data={
            "d": PATH_DATA["d"],
            "points": [list(p) for p in PATH_DATA["points"]],
            "meta": {"closed": True, "tags": ["triangle"]},
        },
        attributes={"fill": "#4ECDC4", **attributes},
    )


@pytest.fixture
def path_object() -> VectorObject:
    return make_path()


@pytest.fixture
def translated_path() -> VectorObject:
    return make_path(transform="translate(1 1)")


@pytest.fixture
def rect_object() -> VectorObject:
    return VectorObject(id="rect-1", type="rect", data=RECT_STRING_DATA, attributes={"stroke": "black"})


@pytest.fixture
def ellipse_object() -> VectorObject:
    return VectorObject(id="ellipse-1", type="ellipse", data=dict(ELLIPSE_DATA))
