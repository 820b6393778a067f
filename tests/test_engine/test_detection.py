"""Tests for transformation detection between object states."""

from __future__ import annotations

import pytest

from vectordiff.engine.detection import detect_transformation, fragment_to_transformation
from vectordiff.engine.descriptor import TransformFragment
from vectordiff.engine.transformer import apply_transformation
from vectordiff.models.transformations import (
    AffineTransformation,
    RotateTransformation,
    ScaleTransformation,
    TranslateTransformation,
)
from vectordiff.models.vector_object import VectorObject


class TestFromDescriptor:
    @pytest.mark.parametrize("request_", [
        TranslateTransformation(x=10, y=20),
        RotateTransformation(angle=45),
        RotateTransformation(angle=90, center_x=5, center_y=5),
        ScaleTransformation(sx=2, sy=3),
        AffineTransformation(matrix=[1, 0, 0, 1, 10, 10]),
    ])
    def test_inverts_single_application(self, translated_path, request_):
        after = apply_transformation(translated_path, request_)
        assert detect_transformation(translated_path, after) == request_

    def test_two_appended_fragments_not_detected(self, path_object):
        after = apply_transformation(path_object, {"type": "translate", "x": 1, "y": 1})
        after = apply_transformation(after, {"type": "rotate", "angle": 1})
        assert detect_transformation(path_object, after) is None

    def test_unchanged_object(self, translated_path):
        assert detect_transformation(translated_path, translated_path) is None

    def test_rewritten_prefix_not_detected(self, path_object):
        before = path_object.model_copy(update={"attributes": {"transform": "rotate(10)"}})
        after = path_object.model_copy(update={"attributes": {"transform": "rotate(20) rotate(5)"}})
        assert detect_transformation(before, after) is None

    def test_unparseable_descriptor(self, path_object):
        after = path_object.model_copy(update={"attributes": {"transform": "perspective(3)x"}})
        assert detect_transformation(path_object, after) is None


class TestFromGeometry:
    def test_rect_translation_from_string_data(self, rect_object):
        moved = rect_object.model_copy(update={"data": "x=15 y=10 width=100 height=50"})
        assert detect_transformation(rect_object, moved) == TranslateTransformation(x=5, y=-10)

    def test_rect_scaling_from_string_data(self, rect_object):
        grown = rect_object.model_copy(update={"data": "x=10 y=20 width=200 height=25"})
        assert detect_transformation(rect_object, grown) == ScaleTransformation(sx=2, sy=0.5)

    def test_translation_wins_over_scaling(self, rect_object):
        both = rect_object.model_copy(update={"data": "x=11 y=20 width=200 height=50"})
        assert isinstance(detect_transformation(rect_object, both), TranslateTransformation)

    def test_ellipse_from_mapping_data(self, ellipse_object):
        scaled = ellipse_object.model_copy(update={"data": {"cx": 50, "cy": 50, "rx": 30, "ry": 10}})
        detected = detect_transformation(ellipse_object, scaled)
        assert detected == ScaleTransformation(sx=1.5, sy=1)

    def test_below_threshold_ignored(self, ellipse_object):
        nudged = ellipse_object.model_copy(update={"data": {"cx": 50.0005, "cy": 50, "rx": 20, "ry": 10}})
        assert detect_transformation(ellipse_object, nudged) is None

    def test_zero_size_not_scaled(self):
        before = VectorObject(id="r", type="rect", data={"x": 0, "y": 0, "width": 0, "height": 5})
        after = VectorObject(id="r", type="rect", data={"x": 0, "y": 0, "width": 3, "height": 5})
        assert detect_transformation(before, after) is None

    def test_path_geometry_not_inspected(self, path_object):
        changed = path_object.model_copy(update={"data": {"d": "M0 0 L1 1"}})
        assert detect_transformation(path_object, changed) is None


def test_different_ids(rect_object):
    other = rect_object.model_copy(update={"id": "rect-2", "data": "x=99 y=99 width=1 height=1"})
    assert detect_transformation(rect_object, other) is None


def test_different_types(rect_object):
    other = rect_object.model_copy(update={"type": "ellipse"})
    assert detect_transformation(rect_object, other) is None


def test_fragment_to_transformation_single_arg_forms():
    assert fragment_to_transformation(TransformFragment("translate", (4.0,))) == TranslateTransformation(x=4, y=0)
    assert fragment_to_transformation(TransformFragment("scale", (3.0,))) == ScaleTransformation(sx=3, sy=3)
    assert fragment_to_transformation(TransformFragment("skewX", (10.0,))) is None


class TestMalformedGeometry:
    @pytest.mark.parametrize("data", [
        "x=1.2.3 y=20 width=100 height=50",
        "x=. y=20 width=100 height=50",
        "x=1e999 y=20 width=100 height=50",
    ])
    def test_bad_position_is_ignored(self, rect_object, data):
        changed = rect_object.model_copy(update={"data": data})
        assert detect_transformation(rect_object, changed) is None
        assert detect_transformation(changed, rect_object) is None

    def test_overflowing_size_is_ignored(self, rect_object):
        changed = rect_object.model_copy(update={"data": "x=10 y=20 width=1e999 height=50"})
        assert detect_transformation(rect_object, changed) is None

    def test_scale_ratio_overflow_is_ignored(self):
        before = VectorObject(id="e", type="ellipse", data={"cx": 0, "cy": 0, "rx": 1e-300, "ry": 1})
        after = VectorObject(id="e", type="ellipse", data={"cx": 0, "cy": 0, "rx": 1e300, "ry": 1})
        assert detect_transformation(before, after) is None

    def test_translation_overflow_is_ignored(self):
        before = VectorObject(id="r", type="rect", data={"x": -1e308, "y": 0, "width": 1, "height": 1})
        after = VectorObject(id="r", type="rect", data={"x": 1e308, "y": 0, "width": 1, "height": 1})
        assert detect_transformation(before, after) is None

    def test_huge_integer_in_mapping_is_ignored(self):
        before = VectorObject(id="r", type="rect", data={"x": 0, "y": 0, "width": 1, "height": 1})
        after = VectorObject(id="r", type="rect", data={"x": 10**400, "y": 0, "width": 1, "height": 1})
        assert detect_transformation(before, after) is None

    def test_overflowing_descriptor_fragment_is_ignored(self, path_object):
        after = path_object.model_copy(update={"attributes": {"transform": "translate(1e999 0)"}})
        assert detect_transformation(path_object, after) is None
