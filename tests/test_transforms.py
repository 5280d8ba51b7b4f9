"""Tests for transform attribute parsing and composition."""
from __future__ import annotations

import pytest

from errors import MalformedAttributeError
from transforms import TransformMatrix, compile_transform, node_transform, parse_transform


class TestTransformMatrix:
    def test_multiply_applies_right_operand_first(self):
        m = TransformMatrix.translate(10, 0).multiply(TransformMatrix.scale(2))
        assert m.transform_point(1, 1) == (12.0, 2.0)

    def test_inverse_round_trip(self):
        m = TransformMatrix(2, 0.5, -1, 3, 7, -4)
        x, y = m.transform_point(3, 5)
        assert m.apply_inverse(x, y) == pytest.approx((3, 5))
        assert m.inverse().transform_point(x, y) == pytest.approx((3, 5))

    def test_singular_has_no_preimage(self):
        m = TransformMatrix.scale(0)
        assert m.is_singular()
        assert m.apply_inverse(4, 5) is None
        assert m.inverse().is_identity()


class TestParseTransform:
    def test_commands_and_params(self):
        assert parse_transform("translate(10,0) scale(2)") == [
            ("translate", ["10", "0"]),
            ("scale", ["2"]),
        ]

    def test_empty(self):
        assert parse_transform("") == []
        assert node_transform(None) is None


class TestCompileTransform:
    def test_translate_then_scale(self):
        m = node_transform("translate(10,0) scale(2)")
        assert m.transform_point(1, 1) == pytest.approx((12, 2))

    def test_translate_single_argument(self):
        m = node_transform("translate(5)")
        assert m.as_tuple() == (1, 0, 0, 1, 5, 0)

    def test_scale_single_argument_is_uniform(self):
        m = node_transform("scale(3)")
        assert m.transform_point(1, 2) == pytest.approx((3, 6))

    def test_rotate_about_pivot(self):
        m = node_transform("rotate(90, 10, 10)")
        assert m.transform_point(20, 10) == pytest.approx((10, 20))
        assert m.transform_point(10, 10) == pytest.approx((10, 10))

    def test_matrix_stops_processing(self):
        m = node_transform("translate(5,5) matrix(1,0,0,1,3,4)")
        assert m == TransformMatrix(1, 0, 0, 1, 3, 4)

    def test_scientific_notation(self):
        m = node_transform("translate(1e1, -2.5E0)")
        assert m.as_tuple() == (1, 0, 0, 1, 10, -2.5)

    def test_unknown_command_reported(self, diagnostics):
        m = compile_transform(parse_transform("skewX(30) translate(1,2)"), diagnostics)
        assert m.as_tuple() == (1, 0, 0, 1, 1, 2)
        assert len(diagnostics) == 1
        assert "skewX" in diagnostics.events[0].message
        assert not diagnostics.events[0].is_error()

    def test_missing_operand_raises(self):
        with pytest.raises(MalformedAttributeError):
            node_transform("translate()")

    def test_bad_operand_raises(self):
        with pytest.raises(MalformedAttributeError) as excinfo:
            node_transform("scale(big)")
        assert excinfo.value.attr_name == "transform"
