"""Tests for point picking over shape records."""
from __future__ import annotations

from graphics import Graphics
from hit_test import pick_graphics_data
from transforms import TransformMatrix


def filled(color: int = 0xFF0000) -> Graphics:
    graphics = Graphics()
    graphics.begin_fill(color, 1.0)
    return graphics


def test_point_inside_hole_misses():
    graphics = filled()
    graphics.draw_rect(0, 0, 10, 10)
    graphics.begin_hole()
    graphics.draw_circle(5, 5, 2)
    graphics.end_hole()

    (record,) = graphics.graphics_data
    assert len(record.holes) == 1
    assert graphics.pick_graphics_data((5, 5)) == []
    assert graphics.pick_graphics_data((1, 1)) == [record]


def test_first_match_versus_all():
    graphics = filled()
    graphics.draw_rect(0, 0, 10, 10)
    graphics.draw_rect(5, 5, 10, 10)
    first, second = graphics.graphics_data

    assert graphics.pick_graphics_data((7, 7)) == [first]
    assert graphics.pick_graphics_data((7, 7), all=True) == [first, second]
    assert graphics.pick_graphics_data((12, 12), all=True) == [second]


def test_invisible_fill_is_not_picked():
    graphics = Graphics()
    graphics.begin_fill(0xFF0000, 0.0)
    graphics.draw_rect(0, 0, 10, 10)
    assert graphics.pick_graphics_data((5, 5)) == []


def test_record_transform_is_inverted():
    graphics = filled()
    graphics.set_transform(TransformMatrix.translate(100, 0))
    graphics.draw_rect(0, 0, 10, 10)
    assert len(graphics.pick_graphics_data((105, 5))) == 1
    assert graphics.pick_graphics_data((5, 5)) == []


def test_transform_is_copied_when_set():
    matrix = TransformMatrix.translate(100, 0)
    graphics = filled()
    graphics.set_transform(matrix)
    graphics.draw_rect(0, 0, 10, 10)
    matrix.tx = 0
    assert len(graphics.pick_graphics_data((105, 5))) == 1


def test_polygon_even_odd():
    graphics = filled()
    graphics.draw_polygon([0, 0, 10, 0, 10, 10, 0, 10])
    graphics.move_to(20, 20)
    graphics.line_to(30, 20)
    graphics.line_to(30, 30)
    graphics.close_path()
    assert len(graphics.pick_graphics_data((5, 5))) == 1
    assert len(graphics.pick_graphics_data((28, 22))) == 1
    assert graphics.pick_graphics_data((22, 28)) == []


def test_repeated_calls_are_independent():
    graphics = filled()
    graphics.draw_circle(0, 0, 5)
    records = graphics.graphics_data
    assert pick_graphics_data(records, (1, 1)) == pick_graphics_data(records, (1, 1))
    assert pick_graphics_data(records, (9, 9), all=True) == []


def test_collapsed_transform_is_never_picked():
    graphics = filled()
    graphics.set_transform(TransformMatrix.scale(0))
    graphics.draw_rect(0, 0, 10, 10)
    assert graphics.pick_graphics_data((0, 0), all=True) == []
    assert graphics.pick_graphics_data((5, 5), all=True) == []
