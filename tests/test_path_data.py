"""Tests for path data tokenizing."""
from __future__ import annotations

import pytest

from errors import MalformedAttributeError
from path_data import ARC, LINE, MOVE, SMOOTH_CUBIC, parse_path_data


def test_implicit_lineto_after_moveto():
    commands = parse_path_data("M1 2 3 4 5 6")
    assert [c.code for c in commands] == ["M", "L", "L"]
    assert commands[0].kind == MOVE
    assert commands[1].kind == LINE
    assert commands[2].end == (5.0, 6.0)


def test_relative_implicit_lineto():
    commands = parse_path_data("m1 2 3 4")
    assert [c.code for c in commands] == ["m", "l"]
    assert all(c.relative for c in commands)


def test_compact_numbers():
    commands = parse_path_data("M-1-2L.5.5 1e1,2E-1")
    assert commands[0].end == (-1.0, -2.0)
    assert commands[1].end == (0.5, 0.5)
    assert commands[2].end == (10.0, 0.2)


def test_repeated_operands_split_per_command():
    commands = parse_path_data("S1 2 3 4 5 6 7 8")
    assert len(commands) == 2
    assert commands[0].kind == SMOOTH_CUBIC
    assert commands[0].cp == (1.0, 2.0)
    assert commands[1].end == (7.0, 8.0)


def test_arc_flags_without_separators():
    (arc,) = parse_path_data("a1 1 0 00 1 1")
    assert arc.kind == ARC
    assert arc.radii == (1.0, 1.0)
    assert arc.large_arc is False
    assert arc.sweep is False
    assert arc.end == (1.0, 1.0)


def test_arc_flags_set():
    (arc,) = parse_path_data("A5 5 30 1 1 10 0")
    assert arc.rotation == 30.0
    assert arc.large_arc is True
    assert arc.sweep is True


def test_close_takes_no_operands():
    commands = parse_path_data("M0 0 L1 1 z")
    assert commands[-1].code == "z"
    with pytest.raises(MalformedAttributeError):
        parse_path_data("M0 0 Z 1")


def test_unknown_command_kept():
    commands = parse_path_data("M0 0 B1 1 L5 5")
    assert [c.code for c in commands] == ["M", "B", "L"]
    assert commands[1].kind is None


@pytest.mark.parametrize("d", ["L1", "M0 0 C1 2 3", "M0 0 L1 #", "12 M0 0", "A1 1 0 1"])
def test_malformed(d):
    with pytest.raises(MalformedAttributeError):
        parse_path_data(d)


def test_missing_d():
    with pytest.raises(MalformedAttributeError) as excinfo:
        parse_path_data(None)
    assert "missing" in str(excinfo.value)
