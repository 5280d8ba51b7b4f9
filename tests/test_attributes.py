"""Tests for style resolution, inheritance and paint defaults."""
from __future__ import annotations

import pytest

from attributes import (EffectiveStyle, GraphicsOptions, parse_style_attribute, resolve_fill,
                        resolve_line, resolve_style)
from parser import Node


def style_of(**attributes) -> EffectiveStyle:
    attributes = {k.replace('_', '-'): v for k, v in attributes.items()}
    return resolve_style(Node.create('rect', attributes))


class TestResolveStyle:
    def test_presentation_attributes(self):
        style = style_of(fill='red', stroke_width='2')
        assert style.fill == 'red'
        assert style.stroke_width == '2'
        assert style.stroke is None

    def test_inline_style_overrides_attribute(self):
        node = Node.create('rect', {'fill': 'red', 'style': 'fill: blue; stroke-width:3'})
        style = resolve_style(node)
        assert style.fill == 'blue'
        assert style.stroke_width == '3'

    def test_unknown_style_property_reported(self, diagnostics):
        node = Node.create('rect', {'id': 'r1', 'style': 'filter: url(#f); fill: green'})
        style = resolve_style(node, diagnostics)
        assert style.fill == 'green'
        assert len(diagnostics) == 1
        event = diagnostics.events[0]
        assert 'filter' in event.message
        assert event.node_id == 'r1'

    def test_empty_values_dropped(self):
        node = Node.create('rect', {'style': 'fill: ;stroke:red;;'})
        assert resolve_style(node).as_dict() == {'stroke': 'red'}

    def test_parse_style_attribute_keeps_colons_in_values(self):
        assert parse_style_attribute('fill:url(a:b)') == [('fill', 'url(a:b)')]


class TestInheritance:
    def test_child_overrides_parent(self):
        parent = EffectiveStyle(fill='red', stroke='blue')
        child = EffectiveStyle(fill='green').inherit(parent)
        assert child.fill == 'green'
        assert child.stroke == 'blue'

    def test_bare_node_yields_parent_style(self):
        parent = EffectiveStyle(fill='red', opacity='0.5', stroke_width='4')
        assert resolve_style(Node.create('g')).inherit(parent) == parent

    def test_inherit_is_idempotent(self):
        parent = EffectiveStyle(fill='red', stroke='blue')
        once = style_of(fill='green').inherit(parent)
        assert once.inherit(parent) == once

    def test_inherit_does_not_mutate_parent(self):
        parent = EffectiveStyle(fill='red')
        EffectiveStyle(fill='green').inherit(parent)
        assert parent.fill == 'red'


class TestResolveFill:
    options = GraphicsOptions(fill_color=0x123456, fill_opacity=0.25)

    def test_unset_fill_uses_default_color(self):
        assert resolve_fill(EffectiveStyle(), self.options) == (0x123456, 1.0)

    def test_none_is_transparent_regardless_of_opacity(self):
        style = EffectiveStyle(fill='none', fill_opacity='1', opacity='1')
        assert resolve_fill(style, self.options) == (0, 0.0)

    def test_fill_opacity(self):
        assert resolve_fill(EffectiveStyle(fill='red', fill_opacity='0.5'), self.options) == (0xFF0000, 0.5)

    def test_opacity_wins_over_fill_opacity(self):
        style = EffectiveStyle(fill='#00f', fill_opacity='0.5', opacity='0.75')
        assert resolve_fill(style, self.options) == (0x0000FF, 0.75)

    def test_explicit_fill_defaults_to_option_opacity(self):
        assert resolve_fill(EffectiveStyle(fill='red'), self.options) == (0xFF0000, 0.25)

    def test_opacity_clamped(self):
        assert resolve_fill(EffectiveStyle(fill='red', opacity='3'), self.options)[1] == 1.0


class TestResolveLine:
    options = GraphicsOptions(line_width=2, line_color=0xABCDEF, line_opacity=0.5)

    def test_no_stroke_draws_nothing(self):
        width, color, _ = resolve_line(EffectiveStyle(), self.options)
        assert width == 0.0
        assert color == 0xABCDEF

    def test_stroke_none(self):
        assert resolve_line(EffectiveStyle(stroke='none', stroke_width='5'), self.options) == (0.0, 0, 0.0)

    def test_stroke_uses_default_width(self):
        assert resolve_line(EffectiveStyle(stroke='blue'), self.options) == (2.0, 0x0000FF, 0.5)

    def test_stroke_width_minimum(self):
        width, _, _ = resolve_line(EffectiveStyle(stroke='blue', stroke_width='0.1'), self.options)
        assert width == 0.5

    def test_stroke_width_units(self):
        width, _, _ = resolve_line(EffectiveStyle(stroke='blue', stroke_width='1in'), self.options)
        assert width == pytest.approx(96.0)

    def test_stroke_opacity(self):
        style = EffectiveStyle(stroke='red', stroke_opacity='0.2')
        assert resolve_line(style, self.options)[2] == pytest.approx(0.2)


class TestGraphicsOptions:
    def test_defaults(self):
        options = GraphicsOptions.from_value(None)
        assert options.line_width == 1.0
        assert options.fill_opacity == 1.0
        assert options.unpack_tree is False

    def test_aliases_and_minimum_width(self):
        options = GraphicsOptions.from_value({'lineWidth': 0.5, 'unpackTree': True})
        assert options.line_width == 1.0
        assert options.unpack_tree is True

    def test_unknown_option(self):
        with pytest.raises(ValueError):
            GraphicsOptions.from_value({'lineDash': 4})

    def test_instance_passes_through(self):
        options = GraphicsOptions(line_width=3)
        assert GraphicsOptions.from_value(options) is options
