from __future__ import annotations
import math
from errors import MalformedAttributeError
from geometry import normalize_unit, parse_points
from parser import Node

HORIZONTAL_LENGTHS = ('x', 'cx', 'width', 'rx')
VERTICAL_LENGTHS = ('y', 'cy', 'height', 'ry')

def percent_reference(attr_name: str, viewport: tuple[float, float] | None) -> float | None:
    if viewport is None:
        return None
    width, height = viewport
    if attr_name in HORIZONTAL_LENGTHS:
        return width
    if attr_name in VERTICAL_LENGTHS:
        return height
    # radii and other non-directional lengths use the normalized diagonal
    return math.sqrt((width * width + height * height) / 2.0)

def _length(node: Node, attr_name: str, value: str, viewport) -> float:
    try:
        return normalize_unit(value, percent_reference(attr_name, viewport))
    except ValueError:
        raise MalformedAttributeError(attr_name, value, node.tag) from None

def required_length(node: Node, attr_name: str, viewport: tuple[float, float] = None) -> float:
    value = node.get_attribute(attr_name)
    if value is None or not value.strip():
        raise MalformedAttributeError(attr_name, tag=node.tag)
    return _length(node, attr_name, value, viewport)

def optional_length(node: Node, attr_name: str, default: float = 0.0,
                    viewport: tuple[float, float] = None) -> float:
    value = node.get_attribute(attr_name)
    if value is None or not value.strip():
        return default
    return _length(node, attr_name, value, viewport)

def draw_rect(node: Node, sink, viewport: tuple[float, float] = None):
    x = optional_length(node, 'x', viewport=viewport)
    y = optional_length(node, 'y', viewport=viewport)
    width = required_length(node, 'width', viewport)
    height = required_length(node, 'height', viewport)
    rx = optional_length(node, 'rx', viewport=viewport)

    if rx:
        sink.draw_rounded_rect(x, y, width, height, rx)
    else:
        sink.draw_rect(x, y, width, height)

def draw_circle(node: Node, sink, viewport: tuple[float, float] = None):
    is_ellipse = node.tag.lower() == 'ellipse'
    cx = optional_length(node, 'cx', viewport=viewport)
    cy = optional_length(node, 'cy', viewport=viewport)

    if is_ellipse:
        sink.draw_ellipse(cx, cy, required_length(node, 'rx', viewport),
                          required_length(node, 'ry', viewport))
    else:
        sink.draw_circle(cx, cy, required_length(node, 'r', viewport))

def draw_poly(node: Node, sink, close: bool):
    points_str = node.get_attribute('points')
    if points_str is None:
        raise MalformedAttributeError('points', tag=node.tag)
    try:
        points = parse_points(points_str)
    except ValueError:
        raise MalformedAttributeError('points', points_str, node.tag) from None

    sink.draw_polygon(points, close)
