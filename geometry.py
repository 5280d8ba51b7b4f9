from __future__ import annotations
import math
import re

INCHES_TO_PX = 96.0
CM_TO_PX = INCHES_TO_PX / 2.54
MM_TO_PX = CM_TO_PX / 10
PT_TO_PX = INCHES_TO_PX / 72.0
PC_TO_PX = PT_TO_PX * 12
FONT_SIZE_PX = 16.0

UNIT_TO_PX = {
    "": 1.0,
    "px": 1.0,
    "pt": PT_TO_PX,
    "pc": PC_TO_PX,
    "in": INCHES_TO_PX,
    "cm": CM_TO_PX,
    "mm": MM_TO_PX,
    "em": FONT_SIZE_PX,
    "ex": FONT_SIZE_PX / 2,
}

number_pattern = re.compile(r'^([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([a-zA-Z%]*)$')
points_split_pattern = re.compile(r'[\s,]+')

def parse_scientific(value) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    if value is None:
        raise ValueError("missing numeric value")
    return float(value.strip())

def parse_number_with_unit(value: str) -> tuple[float, str]:
    if value is None:
        raise ValueError("missing numeric value")
    if isinstance(value, (int, float)):
        return (float(value), "")

    value = value.strip()
    match = number_pattern.match(value)
    if match is None:
        raise ValueError(f"not a number: {value!r}")

    return (float(match.group(1)), match.group(2) or "")

def normalize_unit(value: str, reference: float = None) -> float:
    num_value, unit = parse_number_with_unit(value)
    unit = unit.lower()
    if unit == "%":
        if reference is None:
            raise ValueError(f"percentage without a reference length: {value!r}")
        return num_value / 100.0 * reference
    if unit not in UNIT_TO_PX:
        raise ValueError(f"unsupported unit: {unit!r}")
    return num_value * UNIT_TO_PX[unit]

def parse_points(points_str: str) -> list[float]:
    if not points_str or not points_str.strip():
        return []
    return [parse_scientific(p) for p in points_split_pattern.split(points_str.strip()) if p]

def clamp(x, minx, maxx):
    return max(min(x, maxx), minx)

def subdivide_cubic_bezier(p0: tuple[float, float], p1: tuple[float, float],
                           p2: tuple[float, float], p3: tuple[float, float],
                           tolerance: float = 0.25) -> list[tuple[float, float]]:
    points = []

    def midpoint(a, b):
        return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)

    def flatness(p0, p1, p2, p3):
        ux = 3 * p1[0] - 2 * p0[0] - p3[0]
        uy = 3 * p1[1] - 2 * p0[1] - p3[1]
        vx = 3 * p2[0] - 2 * p3[0] - p0[0]
        vy = 3 * p2[1] - 2 * p3[1] - p0[1]
        return max(ux * ux + uy * uy, vx * vx + vy * vy)

    def subdivide(p0, p1, p2, p3, depth=0):
        if depth > 10 or flatness(p0, p1, p2, p3) < 16 * tolerance * tolerance:
            points.append(p3)
            return

        m01 = midpoint(p0, p1)
        m12 = midpoint(p1, p2)
        m23 = midpoint(p2, p3)
        m012 = midpoint(m01, m12)
        m123 = midpoint(m12, m23)
        m0123 = midpoint(m012, m123)

        subdivide(p0, m01, m012, m0123, depth + 1)
        subdivide(m0123, m123, m23, p3, depth + 1)

    subdivide(p0, p1, p2, p3)
    return points

def subdivide_quadratic_bezier(p0: tuple[float, float], p1: tuple[float, float],
                               p2: tuple[float, float], tolerance: float = 0.25) -> list[tuple[float, float]]:
    points = []

    def midpoint(a, b):
        return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)

    def flatness(p0, p1, p2):
        ux = 2 * p1[0] - p0[0] - p2[0]
        uy = 2 * p1[1] - p0[1] - p2[1]
        return ux * ux + uy * uy

    def subdivide(p0, p1, p2, depth=0):
        if depth > 10 or flatness(p0, p1, p2) < 16 * tolerance * tolerance:
            points.append(p2)
            return

        m01 = midpoint(p0, p1)
        m12 = midpoint(p1, p2)
        m012 = midpoint(m01, m12)

        subdivide(p0, m01, m012, depth + 1)
        subdivide(m012, m12, p2, depth + 1)

    subdivide(p0, p1, p2)
    return points

def _vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    n = math.sqrt(ux * ux + uy * uy) * math.sqrt(vx * vx + vy * vy)
    if n == 0:
        return 0.0
    c = clamp((ux * vx + uy * vy) / n, -1.0, 1.0)
    s = ux * vy - uy * vx
    return math.atan2(s, c)

def _arc_segment(cx: float, cy: float, rx: float, ry: float,
                 cos_phi: float, sin_phi: float, t1: float, t2: float) -> tuple:
    dt = t2 - t1
    alpha = 4.0 / 3.0 * math.tan(dt / 4)

    def on_ellipse(x, y):
        return (cx + cos_phi * x - sin_phi * y, cy + sin_phi * x + cos_phi * y)

    x1 = rx * math.cos(t1)
    y1 = ry * math.sin(t1)
    x2 = rx * math.cos(t2)
    y2 = ry * math.sin(t2)

    start = on_ellipse(x1, y1)
    cp1 = on_ellipse(x1 - alpha * rx * math.sin(t1), y1 + alpha * ry * math.cos(t1))
    cp2 = on_ellipse(x2 + alpha * rx * math.sin(t2), y2 - alpha * ry * math.cos(t2))
    end = on_ellipse(x2, y2)
    return (start[0], start[1], cp1[0], cp1[1], cp2[0], cp2[1], end[0], end[1])

def arc_to_bezier(x1: float, y1: float, rx: float, ry: float, rotation: float,
                  large_arc: bool, sweep: bool, x2: float, y2: float) -> list[tuple]:
    """Approximate an SVG elliptical arc with cubic segments.

    Each segment is (x1, y1, cp1x, cp1y, cp2x, cp2y, x2, y2). The last segment
    ends exactly on (x2, y2).
    """
    if x1 == x2 and y1 == y2:
        return []

    rx = abs(rx)
    ry = abs(ry)
    if rx == 0 or ry == 0:
        return [(x1, y1, x1, y1, x2, y2, x2, y2)]

    cos_phi = math.cos(math.radians(rotation))
    sin_phi = math.sin(math.radians(rotation))

    dx = (x1 - x2) / 2
    dy = (y1 - y2) / 2
    x1p = cos_phi * dx + sin_phi * dy
    y1p = -sin_phi * dx + cos_phi * dy

    lambda_val = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lambda_val > 1:
        rx *= math.sqrt(lambda_val)
        ry *= math.sqrt(lambda_val)

    numerator = rx * rx * ry * ry - rx * rx * y1p * y1p - ry * ry * x1p * x1p
    denominator = rx * rx * y1p * y1p + ry * ry * x1p * x1p
    factor = math.sqrt(max(0.0, numerator / denominator))
    if large_arc == sweep:
        factor = -factor

    cxp = factor * rx * y1p / ry
    cyp = -factor * ry * x1p / rx

    cx = cos_phi * cxp - sin_phi * cyp + (x1 + x2) / 2
    cy = sin_phi * cxp + cos_phi * cyp + (y1 + y2) / 2

    theta1 = _vector_angle(1.0, 0.0, (x1p - cxp) / rx, (y1p - cyp) / ry)
    dtheta = _vector_angle((x1p - cxp) / rx, (y1p - cyp) / ry,
                           (-x1p - cxp) / rx, (-y1p - cyp) / ry)

    if sweep and dtheta < 0:
        dtheta += 2 * math.pi
    elif not sweep and dtheta > 0:
        dtheta -= 2 * math.pi

    num_segments = max(1, int(math.ceil(abs(dtheta) / (math.pi / 2) - 1e-9)))
    delta = dtheta / num_segments

    segments = []
    for i in range(num_segments):
        t1 = theta1 + i * delta
        t2 = theta1 + (i + 1) * delta
        segments.append(_arc_segment(cx, cy, rx, ry, cos_phi, sin_phi, t1, t2))

    # pin the end to the requested point to avoid rounding drift
    last = segments[-1]
    segments[-1] = last[:6] + (x2, y2)
    return segments
