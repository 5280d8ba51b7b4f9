from __future__ import annotations
import math

RECT = 'rect'
ROUNDED_RECT = 'rounded_rect'
CIRCLE = 'circle'
ELLIPSE = 'ellipse'
POLYGON = 'polygon'

def _ellipse_outline(cx: float, cy: float, rx: float, ry: float,
                     start: float = 0.0, sweep: float = 2 * math.pi) -> list[tuple[float, float]]:
    num_segments = max(8, int(abs(sweep) * max(rx, ry) / 2))
    num_segments = min(num_segments, 256)
    points = []
    for i in range(num_segments + 1):
        angle = start + sweep * i / num_segments
        points.append((cx + rx * math.cos(angle), cy + ry * math.sin(angle)))
    return points

class Rectangle:
    type = RECT

    def __init__(self, x: float = 0.0, y: float = 0.0, width: float = 0.0, height: float = 0.0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def contains(self, x: float, y: float) -> bool:
        if self.width <= 0 or self.height <= 0:
            return False
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    def outline(self) -> list[tuple[float, float]]:
        x, y, w, h = self.x, self.y, self.width, self.height
        return [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.width}, {self.height})"

class RoundedRectangle(Rectangle):
    type = ROUNDED_RECT

    def __init__(self, x: float = 0.0, y: float = 0.0, width: float = 0.0,
                 height: float = 0.0, radius: float = 20.0):
        super().__init__(x, y, width, height)
        self.radius = radius

    def _corner_radius(self) -> float:
        return max(0.0, min(self.radius, self.width / 2.0, self.height / 2.0))

    def contains(self, x: float, y: float) -> bool:
        if not super().contains(x, y):
            return False

        r = self._corner_radius()
        if r == 0:
            return True

        left = self.x + r
        right = self.x + self.width - r
        top = self.y + r
        bottom = self.y + self.height - r

        if left <= x <= right or top <= y <= bottom:
            return True

        corner_x = left if x < left else right
        corner_y = top if y < top else bottom
        dx = x - corner_x
        dy = y - corner_y
        return dx * dx + dy * dy <= r * r

    def outline(self) -> list[tuple[float, float]]:
        r = self._corner_radius()
        if r == 0:
            return super().outline()

        left = self.x + r
        right = self.x + self.width - r
        top = self.y + r
        bottom = self.y + self.height - r
        half_pi = math.pi / 2

        points = []
        points.extend(_ellipse_outline(right, top, r, r, -half_pi, half_pi))
        points.extend(_ellipse_outline(right, bottom, r, r, 0.0, half_pi))
        points.extend(_ellipse_outline(left, bottom, r, r, half_pi, half_pi))
        points.extend(_ellipse_outline(left, top, r, r, math.pi, half_pi))
        return points

    def __repr__(self) -> str:
        return f"RoundedRectangle({self.x}, {self.y}, {self.width}, {self.height}, {self.radius})"

class Ellipse:
    type = ELLIPSE

    def __init__(self, x: float = 0.0, y: float = 0.0, half_width: float = 0.0, half_height: float = 0.0):
        self.x = x
        self.y = y
        self.half_width = half_width
        self.half_height = half_height

    def contains(self, x: float, y: float) -> bool:
        if self.half_width <= 0 or self.half_height <= 0:
            return False
        dx = (x - self.x) / self.half_width
        dy = (y - self.y) / self.half_height
        return dx * dx + dy * dy <= 1.0

    def outline(self) -> list[tuple[float, float]]:
        return _ellipse_outline(self.x, self.y, self.half_width, self.half_height)[:-1]

    def __repr__(self) -> str:
        return f"Ellipse({self.x}, {self.y}, {self.half_width}, {self.half_height})"

class Circle(Ellipse):
    type = CIRCLE

    def __init__(self, x: float = 0.0, y: float = 0.0, radius: float = 0.0):
        super().__init__(x, y, radius, radius)
        self.radius = radius

    def __repr__(self) -> str:
        return f"Circle({self.x}, {self.y}, {self.radius})"

class Polygon:
    type = POLYGON

    def __init__(self, points: list[tuple[float, float]] = None, close_stroke: bool = False):
        self.points = list(points or [])
        self.close_stroke = close_stroke

    def contains(self, x: float, y: float) -> bool:
        points = self.points
        if len(points) < 3:
            return False

        inside = False
        j = len(points) - 1
        for i in range(len(points)):
            xi, yi = points[i]
            xj, yj = points[j]
            if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
                inside = not inside
            j = i
        return inside

    def outline(self) -> list[tuple[float, float]]:
        return list(self.points)

    def __repr__(self) -> str:
        return f"Polygon({self.points!r}, close_stroke={self.close_stroke})"
