from __future__ import annotations
import hit_test
from geometry import subdivide_cubic_bezier, subdivide_quadratic_bezier
from shapes import Rectangle, RoundedRectangle, Circle, Ellipse, Polygon
from transforms import TransformMatrix

class FillStyle:
    def __init__(self, color: int = 0, alpha: float = 1.0, visible: bool = None):
        self.color = color
        self.alpha = alpha
        self.visible = alpha > 0 if visible is None else visible

    def __repr__(self) -> str:
        return f"FillStyle(0x{self.color:06X}, {self.alpha}, visible={self.visible})"

class LineStyle:
    def __init__(self, width: float = 0.0, color: int = 0, alpha: float = 1.0):
        self.width = width
        self.color = color
        self.alpha = alpha
        self.visible = width > 0 and alpha > 0

    def __repr__(self) -> str:
        return f"LineStyle({self.width}, 0x{self.color:06X}, {self.alpha})"

class ShapeRecord:
    def __init__(self, shape, fill_style: FillStyle, line_style: LineStyle,
                 matrix: TransformMatrix | None = None):
        self.shape = shape
        self.fill_style = fill_style
        self.line_style = line_style
        self.matrix = matrix
        self.holes: list[ShapeRecord] = []

    def __repr__(self) -> str:
        return f"ShapeRecord({self.shape!r}, {self.fill_style!r}, holes={len(self.holes)})"

class Graphics:
    """Reference ShapeSink: accumulates ShapeRecords and the primitive stream that built them.

    Path primitives build a Polygon per subpath; curves are flattened into its points.
    """

    def __init__(self, name: str = None, type: str = ""):
        self.name = name
        self.type = type
        self.parent: Graphics | None = None
        self.children: list[Graphics] = []

        self.graphics_data: list[ShapeRecord] = []
        self.commands: list[tuple[str, tuple]] = []

        self.fill_style = FillStyle(0, 0.0, visible=False)
        self.line_style = LineStyle(0.0, 0, 1.0)
        self.matrix: TransformMatrix | None = None

        self.current_path: Polygon | None = None
        self._subpath_start = (0.0, 0.0)
        self._hole_mode = False

    def _emit(self, name: str, *args):
        self.commands.append((name, args))

    def begin_fill(self, color: int = 0, alpha: float = 1.0):
        self._emit('begin_fill', color, alpha)
        self.finish_poly()
        self.fill_style = FillStyle(color, alpha)

    def set_line_style(self, width: float = 0.0, color: int = 0, alpha: float = 1.0):
        self._emit('set_line_style', width, color, alpha)
        self.finish_poly()
        self.line_style = LineStyle(width, color, alpha)

    def set_transform(self, matrix: TransformMatrix | None):
        self._emit('set_transform', matrix)
        self.finish_poly()
        self.matrix = matrix.copy() if matrix is not None else None

    def move_to(self, x: float, y: float):
        self._emit('move_to', x, y)
        self.finish_poly()
        self.current_path = Polygon([(x, y)])
        self._subpath_start = (x, y)

    def _ensure_path(self) -> Polygon:
        if self.current_path is None:
            self.current_path = Polygon([self._subpath_start])
        return self.current_path

    def line_to(self, x: float, y: float):
        self._emit('line_to', x, y)
        self._ensure_path().points.append((x, y))

    def bezier_curve_to(self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float):
        self._emit('bezier_curve_to', cp1x, cp1y, cp2x, cp2y, x, y)
        path = self._ensure_path()
        path.points.extend(subdivide_cubic_bezier(path.points[-1], (cp1x, cp1y), (cp2x, cp2y), (x, y)))

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float):
        self._emit('quadratic_curve_to', cpx, cpy, x, y)
        path = self._ensure_path()
        path.points.extend(subdivide_quadratic_bezier(path.points[-1], (cpx, cpy), (x, y)))

    def close_path(self):
        self._emit('close_path')
        if self.current_path is not None:
            self.current_path.close_stroke = True
            self.finish_poly()

    def draw_rect(self, x: float, y: float, width: float, height: float):
        self._emit('draw_rect', x, y, width, height)
        self.draw_shape(Rectangle(x, y, width, height))

    def draw_rounded_rect(self, x: float, y: float, width: float, height: float, radius: float):
        self._emit('draw_rounded_rect', x, y, width, height, radius)
        self.draw_shape(RoundedRectangle(x, y, width, height, radius))

    def draw_circle(self, x: float, y: float, radius: float):
        self._emit('draw_circle', x, y, radius)
        self.draw_shape(Circle(x, y, radius))

    def draw_ellipse(self, x: float, y: float, half_width: float, half_height: float):
        self._emit('draw_ellipse', x, y, half_width, half_height)
        self.draw_shape(Ellipse(x, y, half_width, half_height))

    def draw_polygon(self, points: list, close_stroke: bool = True):
        if points and not isinstance(points[0], (tuple, list)):
            points = [(points[i], points[i + 1]) for i in range(0, len(points) - 1, 2)]
        points = [tuple(p) for p in points]
        self._emit('draw_polygon', points, close_stroke)
        self.draw_shape(Polygon(points, close_stroke))

    def begin_hole(self):
        self._emit('begin_hole')
        self.finish_poly()
        self._hole_mode = True

    def end_hole(self):
        self._emit('end_hole')
        self.finish_poly()
        self._hole_mode = False

    def draw_shape(self, shape):
        self.finish_poly()
        self._store(shape)

    def _store(self, shape):
        record = ShapeRecord(shape, self.fill_style, self.line_style, self.matrix)
        if self._hole_mode:
            if self.graphics_data:
                self.graphics_data[-1].holes.append(record)
        else:
            self.graphics_data.append(record)

    def finish_poly(self):
        path = self.current_path
        if path is None:
            return
        self.current_path = None
        if len(path.points) > 1:
            self._store(path)

    def add_child(self, child: Graphics) -> Graphics:
        child.parent = self
        self.children.append(child)
        return child

    def get_child_by_name(self, name: str) -> Graphics | None:
        for child in self.children:
            if child.name == name:
                return child
        return None

    def iter_tree(self):
        yield self
        for child in self.children:
            yield from child.iter_tree()

    def all_records(self) -> list[ShapeRecord]:
        records = []
        for graphics in self.iter_tree():
            records.extend(graphics.graphics_data)
        return records

    def pick_graphics_data(self, point: tuple[float, float], all: bool = False) -> list[ShapeRecord]:
        return hit_test.pick_graphics_data(self.graphics_data, point, all)

    def __repr__(self) -> str:
        return (f"Graphics(name={self.name!r}, type={self.type!r}, "
                f"records={len(self.graphics_data)}, children={len(self.children)})")
