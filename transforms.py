from __future__ import annotations
import math
import re
from diagnostics import DiagnosticLog
from errors import MalformedAttributeError
from geometry import parse_scientific

transform_pattern = re.compile(r'([A-Za-z]+)\s*\(([^)]*)\)')
params_split_pattern = re.compile(r'[\s,]+')

class TransformMatrix:
    def __init__(self, a: float = 1.0, b: float = 0.0, c: float = 0.0,
                 d: float = 1.0, tx: float = 0.0, ty: float = 0.0):
        self.a = a
        self.b = b
        self.c = c
        self.d = d
        self.tx = tx
        self.ty = ty

    @staticmethod
    def identity() -> TransformMatrix:
        return TransformMatrix(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    @staticmethod
    def translate(tx: float, ty: float) -> TransformMatrix:
        return TransformMatrix(1.0, 0.0, 0.0, 1.0, tx, ty)

    @staticmethod
    def scale(sx: float, sy: float = None) -> TransformMatrix:
        if sy is None:
            sy = sx
        return TransformMatrix(sx, 0.0, 0.0, sy, 0.0, 0.0)

    @staticmethod
    def rotate(angle_degrees: float) -> TransformMatrix:
        angle_rad = math.radians(angle_degrees)
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        return TransformMatrix(cos_a, sin_a, -sin_a, cos_a, 0.0, 0.0)

    def multiply(self, other: TransformMatrix) -> TransformMatrix:
        # self * other: other is applied first
        return TransformMatrix(
            self.a * other.a + self.c * other.b,
            self.b * other.a + self.d * other.b,
            self.a * other.c + self.c * other.d,
            self.b * other.c + self.d * other.d,
            self.a * other.tx + self.c * other.ty + self.tx,
            self.b * other.tx + self.d * other.ty + self.ty
        )

    def is_identity(self) -> bool:
        return (abs(self.a - 1.0) < 1e-6 and abs(self.b) < 1e-6 and
                abs(self.c) < 1e-6 and abs(self.d - 1.0) < 1e-6 and
                abs(self.tx) < 1e-6 and abs(self.ty) < 1e-6)

    def transform_point(self, x: float, y: float) -> tuple[float, float]:
        new_x = self.a * x + self.c * y + self.tx
        new_y = self.b * x + self.d * y + self.ty
        return (new_x, new_y)

    def is_singular(self) -> bool:
        return abs(self.a * self.d - self.b * self.c) < 1e-12

    def apply_inverse(self, x: float, y: float) -> tuple[float, float] | None:
        # a collapsed frame has no preimage
        if self.is_singular():
            return None
        det = self.a * self.d - self.b * self.c
        dx = x - self.tx
        dy = y - self.ty
        return ((self.d * dx - self.c * dy) / det, (self.a * dy - self.b * dx) / det)

    def inverse(self) -> TransformMatrix:
        det = self.a * self.d - self.b * self.c
        if abs(det) < 1e-12:
            return TransformMatrix.identity()

        inv_det = 1.0 / det
        new_a = self.d * inv_det
        new_b = -self.b * inv_det
        new_c = -self.c * inv_det
        new_d = self.a * inv_det
        new_tx = (self.c * self.ty - self.d * self.tx) * inv_det
        new_ty = (self.b * self.tx - self.a * self.ty) * inv_det
        return TransformMatrix(new_a, new_b, new_c, new_d, new_tx, new_ty)

    def copy(self) -> TransformMatrix:
        return TransformMatrix(self.a, self.b, self.c, self.d, self.tx, self.ty)

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.tx, self.ty)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TransformMatrix):
            return NotImplemented
        return all(abs(p - q) < 1e-9 for p, q in zip(self.as_tuple(), other.as_tuple()))

    def __repr__(self) -> str:
        return "TransformMatrix(%g, %g, %g, %g, %g, %g)" % self.as_tuple()

def parse_transform(transform_str: str) -> list[tuple[str, list[str]]]:
    if not transform_str:
        return []

    commands = []
    for name, params in transform_pattern.findall(transform_str):
        params_list = [p for p in params_split_pattern.split(params.strip()) if p]
        commands.append((name, params_list))
    return commands

def _number(values: list[str], index: int, default: float = None) -> float:
    if index >= len(values):
        if default is None:
            raise MalformedAttributeError('transform', ' '.join(values))
        return default
    try:
        return parse_scientific(values[index])
    except ValueError:
        raise MalformedAttributeError('transform', values[index]) from None

def compile_transform(commands: list[tuple[str, list[str]]],
                      diagnostics: DiagnosticLog = None) -> TransformMatrix | None:
    if not commands:
        return None

    matrix = TransformMatrix.identity()

    # the last listed command is the innermost frame, so walk right to left
    for command, values in reversed(commands):
        if command == 'matrix':
            return TransformMatrix(_number(values, 0), _number(values, 1), _number(values, 2),
                                   _number(values, 3), _number(values, 4), _number(values, 5))

        elif command == 'translate':
            dx = _number(values, 0)
            dy = _number(values, 1, 0.0)
            matrix = TransformMatrix.translate(dx, dy).multiply(matrix)

        elif command == 'scale':
            sx = _number(values, 0)
            sy = _number(values, 1, sx)
            matrix = TransformMatrix.scale(sx, sy).multiply(matrix)

        elif command == 'rotate':
            angle = _number(values, 0)
            cx = _number(values, 1, 0.0)
            cy = _number(values, 2, 0.0)
            matrix = (TransformMatrix.translate(cx, cy)
                      .multiply(TransformMatrix.rotate(angle))
                      .multiply(TransformMatrix.translate(-cx, -cy))
                      .multiply(matrix))

        elif diagnostics is not None:
            diagnostics.unsupported(f"transform command {command}() is not supported")

    return matrix

def node_transform(transform_str: str, diagnostics: DiagnosticLog = None) -> TransformMatrix | None:
    if not transform_str:
        return None
    return compile_transform(parse_transform(transform_str), diagnostics)
