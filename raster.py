from __future__ import annotations
import math
import numpy as np
from colors import to_rgba
from graphics import Graphics, ShapeRecord
from shapes import Polygon
from transforms import TransformMatrix

class Rasterizer:
    def __init__(self, width: int, height: int,
                 background_color: tuple[int, int, int] = (255, 255, 255),
                 base_matrix: TransformMatrix = None):
        self.width = width
        self.height = height
        self.base_matrix = base_matrix or TransformMatrix.identity()

        self.buffer = np.zeros((height, width, 4), dtype=np.uint8)
        self.buffer[:, :, 0] = background_color[0]
        self.buffer[:, :, 1] = background_color[1]
        self.buffer[:, :, 2] = background_color[2]
        self.buffer[:, :, 3] = 255

    def render(self, root: Graphics) -> np.ndarray:
        for graphics in root.iter_tree():
            for record in graphics.graphics_data:
                self.render_record(record)
        return self.buffer

    def _device_matrix(self, record: ShapeRecord) -> TransformMatrix:
        if record.matrix is None:
            return self.base_matrix
        return self.base_matrix.multiply(record.matrix)

    def _pixel_bounds(self, points: list[tuple[float, float]], pad: float = 0.0):
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        min_x = max(0, int(math.floor(min(xs) - pad)))
        max_x = min(self.width, int(math.ceil(max(xs) + pad)) + 1)
        min_y = max(0, int(math.floor(min(ys) - pad)))
        max_y = min(self.height, int(math.ceil(max(ys) + pad)) + 1)
        return min_x, max_x, min_y, max_y

    def render_record(self, record: ShapeRecord):
        outline = record.shape.outline()
        if len(outline) < 2:
            return

        matrix = self._device_matrix(record)
        device_outline = [matrix.transform_point(x, y) for x, y in outline]

        if record.fill_style.visible:
            mask = self._fill_mask(record, matrix, device_outline)
            self._blend(mask, to_rgba(record.fill_style.color, record.fill_style.alpha))

        if record.line_style.visible:
            closed = not isinstance(record.shape, Polygon) or record.shape.close_stroke
            scale = math.sqrt(abs(matrix.a * matrix.d - matrix.b * matrix.c))
            mask = self._stroke_mask(device_outline, record.line_style.width * scale / 2.0, closed)
            self._blend(mask, to_rgba(record.line_style.color, record.line_style.alpha))

    def _fill_mask(self, record: ShapeRecord, matrix: TransformMatrix,
                   device_outline: list[tuple[float, float]]) -> np.ndarray:
        mask = np.zeros((self.height, self.width), dtype=bool)
        if matrix.is_singular():
            return mask
        min_x, max_x, min_y, max_y = self._pixel_bounds(device_outline)

        for py in range(min_y, max_y):
            for px in range(min_x, max_x):
                x, y = matrix.apply_inverse(px + 0.5, py + 0.5)
                if not record.shape.contains(x, y):
                    continue
                if any(hole.shape.contains(x, y) for hole in record.holes):
                    continue
                mask[py, px] = True
        return mask

    def _stroke_mask(self, points: list[tuple[float, float]], half_width: float,
                     closed: bool) -> np.ndarray:
        mask = np.zeros((self.height, self.width), dtype=bool)
        if half_width <= 0:
            return mask

        segments = list(zip(points[:-1], points[1:]))
        if closed:
            segments.append((points[-1], points[0]))

        for (x1, y1), (x2, y2) in segments:
            min_x, max_x, min_y, max_y = self._pixel_bounds([(x1, y1), (x2, y2)], half_width + 1)
            if min_x >= max_x or min_y >= max_y:
                continue

            xs, ys = np.meshgrid(np.arange(min_x, max_x) + 0.5, np.arange(min_y, max_y) + 0.5)
            dx = x2 - x1
            dy = y2 - y1
            length_sq = dx * dx + dy * dy
            if length_sq == 0:
                h = np.zeros_like(xs)
            else:
                h = np.clip(((xs - x1) * dx + (ys - y1) * dy) / length_sq, 0.0, 1.0)
            dist = np.hypot(xs - x1 - dx * h, ys - y1 - dy * h)
            mask[min_y:max_y, min_x:max_x] |= dist <= half_width

        return mask

    def _blend(self, mask: np.ndarray, color: tuple[int, int, int, int]):
        if color[3] == 0 or not mask.any():
            return

        fg_alpha = color[3] / 255.0
        region = self.buffer[mask].astype(np.float64)
        bg_alpha = region[:, 3] / 255.0
        out_alpha = fg_alpha + bg_alpha * (1 - fg_alpha)
        safe_alpha = np.where(out_alpha == 0, 1.0, out_alpha)

        for channel in range(3):
            blended = (color[channel] * fg_alpha + region[:, channel] * bg_alpha * (1 - fg_alpha)) / safe_alpha
            region[:, channel] = blended
        region[:, 3] = out_alpha * 255

        self.buffer[mask] = np.clip(np.round(region), 0, 255).astype(np.uint8)

    def get_rgb_buffer(self) -> np.ndarray:
        return self.buffer[:, :, :3].copy()

    def get_rgba_buffer(self) -> np.ndarray:
        return self.buffer.copy()
