from __future__ import annotations
from diagnostics import DiagnosticLog
from geometry import arc_to_bezier
from path_data import (PathCommand, MOVE, LINE, HORIZONTAL, VERTICAL, CUBIC, SMOOTH_CUBIC,
                       QUADRATIC, SMOOTH_QUADRATIC, ARC, CLOSE)

CUBIC_FAMILY = (CUBIC, SMOOTH_CUBIC)
QUADRATIC_FAMILY = (QUADRATIC, SMOOTH_QUADRATIC)

class CursorState:
    def __init__(self):
        self.x = 0.0
        self.y = 0.0
        self.start_x = 0.0
        self.start_y = 0.0
        self.prev_kind = None
        # absolute trailing control point of the previous curve, if it has one
        self.prev_control = None

    def resolve(self, point: tuple[float, float], relative: bool) -> tuple[float, float]:
        if relative:
            return (self.x + point[0], self.y + point[1])
        return (point[0], point[1])

    def reflect(self) -> tuple[float, float]:
        return (2 * self.x - self.prev_control[0], 2 * self.y - self.prev_control[1])

    def can_reflect(self, family: tuple[str, ...]) -> bool:
        return self.prev_kind in family and self.prev_control is not None

    def advance(self, end: tuple[float, float], kind: str, control: tuple[float, float] = None):
        self.x, self.y = end
        self.prev_kind = kind
        self.prev_control = control

def draw_path(commands: list[PathCommand], sink, diagnostics: DiagnosticLog = None,
              tag: str = 'path', node_id: str = None) -> CursorState:
    state = CursorState()

    for command in commands:
        kind = command.kind
        relative = command.relative

        if kind == MOVE:
            end = state.resolve(command.end, relative)
            sink.move_to(*end)
            state.start_x, state.start_y = end
            state.advance(end, kind)

        elif kind == LINE:
            end = state.resolve(command.end, relative)
            sink.line_to(*end)
            state.advance(end, kind)

        elif kind == HORIZONTAL:
            x = state.x + command.value if relative else command.value
            sink.line_to(x, state.y)
            state.advance((x, state.y), kind)

        elif kind == VERTICAL:
            y = state.y + command.value if relative else command.value
            sink.line_to(state.x, y)
            state.advance((state.x, y), kind)

        elif kind == CLOSE:
            # the sink jumps back to the subpath start, the pen stays put
            sink.close_path()
            state.advance((state.x, state.y), kind)

        elif kind == CUBIC:
            cp1 = state.resolve(command.cp1, relative)
            cp2 = state.resolve(command.cp2, relative)
            end = state.resolve(command.end, relative)
            sink.bezier_curve_to(cp1[0], cp1[1], cp2[0], cp2[1], end[0], end[1])
            state.advance(end, kind, cp2)

        elif kind == SMOOTH_CUBIC:
            cp2 = state.resolve(command.cp, relative)
            end = state.resolve(command.end, relative)
            if state.can_reflect(CUBIC_FAMILY):
                cp1 = state.reflect()
                sink.bezier_curve_to(cp1[0], cp1[1], cp2[0], cp2[1], end[0], end[1])
            elif relative:
                # relative form without a cubic predecessor draws a quadratic through cp
                sink.quadratic_curve_to(cp2[0], cp2[1], end[0], end[1])
            else:
                sink.bezier_curve_to(state.x, state.y, cp2[0], cp2[1], end[0], end[1])
            state.advance(end, kind, cp2)

        elif kind == QUADRATIC:
            cp = state.resolve(command.cp, relative)
            end = state.resolve(command.end, relative)
            sink.quadratic_curve_to(cp[0], cp[1], end[0], end[1])
            state.advance(end, kind, cp)

        elif kind == SMOOTH_QUADRATIC:
            end = state.resolve(command.end, relative)
            if state.can_reflect(QUADRATIC_FAMILY):
                cp = state.reflect()
                sink.quadratic_curve_to(cp[0], cp[1], end[0], end[1])
            else:
                cp = (state.x, state.y)
                sink.line_to(end[0], end[1])
            state.advance(end, kind, cp)

        elif kind == ARC:
            end = state.resolve(command.end, relative)
            beziers = arc_to_bezier(state.x, state.y, command.radii[0], command.radii[1],
                                    command.rotation, command.large_arc, command.sweep,
                                    end[0], end[1])
            for b in beziers:
                sink.bezier_curve_to(b[2], b[3], b[4], b[5], b[6], b[7])
            state.advance(end, kind)

        elif diagnostics is not None:
            diagnostics.unsupported(f"draw command {command.code!r} is not supported", tag, node_id)

    return state
