from __future__ import annotations
from attributes import (EffectiveStyle, GraphicsOptions, resolve_style, resolve_fill, resolve_line,
                        report_unsupported_attributes)
from builders import draw_rect, draw_circle, draw_poly
from diagnostics import DiagnosticLog, DEPTH_LIMIT
from errors import InvalidInputError, MalformedAttributeError
from geometry import normalize_unit
from graphics import Graphics, ShapeRecord
from hit_test import pick_graphics_data
from parser import Node, parse_svg_string, parse_svg_file
from path_data import parse_path_data
from path_interpreter import draw_path
from transforms import TransformMatrix, node_transform

MAX_TREE_DEPTH = 256
DEFAULT_VIEWPORT_SIZE = 100.0

def apply_paint(sink: Graphics, style: EffectiveStyle, matrix: TransformMatrix | None,
                options: GraphicsOptions):
    color, alpha = resolve_fill(style, options)
    sink.begin_fill(color, alpha)
    sink.set_line_style(*resolve_line(style, options))
    sink.set_transform(matrix)

def draw_node(node: Node, sink: Graphics, diagnostics: DiagnosticLog,
              viewport: tuple[float, float] = None):
    tag = node.tag.lower()

    if tag == 'path':
        commands = parse_path_data(node.get_attribute('d'))
        draw_path(commands, sink, diagnostics, node.tag, node.id)
    elif tag == 'circle' or tag == 'ellipse':
        draw_circle(node, sink, viewport)
    elif tag == 'rect':
        draw_rect(node, sink, viewport)
    elif tag == 'polygon':
        draw_poly(node, sink, True)
    elif tag == 'polyline':
        draw_poly(node, sink, False)
    elif tag == 'g':
        pass
    else:
        diagnostics.unsupported(f"<{node.tag}> elements unsupported", node.tag, node.id)

def compose_transform(node: Node, parent_matrix: TransformMatrix | None,
                      diagnostics: DiagnosticLog) -> TransformMatrix | None:
    try:
        matrix = node_transform(node.get_attribute('transform'), diagnostics)
    except MalformedAttributeError as e:
        diagnostics.malformed(str(e), node.tag, node.id)
        matrix = None

    if matrix is None:
        return parent_matrix
    if parent_matrix is None:
        return matrix
    return parent_matrix.multiply(matrix)

def build_graphics(children: list[Node], root: Graphics, options: GraphicsOptions,
                   diagnostics: DiagnosticLog, parent_style: EffectiveStyle = None,
                   parent_matrix: TransformMatrix = None, depth: int = 0,
                   viewport: tuple[float, float] = None) -> Graphics:
    if depth >= MAX_TREE_DEPTH:
        if children:
            diagnostics.add(DEPTH_LIMIT, f"markup nested deeper than {MAX_TREE_DEPTH} levels, "
                                         f"{len(children)} element(s) skipped")
        return root

    for i, child in enumerate(children):
        shape = Graphics() if options.unpack_tree else root

        full_style = resolve_style(child, diagnostics).inherit(parent_style)
        matrix = compose_transform(child, parent_matrix, diagnostics)

        apply_paint(shape, full_style, matrix, options)
        report_unsupported_attributes(child, diagnostics)

        try:
            draw_node(child, shape, diagnostics, viewport)
        except MalformedAttributeError as e:
            diagnostics.malformed(str(e), child.tag, child.id)
        shape.finish_poly()

        build_graphics(child.children, shape, options, diagnostics, full_style, matrix, depth + 1,
                       viewport)

        if options.unpack_tree:
            shape.name = child.id or f"child_{i}"
            shape.type = child.tag.lower()
            root.add_child(shape)

    return root

class SVGGraphics:
    def __init__(self, svg: Node | str, options: GraphicsOptions | dict = None):
        self.options = GraphicsOptions.from_value(options)
        self.diagnostics = DiagnosticLog()

        if isinstance(svg, str):
            svg = parse_svg_string(svg)
        if not isinstance(svg, Node) or svg.tag.lower() != 'svg':
            raise InvalidInputError("invalid SVG!")

        self.svg_tree = svg
        self.viewport_width = None
        self.viewport_height = None
        self.viewbox = None
        self._extract_viewport_info()

        self.graphics = Graphics(name=svg.id, type='svg')
        root_style = resolve_style(svg, self.diagnostics)
        build_graphics(svg.children, self.graphics, self.options, self.diagnostics, root_style,
                       viewport=self.reference_size())

    @classmethod
    def from_file(cls, path: str, options: GraphicsOptions | dict = None) -> SVGGraphics:
        return cls(parse_svg_file(path), options)

    def _extract_viewport_info(self):
        attrs = self.svg_tree.attributes

        if 'viewBox' in attrs:
            parts = attrs['viewBox'].replace(',', ' ').split()
            try:
                if len(parts) == 4:
                    self.viewbox = tuple(float(p) for p in parts)
            except ValueError:
                self.viewbox = None
            if self.viewbox is None:
                self.diagnostics.malformed(f"invalid viewBox value: {attrs['viewBox']!r}", 'svg')

        for index, attr_name in ((2, 'width'), (3, 'height')):
            # percentages resolve against the viewBox, or the default size without one
            reference = self.viewbox[index] if self.viewbox is not None else DEFAULT_VIEWPORT_SIZE
            size = None
            if attr_name in attrs:
                try:
                    size = normalize_unit(attrs[attr_name], reference)
                except ValueError:
                    self.diagnostics.malformed(f"invalid {attr_name} value: {attrs[attr_name]!r}", 'svg')
            if size is None and self.viewbox is not None:
                size = self.viewbox[index]
            setattr(self, f"viewport_{attr_name}", DEFAULT_VIEWPORT_SIZE if size is None else size)

    def reference_size(self) -> tuple[float, float]:
        """Width and height that percentage lengths of child elements refer to."""
        if self.viewbox is not None:
            return (self.viewbox[2], self.viewbox[3])
        return (self.viewport_width, self.viewport_height)

    def viewbox_matrix(self) -> TransformMatrix:
        """Map user space onto the viewport, honouring preserveAspectRatio (meet/slice)."""
        if self.viewbox is None:
            return TransformMatrix.identity()

        vb_min_x, vb_min_y, vb_width, vb_height = self.viewbox
        scale_x = self.viewport_width / vb_width if vb_width > 0 else 1.0
        scale_y = self.viewport_height / vb_height if vb_height > 0 else 1.0

        parts = self.svg_tree.get_attribute('preserveAspectRatio', 'xMidYMid meet').strip().split()
        if len(parts) > 0 and parts[0].lower() == 'none':
            return TransformMatrix(scale_x, 0.0, 0.0, scale_y, -vb_min_x * scale_x, -vb_min_y * scale_y)

        meet_or_slice = parts[1].lower() if len(parts) > 1 else 'meet'
        scale = min(scale_x, scale_y) if meet_or_slice == 'meet' else max(scale_x, scale_y)
        align = parts[0].lower() if parts else 'xmidymid'

        free_x = self.viewport_width - vb_width * scale
        free_y = self.viewport_height - vb_height * scale
        if 'xmin' in align:
            offset_x = 0.0
        elif 'xmax' in align:
            offset_x = free_x
        else:
            offset_x = free_x / 2.0
        if 'ymin' in align:
            offset_y = 0.0
        elif 'ymax' in align:
            offset_y = free_y
        else:
            offset_y = free_y / 2.0

        return TransformMatrix(scale, 0.0, 0.0, scale,
                               offset_x - vb_min_x * scale, offset_y - vb_min_y * scale)

    def pick_graphics_data(self, point: tuple[float, float], all: bool = False) -> list[ShapeRecord]:
        return pick_graphics_data(self.graphics.all_records(), point, all)
