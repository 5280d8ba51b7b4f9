from __future__ import annotations
from colors import resolve_color, is_transparent
from diagnostics import DiagnosticLog
from geometry import parse_scientific, normalize_unit
from parser import Node

# presentation attribute / style property -> EffectiveStyle field
STYLE_FIELDS = {
    'fill': 'fill',
    'opacity': 'opacity',
    'fill-opacity': 'fill_opacity',
    'stroke': 'stroke',
    'stroke-opacity': 'stroke_opacity',
    'stroke-width': 'stroke_width',
}

UNSUPPORTED_ATTRIBUTES = ('stroke-linejoin', 'stroke-linecap', 'fill-rule')

DEFAULT_OPTIONS = {
    'unpack_tree': False,
    'line_color': 0,
    'line_opacity': 1.0,
    'fill_color': 0,
    'fill_opacity': 1.0,
    'line_width': 1.0,
}

OPTION_ALIASES = {
    'unpackTree': 'unpack_tree',
    'lineColor': 'line_color',
    'lineOpacity': 'line_opacity',
    'fillColor': 'fill_color',
    'fillOpacity': 'fill_opacity',
    'lineWidth': 'line_width',
}

class GraphicsOptions:
    def __init__(self, line_width: float = 1.0, line_color: int = 0, line_opacity: float = 1.0,
                 fill_color: int = 0, fill_opacity: float = 1.0, unpack_tree: bool = False):
        self.line_width = max(1.0, float(line_width or 1.0))
        self.line_color = line_color
        self.line_opacity = line_opacity
        self.fill_color = fill_color
        self.fill_opacity = fill_opacity
        self.unpack_tree = bool(unpack_tree)

    @classmethod
    def from_value(cls, options) -> GraphicsOptions:
        if options is None:
            return cls()
        if isinstance(options, GraphicsOptions):
            return options

        merged = dict(DEFAULT_OPTIONS)
        for key, value in options.items():
            key = OPTION_ALIASES.get(key, key)
            if key not in DEFAULT_OPTIONS:
                raise ValueError(f"unknown option: {key}")
            merged[key] = value
        return cls(**merged)

class EffectiveStyle:
    FIELDS = ('fill', 'fill_opacity', 'stroke', 'stroke_opacity', 'stroke_width', 'opacity')

    def __init__(self, fill: str = None, fill_opacity: str = None, stroke: str = None,
                 stroke_opacity: str = None, stroke_width: str = None, opacity: str = None):
        self.fill = fill
        self.fill_opacity = fill_opacity
        self.stroke = stroke
        self.stroke_opacity = stroke_opacity
        self.stroke_width = stroke_width
        self.opacity = opacity

    def as_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.FIELDS if getattr(self, name) is not None}

    def inherit(self, parent: EffectiveStyle | None) -> EffectiveStyle:
        if parent is None:
            return EffectiveStyle(**self.as_dict())
        merged = parent.as_dict()
        merged.update(self.as_dict())
        return EffectiveStyle(**merged)

    def __eq__(self, other) -> bool:
        if not isinstance(other, EffectiveStyle):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        fields = ', '.join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"EffectiveStyle({fields})"

def parse_style_attribute(style_str: str) -> list[tuple[str, str]]:
    entries = []
    if not style_str:
        return entries

    for prop in style_str.split(';'):
        if ':' not in prop:
            continue
        name, value = prop.split(':', 1)
        name = name.strip()
        if name:
            entries.append((name, value.strip()))
    return entries

def resolve_style(node: Node, diagnostics: DiagnosticLog = None) -> EffectiveStyle:
    values = {}
    for attr_name, field in STYLE_FIELDS.items():
        value = node.get_attribute(attr_name)
        if value is not None:
            values[field] = value.strip()

    for name, value in parse_style_attribute(node.get_attribute('style')):
        field = STYLE_FIELDS.get(name)
        if field is None:
            if diagnostics is not None:
                diagnostics.unsupported(f'style property "{name}" is not supported',
                                        node.tag, node.id)
            continue
        values[field] = value

    return EffectiveStyle(**{k: v for k, v in values.items() if v != ''})

def report_unsupported_attributes(node: Node, diagnostics: DiagnosticLog):
    for attr_name in UNSUPPORTED_ATTRIBUTES:
        if node.get_attribute(attr_name):
            diagnostics.unsupported(f'"{attr_name}" attribute is not supported', node.tag, node.id)

def _opacity(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return max(0.0, min(1.0, parse_scientific(value)))
    except ValueError:
        return default

def resolve_fill(style: EffectiveStyle, options: GraphicsOptions) -> tuple[int, float]:
    if style.fill is None:
        return (options.fill_color, 1.0)

    if is_transparent(style.fill):
        return (0, 0.0)

    alpha = _opacity(style.opacity, _opacity(style.fill_opacity, options.fill_opacity))
    return (resolve_color(style.fill), alpha)

def resolve_line(style: EffectiveStyle, options: GraphicsOptions) -> tuple[float, int, float]:
    if is_transparent(style.stroke):
        return (0.0, 0, 0.0)

    if style.stroke_width is not None:
        try:
            width = max(0.5, normalize_unit(style.stroke_width))
        except ValueError:
            width = options.line_width
    elif style.stroke is not None:
        width = options.line_width
    else:
        width = 0.0

    color = resolve_color(style.stroke) if style.stroke is not None else options.line_color
    alpha = _opacity(style.opacity, _opacity(style.stroke_opacity, options.line_opacity))
    return (width, color, alpha)
