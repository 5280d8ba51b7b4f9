from __future__ import annotations
import re
from errors import MalformedAttributeError

MOVE = 'move'
LINE = 'line'
HORIZONTAL = 'horizontal'
VERTICAL = 'vertical'
CUBIC = 'cubic'
SMOOTH_CUBIC = 'smooth_cubic'
QUADRATIC = 'quadratic'
SMOOTH_QUADRATIC = 'smooth_quadratic'
ARC = 'arc'
CLOSE = 'close'

COMMAND_KINDS = {
    'M': MOVE,
    'L': LINE,
    'H': HORIZONTAL,
    'V': VERTICAL,
    'C': CUBIC,
    'S': SMOOTH_CUBIC,
    'Q': QUADRATIC,
    'T': SMOOTH_QUADRATIC,
    'A': ARC,
    'Z': CLOSE,
}

OPERAND_COUNTS = {
    MOVE: 2,
    LINE: 2,
    HORIZONTAL: 1,
    VERTICAL: 1,
    CUBIC: 6,
    SMOOTH_CUBIC: 4,
    QUADRATIC: 4,
    SMOOTH_QUADRATIC: 2,
    ARC: 7,
    CLOSE: 0,
}

token_pattern = re.compile(
    r'([A-Za-z])|([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)|([\s,]+)|(.)', re.DOTALL)
number_pattern = re.compile(r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')
flag_pattern = re.compile(r'[\s,]*([01])')

class PathCommand:
    def __init__(self, code: str, kind: str | None, relative: bool = False,
                 end: tuple[float, float] = None, cp1: tuple[float, float] = None,
                 cp2: tuple[float, float] = None, cp: tuple[float, float] = None,
                 value: float = None, radii: tuple[float, float] = None,
                 rotation: float = None, large_arc: bool = None, sweep: bool = None):
        self.code = code
        self.kind = kind
        self.relative = relative
        self.end = end
        self.cp1 = cp1
        self.cp2 = cp2
        self.cp = cp
        self.value = value
        self.radii = radii
        self.rotation = rotation
        self.large_arc = large_arc
        self.sweep = sweep

    def __repr__(self) -> str:
        operands = []
        for name in ('end', 'cp1', 'cp2', 'cp', 'value', 'radii', 'rotation', 'large_arc', 'sweep'):
            value = getattr(self, name)
            if value is not None:
                operands.append(f"{name}={value!r}")
        return f"PathCommand({self.code!r}, {', '.join(operands)})"

def make_command(code: str, numbers: list[float]) -> PathCommand:
    kind = COMMAND_KINDS.get(code.upper())
    relative = code.islower()

    if kind == MOVE or kind == LINE or kind == SMOOTH_QUADRATIC:
        return PathCommand(code, kind, relative, end=(numbers[0], numbers[1]))
    if kind == HORIZONTAL or kind == VERTICAL:
        return PathCommand(code, kind, relative, value=numbers[0])
    if kind == CUBIC:
        return PathCommand(code, kind, relative, cp1=(numbers[0], numbers[1]),
                           cp2=(numbers[2], numbers[3]), end=(numbers[4], numbers[5]))
    if kind == SMOOTH_CUBIC or kind == QUADRATIC:
        return PathCommand(code, kind, relative, cp=(numbers[0], numbers[1]),
                           end=(numbers[2], numbers[3]))
    if kind == ARC:
        return PathCommand(code, kind, relative, radii=(numbers[0], numbers[1]),
                           rotation=numbers[2], large_arc=bool(numbers[3]),
                           sweep=bool(numbers[4]), end=(numbers[5], numbers[6]))
    return PathCommand(code, kind, relative)

def _read_arc_operands(d: str, pos: int) -> tuple[list[float], int]:
    # arc flags are single digits and may be written without separators: "a1 1 0 00 1 1"
    numbers = []
    for index in range(7):
        match = flag_pattern.match(d, pos) if index in (3, 4) else None
        if match is None:
            while pos < len(d) and (d[pos].isspace() or d[pos] == ','):
                pos += 1
            match = number_pattern.match(d, pos)
            if match is None:
                return numbers, pos
            numbers.append(float(match.group(0)))
        else:
            numbers.append(float(match.group(1)))
        pos = match.end()
    return numbers, pos

def _read_operands(d: str, pos: int) -> tuple[list[float], int]:
    numbers = []
    while pos < len(d):
        match = token_pattern.match(d, pos)
        if match.group(1) is not None:
            break
        if match.group(2) is not None:
            numbers.append(float(match.group(2)))
        elif match.group(4) is not None:
            raise MalformedAttributeError('d', d)
        pos = match.end()
    return numbers, pos

def parse_path_data(d: str) -> list[PathCommand]:
    if d is None:
        raise MalformedAttributeError('d')

    commands = []
    pos = 0

    while pos < len(d):
        match = token_pattern.match(d, pos)
        if match.group(3) is not None:
            pos = match.end()
            continue
        if match.group(1) is None:
            raise MalformedAttributeError('d', d)

        code = match.group(1)
        pos = match.end()
        kind = COMMAND_KINDS.get(code.upper())

        if kind == ARC:
            numbers = []
            while True:
                group, pos = _read_arc_operands(d, pos)
                if len(group) == 0:
                    break
                if len(group) < 7:
                    raise MalformedAttributeError('d', d)
                numbers.extend(group)
        else:
            numbers, pos = _read_operands(d, pos)

        if kind is None:
            commands.append(PathCommand(code, None, code.islower()))
            continue

        count = OPERAND_COUNTS[kind]
        if count == 0:
            if numbers:
                raise MalformedAttributeError('d', d)
            commands.append(make_command(code, numbers))
            continue

        if len(numbers) == 0 or len(numbers) % count != 0:
            raise MalformedAttributeError('d', d)

        for i in range(0, len(numbers), count):
            group_code = code
            # pairs after a moveto are implicit linetos
            if kind == MOVE and i > 0:
                group_code = 'l' if code == 'm' else 'L'
            commands.append(make_command(group_code, numbers[i:i + count]))

    return commands
