from __future__ import annotations
import sys
import os
from PIL import Image
from errors import SVGGraphicsError
from raster import Rasterizer
from svg_graphics import SVGGraphics
from transforms import TransformMatrix

def describe_graphics(graphics, level=0):
    indent = '    ' * level
    label = graphics.name or '(root)'
    print(f"{indent}- {label} <{graphics.type}> records={len(graphics.graphics_data)}")
    for child in graphics.children:
        describe_graphics(child, level + 1)

def parse_pair(value: str) -> tuple[float, float]:
    parts = value.split(',')
    if len(parts) != 2:
        raise ValueError(value)
    return (float(parts[0].strip()), float(parts[1].strip()))

def process_svg_file(svg_path: str, output_path: str = None, verbose: bool = False,
                     width: int = None, height: int = None,
                     background: tuple[int, int, int] = (255, 255, 255),
                     skip_render: bool = False, unpack: bool = False,
                     pick: tuple[float, float] = None, pick_all: bool = False) -> bool:
    if not os.path.exists(svg_path):
        print(f"Error: File not found: {svg_path}")
        return False

    if not svg_path.lower().endswith('.svg'):
        print(f"Warning: {svg_path} does not have .svg extension")

    try:
        document = SVGGraphics.from_file(svg_path, {'unpack_tree': unpack})
    except (SVGGraphicsError, OSError, UnicodeDecodeError) as e:
        print(f"Error processing {svg_path}: {e}")
        return False

    if verbose:
        print(f"\nProcessing: {svg_path}")
        print(f"Viewport: {document.viewport_width}x{document.viewport_height}")
        if document.viewbox:
            print(f"ViewBox: {document.viewbox}")
        print(f"Shape records: {len(document.graphics.all_records())}")
        if unpack:
            describe_graphics(document.graphics)
        document.diagnostics.print_report()

    if pick is not None:
        picked = document.pick_graphics_data(pick, pick_all)
        print(f"Picked {len(picked)} record(s) at {pick}")
        for record in picked:
            print(f"  {record!r}")

    if skip_render:
        print(f"[OK] Parsed: {svg_path} (rendering skipped)")
        return True

    if output_path is None:
        base_name = os.path.splitext(os.path.basename(svg_path))[0]
        output_path = f"{base_name}.png"

    if document.viewport_width <= 0 or document.viewport_height <= 0:
        print(f"Error: {svg_path} has an empty viewport")
        return False

    out_width = width or max(1, int(round(document.viewport_width)))
    out_height = height or max(1, int(round(document.viewport_height)))
    base_matrix = TransformMatrix.scale(out_width / document.viewport_width,
                                        out_height / document.viewport_height)
    base_matrix = base_matrix.multiply(document.viewbox_matrix())

    if verbose:
        print(f"Output will be: {output_path} ({out_width}x{out_height})")
        print(f"Background color: RGB{background}")

    rasterizer = Rasterizer(out_width, out_height, background, base_matrix)
    rasterizer.render(document.graphics)

    try:
        Image.fromarray(rasterizer.get_rgb_buffer()).save(output_path)
    except OSError as e:
        print(f"Error saving PNG: {e}")
        return False

    if verbose:
        print(f"[OK] Rendered and saved: {output_path}")
    else:
        print(f"[OK] {svg_path} -> {output_path}")
    return True

def print_usage():
    print("SVG to Graphics converter")
    print("Usage: python main.py <svg_file1> [svg_file2] ... [options]")
    print("\nOptions:")
    print("  -v, --verbose         Print viewport, shape tree and diagnostics")
    print("  -o, --output PATH     Output directory or PNG file")
    print("  -w, --width WIDTH     Override output width in pixels")
    print("  -h, --height HEIGHT   Override output height in pixels")
    print("  -b, --background RGB  Background color as R,G,B (default: 255,255,255)")
    print("  --unpack              Build one named graphics node per element")
    print("  --pick X,Y            Report shape records under a point")
    print("  --all                 With --pick, report every match instead of the first")
    print("  --skip-render         Only convert and report, do not write a PNG")

FLAG_OPTIONS = {
    '-v': 'verbose',
    '--verbose': 'verbose',
    '--unpack': 'unpack',
    '--all': 'pick_all',
    '--skip-render': 'skip_render',
}

VALUE_OPTIONS = {
    '-o': 'output',
    '--output': 'output',
    '-w': 'width',
    '--width': 'width',
    '-h': 'height',
    '--height': 'height',
    '-b': 'background',
    '--background': 'background',
    '--pick': 'pick',
}

def parse_size(value: str) -> int:
    size = int(value)
    if size <= 0:
        raise ValueError("width and height must be positive")
    return size

def parse_background(value: str) -> tuple[int, int, int]:
    channels = [int(p.strip()) for p in value.split(',')]
    if len(channels) != 3:
        raise ValueError("background must be R,G,B (e.g., 255,255,255)")
    return tuple(max(0, min(255, c)) for c in channels)

VALUE_PARSERS = {
    'width': parse_size,
    'height': parse_size,
    'background': parse_background,
    'pick': parse_pair,
}

def parse_args(args: list[str]) -> dict | None:
    options = {
        'verbose': False,
        'unpack': False,
        'pick_all': False,
        'skip_render': False,
        'output': None,
        'width': None,
        'height': None,
        'background': (255, 255, 255),
        'pick': None,
        'files': [],
    }

    remaining = list(args)
    while remaining:
        arg = remaining.pop(0)
        if arg in FLAG_OPTIONS:
            options[FLAG_OPTIONS[arg]] = True
        elif arg in VALUE_OPTIONS:
            if not remaining:
                print(f"Error: {arg} requires a value")
                return None
            key = VALUE_OPTIONS[arg]
            value = remaining.pop(0)
            try:
                options[key] = VALUE_PARSERS.get(key, str)(value)
            except ValueError as e:
                print(f"Error: invalid value for {arg}: {value} ({e})")
                return None
        elif arg.startswith('-'):
            print(f"Unknown option: {arg}")
            return None
        else:
            options['files'].append(arg)

    return options

def output_path_for(svg_file: str, output: str | None, file_count: int) -> str | None:
    if not output:
        return None
    if os.path.isdir(output):
        base_name = os.path.splitext(os.path.basename(svg_file))[0]
        return os.path.join(output, f"{base_name}.png")
    if file_count == 1:
        return output
    print("Warning: -o with multiple files requires a directory, not a file")
    return None

def main(argv: list[str] = None):
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print_usage()
        return

    options = parse_args(args)
    if options is None:
        return

    svg_files = options['files']
    if not svg_files:
        print("Error: No SVG files specified")
        return

    converted = 0
    for svg_file in svg_files:
        output_path = output_path_for(svg_file, options['output'], len(svg_files))
        if process_svg_file(svg_file, output_path, options['verbose'], options['width'],
                            options['height'], options['background'], options['skip_render'],
                            options['unpack'], options['pick'], options['pick_all']):
            converted += 1

    print(f"\nConverted {converted}/{len(svg_files)} file(s) successfully")

if __name__ == "__main__":
    main()
