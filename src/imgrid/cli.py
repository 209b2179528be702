import argparse
import logging
import sys
from pathlib import Path

from imgrid.config import DEFAULT_CONFIG, GridConfig, parse_color
from imgrid.coords import cell_to_pixel, pixel_to_cell
from imgrid.errors import ImgridError
from imgrid.renderer import add_grid


def _add_cell_size(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c",
        "--cell-size",
        type=int,
        default=DEFAULT_CONFIG.cell_size,
        help=f"Cell edge in pixels (default: {DEFAULT_CONFIG.cell_size})",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Overlay a numbered grid on an image")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Draw the grid and write the result as PNG")
    render.add_argument("image", help="Path to input image")
    render.add_argument("-o", "--output", required=True, help="Path to write the gridded PNG")
    _add_cell_size(render)
    render.add_argument("--line-width", type=int, default=DEFAULT_CONFIG.line_width, help="Grid line width in pixels")
    render.add_argument("--number-scale", type=int, default=DEFAULT_CONFIG.number_scale, help="Digit magnification")
    render.add_argument("--grid-color", type=parse_color, default=DEFAULT_CONFIG.grid_color, help="R,G,B[,A] or #RRGGBB[AA]")
    render.add_argument("--number-color", type=parse_color, default=DEFAULT_CONFIG.number_color)
    render.add_argument("--number-background", type=parse_color, default=DEFAULT_CONFIG.number_background)

    cell = sub.add_parser("cell", help="Print the pixel centre of a cell")
    cell.add_argument("cell", type=int)
    cell.add_argument("-w", "--width", type=int, required=True, help="Image width in pixels")
    _add_cell_size(cell)

    pixel = sub.add_parser("pixel", help="Print the cell containing a pixel")
    pixel.add_argument("x", type=int)
    pixel.add_argument("y", type=int)
    pixel.add_argument("-w", "--width", type=int, required=True, help="Image width in pixels")
    _add_cell_size(pixel)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "render":
            image_path = Path(args.image)
            if not image_path.exists():
                print(f"File not found: {image_path}", file=sys.stderr)
                sys.exit(1)
            config = GridConfig(
                cell_size=args.cell_size,
                grid_color=args.grid_color,
                number_color=args.number_color,
                number_background=args.number_background,
                line_width=args.line_width,
                number_scale=args.number_scale,
            )
            Path(args.output).write_bytes(add_grid(image_path, config))
        elif args.command == "cell":
            x, y = cell_to_pixel(args.cell, args.width, args.cell_size)
            print(f"{x} {y}")
        else:
            print(pixel_to_cell(args.x, args.y, args.width, args.cell_size))
    except ImgridError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
