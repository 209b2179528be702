"""Conversion between row-major cell indices and pixel coordinates.

Cells are numbered left to right, top to bottom, starting at 0. The centre of
a cell is where the renderer places its label, so ``cell_to_pixel`` returns the
label position and ``pixel_to_cell`` of that position returns the index again.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from imgrid.errors import InvalidArgument


@dataclass(frozen=True)
class Cell:
    index: int
    row: int
    col: int
    center_x: int
    center_y: int


def _check_cell_size(cell_size: int) -> None:
    if cell_size <= 0:
        raise InvalidArgument(f"cell_size must be positive: {cell_size}")


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (b > 0)."""
    return a // b if a >= 0 else -(-a // b)


def columns_per_row(image_width: int, cell_size: int) -> int:
    _check_cell_size(cell_size)
    return max(1, _trunc_div(image_width, cell_size))


def cell_to_pixel(cell: int, image_width: int, cell_size: int) -> tuple[int, int]:
    """Pixel centre of a cell.

    No upper bound is applied: an index past the last row yields a position
    below the image.
    """
    if cell < 0:
        raise InvalidArgument(f"invalid cell number: {cell}")
    columns = columns_per_row(image_width, cell_size)
    row, col = divmod(cell, columns)
    return col * cell_size + cell_size // 2, row * cell_size + cell_size // 2


def pixel_to_cell(x: int, y: int, image_width: int, cell_size: int) -> int:
    """Cell index containing pixel (x, y).

    Coordinates are not bounds-checked. Negative values or x beyond the image
    width still produce ``row * columns + col``, with both divisions
    truncating toward zero, so (-1, -1) falls in cell 0.
    """
    columns = columns_per_row(image_width, cell_size)
    col = _trunc_div(x, cell_size)
    row = _trunc_div(y, cell_size)
    return row * columns + col


def grid_shape(width: int, height: int, cell_size: int) -> tuple[int, int]:
    """(rows, cols) of the rendered grid; a partial trailing cell counts."""
    _check_cell_size(cell_size)
    return -(-height // cell_size), -(-width // cell_size)


def iter_cells(width: int, height: int, cell_size: int) -> Iterator[Cell]:
    rows, cols = grid_shape(width, height, cell_size)
    half = cell_size // 2
    index = 0
    for row in range(rows):
        for col in range(cols):
            yield Cell(index, row, col, col * cell_size + half, row * cell_size + half)
            index += 1
