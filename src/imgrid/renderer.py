import logging
from pathlib import Path

import numpy as np
from PIL import Image

from imgrid.codec import encode, load_image, to_canvas
from imgrid.config import DEFAULT_CONFIG, GridConfig
from imgrid.coords import iter_cells
from imgrid.glyphs import label_mask, label_size

logger = logging.getLogger(__name__)


def draw_lines(canvas: np.ndarray, config: GridConfig) -> None:
    """Paint grid lines in place.

    Each line sits at a positive multiple of cell_size and is line_width pixels
    thick, growing left (vertical) or up (horizontal) from that position.
    Colours are written as-is, not blended over the image.
    """
    height, width = canvas.shape[:2]
    size, thickness = config.cell_size, config.line_width
    colour = np.asarray(config.grid_color, dtype=np.uint8)

    for x in range(size, width, size):
        canvas[:, max(0, x - thickness + 1) : x + 1] = colour
    for y in range(size, height, size):
        canvas[max(0, y - thickness + 1) : y + 1, :] = colour


def draw_label(canvas: np.ndarray, x: int, y: int, number: int, config: GridConfig) -> None:
    """Draw ``number`` on a filled rectangle centred on (x, y), clipped to the canvas."""
    height, width = canvas.shape[:2]
    text = str(number)
    block_w, block_h = label_size(text, config.number_scale)
    left = x - block_w // 2
    top = y - block_h // 2

    x0, x1 = max(0, left), min(width, left + block_w)
    y0, y1 = max(0, top), min(height, top + block_h)
    if x0 >= x1 or y0 >= y1:
        return

    region = canvas[y0:y1, x0:x1]
    region[...] = np.asarray(config.number_background, dtype=np.uint8)
    mask = label_mask(text, config.number_scale)[y0 - top : y1 - top, x0 - left : x1 - left]
    region[mask] = np.asarray(config.number_color, dtype=np.uint8)


def draw_grid(image: Image.Image | str | Path, config: GridConfig = DEFAULT_CONFIG) -> Image.Image:
    """Return a new RGBA image with grid lines and numbered cells over ``image``.

    The source image is copied first and left untouched. Cells are numbered
    row-major from 0; a cell whose centre falls outside the image keeps its
    number but gets no label.
    """
    config.validate()
    image = load_image(image)
    canvas = to_canvas(image)
    height, width = canvas.shape[:2]
    logger.debug("Drawing %dpx grid on %dx%d image", config.cell_size, width, height)

    draw_lines(canvas, config)

    skipped = 0
    for cell in iter_cells(width, height, config.cell_size):
        if cell.center_x < width and cell.center_y < height:
            draw_label(canvas, cell.center_x, cell.center_y, cell.index, config)
        else:
            skipped += 1
    if skipped:
        logger.debug("Skipped %d labels with centres outside the image", skipped)

    return Image.fromarray(canvas)


def add_grid(
    image: Image.Image | str | Path,
    config: GridConfig = DEFAULT_CONFIG,
    format: str = "PNG",
) -> bytes:
    """Overlay a numbered grid on ``image`` and return it encoded (PNG by default)."""
    return encode(draw_grid(image, config), format=format)
