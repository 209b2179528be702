from functools import lru_cache
from types import MappingProxyType

import numpy as np

GLYPH_WIDTH = 5
GLYPH_HEIGHT = 7

# 5x7 bitmaps, '#' is an inked dot
DIGIT_PATTERNS = MappingProxyType(
    {
        "0": (" ### ", "#   #", "#   #", "#   #", "#   #", "#   #", " ### "),
        "1": ("  #  ", " ##  ", "  #  ", "  #  ", "  #  ", "  #  ", "#####"),
        "2": (" ### ", "#   #", "    #", "   # ", "  #  ", " #   ", "#####"),
        "3": (" ### ", "#   #", "    #", "  ## ", "    #", "#   #", " ### "),
        "4": ("   # ", "  ## ", " # # ", "#  # ", "#####", "   # ", "   # "),
        "5": ("#####", "#    ", "#    ", "#### ", "    #", "#   #", " ### "),
        "6": (" ### ", "#   #", "#    ", "#### ", "#   #", "#   #", " ### "),
        "7": ("#####", "    #", "   # ", "  #  ", " #   ", " #   ", " #   "),
        "8": (" ### ", "#   #", "#   #", " ### ", "#   #", "#   #", " ### "),
        "9": (" ### ", "#   #", "#   #", " ####", "    #", "#   #", " ### "),
    }
)


@lru_cache(maxsize=None)
def digit_mask(char: str) -> np.ndarray:
    """Boolean (GLYPH_HEIGHT, GLYPH_WIDTH) mask for a digit; unknown characters are blank."""
    mask = np.zeros((GLYPH_HEIGHT, GLYPH_WIDTH), dtype=bool)
    for row, line in enumerate(DIGIT_PATTERNS.get(char, ())):
        for col, dot in enumerate(line):
            mask[row, col] = dot == "#"
    mask.flags.writeable = False
    return mask


def label_size(text: str, scale: int) -> tuple[int, int]:
    """(width, height) of a label block including spacing and padding."""
    spacing = padding = 2 * scale
    width = len(text) * GLYPH_WIDTH * scale + (len(text) - 1) * spacing + 2 * padding
    height = GLYPH_HEIGHT * scale + 2 * padding
    return width, height


def label_mask(text: str, scale: int) -> np.ndarray:
    """Render a digit string into a boolean mask the size of its label block.

    True marks glyph pixels; the padding and inter-digit gaps are False, so the
    mask covers exactly the background rectangle drawn behind the number.
    """
    width, height = label_size(text, scale)
    spacing = padding = 2 * scale
    block = np.ones((scale, scale), dtype=bool)

    mask = np.zeros((height, width), dtype=bool)
    for i, char in enumerate(text):
        glyph = np.kron(digit_mask(char), block).astype(bool)
        x0 = padding + i * (GLYPH_WIDTH * scale + spacing)
        mask[padding : padding + glyph.shape[0], x0 : x0 + glyph.shape[1]] = glyph
    return mask
