from dataclasses import dataclass

from imgrid.errors import InvalidArgument

RGBA = tuple[int, int, int, int]

CYAN_TRANSLUCENT: RGBA = (0, 255, 255, 100)
WHITE: RGBA = (255, 255, 255, 255)
BLACK_TRANSLUCENT: RGBA = (0, 0, 0, 200)


@dataclass(frozen=True)
class GridConfig:
    cell_size: int = 100  # pixels per cell edge
    grid_color: RGBA = CYAN_TRANSLUCENT
    number_color: RGBA = WHITE
    number_background: RGBA = BLACK_TRANSLUCENT
    line_width: int = 2
    number_scale: int = 3  # each glyph dot becomes a scale x scale block

    def validate(self) -> None:
        if self.cell_size <= 0:
            raise InvalidArgument(f"cell_size must be positive: {self.cell_size}")
        if self.line_width < 0:
            raise InvalidArgument(f"line_width must not be negative: {self.line_width}")
        if self.number_scale <= 0:
            raise InvalidArgument(f"number_scale must be positive: {self.number_scale}")
        for name in ("grid_color", "number_color", "number_background"):
            _check_rgba(name, getattr(self, name))


DEFAULT_CONFIG = GridConfig()


def _check_rgba(name: str, colour) -> None:
    if len(colour) != 4 or not all(isinstance(c, int) and 0 <= c <= 255 for c in colour):
        raise InvalidArgument(f"{name} must be four integers in 0-255: {colour!r}")


def parse_color(text: str) -> RGBA:
    """Parse ``R,G,B[,A]`` or ``#RRGGBB[AA]`` into an RGBA tuple (alpha defaults to 255)."""
    text = text.strip()
    try:
        if text.startswith("#"):
            digits = text[1:]
            if len(digits) not in (6, 8):
                raise ValueError(text)
            parts = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        else:
            parts = [int(p) for p in text.split(",")]
    except ValueError:
        raise InvalidArgument(f"Not a colour: {text!r}") from None

    if len(parts) == 3:
        parts.append(255)
    colour = tuple(parts)
    _check_rgba("colour", colour)
    return colour
