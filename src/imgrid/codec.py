import io
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from imgrid.errors import EncodingError

logger = logging.getLogger(__name__)


def load_image(image: Image.Image | str | Path) -> Image.Image:
    if not isinstance(image, Image.Image):
        image = Image.open(image)
    return image


def to_canvas(image: Image.Image) -> np.ndarray:
    """Copy an image into a writable (height, width, 4) uint8 RGBA array."""
    return np.array(image.convert("RGBA"), dtype=np.uint8)


def encode(canvas: np.ndarray | Image.Image, format: str = "PNG") -> bytes:
    if isinstance(canvas, np.ndarray):
        canvas = Image.fromarray(canvas)
    buf = io.BytesIO()
    try:
        canvas.save(buf, format=format)
    except (OSError, ValueError, KeyError) as exc:
        raise EncodingError(f"failed to encode image with grid: {exc}") from exc
    data = buf.getvalue()
    logger.debug("Encoded %dx%d canvas as %s (%d bytes)", canvas.width, canvas.height, format, len(data))
    return data
