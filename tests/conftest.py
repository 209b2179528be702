import pytest
from PIL import Image


@pytest.fixture
def gradient_image():
    """300x200 RGB image with a distinct colour in every pixel column/row."""
    img = Image.new("RGB", (300, 200))
    pixels = img.load()
    for y in range(200):
        for x in range(300):
            pixels[x, y] = (x % 256, y % 256, (x + y) % 256)
    return img
