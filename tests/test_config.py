import dataclasses

import pytest

from imgrid.config import DEFAULT_CONFIG, GridConfig, parse_color
from imgrid.errors import InvalidArgument


def test_defaults():
    assert DEFAULT_CONFIG.cell_size == 100
    assert DEFAULT_CONFIG.grid_color == (0, 255, 255, 100)
    assert DEFAULT_CONFIG.number_color == (255, 255, 255, 255)
    assert DEFAULT_CONFIG.number_background == (0, 0, 0, 200)
    assert DEFAULT_CONFIG.line_width == 2
    assert DEFAULT_CONFIG.number_scale == 3
    DEFAULT_CONFIG.validate()


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.cell_size = 10


@pytest.mark.parametrize(
    "changes",
    [
        {"cell_size": 0},
        {"cell_size": -5},
        {"line_width": -1},
        {"number_scale": 0},
        {"grid_color": (0, 0, 0)},
        {"number_color": (0, 0, 256, 0)},
    ],
)
def test_validate_rejects(changes):
    with pytest.raises(InvalidArgument):
        dataclasses.replace(DEFAULT_CONFIG, **changes).validate()


def test_zero_line_width_is_valid():
    GridConfig(line_width=0).validate()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("255,0,0", (255, 0, 0, 255)),
        ("0, 255, 0, 150", (0, 255, 0, 150)),
        ("#00ffff", (0, 255, 255, 255)),
        ("#00FFFF64", (0, 255, 255, 100)),
    ],
)
def test_parse_color(text, expected):
    assert parse_color(text) == expected


@pytest.mark.parametrize("text", ["red", "1,2", "#12345", "1,2,3,400", ""])
def test_parse_color_rejects(text):
    with pytest.raises(InvalidArgument):
        parse_color(text)
