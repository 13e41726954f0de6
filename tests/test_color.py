import pytest

from isocube.color import (
    _rgb_to_nearest_ansi8, _rgb_to_nearest_xterm, init_colors,
    parse_hex_color, resolve_color,
)
from isocube.config import RenderConfig


@pytest.mark.parametrize("text,expected", [
    ('#FF8800', (255, 136, 0)),
    ('0e0e2c', (14, 14, 44)),
    ('  #d0dd14 ', (208, 221, 20)),
    ('#FFF', None),
    ('#GGGGGG', None),
    (None, None),
])
def test_parse_hex_color(text, expected):
    assert parse_hex_color(text) == expected


def test_resolve_color_accepts_names_and_hex():
    assert resolve_color('Black') == (0, 0, 0)
    assert resolve_color('white') == (255, 255, 255)
    assert resolve_color('#010203') == (1, 2, 3)
    assert resolve_color('chartreuse-ish') is None


def test_nearest_xterm():
    assert _rgb_to_nearest_xterm(0, 0, 0) == 16
    assert _rgb_to_nearest_xterm(255, 255, 255) == 231
    assert _rgb_to_nearest_xterm(128, 128, 128) == 244


def test_nearest_ansi8():
    assert _rgb_to_nearest_ansi8(250, 10, 10) == 1
    assert _rgb_to_nearest_ansi8(200, 200, 200) == 7
    assert _rgb_to_nearest_ansi8(0, 0, 0) == 0


def test_init_colors_without_color_is_mono():
    config = RenderConfig(use_color=False)
    pairs, bg = init_colors(config, [(0, 0, 0), (255, 255, 255)])
    assert pairs == [0, 0]
    assert bg == 0
