import random

import pytest

from ledstrip.color_utils import (
    NAMED_COLORS,
    Color,
    hex_to_rgb,
    random_color,
    resolve_color,
    rgb_to_hex,
)
from ledstrip.exceptions import LEDStripError, UnknownColorError


def test_resolve_named_colors():
    assert resolve_color("red") == Color(255, 0, 0)
    assert resolve_color("black") == Color(0, 0, 0)
    assert resolve_color("magenta") == Color(255, 0, 255)


def test_named_table_uses_only_full_or_zero_channels():
    assert len(NAMED_COLORS) == 8
    for color in NAMED_COLORS.values():
        assert set(color.as_tuple()) <= {0, 255}


def test_named_table_is_read_only():
    with pytest.raises(TypeError):
        NAMED_COLORS["teal"] = Color(0, 128, 128)


def test_unknown_color_name():
    with pytest.raises(UnknownColorError) as excinfo:
        resolve_color("teal")
    assert excinfo.value.name == "teal"
    assert "red" in excinfo.value.known
    assert isinstance(excinfo.value, LEDStripError)
    assert isinstance(excinfo.value, ValueError)


def test_resolution_is_case_sensitive():
    with pytest.raises(UnknownColorError):
        resolve_color("Red")


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5), (True, 0, 0)])
def test_color_rejects_out_of_range(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_color_is_immutable():
    color = Color(1, 2, 3)
    with pytest.raises(AttributeError):
        color.r = 10


def test_hex_helpers():
    assert hex_to_rgb("#FF8800") == (255, 136, 0)
    assert hex_to_rgb("00ff7f") == (0, 255, 127)
    assert rgb_to_hex(255, 136, 0) == "#FF8800"
    assert Color.from_hex("102030").to_hex() == "#102030"


@pytest.mark.parametrize(
    "value", ["fff", "#12345", "zzzzzz", "", "-1-2-3", "+f+f+f", "1 2 3 ", "0x0f0f"]
)
def test_hex_rejects_malformed(value):
    with pytest.raises(ValueError):
        hex_to_rgb(value)


def test_random_color_covers_both_ends():
    rng = random.Random(1234)
    seen = set()
    for _ in range(5000):
        seen.update(random_color(rng).as_tuple())
    assert 0 in seen
    assert 255 in seen


def test_random_color_uses_given_rng():
    assert random_color(random.Random(7)) == random_color(random.Random(7))
