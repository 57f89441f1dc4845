import pytest

from chromatone import parse_color, ColorParseError
from chromatone.colors import Color, RED, BLUE


def test_parse_hex():
    assert parse_color("#FF0000") == RED
    assert parse_color("FF0000") == RED


def test_parse_css():
    assert parse_color("rgb(0, 0, 255)") == BLUE
    assert parse_color("rgba(255, 0, 0, 0.5)").alpha == 127 / 255


def test_parse_name():
    assert parse_color("Steel Blue") == Color.from_rgb8(0x46, 0x82, 0xB4)


def test_hex_wins_over_names():
    # "bad" is also valid 3-digit hex
    assert parse_color("bad") == Color.from_rgb8(0xBB, 0xAA, 0xDD)


@pytest.mark.parametrize("text", ["", "not a color", "hsl(0, 100%, 50%)", "#12345"])
def test_parse_failure(text):
    with pytest.raises(ColorParseError) as info:
        parse_color(text)
    assert info.value.text == text


def test_error_is_value_error():
    with pytest.raises(ValueError):
        parse_color("???")
