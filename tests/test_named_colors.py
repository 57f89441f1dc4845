import pytest

from chromatone.colors import Color, RED, BLACK, WHITE
from chromatone.named_colors import NamedColor, lookup_name


def test_table_size():
    # Aliases are not listed
    assert len(NamedColor) == 139
    assert len(NamedColor.__members__) == 141


def test_aliases():
    assert NamedColor.MAGENTA is NamedColor.FUCHSIA
    assert NamedColor.CYAN is NamedColor.AQUA


def test_hex_and_color():
    assert NamedColor.STEEL_BLUE.hex == "#4682B4"
    assert NamedColor.STEEL_BLUE.value == "4682B4"
    assert NamedColor.STEEL_BLUE.color == Color.from_rgb8(0x46, 0x82, 0xB4)
    assert NamedColor.RED.color == RED
    assert NamedColor.BLACK.color == BLACK
    assert NamedColor.WHITE.color == WHITE


def test_every_entry_parses():
    for named in NamedColor:
        color = named.color
        assert isinstance(color, Color)
        assert color.hex == named.hex


@pytest.mark.parametrize("name", ["steelblue", "SteelBlue", "STEELBLUE", "Steel Blue", "steel_blue", "steel-blue", " steel blue "])
def test_lookup_ignores_case_and_separators(name):
    assert lookup_name(name) is NamedColor.STEEL_BLUE


def test_lookup_aliases():
    assert lookup_name("magenta") is NamedColor.FUCHSIA
    assert lookup_name("Cyan") is NamedColor.AQUA


@pytest.mark.parametrize("name", ["", "notacolor", "4682B4", "steel blue 2"])
def test_lookup_unknown(name):
    assert lookup_name(name) is None


def test_color_from_name():
    assert Color.from_name("coral") == Color.from_hex("#FF7F50")
    assert Color.from_name("Navy") == Color.from_rgb8(0, 0, 128)
    assert Color.from_name("nope") is None


def test_color_named():
    assert Color.named(NamedColor.GOLD) == Color.from_hex("FFD700")
    assert Color.named(NamedColor.REBECCA_PURPLE).hex == "#663399"
