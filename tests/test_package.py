import logging

import chromatone
from chromatone import Color


def test_methods_are_attached():
    for name in (
        "lighten", "darken", "saturate", "desaturate", "adjust_hue", "complement",
        "mix", "tint", "shade", "grayscale", "inverted",
        "multiply", "screen", "overlay", "delta_e", "mix_lab",
        "contrast_ratio", "is_accessible", "adjusted_for_accessibility",
        "simulate_protanopia", "simulate_deuteranopia", "simulate_tritanopia",
        "gradient", "multi_gradient", "complementary", "triadic", "tetradic",
        "split_complementary", "analogous", "tints", "shades", "tonal_scale",
        "random", "random_with_hue", "distinct_palette",
        "from_hex", "from_css", "from_name", "named", "hex", "hex_value",
        "css", "css_hsl", "luminance", "contrasting_text_color",
    ):
        assert hasattr(Color, name), name


def test_exports():
    for name in chromatone.__all__:
        assert hasattr(chromatone, name), name


def test_library_logger_has_null_handler():
    handlers = logging.getLogger("chromatone").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
