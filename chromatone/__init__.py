"""Chromatone: immutable RGBA colors, color spaces, palettes and accessibility checks."""
import logging

from .colors import (
    ColorBase,
    Color,
    HSL,
    HSV,
    LAB,
    LCH,
    BLACK,
    WHITE,
    RED,
    GREEN,
    BLUE,
    YELLOW,
    CYAN,
    MAGENTA,
    GRAY,
    CLEAR,
    WCAGLevel,
    color_convert,
    adjust_hue,
    complement,
    mix,
    lighten,
    darken,
    saturate,
    desaturate,
    tint,
    shade,
    grayscale,
    inverted,
    multiply,
    screen,
    overlay,
    delta_e,
    mix_lab,
    relative_luminance,
    contrast_ratio,
    is_accessible,
    text_color_on,
    adjusted_for_accessibility,
    simulate_protanopia,
    simulate_deuteranopia,
    simulate_tritanopia,
)
from .codecs import parse_hex, format_hex, parse_css, format_css, format_css_hsl
from .named_colors import NamedColor, lookup_name
from .parsing import ColorParseError, parse_color
from .gradients import gradient, multi_gradient
from .palettes import (
    complementary,
    triadic,
    tetradic,
    split_complementary,
    analogous,
    tints,
    shades,
    tonal_scale,
    random_color,
    random_with_hue,
    distinct_palette,
)
from .conversions import convert, np_convert
from .types.format_type import FormatType

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # core color types
    "ColorBase",
    "Color",
    "HSL",
    "HSV",
    "LAB",
    "LCH",
    "FormatType",
    "color_convert",
    # constants
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
    "CYAN",
    "MAGENTA",
    "GRAY",
    "CLEAR",
    # manipulation and blending
    "adjust_hue",
    "complement",
    "mix",
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "tint",
    "shade",
    "grayscale",
    "inverted",
    "multiply",
    "screen",
    "overlay",
    "delta_e",
    "mix_lab",
    # accessibility
    "WCAGLevel",
    "relative_luminance",
    "contrast_ratio",
    "is_accessible",
    "text_color_on",
    "adjusted_for_accessibility",
    "simulate_protanopia",
    "simulate_deuteranopia",
    "simulate_tritanopia",
    # text
    "parse_hex",
    "format_hex",
    "parse_css",
    "format_css",
    "format_css_hsl",
    "NamedColor",
    "lookup_name",
    "ColorParseError",
    "parse_color",
    # gradients and palettes
    "gradient",
    "multi_gradient",
    "complementary",
    "triadic",
    "tetradic",
    "split_complementary",
    "analogous",
    "tints",
    "shades",
    "tonal_scale",
    "random_color",
    "random_with_hue",
    "distinct_palette",
    # conversions
    "convert",
    "np_convert",
]
