"""Basic Chromatone usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import logging

import numpy as np

from chromatone import (
    Color,
    NamedColor,
    WCAGLevel,
    WHITE,
    parse_color,
)
from chromatone.types.format_type import FormatType


def demonstrate_colors() -> None:
    # Construct colors and look at them in other spaces.
    accent = Color.from_rgb8(255, 128, 64)
    print("RGBA as bytes:", accent.to_tuple(FormatType.INT))
    print("HSL:", accent.hsl)
    print("LCH:", accent.convert("lch"))
    print("Hex / CSS:", accent.hex, accent.css, accent.css_hsl)

    print("Parsed:", parse_color("rgba(70, 130, 180, 0.5)"), parse_color("rebecca purple").hex)


def demonstrate_manipulation() -> None:
    base = Color.named(NamedColor.STEEL_BLUE)
    print("Lighter:", base.lighten(0.2).hex)
    print("Muted:", base.desaturate(0.3).hex)
    print("Complement:", base.complement().hex)
    print("RGB mix vs LAB mix:", base.mix(WHITE).hex, base.mix_lab(WHITE).hex)
    print("Overlay:", base.overlay(Color(1.0, 0.8, 0.2)).hex)


def demonstrate_palettes() -> None:
    red = Color.from_hex("#E63946")
    print("Gradient:", [c.hex for c in red.gradient(Color.from_hex("#1D3557"), 5)])
    print("Triadic:", [c.hex for c in red.triadic()])
    print("Tonal scale:", [c.hex for c in red.tonal_scale(7)])

    rng = np.random.default_rng(42)
    print("Distinct:", [c.hex for c in Color.distinct_palette(5, rng=rng)])


def demonstrate_accessibility() -> None:
    text = Color.from_hex("#999999")
    print("Contrast on white:", round(text.contrast_ratio(WHITE), 2))
    print("AA:", text.is_accessible(WHITE), "AAA:", text.is_accessible(WHITE, WCAGLevel.AAA))
    print("Adjusted for AA:", text.adjusted_for_accessibility(WHITE).hex)
    print("Text on it:", text.contrasting_text_color.hex)
    print("Protanopia:", Color.from_hex("#E63946").simulate_protanopia().hex)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    demonstrate_colors()
    demonstrate_manipulation()
    demonstrate_palettes()
    demonstrate_accessibility()
