"""
HSL-based adjustments and RGB mixing.

Every function takes a :class:`Color` first and returns a new one; alpha is
preserved unless the operation interpolates it. The functions are also
available as methods on Color.
"""
from __future__ import annotations

from ..conversions.numbers import clamp01, lerp, normalize_hue
from .rgb import BLACK, WHITE, Color

# Rec. 709 luma weights
GRAYSCALE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def lighten(color: Color, amount: float = 0.1) -> Color:
    """Raise HSL lightness by ``amount``, capped at 1."""
    hsl = color.hsl
    return Color.from_hsl(hsl.hue, hsl.saturation, min(hsl.lightness + amount, 1.0), color.alpha)


def darken(color: Color, amount: float = 0.1) -> Color:
    """Lower HSL lightness by ``amount``, floored at 0."""
    hsl = color.hsl
    return Color.from_hsl(hsl.hue, hsl.saturation, max(hsl.lightness - amount, 0.0), color.alpha)


def saturate(color: Color, amount: float = 0.1) -> Color:
    hsl = color.hsl
    return Color.from_hsl(hsl.hue, min(hsl.saturation + amount, 1.0), hsl.lightness, color.alpha)


def desaturate(color: Color, amount: float = 0.1) -> Color:
    hsl = color.hsl
    return Color.from_hsl(hsl.hue, max(hsl.saturation - amount, 0.0), hsl.lightness, color.alpha)


def adjust_hue(color: Color, degrees: float) -> Color:
    """
    Rotate the HSL hue by ``degrees`` (negative values rotate backwards).

    Saturation, lightness and alpha are kept.
    """
    hsl = color.hsl
    return Color.from_hsl(normalize_hue(hsl.hue + degrees), hsl.saturation, hsl.lightness, color.alpha)


def complement(color: Color) -> Color:
    """The color opposite on the wheel."""
    return adjust_hue(color, 180)


def mix(color: Color, other: Color, ratio: float = 0.5) -> Color:
    """
    Linear RGBA interpolation.

    Args:
        color: Start color
        other: Color to mix with
        ratio: 0.0 gives ``color``, 1.0 gives ``other``; clamped to [0, 1]

    Returns:
        Mixed color
    """
    t = clamp01(ratio)
    return Color(*(lerp(a, b, t) for a, b in zip(color.values, other.values)))


def tint(color: Color, amount: float = 0.5) -> Color:
    """Mix with white."""
    return mix(color, WHITE, amount)


def shade(color: Color, amount: float = 0.5) -> Color:
    """Mix with black."""
    return mix(color, BLACK, amount)


def grayscale(color: Color) -> Color:
    wr, wg, wb = GRAYSCALE_WEIGHTS
    gray = wr * color.red + wg * color.green + wb * color.blue
    return Color(gray, gray, gray, color.alpha)


def inverted(color: Color) -> Color:
    return Color(1 - color.red, 1 - color.green, 1 - color.blue, color.alpha)


# Inject manipulation methods into Color
Color.lighten = lighten
Color.darken = darken
Color.saturate = saturate
Color.desaturate = desaturate
Color.adjust_hue = adjust_hue
Color.complement = complement
Color.mix = mix
Color.tint = tint
Color.shade = shade
Color.grayscale = grayscale
Color.inverted = inverted
