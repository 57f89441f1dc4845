from __future__ import annotations
import math

from ..conversions.numbers import clamp01, lerp
from .rgb import Color


def delta_e(color: Color, other: Color) -> float:
    """
    Perceptual difference between two colors (CIE76).

    Euclidean distance in LAB. Below 1 is imperceptible, 1-2 barely
    noticeable, above 100 the colors are unrelated.
    """
    return math.dist(color.lab.values, other.lab.values)


def mix_lab(color: Color, other: Color, ratio: float = 0.5) -> Color:
    """
    Mix two colors in LAB space.

    Gives more even-looking blends than :func:`mix`. Alpha is interpolated
    linearly.

    Args:
        color: Start color
        other: Color to mix with
        ratio: 0.0 gives ``color``, 1.0 gives ``other``; clamped to [0, 1]
    """
    t = clamp01(ratio)
    lab1 = color.lab
    lab2 = other.lab
    return Color.from_lab(
        lerp(lab1.lightness, lab2.lightness, t),
        lerp(lab1.a, lab2.a, t),
        lerp(lab1.b, lab2.b, t),
        alpha=lerp(color.alpha, other.alpha, t),
    )


Color.delta_e = delta_e
Color.mix_lab = mix_lab
