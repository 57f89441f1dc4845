"""
Palettes derived from a single color.

Harmonies rotate the HSL hue, scales are linear RGB gradients to black and
white, and the random helpers draw from a :class:`numpy.random.Generator`
so results can be reproduced by passing a seeded one.
"""
from __future__ import annotations

import numpy as np
from typing import List, Optional, Tuple

from .colors.rgb import BLACK, WHITE, Color
from .gradients.gradient1d import gradient

# Conjugate of the golden ratio; successive hues stay well separated
GOLDEN_RATIO_CONJUGATE = 0.618033988749895

DEFAULT_RANDOM_SATURATION = (0.5, 1.0)
DEFAULT_RANDOM_LIGHTNESS = (0.4, 0.6)


def _rotations(color: Color, *degrees: float) -> List[Color]:
    return [color, *(color.adjust_hue(d) for d in degrees)]


# ------------------ HARMONIES ------------------
def complementary(color: Color) -> List[Color]:
    """``[color, complement]``"""
    return _rotations(color, 180)


def triadic(color: Color) -> List[Color]:
    """Three colors 120 degrees apart, starting with ``color``."""
    return _rotations(color, 120, 240)


def tetradic(color: Color) -> List[Color]:
    """Four colors 90 degrees apart, starting with ``color``."""
    return _rotations(color, 90, 180, 270)


def split_complementary(color: Color) -> List[Color]:
    """``color`` and the two neighbours of its complement (150 and 210 degrees)."""
    return _rotations(color, 150, 210)


def analogous(color: Color, count: int = 3, angle: float = 30) -> List[Color]:
    """
    ``count`` colors ``angle`` degrees apart, centred on ``color``.

    The first hue offset is ``-(count // 2) * angle``, so an odd count has
    ``color`` itself in the middle.
    """
    start = -(count // 2) * angle
    return [color.adjust_hue(start + i * angle) for i in range(count)]


# ------------------ SCALES ------------------
def tints(color: Color, count: int) -> List[Color]:
    """``count`` colors from ``color`` to white."""
    return gradient(color, WHITE, count, perceptual=False)


def shades(color: Color, count: int) -> List[Color]:
    """``count`` colors from ``color`` to black."""
    return gradient(color, BLACK, count, perceptual=False)


def tonal_scale(color: Color, count: int) -> List[Color]:
    """
    Black through ``color`` to white, ``count`` colors in total.

    The first ``count // 2`` entries are shades, ``color`` comes next and
    the rest are tints. Use an odd count for a symmetric scale.
    """
    half = count // 2
    shade_colors = gradient(BLACK, color, half + 1, perceptual=False)
    tint_colors = gradient(color, WHITE, count - half, perceptual=False)
    return shade_colors[:-1] + tint_colors


# ------------------ RANDOM ------------------
def _generator(rng: Optional[np.random.Generator]) -> np.random.Generator:
    if rng is None:
        return np.random.default_rng()
    return rng


def random_color(alpha: float = 1.0, rng: Optional[np.random.Generator] = None) -> Color:
    """Uniformly random RGB with a fixed ``alpha``."""
    r, g, b = _generator(rng).random(3)
    return Color(float(r), float(g), float(b), alpha)


def random_with_hue(
    hue: float,
    saturation: Tuple[float, float] = DEFAULT_RANDOM_SATURATION,
    lightness: Tuple[float, float] = DEFAULT_RANDOM_LIGHTNESS,
    rng: Optional[np.random.Generator] = None,
) -> Color:
    """
    Random color with a fixed hue.

    Args:
        hue: Hue in degrees
        saturation: ``(low, high)`` range for HSL saturation
        lightness: ``(low, high)`` range for HSL lightness
        rng: Random generator; a fresh default one when omitted
    """
    gen = _generator(rng)
    s = gen.uniform(*saturation)
    l = gen.uniform(*lightness)
    return Color.from_hsl(hue, float(s), float(l))


def distinct_palette(
    count: int,
    saturation: float = 0.7,
    lightness: float = 0.5,
    rng: Optional[np.random.Generator] = None,
) -> List[Color]:
    """
    ``count`` colors with well separated hues.

    Starts from a random hue and advances by the golden ratio conjugate of
    a full turn for each color; saturation and lightness are fixed.
    """
    hue = float(_generator(rng).random())
    colors = []
    for _ in range(count):
        hue = (hue + GOLDEN_RATIO_CONJUGATE) % 1.0
        colors.append(Color.from_hsl(hue * 360, saturation, lightness))
    return colors


Color.complementary = complementary
Color.triadic = triadic
Color.tetradic = tetradic
Color.split_complementary = split_complementary
Color.analogous = analogous
Color.tints = tints
Color.shades = shades
Color.tonal_scale = tonal_scale
Color.random = staticmethod(random_color)
Color.random_with_hue = staticmethod(random_with_hue)
Color.distinct_palette = staticmethod(distinct_palette)
