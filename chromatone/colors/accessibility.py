"""
WCAG 2.1 luminance and contrast.

Luminance follows the WCAG definition (sRGB linearisation with the 0.03928
threshold), which differs slightly from the 0.04045 threshold used for LAB.
"""
from __future__ import annotations
from enum import Enum

from .rgb import BLACK, WHITE, Color

WCAG_LINEAR_THRESHOLD = 0.03928
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Lightness step of the accessible-colour search, tried up to 1.0
ACCESSIBILITY_STEP = 0.01
ACCESSIBILITY_MAX_STEPS = 100

# Backgrounds brighter than this get black text
TEXT_COLOR_THRESHOLD = 0.179
FALLBACK_LUMINANCE_THRESHOLD = 0.5


class WCAGLevel(str, Enum):
    AA = "AA"
    AAA = "AAA"

    @property
    def normal_text_ratio(self) -> float:
        """Minimum contrast for body text."""
        return _normal_ratio[self]

    @property
    def large_text_ratio(self) -> float:
        """Minimum contrast for large text (18pt, or 14pt bold)."""
        return _large_ratio[self]


_normal_ratio = {
    WCAGLevel.AA: 4.5,
    WCAGLevel.AAA: 7.0,
}

_large_ratio = {
    WCAGLevel.AA: 3.0,
    WCAGLevel.AAA: 4.5,
}


def _linear_channel(c: float) -> float:
    if c <= WCAG_LINEAR_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    """Relative luminance in [0, 1]; black is 0 and white is 1. Alpha is ignored."""
    wr, wg, wb = LUMINANCE_WEIGHTS
    return (
        wr * _linear_channel(color.red)
        + wg * _linear_channel(color.green)
        + wb * _linear_channel(color.blue)
    )


def contrast_ratio(color: Color, other: Color) -> float:
    """
    WCAG contrast ratio between two colors.

    Symmetric, from 1.0 (identical luminance) to 21.0 (black on white).
    """
    l1 = relative_luminance(color)
    l2 = relative_luminance(other)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def is_accessible(
    color: Color,
    background: Color,
    level: WCAGLevel = WCAGLevel.AA,
    large_text: bool = False,
) -> bool:
    """Check whether ``color`` used as text on ``background`` meets ``level``."""
    level = WCAGLevel(level)
    required = level.large_text_ratio if large_text else level.normal_text_ratio
    return contrast_ratio(color, background) >= required


def text_color_on(background: Color) -> Color:
    """Black or white, whichever reads better on ``background``."""
    if relative_luminance(background) > TEXT_COLOR_THRESHOLD:
        return BLACK
    return WHITE


def adjusted_for_accessibility(
    color: Color,
    background: Color,
    level: WCAGLevel = WCAGLevel.AA,
) -> Color:
    """
    Nudge ``color`` until it meets ``level`` for normal text on ``background``.

    Returns ``color`` unchanged when it already passes. Otherwise HSL
    lightness is moved in steps of ``ACCESSIBILITY_STEP``, trying darker
    before lighter at each step, and the first passing candidate is
    returned. Hue, saturation and alpha are kept. If no candidate passes,
    black or white is returned depending on the background.
    """
    if is_accessible(color, background, level):
        return color

    hsl = color.hsl
    for i in range(1, ACCESSIBILITY_MAX_STEPS + 1):
        delta = i * ACCESSIBILITY_STEP

        darker = Color.from_hsl(hsl.hue, hsl.saturation, max(hsl.lightness - delta, 0.0), color.alpha)
        if is_accessible(darker, background, level):
            return darker

        lighter = Color.from_hsl(hsl.hue, hsl.saturation, min(hsl.lightness + delta, 1.0), color.alpha)
        if is_accessible(lighter, background, level):
            return lighter

    if relative_luminance(background) > FALLBACK_LUMINANCE_THRESHOLD:
        return BLACK
    return WHITE


Color.luminance = property(relative_luminance, doc="WCAG relative luminance")
Color.contrasting_text_color = property(text_color_on, doc="Black or white text for this background")
Color.contrast_ratio = contrast_ratio
Color.is_accessible = is_accessible
Color.adjusted_for_accessibility = adjusted_for_accessibility
