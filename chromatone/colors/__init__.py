"""
Chromatone Color Classes
========================

Immutable color value types for RGBA, HSL, HSV, LAB and LCH, plus the
operations on :class:`Color`.

Features
--------
- Immutable instances (frozen after initialization), compared by value
- Out-of-range channels clamped, hue channels wrapped into [0, 360)
- ``convert(space)`` between every pair of spaces
- HSL adjustments, RGB and LAB mixing, blend modes
- WCAG luminance, contrast and accessible-color search
- Color vision deficiency simulation

Usage
-----
>>> from chromatone.colors import Color
>>>
>>> orange = Color.from_rgb8(255, 128, 0)
>>> print(orange.hsl)
>>> lighter = orange.lighten(0.2)
>>> muted = orange.desaturate(0.3).with_alpha(0.5)
>>>
>>> # Convert to LCH and back
>>> lch = orange.convert("lch")
>>> same = lch.convert("rgb")
>>>
>>> orange.contrast_ratio(Color(1.0, 1.0, 1.0))

Color Classes
-------------
    - Color: sRGB with alpha, channels in [0, 1]
    - HSL: hue in degrees, saturation and lightness in [0, 1]
    - HSV: hue in degrees, saturation and value in [0, 1]
    - LAB: CIE L*a*b* (D65), lightness in [0, 100]
    - LCH: polar LAB, lightness in [0, 100], chroma >= 0, hue in degrees

Notes
-----
- Operation modules attach their functions to Color on import; importing
  this package makes every method available.
- Converting away from RGB drops alpha; converting back to RGB gives 1.0.
"""

from .color_base import ColorBase
from .rgb import (
    Color,
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
)
from .hsl import HSL
from .hsv import HSV
from .lab import LAB, LCH
from .color import color_convert
from .manipulation import (
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
)
from .blend import multiply, screen, overlay
from .perceptual import delta_e, mix_lab
from .accessibility import (
    WCAGLevel,
    relative_luminance,
    contrast_ratio,
    is_accessible,
    text_color_on,
    adjusted_for_accessibility,
)
from .vision import simulate_protanopia, simulate_deuteranopia, simulate_tritanopia


__all__ = [
    'ColorBase',
    'Color',
    'HSL',
    'HSV',
    'LAB',
    'LCH',
    'color_convert',

    # constants
    'BLACK', 'WHITE', 'RED', 'GREEN', 'BLUE', 'YELLOW', 'CYAN', 'MAGENTA', 'GRAY', 'CLEAR',

    # manipulation
    'adjust_hue', 'complement', 'mix', 'lighten', 'darken', 'saturate', 'desaturate',
    'tint', 'shade', 'grayscale', 'inverted',

    # blend modes
    'multiply', 'screen', 'overlay',

    # perceptual
    'delta_e', 'mix_lab',

    # accessibility
    'WCAGLevel', 'relative_luminance', 'contrast_ratio', 'is_accessible',
    'text_color_on', 'adjusted_for_accessibility',

    # vision
    'simulate_protanopia', 'simulate_deuteranopia', 'simulate_tritanopia',
]
