"""
Chromatone Color Space Conversions
==================================

Conversion utilities between unit RGB, HSL, HSV, CIE XYZ, CIE LAB and LCH,
with scalar functions for single colors and vectorized (numpy) versions for
arrays of colors.

Features
--------
- Bidirectional conversions: RGB <-> HSL, RGB <-> HSV, RGB <-> XYZ <-> LAB <-> LCH
- Direct HSV <-> HSL and LAB <-> LCH shortcuts
- Scalar functions for single colors, ``np_*`` functions for arrays of shape (..., 3)
- D65 reference white for every XYZ / LAB computation

Conversion Functions
--------------------

RGB -> HSL / HSV:
    unit_rgb_to_hsl(r, g, b), np_unit_rgb_to_hsl(r, g, b)
    unit_rgb_to_hsv(r, g, b), np_unit_rgb_to_hsv(r, g, b)

HSL / HSV -> RGB:
    hsl_to_unit_rgb(h, s, l), np_hsl_to_unit_rgb(h, s, l)
    hsv_to_unit_rgb(h, s, v), np_hsv_to_unit_rgb(h, s, v)

RGB <-> LAB / LCH:
    unit_rgb_to_lab(r, g, b), np_unit_rgb_to_lab(r, g, b)
    lab_to_unit_rgb(l, a, b), np_lab_to_unit_rgb(l, a, b)
    unit_rgb_to_lch(r, g, b), lch_to_unit_rgb(l, c, h)
    lab_to_lch(l, a, b), lch_to_lab(l, c, h)

High-Level API
--------------
    convert(color, from_space, to_space)
        Universal converter for one 3-channel color
    np_convert(color, from_space, to_space)
        Vectorized universal converter

Examples
--------
>>> from chromatone.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> h, s, l = unit_rgb_to_hsl(1.0, 0.0, 0.0)
>>> print(h, s, l)
0.0 1.0 0.5
>>> r, g, b = hsl_to_unit_rgb(h, s, l)
>>>
>>> import numpy as np
>>> from chromatone.conversions import np_convert
>>> lab = np_convert(np.array([[1.0, 0.0, 0.0], [0.0, 0.0, 1.0]]), "rgb", "lab")
"""

# RGB -> HSL / HSV conversions
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl, hsv_to_hsl
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv, hsl_to_hsv

# -> RGB conversions
from .to_rgb import (
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    lab_to_unit_rgb,
    lch_to_unit_rgb,
    xyz_to_unit_rgb,
    np_hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
    np_lab_to_unit_rgb,
    np_lch_to_unit_rgb,
)

# RGB -> XYZ -> LAB -> LCH conversions
from .to_lab import (
    unit_rgb_to_xyz,
    unit_rgb_to_lab,
    unit_rgb_to_lch,
    xyz_to_lab,
    lab_to_xyz,
    lab_to_lch,
    lch_to_lab,
    np_unit_rgb_to_lab,
    np_lab_to_lch,
    np_lch_to_lab,
)

# High-level API
from .wrapper import convert, np_convert

__all__ = [
    # RGB -> HSL / HSV
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',

    # HSV <-> HSL
    'hsv_to_hsl',
    'hsl_to_hsv',

    # -> RGB
    'hsl_to_unit_rgb',
    'hsv_to_unit_rgb',
    'lab_to_unit_rgb',
    'lch_to_unit_rgb',
    'xyz_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'np_lab_to_unit_rgb',
    'np_lch_to_unit_rgb',

    # XYZ / LAB / LCH
    'unit_rgb_to_xyz',
    'unit_rgb_to_lab',
    'unit_rgb_to_lch',
    'xyz_to_lab',
    'lab_to_xyz',
    'lab_to_lch',
    'lch_to_lab',
    'np_unit_rgb_to_lab',
    'np_lab_to_lch',
    'np_lch_to_lab',

    # High-level API
    'convert',
    'np_convert',
]
