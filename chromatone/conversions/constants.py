"""Colorimetric constants shared by the LAB / XYZ conversions."""

# D65 reference white, Y normalised to 100
D65_WHITE = (95.047, 100.0, 108.883)

# Linear sRGB (scaled to 0-100) -> XYZ
SRGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

# XYZ (scaled to 0-1) -> linear sRGB
XYZ_TO_SRGB = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

# sRGB transfer function
SRGB_LINEAR_THRESHOLD = 0.04045
SRGB_GAMMA_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4

# CIE f(t)
CIE_DELTA = 6.0 / 29.0
CIE_OFFSET = 4.0 / 29.0

LAB_LIGHTNESS_MAX = 100.0
