import numpy as np
from numpy import ndarray as NDArray

from .constants import SRGB_GAMMA, SRGB_GAMMA_THRESHOLD, XYZ_TO_SRGB
from .numbers import clamp01, normalize_hue
from .to_lab import lab_to_xyz, lch_to_lab, np_lab_to_xyz, np_lch_to_lab
from ..types.color_types import Triple

_XYZ_TO_SRGB = np.array(XYZ_TO_SRGB)


def _sector_rgb(h: float, c: float, x: float) -> Triple:
    """Pick (r1, g1, b1) from (C, X, 0) by the 60 degree sector of ``h``."""
    sectors = (
        (c, x, 0.0),  # [0, 60)
        (x, c, 0.0),  # [60, 120)
        (0.0, c, x),  # [120, 180)
        (0.0, x, c),  # [180, 240)
        (x, 0.0, c),  # [240, 300)
        (c, 0.0, x),  # [300, 360)
    )
    return sectors[min(int(h // 60), 5)]


def _np_sector_rgb(h: NDArray, c: NDArray, x: NDArray) -> NDArray:
    zero = np.zeros_like(c)
    sector = np.clip(np.floor(h / 60).astype(int), 0, 5)
    r = np.choose(sector, [c, x, zero, zero, x, c])
    g = np.choose(sector, [x, c, c, x, zero, zero])
    b = np.choose(sector, [zero, zero, x, c, c, x])
    return np.stack([r, g, b], axis=-1)


def _np_broadcast3(a, b, c):
    return np.broadcast_arrays(
        np.asarray(a, dtype=float),
        np.asarray(b, dtype=float),
        np.asarray(c, dtype=float),
    )


## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> Triple:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees, any real number
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    s = clamp01(s)
    l = clamp01(l)

    if s == 0:
        return l, l, l

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    r1, g1, b1 = _sector_rgb(h, c, x)
    return clamp01(r1 + m), clamp01(g1 + m), clamp01(b1 + m)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h, s, l = _np_broadcast3(h, s, l)
    h = h % 360.0
    s = np.clip(s, 0.0, 1.0)
    l = np.clip(l, 0.0, 1.0)

    c = (1 - np.abs(2 * l - 1)) * s
    x = c * (1 - np.abs((h / 60) % 2 - 1))
    m = l - c / 2

    # s == 0 gives c == x == 0, i.e. plain gray at lightness l
    rgb = _np_sector_rgb(h, c, x) + m[..., None]
    return np.clip(rgb, 0.0, 1.0)


## HSV to RGB conversions

def hsv_to_unit_rgb(h: float, s: float, v: float) -> Triple:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in degrees, any real number
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    s = clamp01(s)
    v = clamp01(v)

    if s == 0:
        return v, v, v

    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c

    r1, g1, b1 = _sector_rgb(h, c, x)
    return clamp01(r1 + m), clamp01(g1 + m), clamp01(b1 + m)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to RGB.

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h, s, v = _np_broadcast3(h, s, v)
    h = h % 360.0
    s = np.clip(s, 0.0, 1.0)
    v = np.clip(v, 0.0, 1.0)

    c = v * s
    x = c * (1 - np.abs((h / 60) % 2 - 1))
    m = v - c

    rgb = _np_sector_rgb(h, c, x) + m[..., None]
    return np.clip(rgb, 0.0, 1.0)


## XYZ / LAB / LCH to RGB conversions

def delinearize(value: float) -> float:
    """Apply the sRGB transfer curve to one linear channel."""
    if value > SRGB_GAMMA_THRESHOLD:
        return 1.055 * value ** (1.0 / SRGB_GAMMA) - 0.055
    return 12.92 * value


def xyz_to_unit_rgb(x: float, y: float, z: float) -> Triple:
    """XYZ (white at Y == 100) -> sRGB, clamped into [0, 1]."""
    x, y, z = x / 100, y / 100, z / 100
    r, g, b = (
        delinearize(row[0] * x + row[1] * y + row[2] * z)
        for row in XYZ_TO_SRGB
    )
    return clamp01(r), clamp01(g), clamp01(b)


def lab_to_unit_rgb(l: float, a: float, b: float) -> Triple:
    """
    Convert CIE L*a*b* (D65) to sRGB.

    Colors outside the sRGB gamut are clamped channel by channel.
    """
    return xyz_to_unit_rgb(*lab_to_xyz(l, a, b))


def lch_to_unit_rgb(l: float, c: float, h: float) -> Triple:
    return lab_to_unit_rgb(*lch_to_lab(l, c, h))


def np_xyz_to_unit_rgb(xyz: NDArray) -> NDArray:
    linear = (np.asarray(xyz, dtype=float) / 100) @ _XYZ_TO_SRGB.T
    # negative linear values only ever take the 12.92 branch
    gamma = 1.055 * np.abs(linear) ** (1.0 / SRGB_GAMMA) - 0.055
    rgb = np.where(linear > SRGB_GAMMA_THRESHOLD, gamma, 12.92 * linear)
    return np.clip(rgb, 0.0, 1.0)


def np_lab_to_unit_rgb(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert CIE L*a*b* (D65) to sRGB.

    Returns:
        rgb: array of shape (..., 3) in [0, 1]
    """
    return np_xyz_to_unit_rgb(np_lab_to_xyz(l, a, b))


def np_lch_to_unit_rgb(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    lab = np_lch_to_lab(l, c, h)
    return np_lab_to_unit_rgb(lab[..., 0], lab[..., 1], lab[..., 2])
