"""
RGB -> XYZ -> CIE LAB -> LCH, all against the D65 reference white.

The inverse direction (LAB -> XYZ, LCH -> LAB) lives here as well since it
produces LAB/XYZ values; the final step back to sRGB is in ``to_rgb``.
"""
import math

import numpy as np
from numpy import ndarray as NDArray

from .constants import (
    CIE_DELTA,
    CIE_OFFSET,
    D65_WHITE,
    LAB_LIGHTNESS_MAX,
    SRGB_GAMMA,
    SRGB_LINEAR_THRESHOLD,
    SRGB_TO_XYZ,
)
from .numbers import clamp_to, normalize_hue
from ..types.color_types import Triple

_SRGB_TO_XYZ = np.array(SRGB_TO_XYZ)
_D65 = np.array(D65_WHITE)


## sRGB -> XYZ

def linearize(channel: float) -> float:
    """Undo the sRGB transfer curve for one unit channel."""
    if channel > SRGB_LINEAR_THRESHOLD:
        return ((channel + 0.055) / 1.055) ** SRGB_GAMMA
    return channel / 12.92


def unit_rgb_to_xyz(r: float, g: float, b: float) -> Triple:
    """sRGB in [0, 1] -> XYZ scaled so that white has Y == 100."""
    lr = linearize(r) * 100
    lg = linearize(g) * 100
    lb = linearize(b) * 100
    x, y, z = (
        row[0] * lr + row[1] * lg + row[2] * lb
        for row in SRGB_TO_XYZ
    )
    return x, y, z


def np_unit_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """Vectorized :func:`unit_rgb_to_xyz` over an array of shape (..., 3)."""
    rgb = np.asarray(rgb, dtype=float)
    linear = np.where(
        rgb > SRGB_LINEAR_THRESHOLD,
        ((rgb + 0.055) / 1.055) ** SRGB_GAMMA,
        rgb / 12.92,
    )
    return (linear * 100) @ _SRGB_TO_XYZ.T


## XYZ <-> LAB

def cie_f(t: float) -> float:
    if t > CIE_DELTA ** 3:
        return t ** (1.0 / 3.0)
    return t / (3 * CIE_DELTA ** 2) + CIE_OFFSET


def cie_f_inverse(t: float) -> float:
    if t > CIE_DELTA:
        return t ** 3
    return 3 * CIE_DELTA ** 2 * (t - CIE_OFFSET)


def xyz_to_lab(x: float, y: float, z: float) -> Triple:
    xn, yn, zn = D65_WHITE
    fx = cie_f(x / xn)
    fy = cie_f(y / yn)
    fz = cie_f(z / zn)
    lightness = clamp_to(116 * fy - 16, 0.0, LAB_LIGHTNESS_MAX)
    return lightness, 500 * (fx - fy), 200 * (fy - fz)


def np_xyz_to_lab(xyz: NDArray) -> NDArray:
    t = np.asarray(xyz, dtype=float) / _D65
    # cube root of negative inputs never reaches the first branch
    f = np.where(
        t > CIE_DELTA ** 3,
        np.cbrt(t),
        t / (3 * CIE_DELTA ** 2) + CIE_OFFSET,
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    lightness = np.clip(116 * fy - 16, 0.0, LAB_LIGHTNESS_MAX)
    return np.stack([lightness, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)


def lab_to_xyz(l: float, a: float, b: float) -> Triple:
    """CIE LAB -> XYZ. Lightness is clamped to [0, 100]; a and b are unbounded."""
    l = clamp_to(l, 0.0, LAB_LIGHTNESS_MAX)
    fy = (l + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200
    xn, yn, zn = D65_WHITE
    return xn * cie_f_inverse(fx), yn * cie_f_inverse(fy), zn * cie_f_inverse(fz)


def np_lab_to_xyz(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    l = np.clip(np.asarray(l, dtype=float), 0.0, LAB_LIGHTNESS_MAX)
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    fy = (l + 16) / 116
    f = np.stack([a / 500 + fy, fy, fy - b / 200], axis=-1)
    inv = np.where(f > CIE_DELTA, f ** 3, 3 * CIE_DELTA ** 2 * (f - CIE_OFFSET))
    return inv * _D65


## RGB -> LAB

def unit_rgb_to_lab(r: float, g: float, b: float) -> Triple:
    """
    Convert sRGB to CIE L*a*b* (D65).

    Args:
        r, g, b: Unit channels in [0, 1]

    Returns:
        Tuple[float, float, float]: (lightness [0,100], a, b)
    """
    return xyz_to_lab(*unit_rgb_to_xyz(r, g, b))


def np_unit_rgb_to_lab(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert sRGB to CIE L*a*b* (D65).

    Returns:
        lab: array of shape (..., 3)
    """
    rgb = np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    ), axis=-1)
    return np_xyz_to_lab(np_unit_rgb_to_xyz(rgb))


## LAB <-> LCH

def lab_to_lch(l: float, a: float, b: float) -> Triple:
    """Polar form of LAB: (lightness, chroma, hue in degrees [0, 360))."""
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a))
    if hue < 0:
        hue += 360
    return clamp_to(l, 0.0, LAB_LIGHTNESS_MAX), chroma, normalize_hue(hue)


def np_lab_to_lch(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    l = np.clip(np.asarray(l, dtype=float), 0.0, LAB_LIGHTNESS_MAX)
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    chroma = np.hypot(a, b)
    hue = np.mod(np.degrees(np.arctan2(b, a)), 360.0)
    hue = np.where(hue >= 360.0, 0.0, hue)
    return np.stack(np.broadcast_arrays(l, chroma, hue), axis=-1)


def lch_to_lab(l: float, c: float, h: float) -> Triple:
    c = clamp_to(c, 0.0, None)
    h_rad = math.radians(normalize_hue(h))
    return clamp_to(l, 0.0, LAB_LIGHTNESS_MAX), c * math.cos(h_rad), c * math.sin(h_rad)


def np_lch_to_lab(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    l = np.clip(np.asarray(l, dtype=float), 0.0, LAB_LIGHTNESS_MAX)
    c = np.maximum(np.asarray(c, dtype=float), 0.0)
    h_rad = np.radians(np.asarray(h, dtype=float) % 360.0)
    return np.stack(np.broadcast_arrays(l, c * np.cos(h_rad), c * np.sin(h_rad)), axis=-1)


def unit_rgb_to_lch(r: float, g: float, b: float) -> Triple:
    return lab_to_lch(*unit_rgb_to_lab(r, g, b))
