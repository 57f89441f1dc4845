import numpy as np
from numpy import ndarray as NDArray

from .numbers import clamp01, normalize_hue
from ..types.color_types import Triple


def unit_rgb_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """
    Hue shared by HSL and HSV, in degrees [0, 360).

    ``delta`` must be non-zero; achromatic colors are handled by the callers.
    """
    if max_c == r:
        hue = 60 * (((g - b) / delta) % 6)
    elif max_c == g:
        hue = 60 * ((b - r) / delta + 2)
    else:
        hue = 60 * ((r - g) / delta + 4)
    return normalize_hue(hue)


def np_unit_rgb_hue(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, delta: NDArray) -> NDArray:
    """Vectorized :func:`unit_rgb_hue`; entries with ``delta == 0`` get hue 0."""
    hue = np.zeros_like(max_c)
    mask = delta > 0
    mask_r = mask & (max_c == r)
    mask_g = mask & (max_c == g) & ~mask_r
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = 60 * (((g[mask_r] - b[mask_r]) / delta[mask_r]) % 6)
    hue[mask_g] = 60 * ((b[mask_g] - r[mask_g]) / delta[mask_g] + 2)
    hue[mask_b] = 60 * ((r[mask_b] - g[mask_b]) / delta[mask_b] + 4)

    hue = np.mod(hue, 360.0)
    hue[hue >= 360.0] = 0.0
    return hue


## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> Triple:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    # Achromatic: any hue is valid, 0 is canonical
    if delta == 0:
        return 0.0, 0.0, lightness

    denom = 1 - abs(2 * lightness - 1)
    # lightness can round to exactly 0 or 1 while delta is still positive
    saturation = delta / denom if denom > 0 else 0.0
    hue = unit_rgb_hue(r, g, b, max_c, delta)

    return hue, clamp01(saturation), lightness


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros_like(lightness)
    denom = 1 - np.abs(2 * lightness - 1)
    mask = (delta > 0) & (denom > 0)
    saturation[mask] = delta[mask] / denom[mask]

    hue = np_unit_rgb_hue(r, g, b, max_c, delta)

    return np.stack([hue, np.clip(saturation, 0.0, 1.0), lightness], axis=-1)


## HSV to HSL conversions

def hsv_to_hsl(h: float, s: float, v: float) -> Triple:
    """
    Convert HSV to HSL without going through RGB.

    Returns:
        Tuple[float, float, float]: (hue, saturation, lightness)
    """
    s = clamp01(s)
    v = clamp01(v)
    lightness = v * (1 - s / 2)
    if lightness in (0.0, 1.0):
        saturation = 0.0
    else:
        saturation = (v - lightness) / min(lightness, 1 - lightness)
    return normalize_hue(h), clamp01(saturation), lightness
