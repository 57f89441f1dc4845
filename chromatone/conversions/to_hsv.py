import numpy as np
from numpy import ndarray as NDArray

from .numbers import clamp01, normalize_hue
from .to_hsl import unit_rgb_hue, np_unit_rgb_hue
from ..types.color_types import Triple


## RGB to HSV conversions

def unit_rgb_to_hsv(r: float, g: float, b: float) -> Triple:
    """
    Convert RGB to HSV.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], value [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    # delta == 0 also covers max == 0, so the division below is safe
    if delta == 0:
        return 0.0, 0.0, max_c

    saturation = delta / max_c
    hue = unit_rgb_hue(r, g, b, max_c, delta)
    return hue, clamp01(saturation), max_c


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
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

    saturation = np.zeros_like(max_c)
    mask = delta > 0
    saturation[mask] = delta[mask] / max_c[mask]

    hue = np_unit_rgb_hue(r, g, b, max_c, delta)

    return np.stack([hue, np.clip(saturation, 0.0, 1.0), max_c], axis=-1)


## HSL to HSV conversions

def hsl_to_hsv(h: float, s: float, l: float) -> Triple:
    """
    Convert HSL to HSV without going through RGB.

    Returns:
        Tuple[float, float, float]: (hue, saturation, value)
    """
    s = clamp01(s)
    l = clamp01(l)
    value = l + s * min(l, 1 - l)
    saturation = 0.0 if value == 0 else 2 * (1 - l / value)
    return normalize_hue(h), clamp01(saturation), value
