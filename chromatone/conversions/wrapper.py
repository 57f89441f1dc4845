import numpy as np
from typing import Callable, Dict, Tuple

from .to_rgb import (
    hsl_to_unit_rgb, hsv_to_unit_rgb, lab_to_unit_rgb, lch_to_unit_rgb,
    np_hsl_to_unit_rgb, np_hsv_to_unit_rgb, np_lab_to_unit_rgb, np_lch_to_unit_rgb,
)
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv, hsl_to_hsv
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl, hsv_to_hsl
from .to_lab import (
    unit_rgb_to_lab, unit_rgb_to_lch, lab_to_lch, lch_to_lab,
    np_unit_rgb_to_lab, np_lab_to_lch, np_lch_to_lab,
)

from ..types.color_types import COLOR_SPACES, ColorSpace, ScalarVector, Triple, element_to_array

Converter = Callable[[float, float, float], Triple]
NpConverter = Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]

# Every space reaches every other one through unit RGB
TO_RGB: Dict[str, Converter] = {
    "hsl": hsl_to_unit_rgb,
    "hsv": hsv_to_unit_rgb,
    "lab": lab_to_unit_rgb,
    "lch": lch_to_unit_rgb,
}

FROM_RGB: Dict[str, Converter] = {
    "hsl": unit_rgb_to_hsl,
    "hsv": unit_rgb_to_hsv,
    "lab": unit_rgb_to_lab,
    "lch": unit_rgb_to_lch,
}

# Pairs that skip the RGB round trip
CONVERT_DIRECT: Dict[Tuple[str, str], Converter] = {
    ("hsv", "hsl"): hsv_to_hsl,
    ("hsl", "hsv"): hsl_to_hsv,
    ("lab", "lch"): lab_to_lch,
    ("lch", "lab"): lch_to_lab,
}

NP_TO_RGB: Dict[str, NpConverter] = {
    "hsl": np_hsl_to_unit_rgb,
    "hsv": np_hsv_to_unit_rgb,
    "lab": np_lab_to_unit_rgb,
    "lch": np_lch_to_unit_rgb,
}

NP_FROM_RGB: Dict[str, NpConverter] = {
    "hsl": np_unit_rgb_to_hsl,
    "hsv": np_unit_rgb_to_hsv,
    "lab": np_unit_rgb_to_lab,
}

NP_CONVERT_DIRECT: Dict[Tuple[str, str], NpConverter] = {
    ("lab", "lch"): np_lab_to_lch,
    ("lch", "lab"): np_lch_to_lab,
}


def _check_space(space: str) -> str:
    space = space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown color space: {space!r}; expected one of {COLOR_SPACES}")
    return space


def convert(
    color: ScalarVector,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> Triple:
    """
    Convert a single three-channel color between color spaces.

    RGB channels are unit floats; HSL/HSV use degrees plus unit saturation,
    lightness and value; LAB/LCH use CIE units.
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    if len(color) != 3:
        raise ValueError(f"{fs} expects a 3-channel color, got {len(color)} channels")
    c0, c1, c2 = (float(v) for v in color)

    if fs == ts:
        return c0, c1, c2
    if (fs, ts) in CONVERT_DIRECT:
        return CONVERT_DIRECT[(fs, ts)](c0, c1, c2)

    rgb = (c0, c1, c2) if fs == "rgb" else TO_RGB[fs](c0, c1, c2)
    if ts == "rgb":
        return rgb
    return FROM_RGB[ts](*rgb)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """Vectorized :func:`convert` for arrays of shape (..., 3)."""
    fs, ts = _check_space(from_space), _check_space(to_space)
    arr = element_to_array(color)
    if arr.shape[-1] != 3:
        raise ValueError(f"{fs} expects last dimension to be 3, got shape {arr.shape}")

    if fs == ts:
        return arr
    key = (fs, ts)
    if key in NP_CONVERT_DIRECT:
        return NP_CONVERT_DIRECT[key](arr[..., 0], arr[..., 1], arr[..., 2])

    rgb = arr if fs == "rgb" else NP_TO_RGB[fs](arr[..., 0], arr[..., 1], arr[..., 2])
    if ts == "rgb":
        return rgb
    if ts == "lch":
        lab = np_unit_rgb_to_lab(rgb[..., 0], rgb[..., 1], rgb[..., 2])
        return np_lab_to_lch(lab[..., 0], lab[..., 1], lab[..., 2])
    return NP_FROM_RGB[ts](rgb[..., 0], rgb[..., 1], rgb[..., 2])
