from __future__ import annotations
from typing import Literal, Optional, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = Union[int, float]
ScalarVector = Tuple[Scalar, ...]
Triple = Tuple[float, float, float]
ColorValue = Tuple[float, ...]
ChannelBounds = Tuple[Optional[float], Optional[float]]
ColorSpace = Literal["rgb", "hsl", "hsv", "lab", "lch"]
COLOR_SPACES = ("rgb", "hsl", "hsv", "lab", "lch")
HUE_SPACES = {"hsl", "hsv", "lch"}

def element_to_array(element: Union[ScalarVector, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Tuple of channel values or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.asarray(element, dtype=float)
