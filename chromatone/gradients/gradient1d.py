from __future__ import annotations

import numpy as np
from typing import List, Sequence

from ..colors.rgb import Color
from ..conversions import np_convert


def _interpolate(start: np.ndarray, end: np.ndarray, u: np.ndarray) -> np.ndarray:
    return start + (end - start) * u


def gradient(
    start: Color,
    end: Color,
    steps: int,
    perceptual: bool = True,
) -> List[Color]:
    """
    Evenly spaced colors from ``start`` to ``end``, both included.

    Args:
        start: First color
        end: Last color
        steps: Number of colors; ``steps <= 1`` gives ``[start]``
        perceptual: Interpolate in LAB (matches :func:`mix_lab` at each
            ratio) instead of linear RGB. Alpha is always linear.

    Returns:
        List of ``steps`` colors
    """
    if steps <= 1:
        return [start]

    u = np.linspace(0.0, 1.0, steps, dtype=float)[:, None]

    rgb0 = np.array(start.rgb, dtype=float)
    rgb1 = np.array(end.rgb, dtype=float)
    if perceptual:
        lab = _interpolate(np_convert(rgb0, "rgb", "lab"), np_convert(rgb1, "rgb", "lab"), u)
        rgb = np_convert(lab, "lab", "rgb")
    else:
        rgb = _interpolate(rgb0, rgb1, u)

    alpha = _interpolate(np.float64(start.alpha), np.float64(end.alpha), u[:, 0])

    return [
        Color(float(r), float(g), float(b), float(a))
        for (r, g, b), a in zip(rgb, alpha)
    ]


def multi_gradient(
    start: Color,
    through: Sequence[Color],
    steps_per_segment: int = 10,
    perceptual: bool = True,
) -> List[Color]:
    """
    Gradient passing through several colors.

    Each consecutive pair of ``[start, *through]`` gets its own
    :func:`gradient`; the shared color between two segments appears once.
    An empty ``through`` gives an empty list.

    >>> rainbow = multi_gradient(RED, [YELLOW, GREEN, BLUE], steps_per_segment=10)
    """
    stops = [start, *through]
    result: List[Color] = []
    segments = len(stops) - 1

    for i in range(segments):
        segment = gradient(stops[i], stops[i + 1], steps_per_segment, perceptual)
        if i < segments - 1:
            segment = segment[:-1]
        result.extend(segment)

    return result


Color.gradient = gradient
Color.multi_gradient = multi_gradient
