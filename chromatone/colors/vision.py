"""
Color vision deficiency simulation.

Simple linear approximations applied directly to sRGB channels. Alpha is
kept. Results are clamped into [0, 1] by the Color constructor.
"""
from __future__ import annotations
import numpy as np

from .rgb import Color

# Rows give the output red, green and blue as weights of the input RGB
PROTANOPIA = np.array([
    [0.567, 0.433, 0.0],
    [0.558, 0.442, 0.0],
    [0.0, 0.242, 0.758],
])

DEUTERANOPIA = np.array([
    [0.625, 0.375, 0.0],
    [0.7, 0.3, 0.0],
    [0.0, 0.3, 0.7],
])

TRITANOPIA = np.array([
    [0.95, 0.05, 0.0],
    [0.0, 0.433, 0.567],
    [0.0, 0.475, 0.525],
])


def apply_matrix(color: Color, matrix: np.ndarray) -> Color:
    r, g, b = matrix @ np.asarray(color.rgb, dtype=float)
    return Color(float(r), float(g), float(b), color.alpha)


def simulate_protanopia(color: Color) -> Color:
    """Red-blind."""
    return apply_matrix(color, PROTANOPIA)


def simulate_deuteranopia(color: Color) -> Color:
    """Green-blind."""
    return apply_matrix(color, DEUTERANOPIA)


def simulate_tritanopia(color: Color) -> Color:
    """Blue-blind."""
    return apply_matrix(color, TRITANOPIA)


Color.simulate_protanopia = simulate_protanopia
Color.simulate_deuteranopia = simulate_deuteranopia
Color.simulate_tritanopia = simulate_tritanopia
