"""Separable blend modes. The base color's alpha is kept; the partner's is ignored."""
from __future__ import annotations

from .rgb import Color


def _overlay_channel(base: float, blend: float) -> float:
    if base < 0.5:
        return 2 * base * blend
    return 1 - 2 * (1 - base) * (1 - blend)


def multiply(color: Color, other: Color) -> Color:
    """Per-channel product; never lighter than either input."""
    return Color(
        color.red * other.red,
        color.green * other.green,
        color.blue * other.blue,
        color.alpha,
    )


def screen(color: Color, other: Color) -> Color:
    """Inverse multiply; never darker than either input."""
    return Color(
        1 - (1 - color.red) * (1 - other.red),
        1 - (1 - color.green) * (1 - other.green),
        1 - (1 - color.blue) * (1 - other.blue),
        color.alpha,
    )


def overlay(color: Color, other: Color) -> Color:
    """Multiply where the base is dark (< 0.5), screen where it is light."""
    return Color(
        _overlay_channel(color.red, other.red),
        _overlay_channel(color.green, other.green),
        _overlay_channel(color.blue, other.blue),
        color.alpha,
    )


Color.multiply = multiply
Color.screen = screen
Color.overlay = overlay
