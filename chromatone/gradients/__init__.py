"""
Chromatone Gradients
====================

Two-color and multi-stop gradients as lists of :class:`Color`.

Perceptual gradients interpolate in CIE LAB and look more even than the
linear RGB ones, which pass through muddy midpoints between complementary
colors. Alpha is interpolated linearly in both modes.

>>> from chromatone.colors import RED, BLUE
>>> from chromatone.gradients import gradient
>>> ramp = gradient(RED, BLUE, 5)
>>> linear = RED.gradient(BLUE, 5, perceptual=False)
"""

from .gradient1d import gradient, multi_gradient

__all__ = [
    "gradient",
    "multi_gradient",
]
