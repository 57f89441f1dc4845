from __future__ import annotations
from .color_base import ColorBase
from .rgb import Color, space_to_class
from ..conversions import convert
from ..types.color_types import ColorSpace


def color_convert(self: ColorBase, to_space: ColorSpace | None = None) -> ColorBase:
    """
    Convert this color to a different color space.

    Converting to ``"rgb"`` gives a :class:`Color`; its alpha is kept when
    the source is a Color and is 1.0 otherwise. Converting away from RGB
    drops alpha.

    Args:
        to_space: Target color space ("rgb", "hsl", "hsv", "lab", "lch").
            Defaults to the current space.

    Returns:
        New ColorBase instance in the target space
    """
    to_space = (to_space or self.mode).lower()  # type: ignore[assignment]
    if to_space not in space_to_class:
        raise ValueError(f"Unknown color space: {to_space!r}")
    if to_space == self.mode:
        return self

    if isinstance(self, Color):
        source, alpha = self.rgb, self.alpha
    else:
        source, alpha = self.values, 1.0

    result = convert(source, self.mode, to_space)

    if to_space == "rgb":
        return Color(*result, alpha)
    cls = space_to_class[to_space]
    return cls(*result)


ColorBase.convert = color_convert
