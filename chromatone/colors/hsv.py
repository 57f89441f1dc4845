from typing import ClassVar, Optional, Tuple
from ..types.color_types import ChannelBounds, ColorSpace
from .color_base import ColorBase, channel_property


class HSV(ColorBase):
    """HSV (Hue, Saturation, Value), also known as HSB."""
    __slots__ = ()

    mode:       ClassVar[ColorSpace] = "hsv"
    channels:   ClassVar[Tuple[str, ...]] = ("hue", "saturation", "value")
    bounds:     ClassVar[Tuple[ChannelBounds, ...]] = ((None, None), (0.0, 1.0), (0.0, 1.0))
    hue_index:  ClassVar[Optional[int]] = 0

    hue = channel_property(0, "Hue angle in degrees, [0, 360)")
    saturation = channel_property(1, "Saturation, [0, 1]")
    value = channel_property(2, "Value / brightness, [0, 1]")
