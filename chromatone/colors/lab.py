from typing import ClassVar, Optional, Tuple
from ..conversions.constants import LAB_LIGHTNESS_MAX
from ..types.color_types import ChannelBounds, ColorSpace
from .color_base import ColorBase, channel_property


class LAB(ColorBase):
    """
    CIE L*a*b* (D65).

    Perceptually uniform: equal distances are roughly equal perceived
    differences. Only lightness is bounded; ``a`` and ``b`` are left as
    computed, so values outside the sRGB gamut are representable.
    """
    __slots__ = ()

    mode:       ClassVar[ColorSpace] = "lab"
    channels:   ClassVar[Tuple[str, ...]] = ("lightness", "a", "b")
    bounds:     ClassVar[Tuple[ChannelBounds, ...]] = (
        (0.0, LAB_LIGHTNESS_MAX), (None, None), (None, None),
    )

    lightness = channel_property(0, "Lightness, [0, 100]")
    a = channel_property(1, "Green (-) to red (+) axis")
    b = channel_property(2, "Blue (-) to yellow (+) axis")


class LCH(ColorBase):
    """CIE LCH, the cylindrical form of LAB."""
    __slots__ = ()

    mode:       ClassVar[ColorSpace] = "lch"
    channels:   ClassVar[Tuple[str, ...]] = ("lightness", "chroma", "hue")
    bounds:     ClassVar[Tuple[ChannelBounds, ...]] = (
        (0.0, LAB_LIGHTNESS_MAX), (0.0, None), (None, None),
    )
    hue_index:  ClassVar[Optional[int]] = 2

    lightness = channel_property(0, "Lightness, [0, 100]")
    chroma = channel_property(1, "Chroma, >= 0")
    hue = channel_property(2, "Hue angle in degrees, [0, 360)")
