from __future__ import annotations
from typing import ClassVar, Dict, Mapping, Tuple

from ..conversions.numbers import to_byte
from ..conversions.to_hsl import unit_rgb_to_hsl
from ..conversions.to_hsv import unit_rgb_to_hsv
from ..conversions.to_lab import unit_rgb_to_lab, lab_to_lch
from ..conversions.to_rgb import hsl_to_unit_rgb, hsv_to_unit_rgb, lab_to_unit_rgb, lch_to_unit_rgb
from ..types.color_types import ChannelBounds, ColorSpace, Triple
from ..types.format_type import FormatType, format_classes, max_non_hue
from .color_base import ColorBase, build_registry, channel_property
from .hsl import HSL
from .hsv import HSV
from .lab import LAB, LCH


class Color(ColorBase):
    """
    An sRGB color with alpha.

    All four channels are floats in [0, 1]; out-of-range input is clamped,
    never rejected. Instances are immutable, compare by value and are
    hashable.

    >>> red = Color(1.0, 0.0, 0.0)
    >>> blue = Color.from_rgb8(0, 0, 255)
    >>> purple = red.mix(blue)
    """
    __slots__ = ()

    mode:       ClassVar[ColorSpace] = "rgb"
    channels:   ClassVar[Tuple[str, ...]] = ("red", "green", "blue", "alpha")
    bounds:     ClassVar[Tuple[ChannelBounds, ...]] = ((0.0, 1.0),) * 4

    def __init__(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        super().__init__(r, g, b, a)

    red = channel_property(0, "Red, [0, 1]")
    green = channel_property(1, "Green, [0, 1]")
    blue = channel_property(2, "Blue, [0, 1]")
    alpha = channel_property(3, "Alpha, [0, 1]")

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        """Create a color from 8-bit channels (0-255); values are clamped after scaling."""
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> Color:
        hsl = HSL(h, s, l)
        return cls(*hsl_to_unit_rgb(*hsl), a)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, a: float = 1.0) -> Color:
        hsv = HSV(h, s, v)
        return cls(*hsv_to_unit_rgb(*hsv), a)

    @classmethod
    def from_lab(cls, l: float, a: float, b: float, alpha: float = 1.0) -> Color:
        lab = LAB(l, a, b)
        return cls(*lab_to_unit_rgb(*lab), alpha)

    @classmethod
    def from_lch(cls, l: float, c: float, h: float, alpha: float = 1.0) -> Color:
        lch = LCH(l, c, h)
        return cls(*lch_to_unit_rgb(*lch), alpha)

    def with_alpha(self, alpha: float) -> Color:
        """Return a copy with only the alpha channel replaced (clamped)."""
        return self.__class__(self.red, self.green, self.blue, alpha)

    # ------------------ 8-BIT CHANNELS ------------------
    @property
    def red8(self) -> int:
        return to_byte(self.red)

    @property
    def green8(self) -> int:
        return to_byte(self.green)

    @property
    def blue8(self) -> int:
        return to_byte(self.blue)

    @property
    def alpha8(self) -> int:
        return to_byte(self.alpha)

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= 1.0

    def to_tuple(self, format_type: FormatType = FormatType.FLOAT) -> Tuple[float, ...]:
        """
        RGBA channels scaled for ``format_type``.

        INT gives 0-255 integers (rounded half away from zero), FLOAT the
        unit values and PERCENTAGE 0-100.
        """
        format_type = FormatType(format_type)
        if format_type == FormatType.INT:
            return tuple(to_byte(v) for v in self._value)
        scale = max_non_hue[format_type]
        return tuple(format_classes[format_type](v * scale) for v in self._value)

    # ------------------ OTHER SPACES ------------------
    @property
    def rgb(self) -> Triple:
        """Red, green and blue without alpha."""
        return self.red, self.green, self.blue

    @property
    def hsl(self) -> HSL:
        return HSL(*unit_rgb_to_hsl(*self.rgb))

    @property
    def hsv(self) -> HSV:
        return HSV(*unit_rgb_to_hsv(*self.rgb))

    @property
    def lab(self) -> LAB:
        return LAB(*unit_rgb_to_lab(*self.rgb))

    @property
    def lch(self) -> LCH:
        return LCH(*lab_to_lch(*unit_rgb_to_lab(*self.rgb)))

    # ------------------ SERIALIZATION ------------------
    def to_dict(self) -> Dict[str, float]:
        """Channels keyed by name; the result is JSON serializable."""
        return dict(zip(self.channels, self._value))

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> Color:
        """
        Inverse of :meth:`to_dict`. Channels are clamped like the constructor.

        Raises:
            KeyError: if a channel key is missing
        """
        return cls(data["red"], data["green"], data["blue"], data["alpha"])

    def __repr__(self) -> str:
        if self.alpha < 1.0:
            return f"Color(r={self.red!r}, g={self.green!r}, b={self.blue!r}, a={self.alpha!r})"
        return f"Color(r={self.red!r}, g={self.green!r}, b={self.blue!r})"


# Common colors
BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
YELLOW = Color(1.0, 1.0, 0.0)
CYAN = Color(0.0, 1.0, 1.0)
MAGENTA = Color(1.0, 0.0, 1.0)
GRAY = Color(0.5, 0.5, 0.5)
CLEAR = Color(0.0, 0.0, 0.0, 0.0)


space_to_class = build_registry(Color, HSL, HSV, LAB, LCH)
