from __future__ import annotations
from typing import Any, Callable, ClassVar, Optional, Tuple, Type

from ..conversions.numbers import clamp_to, normalize_hue
from ..types.color_types import ChannelBounds, ColorSpace, ColorValue, HUE_SPACES
from ..utils import get_dimension


class ColorBase:
    """
    Immutable tuple of color channels.

    Subclasses describe their channels with ``channels`` (names, in order),
    ``bounds`` (one ``(lower, upper)`` pair per channel, ``None`` meaning
    unbounded) and ``hue_index`` (the channel normalized into [0, 360)
    instead of clamped). Values are normalized once, in ``__init__``.
    """
    __slots__ = ('_value', '_is_frozen')  # no __dict__ -> no new attributes

    mode:       ClassVar[ColorSpace]
    channels:   ClassVar[Tuple[str, ...]]
    bounds:     ClassVar[Tuple[ChannelBounds, ...]]
    hue_index:  ClassVar[Optional[int]] = None
    # def color_convert(self: ColorBase, to_space: ColorSpace) -> ColorBase:
    convert: Callable[[ColorBase, ColorSpace], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, *values: Any) -> None:
        num_channels = len(self.channels)
        if len(values) == 1 and get_dimension(values[0]) == num_channels:
            values = tuple(values[0])

        if len(values) != num_channels:
            raise ValueError(
                f"{self.__class__.__name__} expects {num_channels} channels "
                f"{self.channels}, got {len(values)}"
            )

        normalized = []
        for index, (raw, (lower, upper)) in enumerate(zip(values, self.bounds)):
            if index == self.hue_index:
                normalized.append(normalize_hue(raw))
            else:
                normalized.append(clamp_to(float(raw), lower, upper))

        # safe assignment; __setattr__ still allows it during init
        self._value: ColorValue = tuple(normalized)

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def values(self) -> ColorValue:
        """All channels as a tuple, in ``channels`` order."""
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    def __iter__(self):
        return iter(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __getitem__(self, index):
        return self._value[index]

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={v!r}" for name, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"

    def __reduce__(self):
        return (self.__class__, self._value)


def channel_property(index: int, doc: str) -> property:
    """Read-only accessor for one channel of a ColorBase subclass."""
    def getter(self: ColorBase) -> float:
        return self._value[index]
    return property(getter, doc=doc)


def build_registry(*classes: Type[ColorBase]):
    return {
        cls.mode: cls
        for cls in classes
    }
