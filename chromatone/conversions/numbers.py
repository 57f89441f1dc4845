import math
from boundednumbers import clamp

HUE_360 = 360.0


def clamp01(value: float) -> float:
    """Clamp a value to the inclusive range ``[0, 1]``."""
    return float(clamp(value, 0.0, 1.0))


def clamp_to(value: float, lower: float | None, upper: float | None) -> float:
    """Clamp ``value`` between optional bounds; ``None`` leaves that side open."""
    if lower is None and upper is None:
        return float(value)
    if lower is None:
        return float(min(value, upper))
    if upper is None:
        return float(max(value, lower))
    return float(clamp(value, lower, upper))


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = float(h) % HUE_360
    # tiny negative inputs round up to exactly 360.0
    return 0.0 if h >= HUE_360 else h


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def to_byte(channel: float) -> int:
    """Unit channel -> 0..255 integer."""
    return round_half_up(channel * 255)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t
