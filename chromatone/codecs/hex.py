from __future__ import annotations
import logging
import re
from typing import Optional, Type

from ..colors.rgb import Color

logger = logging.getLogger(__name__)

HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")
HEX_PREFIXES = ("#", "0x", "0X")
SHORTHAND_LENGTHS = (3, 4)
VALID_LENGTHS = (3, 4, 6, 8)


def _strip_prefix(text: str) -> str:
    for prefix in HEX_PREFIXES:
        if text.startswith(prefix):
            return text[len(prefix):]
    return text


def parse_hex(text: str) -> Optional[Color]:
    """
    Parse a hex color string.

    Accepted forms, with an optional ``#``, ``0x`` or ``0X`` prefix and
    surrounding whitespace:

    - ``RGB`` and ``RGBA`` shorthand, each digit doubled
    - ``RRGGBB`` (alpha 1.0)
    - ``RRGGBBAA``

    Args:
        text: Hex string, e.g. ``"#FF8000"`` or ``"0f08"``

    Returns:
        Parsed Color, or None if ``text`` is not a valid hex color
    """
    digits = _strip_prefix(text.strip())

    if len(digits) not in VALID_LENGTHS:
        logger.debug("Rejected hex color %r: %d digits", text, len(digits))
        return None
    if len(digits) in SHORTHAND_LENGTHS:
        digits = "".join(ch * 2 for ch in digits)
    if not HEX_DIGITS.fullmatch(digits):
        logger.debug("Rejected hex color %r: not hexadecimal", text)
        return None

    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    return Color.from_rgb8(*channels)


def format_hex(color: Color, prefix: str = "#") -> str:
    """
    Uppercase ``#RRGGBB``, or ``#RRGGBBAA`` when the color is translucent.

    >>> format_hex(Color(1.0, 0.5, 0.0))
    '#FF8000'
    """
    if color.alpha < 1.0:
        return f"{prefix}{color.red8:02X}{color.green8:02X}{color.blue8:02X}{color.alpha8:02X}"
    return f"{prefix}{color.red8:02X}{color.green8:02X}{color.blue8:02X}"


def _from_hex(cls: Type[Color], text: str) -> Optional[Color]:
    """Create a color from a hex string; None if it cannot be parsed."""
    return parse_hex(text)


def _hex_value(color: Color) -> str:
    return format_hex(color, prefix="")


Color.from_hex = classmethod(_from_hex)
Color.hex = property(format_hex, doc="Hex string with '#' prefix")
Color.hex_value = property(_hex_value, doc="Hex string without prefix")
