from __future__ import annotations
import logging

from .codecs.css import parse_css
from .codecs.hex import parse_hex
from .colors.rgb import Color
from .named_colors import lookup_name

logger = logging.getLogger(__name__)


class ColorParseError(ValueError):
    """Raised when a string is not a hex code, a CSS rgb() value or a color name."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Cannot parse color from {text!r}")
        self.text = text


def parse_color(text: str) -> Color:
    """
    Parse any supported color string.

    Tries, in order, a hex code (``"#FF8000"``), a CSS ``rgb()``/``rgba()``
    value and a CSS color name (``"coral"``).

    Raises:
        ColorParseError: if none of the forms match
    """
    color = parse_hex(text)
    if color is not None:
        return color

    color = parse_css(text)
    if color is not None:
        return color

    named = lookup_name(text)
    if named is not None:
        return named.color

    logger.debug("No color format matched %r", text)
    raise ColorParseError(text)
