"""CSS ``rgb()`` / ``rgba()`` parsing and ``rgb()`` / ``hsl()`` formatting."""
from __future__ import annotations
import logging
import re
from typing import Optional, Type

from ..colors.rgb import Color

logger = logging.getLogger(__name__)

# The alpha group is optional in both rgb() and rgba()
CSS_RGB = re.compile(
    r"rgba?\s*\(\s*([0-9]+)\s*,\s*([0-9]+)\s*,\s*([0-9]+)\s*"
    r"(?:,\s*([0-9]+(?:\.[0-9]*)?|\.[0-9]+)\s*)?\)",
    re.IGNORECASE,
)


def parse_css(text: str) -> Optional[Color]:
    """
    Parse ``rgb(R, G, B)`` or ``rgba(R, G, B, A)``.

    R, G and B are integers (0-255, larger values clamp), A is a number in
    [0, 1] that is truncated to 8 bits. Matching ignores case and
    whitespace between tokens. Anything else, including ``hsl()``, gives
    None.
    """
    match = CSS_RGB.fullmatch(text.strip())
    if match is None:
        logger.debug("Rejected CSS color %r", text)
        return None

    r, g, b, alpha = match.groups()
    a = float(alpha) if alpha is not None else 1.0
    return Color.from_rgb8(int(r), int(g), int(b), int(a * 255))


def format_css(color: Color) -> str:
    if color.alpha < 1.0:
        return f"rgba({color.red8}, {color.green8}, {color.blue8}, {color.alpha:.2f})"
    return f"rgb({color.red8}, {color.green8}, {color.blue8})"


def format_css_hsl(color: Color) -> str:
    """
    ``hsl(H, S%, L%)`` or ``hsla(H, S%, L%, A)`` with whole-number hue and
    percentages.
    """
    hsl = color.hsl
    h = f"{hsl.hue:.0f}"
    s = f"{hsl.saturation * 100:.0f}%"
    l = f"{hsl.lightness * 100:.0f}%"
    if color.alpha < 1.0:
        return f"hsla({h}, {s}, {l}, {color.alpha:.2f})"
    return f"hsl({h}, {s}, {l})"


def _from_css(cls: Type[Color], text: str) -> Optional[Color]:
    """Create a color from a CSS rgb()/rgba() string; None if it cannot be parsed."""
    return parse_css(text)


Color.from_css = classmethod(_from_css)
Color.css = property(format_css, doc="CSS rgb()/rgba() string")
Color.css_hsl = property(format_css_hsl, doc="CSS hsl()/hsla() string")
