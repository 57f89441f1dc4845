"""
Chromatone Text Codecs
======================

Hex and CSS string forms of :class:`~chromatone.colors.rgb.Color`.

Parsers return ``None`` for input they cannot read; formatters always
succeed. Importing this package adds ``Color.from_hex``, ``Color.hex``,
``Color.hex_value``, ``Color.from_css``, ``Color.css`` and
``Color.css_hsl``.

>>> from chromatone.codecs import parse_hex, format_css
>>> format_css(parse_hex("#F80"))
'rgb(255, 136, 0)'
"""

from .hex import parse_hex, format_hex
from .css import parse_css, format_css, format_css_hsl

__all__ = [
    'parse_hex',
    'format_hex',
    'parse_css',
    'format_css',
    'format_css_hsl',
]
