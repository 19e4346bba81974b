"""
Chromaparse Color Values
========================

``Color`` is the immutable result of every parser and conversion entry point:
integer ``r``, ``g``, ``b`` in [0, 255] and a real ``a`` in [0, 1].

>>> from chromaparse.colors import from_hsl
>>> red = from_hsl(0, 100, 50)
>>> red.to_hex_string()
'#ff0000'
>>> red.to_hex_string(shorten=True)
'#f00'
>>> red.with_alpha(0.5).to_rgb_string()
'rgba(255, 0, 0, 0.5)'
"""

from .color import Color, from_rgb, from_hsl, from_hsv
from .formatting import (
    shorten_hex,
    format_alpha,
    to_hex_string,
    to_rgb_string,
    to_rgba_string,
)

__all__ = [
    "Color",
    "from_rgb",
    "from_hsl",
    "from_hsv",
    "shorten_hex",
    "format_alpha",
    "to_hex_string",
    "to_rgb_string",
    "to_rgba_string",
]
