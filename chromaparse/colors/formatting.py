"""String output for ``Color`` values."""
from __future__ import annotations
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .color import Color

_shortenable_hex = re.compile(r"#([0-9a-fA-F])\1([0-9a-fA-F])\2([0-9a-fA-F])\3")


def shorten_hex(hex_string: str) -> str:
    """
    Collapse ``#aabbcc`` to ``#abc`` when each channel's two digits are identical.

    Anything else, including mixed-case pairs such as ``#aAbbcc``, is returned unchanged.
    """
    match = _shortenable_hex.fullmatch(hex_string)
    if not match:
        return hex_string
    return "#" + "".join(match.groups())


def format_alpha(alpha: float) -> str:
    """Whole alphas print as integers (``1``, ``0``), the rest as the shortest float repr."""
    if float(alpha).is_integer():
        return str(int(alpha))
    return repr(float(alpha))


def to_hex_string(color: Color, shorten: bool = False) -> str:
    """Lowercase ``#rrggbb``; with ``shorten`` collapse to ``#rgb`` when possible. Alpha is ignored."""
    hex_string = f"#{color.r:02x}{color.g:02x}{color.b:02x}"
    if shorten:
        return shorten_hex(hex_string)
    return hex_string


def to_rgb_string(color: Color) -> str:
    """``rgb(r, g, b)``, or the rgba form when the color is not opaque."""
    if color.a != 1:
        return to_rgba_string(color)
    return f"rgb({color.r}, {color.g}, {color.b})"


def to_rgba_string(color: Color) -> str:
    return f"rgba({color.r}, {color.g}, {color.b}, {format_alpha(color.a)})"
