"""Strict-grammar parsers: hex3, hex6 and functional notation."""
import math
from typing import Callable, Collection, Dict, List, Optional, Tuple

from ..colors.color import Color
from ..conversions import hsl_to_rgb, hsv_to_rgb, parse_angle_token, parse_channel_token
from ..types.color_types import channel_count
from ..types.compat_level import BYTE_MAX, HTML_WHITESPACE, PERCENT_MAX
from .keywords import lookup_keyword
from .matchers import match_function, match_hex3, match_hex6, require_text


def parse_hex6(text: str) -> Optional[Color]:
    """``#rrggbb`` (case-insensitive) -> Color, otherwise None."""
    digits = match_hex6(text)
    if digits is None:
        return None
    return Color(*(int(d, 16) for d in digits))


def parse_hex3(text: str) -> Optional[Color]:
    """``#rgb`` -> Color with every digit doubled (``#abc`` is ``#aabbcc``)."""
    digits = match_hex3(text)
    if digits is None:
        return None
    return Color(*(17 * int(d, 16) for d in digits))


def _parse_alpha(args: List[str]) -> Optional[float]:
    if len(args) < 4:
        return 1.0
    return parse_channel_token(args[3], 1)


def _parse_rgb_args(args: List[str]) -> Optional[Color]:
    channels = [parse_channel_token(token, BYTE_MAX) for token in args[:3]]
    alpha = _parse_alpha(args)
    if alpha is None or any(c is None for c in channels):
        return None
    return Color(*(math.floor(c) for c in channels), alpha)


def _hue_parser(to_rgb: Callable[[float, float, float], Tuple[float, float, float]]):
    def parse(args: List[str]) -> Optional[Color]:
        hue = parse_angle_token(args[0])
        first = parse_channel_token(args[1], PERCENT_MAX)
        second = parse_channel_token(args[2], PERCENT_MAX)
        alpha = _parse_alpha(args)
        if hue is None or first is None or second is None or alpha is None:
            return None
        return Color(*to_rgb(hue, first, second), alpha)
    return parse


_function_parsers: Dict[str, Callable[[List[str]], Optional[Color]]] = {
    "rgb": _parse_rgb_args,
    "rgba": _parse_rgb_args,
    "hsl": _hue_parser(hsl_to_rgb),
    "hsla": _hue_parser(hsl_to_rgb),
    "hsv": _hue_parser(hsv_to_rgb),
    "hsva": _hue_parser(hsv_to_rgb),
}

FUNCTION_NAMES = frozenset(_function_parsers)


def parse_functional(text: str, allowed: Optional[Collection[str]] = None) -> Optional[Color]:
    """
    Parse ``rgb()``, ``rgba()``, ``hsl()``, ``hsla()``, ``hsv()`` or ``hsva()``.

    RGB channels accept numbers or percentages of 255 and are floored;
    hue is a plain number of degrees; saturation, lightness and value are
    numbers or percentages clamped to [0, 100]; alpha is a number or a
    percentage of 1.

    Args:
        text: The color text
        allowed: Restrict the accepted function names (lowercase)

    Returns:
        Color, or None for an unknown function, a wrong argument count or a
        malformed argument.
    """
    match = match_function(text)
    if match is None:
        return None
    if allowed is not None and match.name not in allowed:
        return None
    parser = _function_parsers.get(match.name)
    if parser is None or len(match.args) != channel_count(match.name):
        return None
    return parser(match.args)


def parse_rgb_string(text: str) -> Optional[Color]:
    """Only ``rgb()`` and ``rgba()``."""
    return parse_functional(text, allowed=("rgb", "rgba"))


def parse_color(text: str) -> Optional[Color]:
    """
    Parse any strict notation: an extended keyword, ``#rrggbb``, ``#rgb`` or
    a functional notation. Surrounding HTML whitespace is ignored.
    """
    text = require_text(text).strip(HTML_WHITESPACE)
    keyword = lookup_keyword(text)
    if keyword is not None:
        return parse_hex6(keyword)
    return parse_hex6(text) or parse_hex3(text) or parse_functional(text)
