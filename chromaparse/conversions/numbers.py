import math
import re
from numbers import Integral
from typing import Optional

from boundednumbers import clamp

from ..types.color_types import Scalar
from ..types.compat_level import BYTE_MAX, HTML_WHITESPACE, HUE_360


def clamp_byte(value: Scalar) -> int:
    """Round ``value`` to the nearest integer (halves up) and clamp to ``[0, 255]``."""
    if isinstance(value, Integral):
        return int(max(0, min(value, BYTE_MAX)))
    if math.isinf(value):
        return BYTE_MAX if value > 0 else 0
    return int(clamp(math.floor(value + 0.5), 0, BYTE_MAX))


def clamp_unit(value: Scalar) -> float:
    """Clamp ``value`` to ``[0, 1]`` without rounding."""
    if isinstance(value, Integral):
        return 1.0 if value > 0 else 0.0
    return float(clamp(value, 0.0, 1.0))


def mod(dividend: Scalar, divisor: Scalar) -> Scalar:
    """Mathematical modulo: the result always has the sign of ``divisor``."""
    return ((dividend % divisor) + divisor) % divisor


def normalize_hue(h: Scalar) -> float:
    """Normalize hue to [0, 360) range."""
    return float(mod(h, HUE_360))


def normalize_angle(h: Scalar) -> float:
    """Reduce an angle in degrees into [0, 360) and scale it to [0, 1)."""
    return normalize_hue(h) / HUE_360


def bound01(value: Scalar, maximum: Scalar) -> float:
    """Clamp ``value`` to ``[0, maximum]`` and scale the result to ``[0, 1]``."""
    return float(clamp(value, 0, maximum)) / maximum


# CSS integer or number, see http://www.w3.org/TR/css3-values/#numbers
CSS_NUMBER = r"[-+]?(?:[0-9]+|[0-9]*\.[0-9]+)(?:[eE][-+]?[0-9]+)?"
_number_re = re.compile(CSS_NUMBER)


def _to_finite(text: str) -> Optional[float]:
    if not _number_re.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return number


def parse_channel_token(token: str, maximum: Scalar) -> Optional[float]:
    """
    Interpret a raw numeric or percentage token as a channel value.

    A trailing ``%`` scales the number to ``maximum * value / 100``; anything
    else is read as a literal number. Either way the result is clamped to
    ``[0, maximum]``.

    Args:
        token: Raw argument text, e.g. ``"128"``, ``"50%"`` or ``"1.5e2"``
        maximum: Upper bound of the channel (255 for RGB, 1 for alpha, ...)

    Returns:
        The clamped value, or None when the token is not valid number text.
    """
    token = token.strip(HTML_WHITESPACE)
    if token.endswith("%"):
        number = _to_finite(token[:-1])
        if number is None:
            return None
        number = maximum * number / 100
    else:
        number = _to_finite(token)
        if number is None:
            return None
    return float(clamp(number, 0, maximum))


def parse_angle_token(token: str) -> Optional[float]:
    """Read a hue argument in degrees. Percentages are not angles."""
    token = token.strip(HTML_WHITESPACE)
    if token.endswith("%"):
        return None
    return _to_finite(token)
