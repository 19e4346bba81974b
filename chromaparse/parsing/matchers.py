"""
Grammar matcher for hex and functional color notations.

Matchers only recognise and extract; they never interpret numbers. A string
that fits no pattern gives None, which is an ordinary outcome.
"""
import re
from typing import Any, List, NamedTuple, Optional

from ..conversions.numbers import CSS_NUMBER
from ..types.color_types import HexTriplet
from ..types.compat_level import HTML_WHITESPACE

_HEX = "[0-9a-fA-F]"
_WS = "[ \t\n\f\r]*"
CSS_UNIT = f"(?:{CSS_NUMBER})%?"
_SPACED_UNIT = f"{_WS}{CSS_UNIT}{_WS}"

_hex3_re = re.compile(f"#({_HEX})({_HEX})({_HEX})")
_hex6_re = re.compile(f"#({_HEX}{{2}})({_HEX}{{2}})({_HEX}{{2}})")
_function_re = re.compile(
    rf"{_WS}([a-zA-Z]+)\(((?:{_SPACED_UNIT},)*{_SPACED_UNIT})\){_WS}"
)


class FunctionMatch(NamedTuple):
    name: str
    args: List[str]


def require_text(text: Any) -> str:
    if not isinstance(text, str):
        raise TypeError(f"Color text must be a str, got {type(text).__name__}")
    return text


def match_hex3(text: str) -> Optional[HexTriplet]:
    """``#rgb`` -> ``("r", "g", "b")``."""
    match = _hex3_re.fullmatch(require_text(text))
    if not match:
        return None
    r, g, b = match.groups()
    return r, g, b


def match_hex6(text: str) -> Optional[HexTriplet]:
    """``#rrggbb`` -> ``("rr", "gg", "bb")``."""
    match = _hex6_re.fullmatch(require_text(text))
    if not match:
        return None
    r, g, b = match.groups()
    return r, g, b


def match_function(text: str) -> Optional[FunctionMatch]:
    """
    Match the generic functional notation ``name(arg, arg, ...)``.

    Each argument is an integer or a decimal number (optionally with an
    exponent), optionally followed by ``%``. Arguments are separated by
    commas and may be surrounded by space, tab, line feed, form feed or
    carriage return.

    Returns:
        FunctionMatch with the lowercased name and the raw argument strings,
        or None when the text is not a functional notation.
    """
    match = _function_re.fullmatch(require_text(text))
    if not match:
        return None
    name, body = match.groups()
    args = [arg.strip(HTML_WHITESPACE) for arg in body.split(",")]
    return FunctionMatch(name.lower(), args)


def infer_format(text: str) -> Optional[str]:
    """Name the notation of ``text``: ``"hex3"``, ``"hex6"``, a function name, or None."""
    if match_hex3(text):
        return "hex3"
    if match_hex6(text):
        return "hex6"
    function = match_function(text)
    if function:
        return function.name
    return None
