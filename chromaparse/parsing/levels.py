"""
Color parsing as defined by successive web standards.

Each level is an independent pure function; ``parse_at_compatibility_level``
picks one by ``CompatibilityLevel``. Surrounding HTML whitespace is ignored
at every level.
"""
from typing import Callable, Dict, Optional, Union

from ..colors.color import Color
from ..types.compat_level import HTML_WHITESPACE, CompatibilityLevel
from .keywords import BASIC_COLORS, EXTENDED_COLORS, is_system_color, lookup_keyword
from .legacy import parse_legacy
from .matchers import require_text
from .strict import parse_functional, parse_hex3, parse_hex6, parse_rgb_string

ParseFunction = Callable[[str], Optional[Color]]


def _trimmed(text: str) -> str:
    return require_text(text).strip(HTML_WHITESPACE)


def parse_html4(text: str) -> Optional[Color]:
    """HTML 4.01: the sixteen basic keywords, then ``#rrggbb`` only.

    https://www.w3.org/TR/html401/types.html#h-6.5
    """
    text = _trimmed(text)
    keyword = lookup_keyword(text, BASIC_COLORS)
    return parse_hex6(keyword if keyword is not None else text)


def parse_css1(text: str) -> Optional[Color]:
    """CSS1: basic keywords, ``#rrggbb``, ``#rgb``, ``rgb()`` with numbers or percentages."""
    text = _trimmed(text)
    keyword = lookup_keyword(text, BASIC_COLORS)
    if keyword is not None:
        return parse_hex6(keyword)
    return parse_hex6(text) or parse_hex3(text) or parse_rgb_string(text)


def parse_css2(text: str) -> Optional[Color]:
    """CSS2: as CSS1, but system colors have no defined RGB value and give None."""
    text = _trimmed(text)
    if is_system_color(text):
        return None
    return parse_css1(text)


def parse_css2_1(text: str) -> Optional[Color]:
    """CSS 2.1: adds ``orange``."""
    text = _trimmed(text)
    if text.lower() == "orange":
        return parse_hex6(EXTENDED_COLORS["orange"])
    return parse_css2(text)


def parse_css3(text: str) -> Optional[Color]:
    """
    CSS Color Module Level 3.

    https://www.w3.org/TR/2011/REC-css3-color-20110607/

    Extended keywords; ``transparent`` is transparent black; system colors
    (deprecated) and ``currentColor`` depend on context and give None;
    then ``#rrggbb``, ``#rgb``, ``rgb()``, ``rgba()``, ``hsl()``, ``hsla()``.
    """
    text = _trimmed(text)
    lower = text.lower()
    if lower == "transparent":
        return Color(0, 0, 0, 0)
    if lower == "currentcolor" or is_system_color(lower):
        return None
    keyword = lookup_keyword(lower, EXTENDED_COLORS)
    if keyword is not None:
        return parse_hex6(keyword)
    return (
        parse_hex6(text)
        or parse_hex3(text)
        or parse_functional(text, allowed=("rgb", "rgba", "hsl", "hsla"))
    )


_level_parsers: Dict[CompatibilityLevel, ParseFunction] = {
    CompatibilityLevel.HTML4: parse_html4,
    CompatibilityLevel.CSS1: parse_css1,
    CompatibilityLevel.CSS2: parse_css2,
    CompatibilityLevel.CSS2_1: parse_css2_1,
    CompatibilityLevel.CSS3: parse_css3,
    CompatibilityLevel.HTML5_LEGACY: parse_legacy,
}


def resolve_level(level: Union[CompatibilityLevel, str]) -> CompatibilityLevel:
    """
    Turn an enum member, its value (``"css2.1"``) or its name (``"CSS2_1"``)
    into a ``CompatibilityLevel``. Strings are matched case-insensitively.

    Raises:
        ValueError: if ``level`` names no known level.
    """
    if isinstance(level, CompatibilityLevel) or not isinstance(level, str):
        return CompatibilityLevel(level)
    try:
        return CompatibilityLevel(level.lower())
    except ValueError:
        pass
    try:
        return CompatibilityLevel[level.upper()]
    except KeyError:
        raise ValueError(f"{level!r} is not a valid CompatibilityLevel") from None


def parse_at_compatibility_level(level: Union[CompatibilityLevel, str], text: str) -> Optional[Color]:
    """Parse ``text`` with the rules of ``level``; None when it defines no color."""
    return _level_parsers[resolve_level(level)](text)
