"""
HTML rules for parsing a legacy color value.

https://www.w3.org/TR/2011/WD-html5-20110525/common-microsyntaxes.html#rules-for-parsing-a-legacy-color-value

Every non-empty string other than "transparent" gives a color. After the
keyword and ``#rgb`` shortcuts, the text goes through a fixed sequence of
string transforms that reduce it to three hex components of at most two
digits each. The transforms are exposed separately so each can be tested.
"""
import re
from typing import Optional, Tuple

from ..colors.color import Color
from ..types.compat_level import HTML_WHITESPACE, LEGACY_MAX_COMPONENT, LEGACY_MAX_LENGTH
from .keywords import EXTENDED_COLORS, lookup_keyword
from .matchers import require_text
from .strict import parse_hex3, parse_hex6

Components = Tuple[str, str, str]

# A code point above U+FFFF, or one written as a UTF-16 surrogate pair
_astral_re = re.compile("[\U00010000-\U0010ffff]|[\ud800-\udbff][\udc00-\udfff]")
_non_hex_re = re.compile("[^0-9a-fA-F]")


def replace_astral(text: str) -> str:
    """Replace every character outside the Basic Multilingual Plane with ``"00"``."""
    return _astral_re.sub("00", text)


def truncate(text: str, limit: int = LEGACY_MAX_LENGTH) -> str:
    return text[:limit]


def drop_hash(text: str) -> str:
    return text[1:] if text.startswith("#") else text


def replace_non_hex(text: str) -> str:
    return _non_hex_re.sub("0", text)


def pad_to_triplet(text: str) -> str:
    """Right-pad with ``'0'`` to a non-zero multiple of three characters."""
    length = max(3, -(-len(text) // 3) * 3)
    return text.ljust(length, "0")


def split_components(text: str) -> Components:
    """Split a string whose length is a multiple of three into three equal parts."""
    size = len(text) // 3
    return text[:size], text[size:2 * size], text[2 * size:]


def keep_last(components: Components, size: int = LEGACY_MAX_COMPONENT) -> Components:
    """Keep the last ``size`` characters of each component when they are longer."""
    if len(components[0]) <= size:
        return components
    r, g, b = (c[-size:] for c in components)
    return r, g, b


def strip_common_zeros(components: Components) -> Components:
    """Drop leading ``'0'`` from all components at once while they all start with one and exceed two characters."""
    while len(components[0]) > 2 and all(c.startswith("0") for c in components):
        r, g, b = (c[1:] for c in components)
        components = r, g, b
    return components


def keep_first(components: Components, size: int = 2) -> Components:
    if len(components[0]) <= size:
        return components
    r, g, b = (c[:size] for c in components)
    return r, g, b


def legacy_components(text: str) -> Components:
    """
    Reduce arbitrary text to three hex components of one or two digits.

    This is the mechanical part of the algorithm, applied after the keyword
    and ``#rgb`` shortcuts.
    """
    text = replace_astral(text)
    text = truncate(text)
    text = drop_hash(text)
    text = replace_non_hex(text)
    text = pad_to_triplet(text)
    components = split_components(text)
    components = keep_last(components)
    components = strip_common_zeros(components)
    return keep_first(components)


def parse_legacy(text: str) -> Optional[Color]:
    """
    Parse a legacy (HTML attribute) color value.

    Returns:
        A fully opaque Color, or None for the empty string and for
        "transparent" (any case). None here is not the same as a transparent
        black color.
    """
    if require_text(text) == "":
        return None
    text = text.strip(HTML_WHITESPACE)
    if text.lower() == "transparent":
        return None

    keyword = lookup_keyword(text, EXTENDED_COLORS)
    if keyword is not None:
        return parse_hex6(keyword)

    hex3 = parse_hex3(text)
    if hex3 is not None:
        return hex3

    r, g, b = legacy_components(text)
    return Color(int(r, 16), int(g, 16), int(b, 16))
