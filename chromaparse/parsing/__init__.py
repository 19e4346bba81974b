"""
Chromaparse Parsers
===================

Strict parsers (``parse_hex6``, ``parse_hex3``, ``parse_functional``,
``parse_color``) report None when the text does not fit their grammar.
``parse_legacy`` implements the permissive HTML legacy color algorithm and
only gives None for the empty string and "transparent".
``parse_at_compatibility_level`` applies the rules of a given standard.

>>> from chromaparse.parsing import parse_legacy, parse_functional
>>> parse_legacy("chucknorris").to_hex_string()
'#c00000'
>>> parse_functional("hsl(120, 100%, 50%)").to_hex_string()
'#00ff00'
"""

from .keywords import BASIC_COLORS, EXTENDED_COLORS, SYSTEM_COLORS, lookup_keyword, is_system_color
from .matchers import FunctionMatch, match_hex3, match_hex6, match_function, infer_format
from .strict import FUNCTION_NAMES, parse_hex6, parse_hex3, parse_functional, parse_rgb_string, parse_color
from .legacy import parse_legacy, legacy_components
from .levels import (
    parse_html4,
    parse_css1,
    parse_css2,
    parse_css2_1,
    parse_css3,
    resolve_level,
    parse_at_compatibility_level,
)

__all__ = [
    # keywords
    "BASIC_COLORS",
    "EXTENDED_COLORS",
    "SYSTEM_COLORS",
    "lookup_keyword",
    "is_system_color",
    # grammar matcher
    "FunctionMatch",
    "match_hex3",
    "match_hex6",
    "match_function",
    "infer_format",
    # strict
    "FUNCTION_NAMES",
    "parse_hex6",
    "parse_hex3",
    "parse_functional",
    "parse_rgb_string",
    "parse_color",
    # legacy
    "parse_legacy",
    "legacy_components",
    # levels
    "parse_html4",
    "parse_css1",
    "parse_css2",
    "parse_css2_1",
    "parse_css3",
    "resolve_level",
    "parse_at_compatibility_level",
]
