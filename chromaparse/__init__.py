"""Chromaparse: color text parsing and RGB/HSL/HSV conversion."""

from .colors import (
    Color,
    from_rgb,
    from_hsl,
    from_hsv,
    shorten_hex,
    to_hex_string,
    to_rgb_string,
    to_rgba_string,
)
from .parsing import (
    BASIC_COLORS,
    EXTENDED_COLORS,
    SYSTEM_COLORS,
    lookup_keyword,
    is_system_color,
    FunctionMatch,
    match_function,
    infer_format,
    parse_hex6,
    parse_hex3,
    parse_functional,
    parse_rgb_string,
    parse_color,
    parse_legacy,
    parse_at_compatibility_level,
)
from .conversions import (
    hsl_to_rgb,
    hsv_to_hsl,
    hsv_to_rgb,
    rgb_to_hsl,
    rgb_to_hsv,
    hsl_to_hsv,
    np_hsl_to_rgb,
    np_hsv_to_hsl,
    np_hsv_to_rgb,
    np_rgb_to_hsl,
    np_rgb_to_hsv,
)
from .types.compat_level import CompatibilityLevel

__version__ = "1.0.0"

__all__ = [
    # color value
    "Color",
    "from_rgb",
    "from_hsl",
    "from_hsv",
    # output
    "shorten_hex",
    "to_hex_string",
    "to_rgb_string",
    "to_rgba_string",
    # keywords
    "BASIC_COLORS",
    "EXTENDED_COLORS",
    "SYSTEM_COLORS",
    "lookup_keyword",
    "is_system_color",
    # parsing
    "FunctionMatch",
    "match_function",
    "infer_format",
    "parse_hex6",
    "parse_hex3",
    "parse_functional",
    "parse_rgb_string",
    "parse_color",
    "parse_legacy",
    "parse_at_compatibility_level",
    "CompatibilityLevel",
    # conversions
    "hsl_to_rgb",
    "hsv_to_hsl",
    "hsv_to_rgb",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "hsl_to_hsv",
    "np_hsl_to_rgb",
    "np_hsv_to_hsl",
    "np_hsv_to_rgb",
    "np_rgb_to_hsl",
    "np_rgb_to_hsv",
    "__version__",
]
