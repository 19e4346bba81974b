"""
Chromaparse Color Model Conversions
===================================

Numeric helpers and conversions between the RGB, HSL and HSV color models,
with scalar and vectorized (numpy) implementations.

Conventions
-----------
- RGB channels are in [0, 255]
- Hue is in degrees; any value is accepted and reduced modulo 360
- Saturation, lightness and value are percentages in [0, 100]
- Conversions to RGB return unrounded floats; ``Color`` rounds and clamps

Conversion Functions
-------------------

HSL → RGB:
    hsl_to_rgb(h, s, l)
    np_hsl_to_rgb(h, s, l)

HSV → HSL → RGB:
    hsv_to_hsl(h, s, v)
    hsv_to_rgb(h, s, v)
    np_hsv_to_hsl(h, s, v)
    np_hsv_to_rgb(h, s, v)

RGB → HSL / HSV:
    rgb_to_hsl(r, g, b)
    rgb_to_hsv(r, g, b)
    np_rgb_to_hsl(r, g, b)
    np_rgb_to_hsv(r, g, b)
    hsl_to_hsv(h, s, l)

Numbers:
    clamp_byte, clamp_unit, mod, normalize_angle, bound01,
    parse_channel_token, parse_angle_token

Examples
--------
>>> from chromaparse.conversions import hsl_to_rgb
>>> hsl_to_rgb(120, 100, 50)
(0.0, 255.0, 0.0)
>>> hsl_to_rgb(0, 0, 75)  # zero saturation is always black
(0.0, 0.0, 0.0)
"""

from .numbers import (
    clamp_byte,
    clamp_unit,
    mod,
    normalize_hue,
    normalize_angle,
    bound01,
    parse_channel_token,
    parse_angle_token,
)

# HSL / HSV → RGB
from .to_rgb import (
    hsl_to_rgb,
    np_hsl_to_rgb,
    hsv_to_hsl,
    np_hsv_to_hsl,
    hsv_to_rgb,
    np_hsv_to_rgb,
)

# RGB → HSL / HSV
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_hsv import rgb_to_hsv, np_rgb_to_hsv, hsl_to_hsv

__all__ = [
    # Numbers
    'clamp_byte',
    'clamp_unit',
    'mod',
    'normalize_hue',
    'normalize_angle',
    'bound01',
    'parse_channel_token',
    'parse_angle_token',

    # → RGB
    'hsl_to_rgb',
    'np_hsl_to_rgb',
    'hsv_to_hsl',
    'np_hsv_to_hsl',
    'hsv_to_rgb',
    'np_hsv_to_rgb',

    # RGB →
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'rgb_to_hsv',
    'np_rgb_to_hsv',
    'hsl_to_hsv',
]
