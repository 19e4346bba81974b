from __future__ import annotations
import math
from numbers import Integral, Real
from typing import Any, Dict, Tuple

import numpy as np
from numpy import ndarray

from ..conversions import clamp_byte, clamp_unit, hsl_to_rgb, hsv_to_rgb, rgb_to_hsl, rgb_to_hsv
from ..types.color_types import RGBATuple, Scalar
from . import formatting


def _check_channel(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"Color channel {name} must be a real number, got {type(value).__name__}")
    if not isinstance(value, Integral) and math.isnan(value):
        raise ValueError(f"Color channel {name} must not be NaN")


class Color:
    """
    An immutable sRGB color with alpha.

    ``r``, ``g`` and ``b`` are integers in [0, 255], rounded (halves up) and
    clamped on construction. ``a`` is a float clamped to [0, 1] and never
    rounded. Two colors are equal when all four channels are equal.
    """

    __slots__ = ('_r', '_g', '_b', '_a', '_is_frozen')  # prevents adding new attributes → immutability

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, r: Scalar, g: Scalar, b: Scalar, a: Scalar = 1) -> None:
        for name, value in (("r", r), ("g", g), ("b", b), ("a", a)):
            _check_channel(name, value)

        self._r = clamp_byte(r)
        self._g = clamp_byte(g)
        self._b = clamp_byte(b)
        self._a = clamp_unit(a)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> int:
        return self._r

    @property
    def g(self) -> int:
        return self._g

    @property
    def b(self) -> int:
        return self._b

    @property
    def a(self) -> float:
        return self._a

    @property
    def is_opaque(self) -> bool:
        return self._a == 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return f"Color(r={self._r}, g={self._g}, b={self._b}, a={formatting.format_alpha(self._a)})"

    def __str__(self) -> str:
        if self._a == 1:
            return self.to_hex_string()
        if self._a == 0:
            return 'transparent'
        return self.to_rgba_string()

    # ------------------ DERIVED REPRESENTATIONS ------------------
    def as_tuple(self) -> RGBATuple:
        return self._r, self._g, self._b, self._a

    def to_dict(self) -> Dict[str, Scalar]:
        return {'r': self._r, 'g': self._g, 'b': self._b, 'a': self._a}

    def to_array(self) -> ndarray:
        """Channels as a float array ``[r, g, b, a]``."""
        return np.array(self.as_tuple(), dtype=float)

    def to_hex_string(self, shorten: bool = False) -> str:
        return formatting.to_hex_string(self, shorten)

    def to_rgb_string(self) -> str:
        return formatting.to_rgb_string(self)

    def to_rgba_string(self) -> str:
        return formatting.to_rgba_string(self)

    def to_hsl(self) -> Tuple[float, float, float]:
        """(hue [0,360), saturation [0,100], lightness [0,100]); alpha is dropped."""
        return rgb_to_hsl(self._r, self._g, self._b)

    def to_hsv(self) -> Tuple[float, float, float]:
        """(hue [0,360), saturation [0,100], value [0,100]); alpha is dropped."""
        return rgb_to_hsv(self._r, self._g, self._b)

    def with_alpha(self, alpha: Scalar) -> Color:
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value, clamped to [0, 1].

        Returns:
            New color instance with updated alpha.
        """
        return Color(self._r, self._g, self._b, alpha)


def from_rgb(r: Scalar, g: Scalar, b: Scalar, a: Scalar = 1) -> Color:
    """Build a color from RGB channels in [0, 255] (rounded and clamped)."""
    return Color(r, g, b, a)


def from_hsl(h: Scalar, s: Scalar, l: Scalar, a: Scalar = 1) -> Color:
    """
    Build a color from HSL.

    Args:
        h: Hue in degrees, reduced modulo 360 (negative values wrap)
        s: Saturation in [0, 100]
        l: Lightness in [0, 100]
        a: Alpha in [0, 1]
    """
    return Color(*hsl_to_rgb(h, s, l), a)


def from_hsv(h: Scalar, s: Scalar, v: Scalar, a: Scalar = 1) -> Color:
    """Build a color from HSV (percent saturation/value) by way of HSL."""
    return Color(*hsv_to_rgb(h, s, v), a)
