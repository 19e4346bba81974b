import numpy as np
from numpy import ndarray as NDArray

from .numbers import bound01
from .to_hsl import rgb_hue, np_rgb_hue
from ..types.compat_level import BYTE_MAX, PERCENT_MAX


def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB channels in [0, 255] to HSV.

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,100], value [0,100])
    """
    r, g, b = r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX
    value = max(r, g, b)
    delta = value - min(r, g, b)

    saturation = 0.0 if value == 0 else delta / value
    hue = rgb_hue(r, g, b, value, delta)
    return hue, saturation * PERCENT_MAX, value * PERCENT_MAX


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert RGB channels in [0, 255] to HSV (percent)."""
    r = np.asarray(r, dtype=float) / BYTE_MAX
    g = np.asarray(g, dtype=float) / BYTE_MAX
    b = np.asarray(b, dtype=float) / BYTE_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    value = np.asarray(np.maximum.reduce([r, g, b]))
    delta = value - np.minimum.reduce([r, g, b])

    saturation = np.zeros_like(value)
    mask = value > 0
    saturation[mask] = delta[mask] / value[mask]

    hue = np_rgb_hue(r, g, b, value, delta)
    return np.stack([hue, saturation * PERCENT_MAX, value * PERCENT_MAX], axis=-1)


def hsl_to_hsv(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HSL to HSV, saturation/lightness/value in percent."""
    s = bound01(s, PERCENT_MAX)
    l = bound01(l, PERCENT_MAX)

    v = l + s * min(l, 1 - l)
    sv = 0.0 if v == 0 else 2 * (1 - l / v)
    return h, sv * PERCENT_MAX, v * PERCENT_MAX
