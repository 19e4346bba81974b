import numpy as np
from numpy import ndarray as NDArray

from .numbers import bound01, normalize_angle
from ..types.compat_level import BYTE_MAX, HUE_360, PERCENT_MAX

## HSL to RGB conversions
# https://www.w3.org/TR/2011/REC-css3-color-20110607/#hsl-color


def _hue_to_channel(m1: float, m2: float, h: float) -> float:
    if h < 0:
        h += 1
    if h > 1:
        h -= 1
    if h * 6 < 1:
        return m1 + (m2 - m1) * h * 6
    if h * 2 < 1:
        return m2
    if h * 3 < 2:
        return m1 + (m2 - m1) * (2 / 3 - h) * 6
    return m1


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB with the CSS3 reference algorithm.

    A saturation of zero always gives black, whatever the lightness. Results
    are neither rounded nor clamped; ``Color`` does that on construction.

    Args:
        h: Hue in degrees, any value (reduced modulo 360)
        s: Saturation in [0, 100]
        l: Lightness in [0, 100]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 255]
    """
    h = normalize_angle(h)
    s = bound01(s, PERCENT_MAX)
    l = bound01(l, PERCENT_MAX)

    if s == 0:
        return 0.0, 0.0, 0.0

    m2 = l * (s + 1) if l <= 0.5 else l + s - l * s
    m1 = l * 2 - m2

    return (
        BYTE_MAX * _hue_to_channel(m1, m2, h + 1 / 3),
        BYTE_MAX * _hue_to_channel(m1, m2, h),
        BYTE_MAX * _hue_to_channel(m1, m2, h - 1 / 3),
    )


def _np_hue_to_channel(m1: NDArray, m2: NDArray, h: NDArray) -> NDArray:
    h = np.where(h < 0, h + 1, h)
    h = np.where(h > 1, h - 1, h)
    return np.select(
        [h * 6 < 1, h * 2 < 1, h * 3 < 2],
        [m1 + (m2 - m1) * h * 6, m2, m1 + (m2 - m1) * (2 / 3 - h) * 6],
        default=m1,
    )


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB with the CSS3 reference algorithm.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 100]
        l: array-like or scalar, lightness in [0, 100]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 255]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(np.clip(s, 0, PERCENT_MAX) / PERCENT_MAX, out_shape)
    l = np.broadcast_to(np.clip(l, 0, PERCENT_MAX) / PERCENT_MAX, out_shape)

    h = ((h % HUE_360) + HUE_360) % HUE_360 / HUE_360

    m2 = np.where(l <= 0.5, l * (s + 1), l + s - l * s)
    m1 = l * 2 - m2

    rgb = np.stack([
        _np_hue_to_channel(m1, m2, h + 1 / 3),
        _np_hue_to_channel(m1, m2, h),
        _np_hue_to_channel(m1, m2, h - 1 / 3),
    ], axis=-1) * BYTE_MAX

    rgb[s == 0] = 0.0
    return rgb


## HSV to HSL / RGB conversions
# https://gist.github.com/voxpelli/1069204


def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to HSL, both with saturation/value/lightness in percent.

    Returns:
        Tuple[float, float, float]: (hue, saturation [0,100], lightness [0,100])
    """
    s = bound01(s, PERCENT_MAX)
    v = bound01(v, PERCENT_MAX)

    s2 = s * v
    l2 = (2 - s) * v

    if l2 == 2 or l2 == 0:
        s2 = 0.0
    else:
        s2 /= l2 if l2 < 1 else 2 - l2
    l2 /= 2

    return h, s2 * PERCENT_MAX, l2 * PERCENT_MAX


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: Convert HSV to HSL (percent in, percent out)."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(np.clip(s, 0, PERCENT_MAX) / PERCENT_MAX, out_shape)
    v = np.broadcast_to(np.clip(v, 0, PERCENT_MAX) / PERCENT_MAX, out_shape)

    s2 = s * v
    l2 = (2 - s) * v

    divisor = np.where(l2 < 1, l2, 2 - l2)
    degenerate = (l2 == 2) | (l2 == 0)
    safe = np.where(degenerate, 1.0, divisor)
    s2 = np.where(degenerate, 0.0, s2 / safe)

    return np.stack([h, s2 * PERCENT_MAX, l2 / 2 * PERCENT_MAX], axis=-1)


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert HSV (percent saturation/value) to RGB in [0, 255] by way of HSL."""
    return hsl_to_rgb(*hsv_to_hsl(h, s, v))


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: Convert HSV to RGB in [0, 255] by way of HSL."""
    hsl = np_hsv_to_hsl(h, s, v)
    return np_hsl_to_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2])
