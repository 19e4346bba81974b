import numpy as np
from numpy import ndarray as NDArray

from ..types.compat_level import BYTE_MAX, HUE_360, PERCENT_MAX

## RGB to HSL conversions


def rgb_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """Hue in degrees [0, 360) shared by the HSL and HSV conversions."""
    if delta == 0:
        return 0.0
    if max_c == r:
        return (60 * ((g - b) / delta) + HUE_360) % HUE_360
    if max_c == g:
        return (60 * ((b - r) / delta) + 120) % HUE_360
    return (60 * ((r - g) / delta) + 240) % HUE_360


def np_rgb_hue(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, delta: NDArray) -> NDArray:
    """Vectorized twin of :func:`rgb_hue`."""
    hue = np.zeros_like(max_c)
    mask = delta > 0
    mask_r = mask & (max_c == r)
    mask_g = mask & (max_c == g) & ~mask_r
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = (60 * ((g[mask_r] - b[mask_r]) / delta[mask_r]) + HUE_360) % HUE_360
    hue[mask_g] = (60 * ((b[mask_g] - r[mask_g]) / delta[mask_g]) + 120) % HUE_360
    hue[mask_b] = (60 * ((r[mask_b] - g[mask_b]) / delta[mask_b]) + 240) % HUE_360
    return hue


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB channels to HSL.

    Args:
        r: Red component in [0, 255]
        g: Green component in [0, 255]
        b: Blue component in [0, 255]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,100], lightness [0,100])
    """
    r, g, b = r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        saturation = 0.0
    else:
        saturation = delta / (1 - abs(2 * lightness - 1))

    hue = rgb_hue(r, g, b, max_c, delta)
    return hue, saturation * PERCENT_MAX, lightness * PERCENT_MAX


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB channels to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,100], lightness [0,100])
    """
    r = np.asarray(r, dtype=float) / BYTE_MAX
    g = np.asarray(g, dtype=float) / BYTE_MAX
    b = np.asarray(b, dtype=float) / BYTE_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.asarray(np.maximum.reduce([r, g, b]))
    min_c = np.asarray(np.minimum.reduce([r, g, b]))
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros_like(lightness)
    mask_delta = delta > 0
    saturation[mask_delta] = delta[mask_delta] / (1 - np.abs(2 * lightness[mask_delta] - 1))

    hue = np_rgb_hue(r, g, b, max_c, delta)
    return np.stack([hue, saturation * PERCENT_MAX, lightness * PERCENT_MAX], axis=-1)
