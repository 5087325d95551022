import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBType, HSVType, HSLType
from .to_hsv import sector_hue, np_sector_hue


def rgb_to_hsl(rgb: RGBType) -> HSLType:
    """
    Convert an RGB triple to HSL.

    Lightness is the mid-range of the unit channels. The saturation formula
    switches on ``l > 0.5`` so the denominator never approaches zero for
    near-white colors.

    Args:
        rgb: (r, g, b) with channels in [0, 255]
    Returns:
        (h, s, l) each in [0, 1]
    """
    r, g, b = (c / 255 for c in rgb)
    max_c = max(r, g, b)
    min_c = min(r, g, b)

    h = s = 0.0
    l = (max_c + min_c) / 2
    if max_c != min_c:
        delta = max_c - min_c
        s = delta / (2 - max_c - min_c) if l > 0.5 else delta / (max_c + min_c)
        h = sector_hue(r, g, b, max_c, delta)
    return h, s, l


def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized rgb_to_hsl.

    Args:
        rgb: array of shape (..., 3) with channels in [0, 255]
    Returns:
        array of shape (..., 3): (hue, saturation, lightness) in [0, 1]
    """
    unit = np.asarray(rgb, dtype=float) / 255.0
    r, g, b = unit[..., 0], unit[..., 1], unit[..., 2]
    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c
    l = (max_c + min_c) / 2

    denom = np.where(l > 0.5, 2 - max_c - min_c, max_c + min_c)
    s = np.where(delta == 0, 0.0, delta / np.where(delta == 0, 1.0, denom))
    h = np_sector_hue(r, g, b, max_c, delta)
    return np.stack([h, s, l], axis=-1)


def hsv_to_hsl(hsv: HSVType) -> HSLType:
    """Convert HSV to HSL directly; hue is carried over unchanged."""
    h, s, v = hsv
    l = v * (1 - s / 2)
    sl = 0.0 if l in (0, 1) else (v - l) / min(l, 1 - l)
    return h, sl, l


def np_hsv_to_hsl(hsv: NDArray) -> NDArray:
    hsv = np.asarray(hsv, dtype=float)
    h, s, v = hsv[..., 0], hsv[..., 1], hsv[..., 2]
    l = v * (1 - s / 2)
    edge = (l == 0) | (l == 1)
    denom = np.where(edge, 1.0, np.minimum(l, 1 - l))
    sl = np.where(edge, 0.0, (v - l) / denom)
    return np.stack([h, sl, l], axis=-1)
