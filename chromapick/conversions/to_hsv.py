import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBType, HSVType, HSLType


def sector_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """
    Hue in [0, 1) from unit RGB channels using the max-channel sector rule.

    Callers must ensure ``delta = max_c - min_c`` is non-zero.
    """
    if max_c == r:
        h = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return h / 6


def np_sector_hue(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, delta: NDArray) -> NDArray:
    """Vectorized sector_hue; achromatic entries (delta == 0) get hue 0."""
    safe_delta = np.where(delta == 0, 1.0, delta)
    h = np.where(
        max_c == r,
        (g - b) / safe_delta + np.where(g < b, 6.0, 0.0),
        np.where(
            max_c == g,
            (b - r) / safe_delta + 2.0,
            (r - g) / safe_delta + 4.0,
        ),
    )
    return np.where(delta == 0, 0.0, h / 6.0)


def rgb_to_hsv(rgb: RGBType) -> HSVType:
    """
    Convert an RGB triple to HSV.

    Args:
        rgb: (r, g, b) with channels in [0, 255]
    Returns:
        (h, s, v) each in [0, 1]; hue is 0 for achromatic colors and
        saturation is 0 for black
    """
    r, g, b = (c / 255 for c in rgb)
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    h = 0.0
    s = 0.0 if max_c == 0 else delta / max_c
    if max_c != min_c:
        h = sector_hue(r, g, b, max_c, delta)
    return h, s, max_c


def np_rgb_to_hsv(rgb: NDArray) -> NDArray:
    """
    Vectorized rgb_to_hsv.

    Args:
        rgb: array of shape (..., 3) with channels in [0, 255]
    Returns:
        array of shape (..., 3): (hue, saturation, value) in [0, 1]
    """
    unit = np.asarray(rgb, dtype=float) / 255.0
    r, g, b = unit[..., 0], unit[..., 1], unit[..., 2]
    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    s = np.where(max_c == 0, 0.0, delta / np.where(max_c == 0, 1.0, max_c))
    h = np_sector_hue(r, g, b, max_c, delta)
    return np.stack([h, s, max_c], axis=-1)


def hsl_to_hsv(hsl: HSLType) -> HSVType:
    """Convert HSL to HSV directly; hue is carried over unchanged."""
    h, s, l = hsl
    v = l + s * min(l, 1 - l)
    sv = 0.0 if v == 0 else 2 * (1 - l / v)
    return h, sv, v


def np_hsl_to_hsv(hsl: NDArray) -> NDArray:
    hsl = np.asarray(hsl, dtype=float)
    h, s, l = hsl[..., 0], hsl[..., 1], hsl[..., 2]
    v = l + s * np.minimum(l, 1 - l)
    sv = np.where(v == 0, 0.0, 2 * (1 - l / np.where(v == 0, 1.0, v)))
    return np.stack([h, sv, v], axis=-1)
