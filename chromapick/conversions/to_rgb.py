import math

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBType, HSVType, HSLType
from ..utils.num_utils import round_half_up, np_round_half_up


def hsv_to_rgb(hsv: HSVType) -> RGBType:
    """
    Convert HSV to an RGB triple.

    The hue is split into six sectors; each sector picks the channels from
    the candidates v, p, q, t.

    Args:
        hsv: (h, s, v) each in [0, 1]
    Returns:
        (r, g, b) rounded to the nearest integer, nominally in [0, 255]
    """
    h, s, v = hsv
    h *= 6
    i = math.floor(h)
    f = h - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    mod = i % 6
    r = (v, q, p, p, t, v)[mod]
    g = (t, v, v, q, p, p)[mod]
    b = (p, p, t, v, v, q)[mod]
    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)


def np_hsv_to_rgb(hsv: NDArray) -> NDArray:
    """
    Vectorized hsv_to_rgb.

    Args:
        hsv: array of shape (..., 3) with components in [0, 1]
    Returns:
        integer array of shape (..., 3)
    """
    hsv = np.asarray(hsv, dtype=float)
    h, s, v = hsv[..., 0] * 6, hsv[..., 1], hsv[..., 2]
    i = np.floor(h)
    f = h - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    mod = i.astype(int) % 6

    r = np.choose(mod, [v, q, p, p, t, v])
    g = np.choose(mod, [t, v, v, q, p, p])
    b = np.choose(mod, [p, p, t, v, v, q])
    return np_round_half_up(np.stack([r, g, b], axis=-1) * 255)


def hue_to_channel(p: float, q: float, t: float) -> float:
    """
    Evaluate one RGB channel of an HSL color.

    ``t`` is the hue shifted by the channel's phase; it is wrapped back into
    [0, 1] before the piecewise ramp is applied.
    """
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )


def hsl_to_rgb(hsl: HSLType) -> RGBType:
    """
    Convert HSL to an RGB triple.

    Args:
        hsl: (h, s, l) each in [0, 1]
    Returns:
        (r, g, b) rounded to the nearest integer, nominally in [0, 255]
    """
    h, s, l = hsl
    r = g = b = l
    if s != 0:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_channel(p, q, h + 1 / 3)
        g = hue_to_channel(p, q, h)
        b = hue_to_channel(p, q, h - 1 / 3)
    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)


def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """
    Vectorized hsl_to_rgb.

    Args:
        hsl: array of shape (..., 3) with components in [0, 1]
    Returns:
        integer array of shape (..., 3)
    """
    hsl = np.asarray(hsl, dtype=float)
    h, s, l = hsl[..., 0], hsl[..., 1], hsl[..., 2]
    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    chromatic = s != 0
    r = np.where(chromatic, np_hue_to_channel(p, q, h + 1 / 3), l)
    g = np.where(chromatic, np_hue_to_channel(p, q, h), l)
    b = np.where(chromatic, np_hue_to_channel(p, q, h - 1 / 3), l)
    return np_round_half_up(np.stack([r, g, b], axis=-1) * 255)
