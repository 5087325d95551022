from typing import Iterable

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBType


def _expand_hex(hex_str: str) -> str:
    digits = hex_str.lower().lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return digits


def hex_to_rgb(hex_str: str) -> RGBType:
    """
    Convert a hex color to an RGB triple.

    Shorthand ``#abc`` is expanded to ``#aabbcc`` first. Only 3- and 6-digit
    forms (``#`` optional) are supported; validate with ``is_valid_hex`` before
    calling with untrusted input.

    Args:
        hex_str: e.g. ``"#ffffff"`` or ``"#fff"``
    Returns:
        (r, g, b) with each channel in [0, 255]
    """
    digits = _expand_hex(hex_str)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: RGBType) -> str:
    """
    Convert an RGB triple to a lowercase ``#rrggbb`` string.

    Channels are not range-checked; out-of-range input yields the arithmetic
    result of packing the channels into a 24-bit integer.
    """
    r, g, b = (int(c) for c in rgb)
    return "#" + format((1 << 24) + (r << 16) + (g << 8) + b, "x")[1:]


def np_hex_to_rgb(hex_strs: Iterable[str]) -> NDArray:
    """Vectorized hex_to_rgb: returns an integer array of shape (n, 3)."""
    digits = [_expand_hex(h) for h in hex_strs]
    packed = np.array([int(d, 16) for d in digits], dtype=np.int64)
    return np.stack([(packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF], axis=-1)


def np_rgb_to_hex(rgb: NDArray) -> NDArray:
    """Vectorized rgb_to_hex over an array of shape (..., 3); returns an array of str."""
    rgb = np.asarray(rgb).astype(np.int64)
    packed = (1 << 24) + (rgb[..., 0] << 16) + (rgb[..., 1] << 8) + rgb[..., 2]
    to_hex = np.vectorize(lambda v: "#" + format(int(v), "x")[1:], otypes=[object])
    return to_hex(packed).astype(str)
