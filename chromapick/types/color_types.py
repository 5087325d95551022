from __future__ import annotations
from enum import Enum, IntEnum
from typing import Tuple

# r, g, b in [0, 255]
RGBType = Tuple[int, int, int]
# h, s, v in [0, 1]
HSVType = Tuple[float, float, float]
# h, s, l in [0, 1]
HSLType = Tuple[float, float, float]


class ColorSpace(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSV = "hsv"
    HSL = "hsl"


class PickColorType(IntEnum):
    """Editing mode of a picker: a flat color, a gradient, or an image fill."""
    COLOR = 0
    GRADIENT_COLOR = 1
    IMAGE = 2


def to_color_space(value: ColorSpace | str) -> ColorSpace:
    """
    Resolve a color space name (case-insensitive) to its enum member.

    Args:
        value: Enum member or name such as ``"RGB"`` or ``"hsl"``
    Returns:
        The matching ColorSpace
    Raises:
        ValueError: if the name is not a supported color space
    """
    if isinstance(value, ColorSpace):
        return value
    try:
        return ColorSpace(value.lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {value!r}") from None
