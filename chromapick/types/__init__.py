from .color_types import (
    RGBType,
    HSVType,
    HSLType,
    ColorSpace,
    PickColorType,
    to_color_space,
)

__all__ = [
    "RGBType",
    "HSVType",
    "HSLType",
    "ColorSpace",
    "PickColorType",
    "to_color_space",
]
