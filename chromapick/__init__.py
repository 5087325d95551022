"""
Chromapick - color picker toolkit
=================================

Keeps one color in sync across hex, RGB, HSV and HSL, and models CSS linear
gradients as sorted color stops plus a direction.

Quick Start
-----------
>>> from chromapick import hex_to_rgb, rgb_to_hsv, GradientColor, parse_gradient_string
>>> hex_to_rgb("#fff")
(255, 255, 255)
>>> g = GradientColor(stops=[("#000", "100%"), ("#fff", "0%")])
>>> str(g)
'linear-gradient(90deg,#fff 0%,#000 100%)'
>>> parse_gradient_string(str(g)) == g
True

Modules
-------
- conversions: hex / RGB / HSV / HSL conversion functions, scalar and numpy
- gradients: GradientColor, GradientStop and the gradient string parser
- utils: clamp, hex validation, debounce
- state: ColorPickState shared by picker widgets
"""

from .types import RGBType, HSVType, HSLType, ColorSpace, PickColorType
from .conversions import (
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsv,
    rgb_to_hsl,
    hsv_to_rgb,
    hsl_to_rgb,
    hsv_to_hsl,
    hsl_to_hsv,
    np_hex_to_rgb,
    np_rgb_to_hex,
    np_rgb_to_hsv,
    np_rgb_to_hsl,
    np_hsv_to_rgb,
    np_hsl_to_rgb,
    np_hsv_to_hsl,
    np_hsl_to_hsv,
    convert,
)
from .gradients import (
    GradientColor,
    GradientStop,
    DirectionMode,
    GradientParseError,
    parse_gradient_string,
)
from .utils import clamp, is_valid_hex, debounce, Debounced
from .state import ColorPickState

__version__ = "0.1.0"

__all__ = [
    # types
    "RGBType",
    "HSVType",
    "HSLType",
    "ColorSpace",
    "PickColorType",
    # conversions
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsv",
    "rgb_to_hsl",
    "hsv_to_rgb",
    "hsl_to_rgb",
    "hsv_to_hsl",
    "hsl_to_hsv",
    "np_hex_to_rgb",
    "np_rgb_to_hex",
    "np_rgb_to_hsv",
    "np_rgb_to_hsl",
    "np_hsv_to_rgb",
    "np_hsl_to_rgb",
    "np_hsv_to_hsl",
    "np_hsl_to_hsv",
    "convert",
    # gradients
    "GradientColor",
    "GradientStop",
    "DirectionMode",
    "GradientParseError",
    "parse_gradient_string",
    # utilities
    "clamp",
    "is_valid_hex",
    "debounce",
    "Debounced",
    # editor state
    "ColorPickState",
    "__version__",
]
