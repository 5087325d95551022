"""
Chromapick Color Conversions
============================

Pure functions converting a single color between hex, RGB, HSV and HSL, plus
numpy-vectorized variants for batches.

Value ranges
------------
- hex: ``#rgb`` or ``#rrggbb`` (case-insensitive, ``#`` optional on input),
  always ``#rrggbb`` lowercase on output
- rgb: integers in [0, 255]
- hsv / hsl: floats in [0, 1], hue included

Inputs are not clamped; out-of-range values propagate arithmetically.

Conversion Functions
--------------------
Hex <-> RGB:
    hex_to_rgb(hex), rgb_to_hex(rgb)
    np_hex_to_rgb(hexes), np_rgb_to_hex(rgb_array)

RGB -> HSV / HSL:
    rgb_to_hsv(rgb), rgb_to_hsl(rgb)
    np_rgb_to_hsv(rgb_array), np_rgb_to_hsl(rgb_array)

HSV / HSL -> RGB:
    hsv_to_rgb(hsv), hsl_to_rgb(hsl)
    np_hsv_to_rgb(hsv_array), np_hsl_to_rgb(hsl_array)

HSV <-> HSL:
    hsv_to_hsl(hsv), hsl_to_hsv(hsl)
    np_hsv_to_hsl(hsv_array), np_hsl_to_hsv(hsl_array)

High-Level API
--------------
    convert(color, from_space, to_space)

Examples
--------
>>> from chromapick.conversions import hex_to_rgb, rgb_to_hsv, hsv_to_rgb
>>> hex_to_rgb("#f80")
(255, 136, 0)
>>> hsv_to_rgb(rgb_to_hsv((255, 136, 0)))
(255, 136, 0)
"""

# Hex <-> RGB
from .hex import hex_to_rgb, rgb_to_hex, np_hex_to_rgb, np_rgb_to_hex

# RGB -> HSV, HSL -> HSV
from .to_hsv import rgb_to_hsv, np_rgb_to_hsv, hsl_to_hsv, np_hsl_to_hsv

# RGB -> HSL, HSV -> HSL
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl, hsv_to_hsl, np_hsv_to_hsl

# HSV / HSL -> RGB
from .to_rgb import hsv_to_rgb, np_hsv_to_rgb, hsl_to_rgb, np_hsl_to_rgb, hue_to_channel

# High-level API
from .wrapper import convert

__all__ = [
    # Hex <-> RGB
    'hex_to_rgb',
    'rgb_to_hex',
    'np_hex_to_rgb',
    'np_rgb_to_hex',

    # RGB -> HSV / HSL
    'rgb_to_hsv',
    'np_rgb_to_hsv',
    'rgb_to_hsl',
    'np_rgb_to_hsl',

    # HSV / HSL -> RGB
    'hsv_to_rgb',
    'np_hsv_to_rgb',
    'hsl_to_rgb',
    'np_hsl_to_rgb',
    'hue_to_channel',

    # HSV <-> HSL
    'hsv_to_hsl',
    'hsl_to_hsv',
    'np_hsv_to_hsl',
    'np_hsl_to_hsv',

    # High-level API
    'convert',
]
