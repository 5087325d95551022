from typing import Callable, Dict, Tuple, Union

from ..types.color_types import ColorSpace, RGBType, to_color_space
from .hex import hex_to_rgb, rgb_to_hex
from .to_hsv import rgb_to_hsv, hsl_to_hsv
from .to_hsl import rgb_to_hsl, hsv_to_hsl
from .to_rgb import hsv_to_rgb, hsl_to_rgb

ColorValue = Union[str, Tuple[float, float, float]]

TO_RGB: Dict[ColorSpace, Callable[..., RGBType]] = {
    ColorSpace.HEX: hex_to_rgb,
    ColorSpace.RGB: lambda rgb: tuple(rgb),
    ColorSpace.HSV: hsv_to_rgb,
    ColorSpace.HSL: hsl_to_rgb,
}

FROM_RGB: Dict[ColorSpace, Callable[[RGBType], ColorValue]] = {
    ColorSpace.HEX: rgb_to_hex,
    ColorSpace.RGB: lambda rgb: tuple(rgb),
    ColorSpace.HSV: rgb_to_hsv,
    ColorSpace.HSL: rgb_to_hsl,
}

# Hue-preserving shortcuts that skip the integer RGB round trip
CONVERT_DIRECT: Dict[Tuple[ColorSpace, ColorSpace], Callable[..., ColorValue]] = {
    (ColorSpace.HSV, ColorSpace.HSL): hsv_to_hsl,
    (ColorSpace.HSL, ColorSpace.HSV): hsl_to_hsv,
}


def convert(
    color: ColorValue,
    from_space: Union[ColorSpace, str],
    to_space: Union[ColorSpace, str],
) -> ColorValue:
    """
    Convert a color between any two of hex, rgb, hsv and hsl.

    Everything except the HSV <-> HSL pair goes through integer RGB.

    Args:
        color: hex string or 3-tuple in ``from_space``
        from_space: source space name or ColorSpace
        to_space: target space name or ColorSpace
    Returns:
        The color expressed in ``to_space``
    Raises:
        ValueError: if either space is unknown
    """
    fs = to_color_space(from_space)
    ts = to_color_space(to_space)
    if fs == ts:
        return color if isinstance(color, str) else tuple(color)

    direct = CONVERT_DIRECT.get((fs, ts))
    if direct is not None:
        return direct(color)
    return FROM_RGB[ts](TO_RGB[fs](color))
