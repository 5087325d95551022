"""
Gradient Color Model
====================

``GradientColor`` holds a direction and color stops kept sorted by position,
and serializes to a CSS ``linear-gradient(...)`` string that
``parse_gradient_string`` reads back.
"""

from .stop import GradientStop, as_stop
from .gradient_color import (
    GradientColor,
    DirectionMode,
    DEFAULT_DIRECTION,
    DEFAULT_STOPS,
    GRADIENT_PREFIX,
)
from .parser import parse_gradient_string, split_top_level, GradientParseError

__all__ = [
    "GradientStop",
    "as_stop",
    "GradientColor",
    "DirectionMode",
    "DEFAULT_DIRECTION",
    "DEFAULT_STOPS",
    "GRADIENT_PREFIX",
    "parse_gradient_string",
    "split_top_level",
    "GradientParseError",
]
