"""
Editor state shared between a color picker and its child widgets.

A ``ColorPickState`` is created once per editor and handed to every widget
that reads or edits the color. The hex, RGB, HSV and HSL views are kept in
sync through the conversion functions; the gradient list and angle back a
``GradientColor``. No locking is done: the state is meant to be driven from
a single UI thread.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .conversions import (
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsv,
    rgb_to_hsl,
    hsv_to_rgb,
    hsl_to_rgb,
    hsv_to_hsl,
    hsl_to_hsv,
)
from .gradients import (
    DEFAULT_STOPS,
    GRADIENT_PREFIX,
    DirectionMode,
    GradientColor,
    GradientStop,
    parse_gradient_string,
)
from .types.color_types import HSLType, HSVType, PickColorType, RGBType
from .utils.color_utils import is_valid_hex

logger = logging.getLogger(__name__)

SIDE_DIRECTIONS = {"to top": 0, "to right": 90, "to bottom": 180, "to left": 270}


@dataclass
class ColorPickState:
    hex: str = "#000000"
    rgb: RGBType = (0, 0, 0)
    hsv: HSVType = (0.0, 0.0, 0.0)
    hsl: HSLType = (0.0, 0.0, 0.0)
    color_alpha: int = 100  # percent
    alpha: bool = False
    disable_fields: bool = False
    type: PickColorType = PickColorType.COLOR
    g_index: int = 0
    g_deg: int = 90
    g_list: List[GradientStop] = field(default_factory=lambda: list(DEFAULT_STOPS))
    direction_mode: DirectionMode = DirectionMode.CLAMP

    @classmethod
    def from_hex(cls, hex_str: str, **kwargs) -> ColorPickState:
        state = cls(**kwargs)
        if not state.set_hex(hex_str):
            raise ValueError(f"Invalid hex color: {hex_str!r}")
        return state

    # ------------------ COLOR VIEWS ------------------
    def set_hex(self, hex_str: str) -> bool:
        """
        Update every view from a hex string.

        Returns False and leaves the state untouched if ``hex_str`` is not a
        valid 3- or 6-digit hex color.
        """
        if not is_valid_hex(hex_str):
            logger.debug(f"Ignoring invalid hex input {hex_str!r}")
            return False
        self._sync(hex_to_rgb(hex_str))
        return True

    def set_rgb(self, rgb: RGBType) -> None:
        self._sync(rgb)

    def set_hsv(self, hsv: HSVType) -> None:
        # Keep the caller's hue and saturation; they are lost in RGB for greys.
        self._sync(hsv_to_rgb(hsv), hsv=tuple(hsv), hsl=hsv_to_hsl(hsv))

    def set_hsl(self, hsl: HSLType) -> None:
        self._sync(hsl_to_rgb(hsl), hsv=hsl_to_hsv(hsl), hsl=tuple(hsl))

    def _sync(
        self,
        rgb: RGBType,
        hsv: Optional[HSVType] = None,
        hsl: Optional[HSLType] = None,
    ) -> None:
        self.rgb = tuple(int(c) for c in rgb)
        self.hex = rgb_to_hex(self.rgb)
        self.hsv = hsv if hsv is not None else rgb_to_hsv(self.rgb)
        self.hsl = hsl if hsl is not None else rgb_to_hsl(self.rgb)
        if self.type == PickColorType.GRADIENT_COLOR:
            self.set_active_stop_color(self.hex)

    # ------------------ GRADIENT ------------------
    @property
    def gradient(self) -> GradientColor:
        """A fresh GradientColor built from ``g_deg`` and ``g_list``."""
        return GradientColor(self.g_deg, self.g_list, direction_mode=self.direction_mode)

    def load_gradient(self, gradient: Union[GradientColor, str]) -> None:
        """
        Replace the gradient list and angle from a model or a gradient string.

        Side keywords such as ``"to right"`` become their angle. Any other
        direction without a leading number falls back to 0. The angle is then
        passed through the direction policy so ``g_deg`` matches what
        ``gradient.to_string()`` emits.
        """
        if isinstance(gradient, str):
            gradient = parse_gradient_string(gradient, direction_mode=self.direction_mode)
        self.g_list = gradient.stops
        direction = gradient.direction
        if direction is None:
            keyword = " ".join(gradient.direction_string.lower().split())
            direction = SIDE_DIRECTIONS.get(keyword)
            if direction is None:
                logger.debug(f"Unsupported gradient direction {gradient.direction_string!r}, using 0deg")
                direction = 0
        self.g_deg = direction
        self.g_deg = self.gradient.direction
        if not 0 <= self.g_index < len(self.g_list):
            self.g_index = 0

    def set_gradient_angle(self, degrees: int) -> None:
        model = self.gradient
        model.direction = degrees
        self.g_deg = model.direction

    def set_active_stop_color(self, color: str) -> None:
        """Recolor the stop at ``g_index``; out-of-range indices are ignored."""
        model = self.gradient
        model.set_stop_color(self.g_index, color)
        self.g_list = model.stops

    def select_stop(self, index: int) -> bool:
        """
        Make the stop at ``index`` active and show its color in the views.

        The views are only refreshed when the stop color is a hex color.
        Returns False if ``index`` is out of range.
        """
        if not 0 <= index < len(self.g_list):
            logger.debug(f"Stop index {index} out of range for {len(self.g_list)} stops")
            return False
        self.g_index = index
        color = self.g_list[index].color
        if is_valid_hex(color):
            rgb = hex_to_rgb(color)
            self.rgb = rgb
            self.hex = rgb_to_hex(rgb)
            self.hsv = rgb_to_hsv(rgb)
            self.hsl = rgb_to_hsl(rgb)
        return True

    # ------------------ OUTPUT ------------------
    @property
    def css_value(self) -> str:
        """The value handed to the styling layer for the current mode."""
        if self.type == PickColorType.GRADIENT_COLOR:
            return self.gradient.to_string()
        return self.hex

    @property
    def color(self) -> str:
        """
        Read/write view of ``css_value``.

        Assigning a ``linear-gradient(...)`` string switches to gradient mode
        and loads it. Any other value is taken as a hex color and switches to
        plain color mode.

        Raises:
            ValueError: If a non-gradient value is not a valid hex color
        """
        return self.css_value

    @color.setter
    def color(self, value: str) -> None:
        if value.strip().startswith(GRADIENT_PREFIX):
            self.type = PickColorType.GRADIENT_COLOR
            self.load_gradient(value)
            return
        if not is_valid_hex(value):
            raise ValueError(f"Invalid hex color: {value!r}")
        self.type = PickColorType.COLOR
        self.set_hex(value)
