from __future__ import annotations

import logging
import math
import warnings
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Union

from ..utils.num_utils import clamp, leading_int
from .stop import GradientStop, StopLike, as_stop

logger = logging.getLogger(__name__)

GRADIENT_PREFIX = "linear-gradient("
DEFAULT_DIRECTION = "90deg"
DEFAULT_STOPS = (
    GradientStop("#ffffff", "0%"),
    GradientStop("#000000", "100%"),
)


class DirectionMode(str, Enum):
    """How the ``direction`` setter treats angles outside [0, 360].

    Every mode rejects NaN and infinite angles with ValueError.
    """
    CLAMP = "clamp"          # pin to [0, 360]
    WRAP = "wrap"            # reduce modulo 360 into [0, 360)
    UNCLAMPED = "unclamped"  # store the raw input


class GradientColor:
    """
    A linear gradient: a direction angle plus color stops kept sorted by position.

    Every assignment to ``stops`` re-sorts the sequence ascending by the numeric
    value of each stop's position. The direction is held as a ``"<n>deg"``
    string, which is what ``to_string`` emits, and exposed as an integer.

    Args:
        direction: CSS angle string such as ``"45deg"`` (stored verbatim) or
            a number of degrees (applied through the ``direction`` setter)
        stops: Initial stops; defaults to white at 0% and black at 100%
        direction_mode: Policy for out-of-range angles given to the setter
    """

    def __init__(
        self,
        direction: Union[str, int, float] = DEFAULT_DIRECTION,
        stops: Optional[Iterable[StopLike]] = None,
        *,
        direction_mode: DirectionMode = DirectionMode.CLAMP,
    ) -> None:
        self.direction_mode = DirectionMode(direction_mode)
        self._direction = DEFAULT_DIRECTION
        self._stops: List[GradientStop] = list(DEFAULT_STOPS)

        if isinstance(direction, str):
            self._direction = direction.strip()
        else:
            self.direction = direction

        if stops is not None:
            self.stops = stops

    # ------------------ STOPS ------------------
    @property
    def stops(self) -> List[GradientStop]:
        """The stops in ascending position order (a copy of the internal list)."""
        return list(self._stops)

    @stops.setter
    def stops(self, stops: Iterable[StopLike]) -> None:
        self._stops = sorted((as_stop(s) for s in stops), key=lambda s: s.offset)

    def set_stop_color(self, index: int, color: str) -> None:
        """
        Replace the color of the stop at ``index`` in the sorted sequence.

        Indices outside ``[0, len(stops))``, negative ones included, are
        ignored without raising.
        """
        if not 0 <= index < len(self._stops):
            logger.debug(f"Ignoring color {color!r} for stop index {index} out of {len(self._stops)}")
            return
        stop = self._stops[index]
        self._stops[index] = GradientStop(color, stop.position)

    def set_gradient_index(self, index: int, color: str) -> None:
        """Deprecated: use set_stop_color instead."""
        warnings.warn(
            "set_gradient_index is deprecated. Use GradientColor.set_stop_color instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        self.set_stop_color(index, color)

    # ------------------ DIRECTION ------------------
    @property
    def direction(self) -> Optional[int]:
        """
        Angle in whole degrees parsed from the stored direction string.

        None when the stored token has no leading integer (e.g. ``"to right"``).
        """
        return leading_int(self._direction)

    @direction.setter
    def direction(self, degrees: Union[int, float]) -> None:
        if not math.isfinite(degrees):
            raise ValueError(f"Gradient direction must be a finite number of degrees, got {degrees!r}")
        if self.direction_mode == DirectionMode.CLAMP:
            degrees = clamp(degrees, 0, 360)
        elif self.direction_mode == DirectionMode.WRAP:
            degrees = degrees % 360
        self._direction = f"{int(degrees)}deg"

    @property
    def direction_string(self) -> str:
        return self._direction

    # ------------------ SERIALIZATION ------------------
    def to_string(self) -> str:
        """
        Serialize as ``linear-gradient(<direction>,<color> <pos>,...)``.

        Stop groups are joined by a bare comma. A model without stops yields
        ``linear-gradient(<direction>)``.
        """
        parts = [self._direction] + [s.to_string() for s in self._stops]
        return f"{GRADIENT_PREFIX}{','.join(parts)})"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"GradientColor({self._direction!r}, {self._stops!r})"

    # ------------------ CONTAINER PROTOCOL ------------------
    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[GradientStop]:
        return iter(list(self._stops))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GradientColor):
            return NotImplemented
        return self._direction == other._direction and self._stops == other._stops

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> GradientColor:
        return GradientColor(self._direction, self._stops, direction_mode=self.direction_mode)
