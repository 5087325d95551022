from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union

from ..utils.num_utils import leading_float


@dataclass(frozen=True)
class GradientStop:
    """
    One (color, position) point of a linear gradient.

    ``color`` is any CSS color token and is not validated. ``position`` is a
    percentage string such as ``"37.5%"``.
    """
    color: str
    position: str

    @property
    def offset(self) -> float:
        """
        Numeric value of ``position`` used for ordering.

        Positions without a numeric prefix sort after every valid one.
        """
        value = leading_float(self.position.replace("%", ""))
        return math.inf if value is None else value

    def to_string(self) -> str:
        return f"{self.color} {self.position}"

    def __str__(self) -> str:
        return self.to_string()


StopLike = Union[GradientStop, Mapping[str, Any], Sequence[str]]


def as_stop(value: StopLike) -> GradientStop:
    """
    Coerce a stop given as a GradientStop, a ``{"color", "position"}`` mapping
    or a ``(color, position)`` pair.
    """
    if isinstance(value, GradientStop):
        return value
    if isinstance(value, Mapping):
        try:
            return GradientStop(str(value["color"]), str(value["position"]))
        except KeyError as e:
            raise ValueError(f"Gradient stop mapping is missing {e.args[0]!r}: {value!r}") from None
    if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
        color, position = value
        return GradientStop(str(color), str(position))
    raise TypeError(f"Cannot build a gradient stop from {value!r}")
