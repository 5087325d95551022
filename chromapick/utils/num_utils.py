import math
import re
from typing import Optional, TypeVar

import numpy as np
from numpy import ndarray as NDArray

N = TypeVar("N", int, float)

_LEADING_FLOAT = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


def clamp(value: N, min_value: N, max_value: N) -> N:
    """Limit ``value`` to the inclusive range ``[min_value, max_value]``."""
    return min_value if value < min_value else max_value if value > max_value else value


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up (``2.5 -> 3``, ``-2.5 -> -2``)."""
    return math.floor(value + 0.5)


def np_round_half_up(values: NDArray) -> NDArray:
    """Vectorized round_half_up returning an integer array."""
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(int)


def leading_float(text: str) -> Optional[float]:
    """
    Parse the numeric prefix of a string, ignoring any trailing unit.

    ``"12.5%"`` gives ``12.5``; a string without a numeric prefix gives None.
    """
    match = _LEADING_FLOAT.match(text)
    return float(match.group()) if match else None


def leading_int(text: str) -> Optional[int]:
    """Integer counterpart of leading_float: ``"45.9deg"`` gives ``45``."""
    match = _LEADING_INT.match(text)
    return int(match.group()) if match else None
