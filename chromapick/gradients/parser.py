from __future__ import annotations

import logging
from typing import List

from ..utils.num_utils import leading_float, leading_int
from .gradient_color import GRADIENT_PREFIX, DirectionMode, GradientColor
from .stop import GradientStop

logger = logging.getLogger(__name__)


class GradientParseError(ValueError):
    """Raised by strict parsing when a gradient string is structurally invalid."""

    MISSING_PREFIX_SUFFIX = "missing prefix/suffix"
    NO_STOPS = "no stops found"
    MALFORMED_STOP = "malformed stop"
    INVALID_DIRECTION = "invalid direction"

    def __init__(self, reason: str, text: str) -> None:
        super().__init__(f"Cannot parse gradient {text!r}: {reason}")
        self.reason = reason
        self.text = text


def split_top_level(text: str, separator: str = ",") -> List[str]:
    """
    Split ``text`` on ``separator`` characters that are not inside parentheses.

    With ``separator=" "`` any whitespace counts and empty pieces are dropped,
    so ``"rgb(0, 0, 0)  50%"`` gives ``["rgb(0, 0, 0)", "50%"]``.
    """
    on_space = separator.isspace()
    pieces: List[str] = []
    current: List[str] = []
    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")" and depth > 0:
            depth -= 1
        elif depth == 0 and (ch.isspace() if on_space else ch == separator):
            pieces.append("".join(current))
            current = []
            continue
        current.append(ch)
    pieces.append("".join(current))

    if on_space:
        return [p for p in pieces if p]
    return pieces


def parse_gradient_string(
    gradient: str,
    strict: bool = False,
    *,
    direction_mode: DirectionMode = DirectionMode.CLAMP,
) -> GradientColor:
    """
    Rebuild a GradientColor from a ``linear-gradient(...)`` string.

    The text between the parentheses is split on top-level commas: the first
    piece is the direction and each remaining piece is ``"<color> <position>"``.
    Commas and spaces nested in parentheses (``rgb(0, 0, 0)``) stay part of the
    color token.

    By default no validation is done: a malformed string yields a model holding
    whatever pieces were found, with empty positions where none were given.

    Args:
        gradient: e.g. ``"linear-gradient(45deg,#fff 0%,#000 100%)"``
        strict: Raise GradientParseError instead of accepting malformed input
        direction_mode: Passed through to the new model
    Returns:
        A new GradientColor with its stops sorted by position
    Raises:
        GradientParseError: only when ``strict`` is True
    """
    text = gradient.strip()
    has_prefix = text.startswith(GRADIENT_PREFIX)
    has_suffix = text.endswith(")")
    if strict and not (has_prefix and has_suffix):
        raise GradientParseError(GradientParseError.MISSING_PREFIX_SUFFIX, gradient)

    text = text.removeprefix(GRADIENT_PREFIX)
    if has_suffix:
        text = text[:-1]
    pieces = [p.strip() for p in split_top_level(text.strip(), ",")]

    direction = pieces[0]
    if strict and leading_int(direction) is None:
        raise GradientParseError(GradientParseError.INVALID_DIRECTION, gradient)

    stops: List[GradientStop] = []
    for descriptor in pieces[1:]:
        if not descriptor:
            if strict:
                raise GradientParseError(GradientParseError.MALFORMED_STOP, gradient)
            logger.debug(f"Skipping empty stop descriptor in {gradient!r}")
            continue

        tokens = split_top_level(descriptor, " ")
        color = tokens[0]
        position = tokens[1] if len(tokens) > 1 else ""
        if strict and (len(tokens) != 2 or leading_float(position) is None):
            raise GradientParseError(GradientParseError.MALFORMED_STOP, gradient)
        stops.append(GradientStop(color, position))

    if strict and not stops:
        raise GradientParseError(GradientParseError.NO_STOPS, gradient)

    return GradientColor(direction, stops, direction_mode=direction_mode)
