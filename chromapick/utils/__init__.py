from .num_utils import clamp, round_half_up, np_round_half_up, leading_float, leading_int
from .color_utils import HEX_PATTERN, is_valid_hex
from .debounce import Debounced, debounce, DEFAULT_DEBOUNCE_WAIT

__all__ = [
    "clamp",
    "round_half_up",
    "np_round_half_up",
    "leading_float",
    "leading_int",
    "HEX_PATTERN",
    "is_valid_hex",
    "Debounced",
    "debounce",
    "DEFAULT_DEBOUNCE_WAIT",
]
