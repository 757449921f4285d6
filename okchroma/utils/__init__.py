from .default import value_or_default
from .num_utils import (
    normalize_hue,
    np_normalize_hue,
    clamp,
    round_half_up,
    np_round_half_up,
    cbrt,
)

__all__ = [
    "value_or_default",
    "normalize_hue",
    "np_normalize_hue",
    "clamp",
    "round_half_up",
    "np_round_half_up",
    "cbrt",
]
