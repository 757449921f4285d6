import math

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_space import HUE_360


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = h % HUE_360
    # -1e-20 % 360 rounds to 360.0
    return 0.0 if h >= HUE_360 else h

def np_normalize_hue(h: NDArray) -> NDArray:
    h = np.mod(np.asarray(h, dtype=float), HUE_360)
    return np.where(h >= HUE_360, 0.0, h)

def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))

def round_half_up(value: float) -> int | float:
    """
    Round to nearest integer with halves going up (2.5 -> 3, -2.5 -> -2).

    NaN and infinities are returned unchanged so they keep propagating.
    """
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))

def np_round_half_up(value: NDArray) -> NDArray:
    return np.floor(np.asarray(value, dtype=float) + 0.5)

def cbrt(value: float) -> float:
    """Real cube root that keeps the sign of negative inputs."""
    return math.copysign(abs(value) ** (1.0 / 3.0), value)
