import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBA, LinearRGB
from ..utils.num_utils import round_half_up, np_round_half_up
from .constants import (
    SRGB_TO_LINEAR_THRESHOLD,
    LINEAR_TO_SRGB_THRESHOLD,
    SRGB_SLOPE,
    SRGB_OFFSET,
    SRGB_DIVISOR,
    SRGB_GAMMA,
    RGB_MAX,
)

## Unit-scale curve (encoded 0-1 <-> linear 0-1)

def unit_srgb_to_linear(v: float) -> float:
    """Gamma-expand an encoded channel in [0, 1]. Shared by sRGB and Display P3."""
    if v <= SRGB_TO_LINEAR_THRESHOLD:
        return v / SRGB_SLOPE
    return ((v + SRGB_OFFSET) / SRGB_DIVISOR) ** SRGB_GAMMA

def unit_linear_to_srgb(v: float) -> float:
    """Gamma-compress a linear channel to its encoded [0, 1] value, unscaled and unrounded."""
    if v <= LINEAR_TO_SRGB_THRESHOLD:
        return v * SRGB_SLOPE
    return SRGB_DIVISOR * v ** (1 / SRGB_GAMMA) - SRGB_OFFSET

def np_unit_srgb_to_linear(v: NDArray) -> NDArray:
    v = np.asarray(v, dtype=float)
    # abs() keeps the unused branch of np.where free of complex/NaN warnings
    curved = ((np.abs(v) + SRGB_OFFSET) / SRGB_DIVISOR) ** SRGB_GAMMA
    return np.where(v <= SRGB_TO_LINEAR_THRESHOLD, v / SRGB_SLOPE, curved)

def np_unit_linear_to_srgb(v: NDArray) -> NDArray:
    v = np.asarray(v, dtype=float)
    curved = SRGB_DIVISOR * np.abs(v) ** (1 / SRGB_GAMMA) - SRGB_OFFSET
    return np.where(v <= LINEAR_TO_SRGB_THRESHOLD, v * SRGB_SLOPE, curved)

## 8-bit scale (0-255 <-> linear 0-1)

def srgb_to_linear(value: float) -> float:
    """
    Convert an 8-bit-scale sRGB channel to linear light.

    Args:
        value: Channel in [0, 255]; fractional and out-of-range values are accepted

    Returns:
        Linear-light value, nominally in [0, 1]
    """
    return unit_srgb_to_linear(value / RGB_MAX)

def linear_to_srgb(value: float) -> int | float:
    """
    Convert a linear-light value back to an 8-bit-scale sRGB channel.

    The result is rounded to the nearest integer but not clamped; values
    outside [0, 1] produce channels outside [0, 255].
    """
    return round_half_up(unit_linear_to_srgb(value) * RGB_MAX)

# Short names for the 8-bit channel codec
to_linear = srgb_to_linear
from_linear = linear_to_srgb

def np_srgb_to_linear(values: NDArray) -> NDArray:
    return np_unit_srgb_to_linear(np.asarray(values, dtype=float) / RGB_MAX)

def np_linear_to_srgb(values: NDArray) -> NDArray:
    return np_round_half_up(np_unit_linear_to_srgb(values) * RGB_MAX)

## Whole colors

def rgb_to_linear_rgb(rgba: RGBA) -> LinearRGB:
    return LinearRGB(
        srgb_to_linear(rgba.r),
        srgb_to_linear(rgba.g),
        srgb_to_linear(rgba.b),
        rgba.a,
    )

def linear_rgb_to_rgb(lrgb: LinearRGB) -> RGBA:
    return RGBA(
        linear_to_srgb(lrgb.r),
        linear_to_srgb(lrgb.g),
        linear_to_srgb(lrgb.b),
        lrgb.a,
    )
