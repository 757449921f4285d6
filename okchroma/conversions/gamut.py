"""
Gamut test and gamut mapping for OKLCH colors.

Implements the CSS Color 4 chroma-reduction algorithm: lightness and hue
are held fixed while chroma is bisected down to the largest value that is
still displayable in the target gamut, to within one JND.

    https://www.w3.org/TR/css-color-4/#gamut-mapping

Two gamuts are supported: sRGB and Display P3. Both are tested in linear
light; P3 goes through the shared XYZ hub.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import LinearRGB, OKLCH
from ..types.array_types import split_channels, join_alpha
from ..utils.default import value_or_default
from .constants import DEFAULT_JND, GAMUT_EPSILON
from .oklab import oklch_to_oklab, oklab_to_linear_rgb, np_oklch_to_oklab, np_oklab_to_linear_rgb
from .xyz import linear_rgb_to_xyz, np_linear_rgb_to_xyz
from .p3 import xyz_to_linear_p3, np_xyz_to_linear_p3

logger = logging.getLogger(__name__)


class Gamut(str, Enum):
    SRGB = "srgb"
    P3 = "p3"


@dataclass(frozen=True)
class GamutMapOptions:
    """Options for ``map_to_gamut``."""
    jnd: float = DEFAULT_JND


def oklch_to_linear_rgb(oklch: OKLCH) -> LinearRGB:
    return oklab_to_linear_rgb(oklch_to_oklab(oklch), oklch.a)

def oklch_to_linear_p3(oklch: OKLCH) -> LinearRGB:
    return xyz_to_linear_p3(linear_rgb_to_xyz(oklch_to_linear_rgb(oklch)), oklch.a)

def _channels_in_unit_range(linear: LinearRGB) -> bool:
    lo = -GAMUT_EPSILON
    hi = 1 + GAMUT_EPSILON
    return lo <= linear.r <= hi and lo <= linear.g <= hi and lo <= linear.b <= hi

def _in_gamut(oklch: OKLCH, to_linear: Callable[[OKLCH], LinearRGB]) -> bool:
    # Any gray with lightness in [0, 1] is displayable in every RGB gamut
    if oklch.c <= 0:
        return 0 <= oklch.l <= 1
    return _channels_in_unit_range(to_linear(oklch))

def is_in_gamut(oklch: OKLCH) -> bool:
    """Check whether an OKLCH color is displayable in sRGB."""
    return _in_gamut(oklch, oklch_to_linear_rgb)

def is_in_p3_gamut(oklch: OKLCH) -> bool:
    """Check whether an OKLCH color is displayable in Display P3."""
    return _in_gamut(oklch, oklch_to_linear_p3)

_GAMUT_TESTS: dict[Gamut, Callable[[OKLCH], bool]] = {
    Gamut.SRGB: is_in_gamut,
    Gamut.P3: is_in_p3_gamut,
}

def _clamp_chroma(oklch: OKLCH, jnd: float, in_gamut: Callable[[OKLCH], bool]) -> OKLCH:
    if in_gamut(oklch):
        return oklch

    # At the lightness extremes every chroma lands on the same black/white
    if oklch.l <= 0:
        return OKLCH(0.0, 0.0, oklch.h, oklch.a)
    if oklch.l >= 1:
        return OKLCH(1.0, 0.0, oklch.h, oklch.a)

    low = 0.0
    high = oklch.c
    steps = 0

    while high - low > jnd:
        mid = (low + high) / 2
        # Interval can no longer shrink in float precision (jnd <= 0)
        if mid == low or mid == high:
            break
        if in_gamut(oklch._replace(c=mid)):
            low = mid
        else:
            high = mid
        steps += 1

    logger.debug(
        "chroma %.6f -> %.6f at l=%.4f h=%.2f after %d steps",
        oklch.c, low, oklch.l, oklch.h, steps,
    )
    return oklch._replace(c=low)

def clamp_to_gamut(oklch: OKLCH, jnd: float = DEFAULT_JND) -> OKLCH:
    """
    Reduce chroma until an OKLCH color fits in sRGB.

    Args:
        oklch: Color to map. Returned as-is when already in gamut.
        jnd: Stop once the search interval is narrower than this

    Returns:
        Color with the same lightness, hue and alpha and a chroma within
        ``jnd`` of the sRGB boundary. Lightness <= 0 or >= 1 maps to pure
        black or white.
    """
    return _clamp_chroma(oklch, jnd, is_in_gamut)

def clamp_to_p3_gamut(oklch: OKLCH, jnd: float = DEFAULT_JND) -> OKLCH:
    """Display P3 counterpart of ``clamp_to_gamut``."""
    return _clamp_chroma(oklch, jnd, is_in_p3_gamut)

def map_to_gamut(
    oklch: OKLCH,
    options: GamutMapOptions | None = None,
    *,
    gamut: Gamut | str = Gamut.SRGB,
) -> OKLCH:
    options = value_or_default(options, GamutMapOptions())
    return _clamp_chroma(oklch, options.jnd, _GAMUT_TESTS[Gamut(gamut)])

## Vectorized

def _np_linear(lch: NDArray, gamut: Gamut) -> NDArray:
    linear = np_oklab_to_linear_rgb(np_oklch_to_oklab(lch))
    if gamut is Gamut.P3:
        linear = np_xyz_to_linear_p3(np_linear_rgb_to_xyz(linear))
    return linear

def np_is_in_gamut(lch: NDArray, gamut: Gamut | str = Gamut.SRGB) -> NDArray:
    """
    Vectorized gamut test.

    Args:
        lch: OKLCH array of shape (..., 3) or (..., 4)
        gamut: Target gamut

    Returns:
        Boolean array of shape (...)
    """
    base, _ = split_channels(np.asarray(lch, dtype=float), 3)
    l, c = base[..., 0], base[..., 1]

    linear = _np_linear(base, Gamut(gamut))
    inside = np.all(
        (linear >= -GAMUT_EPSILON) & (linear <= 1 + GAMUT_EPSILON), axis=-1
    )
    gray = c <= 0
    return np.where(gray, (l >= 0) & (l <= 1), inside)

def np_clamp_to_gamut(
    lch: NDArray,
    jnd: float = DEFAULT_JND,
    gamut: Gamut | str = Gamut.SRGB,
) -> NDArray:
    """
    Vectorized ``clamp_to_gamut``: every color is bisected independently,
    giving the same result as the scalar function element by element.
    """
    gamut = Gamut(gamut)
    arr = np.asarray(lch, dtype=float)
    base, alpha = split_channels(arr, 3)
    base = base.copy()
    l, c, h = base[..., 0], base[..., 1], base[..., 2]

    out_of_gamut = ~np_is_in_gamut(base, gamut)
    dark = out_of_gamut & (l <= 0)
    bright = out_of_gamut & (l >= 1)
    searching = out_of_gamut & ~dark & ~bright

    low = np.zeros_like(c)
    high = np.where(searching, c, 0.0)

    active = searching & (high - low > jnd)
    while np.any(active):
        mid = (low + high) / 2
        active &= (mid != low) & (mid != high)
        candidate = np.stack([l, mid, h], axis=-1)
        fits = np_is_in_gamut(candidate, gamut)
        low = np.where(active & fits, mid, low)
        high = np.where(active & ~fits, mid, high)
        active &= high - low > jnd

    result_l = np.where(dark, 0.0, np.where(bright, 1.0, l))
    result_c = np.where(searching, low, np.where(out_of_gamut, 0.0, c))
    return join_alpha(np.stack([result_l, result_c, h], axis=-1), alpha)
