"""
Blending two or more colors.

OKLCH mixing interpolates lightness, chroma and alpha linearly and takes the
shorter way around the hue circle, then maps the result back into sRGB.
RGB mixing works on the 8-bit channels and rounds them half up.
"""
from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from ..types.color_space import ColorSpace, HUE_360
from ..types.color_types import RGBA, OKLCH, AnyColor, space_of
from ..conversions.gamut import clamp_to_gamut
from ..conversions.wrapper import convert, to_rgba
from ..utils.default import value_or_default
from ..utils.num_utils import clamp, normalize_hue, round_half_up
from .common import to_oklch, from_oklch, lerp

logger = logging.getLogger(__name__)

MIX_SPACES = (ColorSpace.OKLCH, ColorSpace.RGB)


def _mix_space(space: ColorSpace | str) -> ColorSpace:
    mode = ColorSpace(space)
    if mode not in MIX_SPACES:
        raise ValueError(f"cannot mix in {mode.value}, expected one of {[s.value for s in MIX_SPACES]}")
    return mode

def _shortest_hue_delta(h1: float, h2: float) -> float:
    diff = h2 - h1
    if diff > HUE_360 / 2:
        diff -= HUE_360
    elif diff < -HUE_360 / 2:
        diff += HUE_360
    return diff

def mix(
    color_a: AnyColor,
    color_b: AnyColor,
    ratio: float = 0.5,
    space: ColorSpace | str = ColorSpace.OKLCH,
) -> AnyColor:
    """
    Blend two colors.

    Args:
        color_a: Start color, also decides the result type
        color_b: End color, any color value type
        ratio: 0 gives ``color_a``, 1 gives ``color_b``; clamped to [0, 1]
        space: "oklch" (default) or "rgb"

    Returns:
        A value of the same type as ``color_a``

    Raises:
        ValueError: If ``space`` is not one of the mixing spaces
    """
    mode = _mix_space(space)
    t = clamp(ratio, 0.0, 1.0)

    if mode is ColorSpace.RGB:
        a, b = to_rgba(color_a), to_rgba(color_b)
        mixed = RGBA(
            round_half_up(lerp(a.r, b.r, t)),
            round_half_up(lerp(a.g, b.g, t)),
            round_half_up(lerp(a.b, b.b, t)),
            lerp(a.a, b.a, t),
        )
        return convert(mixed, space_of(color_a))

    a, b = to_oklch(color_a), to_oklch(color_b)
    mixed = OKLCH(
        lerp(a.l, b.l, t),
        lerp(a.c, b.c, t),
        normalize_hue(a.h + _shortest_hue_delta(a.h, b.h) * t),
        lerp(a.a, b.a, t),
    )
    return from_oklch(clamp_to_gamut(mixed), color_a)

def mix_colors(
    colors: Sequence[AnyColor],
    weights: Optional[Sequence[float]] = None,
    space: ColorSpace | str = ColorSpace.OKLCH,
) -> AnyColor:
    """
    Weighted blend of any number of colors.

    Weights default to equal shares and are normalized by their sum. In
    OKLCH the hue is the circular mean of the input hues, in RGB the
    channels are rounded half up.

    Args:
        colors: Colors to blend, any color value types
        weights: One non-negative weight per color
        space: "oklch" (default) or "rgb"

    Returns:
        ``colors[0]`` unchanged when it is the only color, otherwise an
        ``OKLCH`` or ``RGBA`` value matching ``space``

    Raises:
        ValueError: On an empty ``colors``, a weight count that does not
            match, a non-positive weight sum, or an unknown ``space``
    """
    colors = list(colors)
    if not colors:
        raise ValueError("mix_colors requires at least one color")
    mode = _mix_space(space)
    if len(colors) == 1:
        return colors[0]

    weights = list(value_or_default(weights, [1.0] * len(colors)))
    if len(weights) != len(colors):
        raise ValueError(f"got {len(weights)} weights for {len(colors)} colors")
    total = math.fsum(weights)
    if not total > 0:
        raise ValueError(f"weights must sum to a positive number, got {total}")
    shares = [w / total for w in weights]

    if mode is ColorSpace.RGB:
        rgbas = [to_rgba(c) for c in colors]
        return RGBA(
            round_half_up(math.fsum(c.r * w for c, w in zip(rgbas, shares))),
            round_half_up(math.fsum(c.g * w for c, w in zip(rgbas, shares))),
            round_half_up(math.fsum(c.b * w for c, w in zip(rgbas, shares))),
            math.fsum(c.a * w for c, w in zip(rgbas, shares)),
        )

    lchs = [to_oklch(c) for c in colors]
    sin_h = math.fsum(math.sin(math.radians(c.h)) * w for c, w in zip(lchs, shares))
    cos_h = math.fsum(math.cos(math.radians(c.h)) * w for c, w in zip(lchs, shares))
    mixed = OKLCH(
        math.fsum(c.l * w for c, w in zip(lchs, shares)),
        math.fsum(c.c * w for c, w in zip(lchs, shares)),
        normalize_hue(math.degrees(math.atan2(sin_h, cos_h))),
        math.fsum(c.a * w for c, w in zip(lchs, shares)),
    )
    logger.debug("mixed %d colors in oklch to %s", len(colors), mixed)
    return clamp_to_gamut(mixed)
