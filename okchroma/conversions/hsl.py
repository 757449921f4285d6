"""
Direct sRGB <-> HSL conversion.

This path does not go through XYZ/Oklab. HSL is not perceptually uniform
and an RGB -> OKLCH -> HSL detour would not reproduce exact pixel values,
so callers that need RGB-accurate HSL use these functions.
"""
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBA, HSLA
from ..types.array_types import split_channels, join_alpha
from ..utils.num_utils import normalize_hue, np_normalize_hue, round_half_up, np_round_half_up
from .constants import RGB_MAX

## RGB to HSL

def rgb_to_hsl(rgba: RGBA) -> HSLA:
    """
    Convert sRGB (0-255) to HSL.

    Args:
        rgba: Source color, alpha is passed through

    Returns:
        HSLA with hue in [0, 360) and saturation, lightness in [0, 1]
    """
    r = rgba.r / RGB_MAX
    g = rgba.g / RGB_MAX
    b = rgba.b / RGB_MAX

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2

    # Achromatic: no hue, no saturation
    if delta == 0:
        return HSLA(0.0, 0.0, lightness, rgba.a)

    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    if max_c == r:
        hue = ((g - b) / delta + (6 if g < b else 0)) * 60
    elif max_c == g:
        hue = ((b - r) / delta + 2) * 60
    else:
        hue = ((r - g) / delta + 4) * 60

    if hue < 0:
        hue += 360

    return HSLA(normalize_hue(hue), saturation, lightness, rgba.a)

def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: sRGB (0-255) of shape (..., 3) or (..., 4) to HSL.

    Returns:
        hsl: array of shape (..., 3) or (..., 4): (hue [0,360), saturation [0,1], lightness [0,1][, alpha])
    """
    base, alpha = split_channels(np.asarray(rgb, dtype=float), 3)
    base = base / RGB_MAX
    r, g, b = base[..., 0], base[..., 1], base[..., 2]

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)

    denom = np.where(lightness > 0.5, 2 - max_c - min_c, max_c + min_c)
    saturation = np.where(chromatic, delta / np.where(chromatic, denom, 1.0), 0.0)

    hue = np.zeros_like(max_c)
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & (max_c == g) & ~mask_r
    mask_b = chromatic & ~mask_r & ~mask_g

    hue = np.where(mask_r, ((g - b) / safe_delta + np.where(g < b, 6, 0)) * 60, hue)
    hue = np.where(mask_g, ((b - r) / safe_delta + 2) * 60, hue)
    hue = np.where(mask_b, ((r - g) / safe_delta + 4) * 60, hue)

    hsl = np.stack([np_normalize_hue(hue), saturation, lightness], axis=-1)
    return join_alpha(hsl, alpha)

## HSL to RGB

def hue_to_rgb(p: float, q: float, t: float) -> float:
    """Evaluate one channel of the HSL trapezoid at phase ``t`` (in turns)."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1

    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p

def hsl_to_rgb(hsla: HSLA) -> RGBA:
    """
    Convert HSL to sRGB (0-255), channels rounded to integers.

    Args:
        hsla: Hue in degrees (any value, wrapped to [0, 360)), s and l in [0, 1]
    """
    h, s, l, a = hsla

    if s == 0:
        gray = round_half_up(l * RGB_MAX)
        return RGBA(gray, gray, gray, a)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    hk = normalize_hue(h) / 360

    r = hue_to_rgb(p, q, hk + 1 / 3)
    g = hue_to_rgb(p, q, hk)
    b = hue_to_rgb(p, q, hk - 1 / 3)

    return RGBA(
        round_half_up(r * RGB_MAX),
        round_half_up(g * RGB_MAX),
        round_half_up(b * RGB_MAX),
        a,
    )

def np_hue_to_rgb(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )

def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """
    Vectorized: HSL of shape (..., 3) or (..., 4) to sRGB (0-255), rounded.
    """
    base, alpha = split_channels(np.asarray(hsl, dtype=float), 3)
    h, s, l = base[..., 0], base[..., 1], base[..., 2]

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q
    hk = np_normalize_hue(h) / 360

    rgb = np.stack(
        [np_hue_to_rgb(p, q, hk + 1 / 3), np_hue_to_rgb(p, q, hk), np_hue_to_rgb(p, q, hk - 1 / 3)],
        axis=-1,
    )
    gray = (s == 0)[..., None]
    rgb = np.where(gray, l[..., None], rgb)
    return join_alpha(np_round_half_up(rgb * RGB_MAX), alpha)
