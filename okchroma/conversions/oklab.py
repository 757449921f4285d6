"""
XYZ <-> Oklab and Oklab <-> OKLCH.

Oklab is cartesian (L, a, b): L is perceptual lightness in [0, 1], a is the
green-red axis and b the blue-yellow axis (both roughly +-0.4). OKLCH is its
polar form (l, c, h) with hue in degrees.

Chroma below ``ACHROMATIC_THRESHOLD`` is treated as exactly gray in both
directions, so ``atan2(0, 0)`` never decides a hue and float noise from a
near-zero chroma does not leak through the trig functions.
"""
import math

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import LinearRGB, XYZ, Oklab, OKLCH
from ..utils.num_utils import cbrt, normalize_hue, np_normalize_hue
from .constants import (
    ACHROMATIC_THRESHOLD,
    OKLAB_M1,
    OKLAB_M2,
    OKLAB_M1_INV,
    OKLAB_M2_INV,
    LRGB_TO_LMS,
    LMS_TO_LRGB,
    mat_vec,
    np_mat_vec,
)

## XYZ <-> Oklab

def xyz_to_oklab(xyz: XYZ) -> Oklab:
    l, m, s = mat_vec(OKLAB_M1, xyz.x, xyz.y, xyz.z)
    return Oklab(*mat_vec(OKLAB_M2, cbrt(l), cbrt(m), cbrt(s)))

def oklab_to_xyz(lab: Oklab) -> XYZ:
    l_, m_, s_ = mat_vec(OKLAB_M2_INV, lab.L, lab.a, lab.b)
    return XYZ(*mat_vec(OKLAB_M1_INV, l_ * l_ * l_, m_ * m_ * m_, s_ * s_ * s_))

def np_xyz_to_oklab(xyz: NDArray) -> NDArray:
    lms = np_mat_vec(OKLAB_M1, xyz)
    return np_mat_vec(OKLAB_M2, np.cbrt(lms))

def np_oklab_to_xyz(lab: NDArray) -> NDArray:
    lms_ = np_mat_vec(OKLAB_M2_INV, lab)
    return np_mat_vec(OKLAB_M1_INV, lms_ ** 3)

## Linear sRGB <-> Oklab through the direct LMS matrices

def linear_rgb_to_oklab(rgb: LinearRGB) -> Oklab:
    l, m, s = mat_vec(LRGB_TO_LMS, rgb.r, rgb.g, rgb.b)
    return Oklab(*mat_vec(OKLAB_M2, cbrt(l), cbrt(m), cbrt(s)))

def oklab_to_linear_rgb(lab: Oklab, alpha: float = 1.0) -> LinearRGB:
    l_, m_, s_ = mat_vec(OKLAB_M2_INV, lab.L, lab.a, lab.b)
    r, g, b = mat_vec(LMS_TO_LRGB, l_ * l_ * l_, m_ * m_ * m_, s_ * s_ * s_)
    return LinearRGB(r, g, b, alpha)

def np_oklab_to_linear_rgb(lab: NDArray) -> NDArray:
    lms_ = np_mat_vec(OKLAB_M2_INV, lab)
    return np_mat_vec(LMS_TO_LRGB, lms_ ** 3)

## Oklab <-> OKLCH

def oklab_to_oklch(lab: Oklab, alpha: float = 1.0) -> OKLCH:
    """
    Convert Oklab to its polar form.

    Args:
        lab: Oklab color
        alpha: Alpha to attach, Oklab itself carries none

    Returns:
        OKLCH with hue in [0, 360); gray inputs get ``c = 0, h = 0``
    """
    c = math.hypot(lab.a, lab.b)
    if c < ACHROMATIC_THRESHOLD:
        return OKLCH(lab.L, 0.0, 0.0, alpha)

    h = math.degrees(math.atan2(lab.b, lab.a))
    if h < 0:
        h += 360
    return OKLCH(lab.L, c, normalize_hue(h), alpha)

def oklch_to_oklab(lch: OKLCH) -> Oklab:
    if lch.c < ACHROMATIC_THRESHOLD:
        return Oklab(lch.l, 0.0, 0.0)

    h_rad = math.radians(lch.h)
    return Oklab(lch.l, lch.c * math.cos(h_rad), lch.c * math.sin(h_rad))

def np_oklab_to_oklch(lab: NDArray) -> NDArray:
    """
    Vectorized: Oklab of shape (..., 3) to OKLCH of shape (..., 3).

    Same achromatic rule as the scalar version.
    """
    lab = np.asarray(lab, dtype=float)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    c = np.hypot(a, b)
    h = np_normalize_hue(np.degrees(np.arctan2(b, a)))

    gray = c < ACHROMATIC_THRESHOLD
    c = np.where(gray, 0.0, c)
    h = np.where(gray, 0.0, h)
    return np.stack([L, c, h], axis=-1)

def np_oklch_to_oklab(lch: NDArray) -> NDArray:
    lch = np.asarray(lch, dtype=float)
    l, c, h = lch[..., 0], lch[..., 1], lch[..., 2]

    h_rad = np.radians(h)
    gray = c < ACHROMATIC_THRESHOLD
    a = np.where(gray, 0.0, c * np.cos(h_rad))
    b = np.where(gray, 0.0, c * np.sin(h_rad))
    return np.stack([l, a, b], axis=-1)
