import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBA, LinearRGB, XYZ, P3
from ..utils.num_utils import clamp, round_half_up, np_round_half_up
from .constants import P3_TO_XYZ, XYZ_TO_P3, RGB_MAX, mat_vec, np_mat_vec
from .linear import (
    unit_srgb_to_linear,
    unit_linear_to_srgb,
    np_unit_srgb_to_linear,
    np_unit_linear_to_srgb,
    srgb_to_linear,
)
from .xyz import linear_rgb_to_xyz, xyz_to_linear_rgb, np_linear_rgb_to_xyz, np_xyz_to_linear_rgb


def linear_p3_to_xyz(p3: LinearRGB) -> XYZ:
    return XYZ(*mat_vec(P3_TO_XYZ, p3.r, p3.g, p3.b))

def xyz_to_linear_p3(xyz: XYZ, alpha: float = 1.0) -> LinearRGB:
    r, g, b = mat_vec(XYZ_TO_P3, xyz.x, xyz.y, xyz.z)
    return LinearRGB(r, g, b, alpha)

def p3_to_linear_p3(p3: P3) -> LinearRGB:
    """Display P3 uses the sRGB transfer curve; only the primaries differ."""
    return LinearRGB(
        unit_srgb_to_linear(p3.r),
        unit_srgb_to_linear(p3.g),
        unit_srgb_to_linear(p3.b),
        p3.a,
    )

def linear_p3_to_p3(linear: LinearRGB, alpha: float | None = None) -> P3:
    return P3(
        unit_linear_to_srgb(linear.r),
        unit_linear_to_srgb(linear.g),
        unit_linear_to_srgb(linear.b),
        linear.a if alpha is None else alpha,
    )

def rgb_to_p3(rgba: RGBA) -> P3:
    """
    Convert an sRGB color to Display P3.

    Input channels are clamped to [0, 255] and alpha to [0, 1]. Every sRGB
    color lies inside P3, so the result needs no clamping.

    Returns:
        P3 with encoded channels in [0, 1] (unrounded)
    """
    linear_srgb = LinearRGB(
        srgb_to_linear(clamp(rgba.r, 0, RGB_MAX)),
        srgb_to_linear(clamp(rgba.g, 0, RGB_MAX)),
        srgb_to_linear(clamp(rgba.b, 0, RGB_MAX)),
    )
    linear_p3 = xyz_to_linear_p3(linear_rgb_to_xyz(linear_srgb))
    return linear_p3_to_p3(linear_p3, clamp(rgba.a, 0, 1))

def p3_to_rgb(p3: P3) -> RGBA:
    """
    Convert a Display P3 color to sRGB.

    P3 channels are clamped to [0, 1] on input. Colors outside the sRGB gamut
    are clipped per channel to [0, 255] on output and rounded to integers.
    """
    linear_p3 = LinearRGB(
        unit_srgb_to_linear(clamp(p3.r, 0, 1)),
        unit_srgb_to_linear(clamp(p3.g, 0, 1)),
        unit_srgb_to_linear(clamp(p3.b, 0, 1)),
    )
    linear_srgb = xyz_to_linear_rgb(linear_p3_to_xyz(linear_p3))
    r, g, b = (
        round_half_up(clamp(unit_linear_to_srgb(v) * RGB_MAX, 0, RGB_MAX))
        for v in (linear_srgb.r, linear_srgb.g, linear_srgb.b)
    )
    return RGBA(r, g, b, clamp(p3.a, 0, 1))

def np_linear_p3_to_xyz(p3: NDArray) -> NDArray:
    return np_mat_vec(P3_TO_XYZ, p3)

def np_xyz_to_linear_p3(xyz: NDArray) -> NDArray:
    return np_mat_vec(XYZ_TO_P3, xyz)

def np_rgb_to_p3(rgb: NDArray) -> NDArray:
    """Vectorized: 8-bit-scale sRGB of shape (..., 3) to encoded P3 of shape (..., 3)."""
    rgb = np.clip(np.asarray(rgb, dtype=float), 0, RGB_MAX)
    linear_srgb = np_unit_srgb_to_linear(rgb / RGB_MAX)
    linear_p3 = np_xyz_to_linear_p3(np_linear_rgb_to_xyz(linear_srgb))
    return np_unit_linear_to_srgb(linear_p3)

def np_p3_to_rgb(p3: NDArray) -> NDArray:
    p3 = np.clip(np.asarray(p3, dtype=float), 0, 1)
    linear_srgb = np_xyz_to_linear_rgb(np_linear_p3_to_xyz(np_unit_srgb_to_linear(p3)))
    encoded = np.clip(np_unit_linear_to_srgb(linear_srgb) * RGB_MAX, 0, RGB_MAX)
    return np_round_half_up(encoded)
