import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBA, LinearRGB, XYZ
from .constants import SRGB_TO_XYZ, XYZ_TO_SRGB, mat_vec, np_mat_vec
from .linear import rgb_to_linear_rgb, linear_rgb_to_rgb, np_srgb_to_linear, np_linear_to_srgb


def linear_rgb_to_xyz(rgb: LinearRGB) -> XYZ:
    """Linear sRGB (0-1) to CIE XYZ (D65). Alpha is dropped."""
    return XYZ(*mat_vec(SRGB_TO_XYZ, rgb.r, rgb.g, rgb.b))

def xyz_to_linear_rgb(xyz: XYZ, alpha: float = 1.0) -> LinearRGB:
    """CIE XYZ (D65) to linear sRGB. Out-of-gamut colors give channels outside [0, 1]."""
    r, g, b = mat_vec(XYZ_TO_SRGB, xyz.x, xyz.y, xyz.z)
    return LinearRGB(r, g, b, alpha)

def rgb_to_xyz(rgba: RGBA) -> XYZ:
    return linear_rgb_to_xyz(rgb_to_linear_rgb(rgba))

def xyz_to_rgb(xyz: XYZ, alpha: float = 1.0) -> RGBA:
    return linear_rgb_to_rgb(xyz_to_linear_rgb(xyz, alpha))

def np_linear_rgb_to_xyz(rgb: NDArray) -> NDArray:
    return np_mat_vec(SRGB_TO_XYZ, rgb)

def np_xyz_to_linear_rgb(xyz: NDArray) -> NDArray:
    return np_mat_vec(XYZ_TO_SRGB, xyz)

def np_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """Vectorized: 8-bit-scale sRGB of shape (..., 3) to XYZ of shape (..., 3)."""
    return np_linear_rgb_to_xyz(np_srgb_to_linear(rgb))

def np_xyz_to_rgb(xyz: NDArray) -> NDArray:
    return np_linear_to_srgb(np_xyz_to_linear_rgb(np.asarray(xyz, dtype=float)))
