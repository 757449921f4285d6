"""
Composed sRGB <-> OKLCH pipelines.

    RGB -> linear RGB -> XYZ -> Oklab -> OKLCH
    OKLCH -> Oklab -> XYZ -> linear RGB -> RGB

Alpha is carried through untouched. ``oklch_to_rgb`` rounds channels to
integers but does not clamp them: an out-of-gamut OKLCH color comes back
with channels outside [0, 255]. Use ``clamp_to_gamut`` first when the result
has to be displayable.
"""
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBA, Oklab, OKLCH
from ..types.array_types import split_channels, join_alpha
from .linear import rgb_to_linear_rgb, linear_rgb_to_rgb, np_srgb_to_linear, np_linear_to_srgb
from .xyz import linear_rgb_to_xyz, xyz_to_linear_rgb, np_linear_rgb_to_xyz, np_xyz_to_linear_rgb
from .oklab import (
    xyz_to_oklab,
    oklab_to_xyz,
    oklab_to_oklch,
    oklch_to_oklab,
    np_xyz_to_oklab,
    np_oklab_to_xyz,
    np_oklab_to_oklch,
    np_oklch_to_oklab,
)


def rgb_to_oklab(rgba: RGBA) -> Oklab:
    return xyz_to_oklab(linear_rgb_to_xyz(rgb_to_linear_rgb(rgba)))

def oklab_to_rgb(lab: Oklab, alpha: float = 1.0) -> RGBA:
    return linear_rgb_to_rgb(xyz_to_linear_rgb(oklab_to_xyz(lab), alpha))

def rgb_to_oklch(rgba: RGBA) -> OKLCH:
    """
    Convert an sRGB color to OKLCH.

    >>> rgb_to_oklch(RGBA(255, 0, 0, 1))  # doctest: +SKIP
    OKLCH(l=0.628, c=0.258, h=29.23, a=1)
    """
    return oklab_to_oklch(rgb_to_oklab(rgba), rgba.a)

def oklch_to_rgb(oklch: OKLCH) -> RGBA:
    return oklab_to_rgb(oklch_to_oklab(oklch), oklch.a)

def np_rgb_to_oklch(rgb: NDArray) -> NDArray:
    """
    Vectorized: sRGB (0-255) of shape (..., 3) or (..., 4) to OKLCH.

    A fourth (alpha) column is passed through unchanged.
    """
    base, alpha = split_channels(np.asarray(rgb, dtype=float), 3)
    lab = np_xyz_to_oklab(np_linear_rgb_to_xyz(np_srgb_to_linear(base)))
    return join_alpha(np_oklab_to_oklch(lab), alpha)

def np_oklch_to_rgb(lch: NDArray) -> NDArray:
    base, alpha = split_channels(np.asarray(lch, dtype=float), 3)
    linear = np_xyz_to_linear_rgb(np_oklab_to_xyz(np_oklch_to_oklab(base)))
    return join_alpha(np_linear_to_srgb(linear), alpha)
