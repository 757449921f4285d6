import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBA, AnyColor
from ..conversions.linear import srgb_to_linear, np_srgb_to_linear
from ..conversions.wrapper import to_rgba

# Rec. 709 / WCAG 2.x relative luminance weights
LUMINANCE_COEFFICIENTS = (0.2126, 0.7152, 0.0722)


def luminance(color: AnyColor) -> float:
    """
    WCAG relative luminance of a color, 0 for black and 1 for white.

    Args:
        color: Any color value; non-RGB colors are converted to sRGB first

    Returns:
        Weighted sum of the linearized channels
    """
    rgba = color if isinstance(color, RGBA) else to_rgba(color)
    kr, kg, kb = LUMINANCE_COEFFICIENTS
    return (
        kr * srgb_to_linear(rgba.r)
        + kg * srgb_to_linear(rgba.g)
        + kb * srgb_to_linear(rgba.b)
    )

def np_luminance(rgb: NDArray) -> NDArray:
    """Vectorized: sRGB (0-255) of shape (..., 3) or (..., 4) to luminance of shape (...)."""
    rgb = np.asarray(rgb, dtype=float)[..., :3]
    return np_srgb_to_linear(rgb) @ np.array(LUMINANCE_COEFFICIENTS)
