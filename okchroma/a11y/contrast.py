import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import AnyColor
from .luminance import luminance, np_luminance

# Ambient-light offset in the WCAG ratio, also keeps the denominator non-zero
WCAG_LUMINANCE_OFFSET = 0.05


def contrast_from_luminance(lum_a: float, lum_b: float) -> float:
    l1, l2 = (lum_a, lum_b) if lum_a > lum_b else (lum_b, lum_a)
    return (l1 + WCAG_LUMINANCE_OFFSET) / (l2 + WCAG_LUMINANCE_OFFSET)

def contrast(color_a: AnyColor, color_b: AnyColor) -> float:
    """
    WCAG 2.1 contrast ratio between two colors.

    Symmetric in its arguments. 1.0 for identical colors, 21.0 for black
    against white.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    return contrast_from_luminance(luminance(color_a), luminance(color_b))

def np_contrast(rgb_a: NDArray, rgb_b: NDArray) -> NDArray:
    lum_a = np_luminance(rgb_a)
    lum_b = np_luminance(rgb_b)
    return (np.maximum(lum_a, lum_b) + WCAG_LUMINANCE_OFFSET) / (
        np.minimum(lum_a, lum_b) + WCAG_LUMINANCE_OFFSET
    )
