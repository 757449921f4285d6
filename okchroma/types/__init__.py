from .color_space import ColorSpace, CHANNELS, ALPHA_SPACES, HUE_360
from .color_types import (
    RGBA,
    LinearRGB,
    XYZ,
    Oklab,
    OKLCH,
    HSLA,
    P3,
    AnyColor,
    SPACE_TO_CLASS,
    space_of,
    has_alpha,
    alpha_of,
)

__all__ = [
    "ColorSpace",
    "CHANNELS",
    "ALPHA_SPACES",
    "HUE_360",
    "RGBA",
    "LinearRGB",
    "XYZ",
    "Oklab",
    "OKLCH",
    "HSLA",
    "P3",
    "AnyColor",
    "SPACE_TO_CLASS",
    "space_of",
    "has_alpha",
    "alpha_of",
]
