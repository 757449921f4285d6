"""okchroma: perceptual color conversion, gamut mapping, contrast and color manipulation."""

__version__ = "1.0.0"

from .types import (
    ColorSpace,
    RGBA,
    LinearRGB,
    XYZ,
    Oklab,
    OKLCH,
    HSLA,
    P3,
    AnyColor,
)
from .conversions import (
    srgb_to_linear,
    linear_to_srgb,
    to_linear,
    from_linear,
    linear_rgb_to_xyz,
    xyz_to_linear_rgb,
    xyz_to_oklab,
    oklab_to_xyz,
    oklab_to_oklch,
    oklch_to_oklab,
    rgb_to_oklch,
    oklch_to_rgb,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_p3,
    p3_to_rgb,
    Gamut,
    GamutMapOptions,
    is_in_gamut,
    is_in_p3_gamut,
    clamp_to_gamut,
    clamp_to_p3_gamut,
    map_to_gamut,
    convert,
    np_convert,
)
from .a11y import (
    luminance,
    contrast,
    is_readable,
    get_readability_level,
    ReadabilityLevel,
    WCAG_THRESHOLDS,
    apca_contrast,
    APCA_THRESHOLDS,
    EnsureContrastOptions,
    ensure_contrast,
)
from .ops import (
    lighten,
    darken,
    invert_lightness,
    saturate,
    desaturate,
    grayscale,
    rotate,
    complement,
    alpha,
    opacify,
    transparentize,
    invert,
    mix,
    mix_colors,
)

__all__ = [
    "__version__",
    # Types
    "ColorSpace",
    "RGBA",
    "LinearRGB",
    "XYZ",
    "Oklab",
    "OKLCH",
    "HSLA",
    "P3",
    "AnyColor",
    # Conversions
    "srgb_to_linear",
    "linear_to_srgb",
    "to_linear",
    "from_linear",
    "linear_rgb_to_xyz",
    "xyz_to_linear_rgb",
    "xyz_to_oklab",
    "oklab_to_xyz",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "rgb_to_oklch",
    "oklch_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_p3",
    "p3_to_rgb",
    # Gamut
    "Gamut",
    "GamutMapOptions",
    "is_in_gamut",
    "is_in_p3_gamut",
    "clamp_to_gamut",
    "clamp_to_p3_gamut",
    "map_to_gamut",
    # Dispatch
    "convert",
    "np_convert",
    # Accessibility
    "luminance",
    "contrast",
    "is_readable",
    "get_readability_level",
    "ReadabilityLevel",
    "WCAG_THRESHOLDS",
    "apca_contrast",
    "APCA_THRESHOLDS",
    "EnsureContrastOptions",
    "ensure_contrast",
    # Manipulation
    "lighten",
    "darken",
    "invert_lightness",
    "saturate",
    "desaturate",
    "grayscale",
    "rotate",
    "complement",
    "alpha",
    "opacify",
    "transparentize",
    "invert",
    "mix",
    "mix_colors",
]
