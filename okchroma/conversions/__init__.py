"""
okchroma Color Space Conversions
================================

Conversion pipeline between sRGB, linear RGB, CIE XYZ (D65), Oklab, OKLCH,
Display P3 and HSL, plus the OKLCH gamut-mapping engine. Every transform
has a scalar function working on the immutable value types in
``okchroma.types`` and, where it is a per-pixel transform, a vectorized
numpy ``np_`` twin working on arrays whose last axis holds the channels.

Pipeline
--------
    sRGB --(transfer curve)--> linear RGB --(3x3)--> XYZ --(M1, cbrt, M2)--> Oklab --(polar)--> OKLCH
    Display P3 --(transfer curve)--> linear P3 --(3x3)--> XYZ
    sRGB <--(min/max)--> HSL        (direct, independent of the hub)

Conversion Functions
--------------------

Transfer curve:
    srgb_to_linear(v) / linear_to_srgb(v)
        8-bit-scale channel <-> linear light (alias: to_linear / from_linear)
    unit_srgb_to_linear(v) / unit_linear_to_srgb(v)
        Same curve on 0-1 encoded values (shared by Display P3)

Linear RGB / P3 <-> XYZ:
    linear_rgb_to_xyz, xyz_to_linear_rgb, rgb_to_xyz, xyz_to_rgb
    linear_p3_to_xyz, xyz_to_linear_p3, rgb_to_p3, p3_to_rgb

Oklab / OKLCH:
    xyz_to_oklab, oklab_to_xyz, oklab_to_oklch, oklch_to_oklab
    rgb_to_oklch, oklch_to_rgb (composed pipelines)

HSL:
    rgb_to_hsl, hsl_to_rgb

Gamut:
    is_in_gamut(oklch), clamp_to_gamut(oklch, jnd=0.02)
    is_in_p3_gamut(oklch), clamp_to_p3_gamut(oklch, jnd=0.02)
    map_to_gamut(oklch, GamutMapOptions(jnd), gamut=Gamut.SRGB)

High-Level API
--------------
    convert(color, to_space)
        Convert any color value to another space, routed through RGBA
    np_convert(array, from_space, to_space)
        Vectorized converter

Examples
--------
>>> from okchroma.conversions import convert, rgb_to_oklch, clamp_to_gamut
>>> from okchroma.types import RGBA, OKLCH
>>>
>>> lch = rgb_to_oklch(RGBA(255, 0, 0))        # ~ OKLCH(0.628, 0.258, 29.2, 1.0)
>>> hsl = convert(RGBA(255, 0, 0), "hsl")      # HSLA(0.0, 1.0, 0.5, 1.0)
>>> clamp_to_gamut(OKLCH(0.9, 0.3, 180))      # chroma reduced to fit sRGB
>>>
>>> import numpy as np
>>> from okchroma.conversions import np_convert
>>> np_convert(np.array([[255, 0, 0], [0, 0, 255]]), "rgb", "oklch")
"""

from .constants import DEFAULT_JND, ACHROMATIC_THRESHOLD, GAMUT_EPSILON, D65

from .linear import (
    srgb_to_linear,
    linear_to_srgb,
    to_linear,
    from_linear,
    unit_srgb_to_linear,
    unit_linear_to_srgb,
    rgb_to_linear_rgb,
    linear_rgb_to_rgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    np_unit_srgb_to_linear,
    np_unit_linear_to_srgb,
)

from .xyz import (
    linear_rgb_to_xyz,
    xyz_to_linear_rgb,
    rgb_to_xyz,
    xyz_to_rgb,
    np_linear_rgb_to_xyz,
    np_xyz_to_linear_rgb,
    np_rgb_to_xyz,
    np_xyz_to_rgb,
)

from .p3 import (
    linear_p3_to_xyz,
    xyz_to_linear_p3,
    p3_to_linear_p3,
    linear_p3_to_p3,
    rgb_to_p3,
    p3_to_rgb,
    np_linear_p3_to_xyz,
    np_xyz_to_linear_p3,
    np_rgb_to_p3,
    np_p3_to_rgb,
)

from .oklab import (
    xyz_to_oklab,
    oklab_to_xyz,
    oklab_to_oklch,
    oklch_to_oklab,
    linear_rgb_to_oklab,
    oklab_to_linear_rgb,
    np_xyz_to_oklab,
    np_oklab_to_xyz,
    np_oklab_to_oklch,
    np_oklch_to_oklab,
    np_oklab_to_linear_rgb,
)

from .rgb_oklch import (
    rgb_to_oklab,
    oklab_to_rgb,
    rgb_to_oklch,
    oklch_to_rgb,
    np_rgb_to_oklch,
    np_oklch_to_rgb,
)

from .hsl import rgb_to_hsl, hsl_to_rgb, hue_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb

from .gamut import (
    Gamut,
    GamutMapOptions,
    is_in_gamut,
    is_in_p3_gamut,
    clamp_to_gamut,
    clamp_to_p3_gamut,
    map_to_gamut,
    np_is_in_gamut,
    np_clamp_to_gamut,
)

# High-level API
from .wrapper import convert, np_convert, to_rgba

from ..types.color_space import ColorSpace

__all__ = [
    # Constants
    'DEFAULT_JND',
    'ACHROMATIC_THRESHOLD',
    'GAMUT_EPSILON',
    'D65',

    # Transfer curve
    'srgb_to_linear',
    'linear_to_srgb',
    'to_linear',
    'from_linear',
    'unit_srgb_to_linear',
    'unit_linear_to_srgb',
    'rgb_to_linear_rgb',
    'linear_rgb_to_rgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'np_unit_srgb_to_linear',
    'np_unit_linear_to_srgb',

    # XYZ
    'linear_rgb_to_xyz',
    'xyz_to_linear_rgb',
    'rgb_to_xyz',
    'xyz_to_rgb',
    'np_linear_rgb_to_xyz',
    'np_xyz_to_linear_rgb',
    'np_rgb_to_xyz',
    'np_xyz_to_rgb',

    # Display P3
    'linear_p3_to_xyz',
    'xyz_to_linear_p3',
    'p3_to_linear_p3',
    'linear_p3_to_p3',
    'rgb_to_p3',
    'p3_to_rgb',
    'np_linear_p3_to_xyz',
    'np_xyz_to_linear_p3',
    'np_rgb_to_p3',
    'np_p3_to_rgb',

    # Oklab / OKLCH
    'xyz_to_oklab',
    'oklab_to_xyz',
    'oklab_to_oklch',
    'oklch_to_oklab',
    'linear_rgb_to_oklab',
    'oklab_to_linear_rgb',
    'np_xyz_to_oklab',
    'np_oklab_to_xyz',
    'np_oklab_to_oklch',
    'np_oklch_to_oklab',
    'np_oklab_to_linear_rgb',
    'rgb_to_oklab',
    'oklab_to_rgb',
    'rgb_to_oklch',
    'oklch_to_rgb',
    'np_rgb_to_oklch',
    'np_oklch_to_rgb',

    # HSL
    'rgb_to_hsl',
    'hsl_to_rgb',
    'hue_to_rgb',
    'np_rgb_to_hsl',
    'np_hsl_to_rgb',

    # Gamut
    'Gamut',
    'GamutMapOptions',
    'is_in_gamut',
    'is_in_p3_gamut',
    'clamp_to_gamut',
    'clamp_to_p3_gamut',
    'map_to_gamut',
    'np_is_in_gamut',
    'np_clamp_to_gamut',

    # High-level API
    'convert',
    'np_convert',
    'to_rgba',

    # Types
    'ColorSpace',
]
