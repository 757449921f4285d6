import numpy as np
from typing import Callable, Dict

from ..types.color_space import ColorSpace, ALPHA_SPACES
from ..types.color_types import RGBA, AnyColor, SPACE_TO_CLASS, space_of
from ..types.array_types import to_array, split_channels, join_alpha
from .linear import (
    rgb_to_linear_rgb,
    linear_rgb_to_rgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
)
from .xyz import rgb_to_xyz, xyz_to_rgb, np_rgb_to_xyz, np_xyz_to_rgb
from .rgb_oklch import (
    rgb_to_oklab,
    oklab_to_rgb,
    rgb_to_oklch,
    oklch_to_rgb,
    np_rgb_to_oklch,
    np_oklch_to_rgb,
)
from .oklab import np_xyz_to_oklab, np_oklab_to_xyz
from .hsl import rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb
from .p3 import rgb_to_p3, p3_to_rgb, np_rgb_to_p3, np_p3_to_rgb

# Every route goes through RGBA; HSL is the direct min/max path,
# OKLCH, Oklab and P3 detour through linear RGB and XYZ.
TO_RGB: Dict[ColorSpace, Callable[..., RGBA]] = {
    ColorSpace.RGB: lambda c: RGBA(c.r, c.g, c.b, c.a),
    ColorSpace.LINEAR_RGB: linear_rgb_to_rgb,
    ColorSpace.XYZ: xyz_to_rgb,
    ColorSpace.OKLAB: oklab_to_rgb,
    ColorSpace.OKLCH: oklch_to_rgb,
    ColorSpace.HSL: hsl_to_rgb,
    ColorSpace.P3: p3_to_rgb,
}

FROM_RGB: Dict[ColorSpace, Callable[[RGBA], AnyColor]] = {
    ColorSpace.RGB: lambda c: RGBA(c.r, c.g, c.b, c.a),
    ColorSpace.LINEAR_RGB: rgb_to_linear_rgb,
    ColorSpace.XYZ: rgb_to_xyz,
    ColorSpace.OKLAB: rgb_to_oklab,
    ColorSpace.OKLCH: rgb_to_oklch,
    ColorSpace.HSL: rgb_to_hsl,
    ColorSpace.P3: rgb_to_p3,
}

NP_TO_RGB: Dict[ColorSpace, Callable[[np.ndarray], np.ndarray]] = {
    ColorSpace.RGB: lambda arr: arr,
    ColorSpace.LINEAR_RGB: np_linear_to_srgb,
    ColorSpace.XYZ: np_xyz_to_rgb,
    ColorSpace.OKLAB: lambda lab: np_xyz_to_rgb(np_oklab_to_xyz(lab)),
    ColorSpace.OKLCH: np_oklch_to_rgb,
    ColorSpace.HSL: np_hsl_to_rgb,
    ColorSpace.P3: np_p3_to_rgb,
}

NP_FROM_RGB: Dict[ColorSpace, Callable[[np.ndarray], np.ndarray]] = {
    ColorSpace.RGB: lambda arr: arr,
    ColorSpace.LINEAR_RGB: np_srgb_to_linear,
    ColorSpace.XYZ: np_rgb_to_xyz,
    ColorSpace.OKLAB: lambda rgb: np_xyz_to_oklab(np_rgb_to_xyz(rgb)),
    ColorSpace.OKLCH: np_rgb_to_oklch,
    ColorSpace.HSL: np_rgb_to_hsl,
    ColorSpace.P3: np_rgb_to_p3,
}


def to_rgba(color: AnyColor) -> RGBA:
    """Lower any color value to the RGBA pivot."""
    return TO_RGB[space_of(color)](color)

def convert(color: AnyColor, to_space: ColorSpace | str) -> AnyColor:
    """
    Convert a color value to another space.

    Every cross-space request passes through RGBA, whose channels are
    rounded to 8-bit integers, so results are quantized even between two
    float spaces: ``convert(LinearRGB(0.5, 0.5, 0.5), "xyz")`` gives
    x = 0.47797 where ``linear_rgb_to_xyz`` gives 0.47523. Call the direct
    functions (``linear_rgb_to_xyz``, ``xyz_to_oklab``, ...) when full
    precision matters.

    Args:
        color: Any color value type; its class carries the source space
        to_space: Target space, a ``ColorSpace`` or its name ("rgb", "oklch", ...)

    Returns:
        A new value of the target space's type. Same-space requests return a copy.

    Raises:
        ValueError: If ``to_space`` names no supported space
    """
    target = ColorSpace(to_space)
    source = space_of(color)

    if source is target:
        return SPACE_TO_CLASS[target](*color)

    return FROM_RGB[target](to_rgba(color))

def np_convert(
    color: np.ndarray,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> np.ndarray:
    """
    Vectorized ``convert`` over arrays whose last axis holds the channels.

    Spaces that carry alpha accept an optional fourth column which is passed
    through; converting into XYZ or Oklab drops it, converting out of them
    leaves the result without alpha.
    """
    fs = ColorSpace(from_space)
    ts = ColorSpace(to_space)
    arr = to_array(color)

    base, alpha = split_channels(arr, 3)
    if alpha is not None and fs not in ALPHA_SPACES:
        raise ValueError(f"{fs.value} has no alpha channel, got shape {arr.shape}")

    if fs is ts:
        return arr.copy()

    converted = NP_FROM_RGB[ts](NP_TO_RGB[fs](base))
    return join_alpha(converted, alpha if ts in ALPHA_SPACES else None)
