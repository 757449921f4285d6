"""Color manipulation in OKLCH: lightness, chroma, hue, alpha, inversion and mixing."""

from .lightness import lighten, darken, invert_lightness
from .chroma import saturate, desaturate, grayscale
from .hue import rotate, complement
from .alpha import alpha, opacify, transparentize
from .invert import invert
from .mix import MIX_SPACES, mix, mix_colors

__all__ = [
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
    "MIX_SPACES",
    "mix",
    "mix_colors",
]
