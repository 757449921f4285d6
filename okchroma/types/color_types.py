from __future__ import annotations
from typing import NamedTuple, Union

from .color_space import ColorSpace, ALPHA_SPACES


class RGBA(NamedTuple):
    """sRGB color. r, g, b nominally 0-255 (floats allowed), a in [0, 1]."""
    r: float
    g: float
    b: float
    a: float = 1.0

    space = ColorSpace.RGB


class LinearRGB(NamedTuple):
    """Linear-light RGB, nominally 0-1. Also used for linear Display P3."""
    r: float
    g: float
    b: float
    a: float = 1.0

    space = ColorSpace.LINEAR_RGB


class XYZ(NamedTuple):
    """CIE XYZ relative to D65, Y = 1.0 for reference white."""
    x: float
    y: float
    z: float

    space = ColorSpace.XYZ


class Oklab(NamedTuple):
    L: float
    a: float
    b: float

    space = ColorSpace.OKLAB


class OKLCH(NamedTuple):
    """Polar Oklab. l in [0, 1], c >= 0, h in [0, 360) degrees, a in [0, 1]."""
    l: float
    c: float
    h: float
    a: float = 1.0

    space = ColorSpace.OKLCH


class HSLA(NamedTuple):
    h: float
    s: float
    l: float
    a: float = 1.0

    space = ColorSpace.HSL


class P3(NamedTuple):
    """Gamma-encoded Display P3, channels nominally 0-1."""
    r: float
    g: float
    b: float
    a: float = 1.0

    space = ColorSpace.P3


AnyColor = Union[RGBA, LinearRGB, XYZ, Oklab, OKLCH, HSLA, P3]

SPACE_TO_CLASS: dict[ColorSpace, type] = {
    cls.space: cls
    for cls in (RGBA, LinearRGB, XYZ, Oklab, OKLCH, HSLA, P3)
}


def space_of(color: AnyColor) -> ColorSpace:
    """Return the space tag carried by a color value's type."""
    space = getattr(type(color), "space", None)
    if not isinstance(space, ColorSpace):
        raise TypeError(f"{type(color).__name__} is not a color value type")
    return space


def has_alpha(color: AnyColor) -> bool:
    return space_of(color) in ALPHA_SPACES


def alpha_of(color: AnyColor) -> float:
    """Alpha of a color, 1.0 for spaces that do not carry one."""
    return color.a if has_alpha(color) else 1.0  # type: ignore[union-attr]
