from ..types.color_types import AnyColor
from ..conversions.gamut import clamp_to_gamut
from .common import to_oklch, from_oklch


def saturate(color: AnyColor, amount: float) -> AnyColor:
    """
    Add ``amount`` to OKLCH chroma.

    Chroma never drops below zero, and a result outside sRGB is pulled back
    with ``clamp_to_gamut``, so large amounts saturate up to the gamut edge
    for that lightness and hue.

    Args:
        color: Any color value type
        amount: Chroma step, negative to desaturate

    Returns:
        A value of the same type as ``color``
    """
    oklch = to_oklch(color)
    boosted = oklch._replace(c=max(0.0, oklch.c + amount))
    return from_oklch(clamp_to_gamut(boosted), color)

def desaturate(color: AnyColor, amount: float) -> AnyColor:
    return saturate(color, -amount)

def grayscale(color: AnyColor) -> AnyColor:
    """Drop all chroma, keeping OKLCH lightness."""
    return from_oklch(to_oklch(color)._replace(c=0.0), color)
