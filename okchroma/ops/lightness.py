from ..types.color_types import AnyColor
from ..utils.num_utils import clamp
from .common import to_oklch, from_oklch


def lighten(color: AnyColor, amount: float) -> AnyColor:
    """
    Raise OKLCH lightness by ``amount``.

    Args:
        color: Any color value type
        amount: Lightness step on the 0-1 scale, e.g. 0.1 for 10% lighter

    Returns:
        A value of the same type as ``color``, lightness clamped to [0, 1]
    """
    oklch = to_oklch(color)
    return from_oklch(oklch._replace(l=clamp(oklch.l + amount, 0.0, 1.0)), color)

def darken(color: AnyColor, amount: float) -> AnyColor:
    return lighten(color, -amount)

def invert_lightness(color: AnyColor) -> AnyColor:
    """Mirror OKLCH lightness (l -> 1 - l) keeping hue and chroma."""
    oklch = to_oklch(color)
    return from_oklch(oklch._replace(l=1.0 - oklch.l), color)
