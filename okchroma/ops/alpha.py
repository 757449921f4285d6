"""
Alpha edits.

XYZ and Oklab values carry no alpha channel, so for them these functions
return the (round-tripped) color without an opacity change.
"""
from ..types.color_types import AnyColor
from ..utils.num_utils import clamp
from .common import to_oklch, from_oklch


def _clamp_alpha(value: float) -> float:
    return clamp(value, 0.0, 1.0)

def alpha(color: AnyColor, value: float) -> AnyColor:
    """Set alpha to ``value``, clamped to [0, 1]."""
    return from_oklch(to_oklch(color)._replace(a=_clamp_alpha(value)), color)

def opacify(color: AnyColor, amount: float) -> AnyColor:
    """
    Make a color more opaque.

    Args:
        color: Any color value type
        amount: Added to alpha, result clamped to [0, 1]

    Returns:
        A value of the same type as ``color``
    """
    oklch = to_oklch(color)
    return from_oklch(oklch._replace(a=_clamp_alpha(oklch.a + amount)), color)

def transparentize(color: AnyColor, amount: float) -> AnyColor:
    return opacify(color, -amount)
