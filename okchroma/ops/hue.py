from ..types.color_types import AnyColor
from ..utils.num_utils import normalize_hue
from .common import to_oklch, from_oklch


def rotate(color: AnyColor, degrees: float) -> AnyColor:
    """Turn the OKLCH hue by ``degrees``; the result hue is in [0, 360)."""
    oklch = to_oklch(color)
    return from_oklch(oklch._replace(h=normalize_hue(oklch.h + degrees)), color)

def complement(color: AnyColor) -> AnyColor:
    return rotate(color, 180)
