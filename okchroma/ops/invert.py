from ..types.color_types import RGBA, AnyColor, space_of
from ..conversions.wrapper import convert, to_rgba


def invert(color: AnyColor) -> AnyColor:
    """
    Photographic negative: every 8-bit channel becomes ``255 - channel``.

    Alpha is kept and the result has the same type as ``color``.
    """
    rgba = to_rgba(color)
    negative = RGBA(255 - rgba.r, 255 - rgba.g, 255 - rgba.b, rgba.a)
    return convert(negative, space_of(color))
