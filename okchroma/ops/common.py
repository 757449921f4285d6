from ..types.color_types import OKLCH, AnyColor, space_of
from ..conversions.wrapper import convert


def to_oklch(color: AnyColor) -> OKLCH:
    return convert(color, "oklch")

def from_oklch(oklch: OKLCH, like: AnyColor) -> AnyColor:
    """Convert an edited OKLCH value back to the type of ``like``."""
    return convert(oklch, space_of(like))

def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t
