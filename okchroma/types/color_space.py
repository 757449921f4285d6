# No dependencies
from enum import Enum


class ColorSpace(str, Enum):
    RGB = "rgb"
    LINEAR_RGB = "linear-rgb"
    XYZ = "xyz"
    OKLAB = "oklab"
    OKLCH = "oklch"
    HSL = "hsl"
    P3 = "p3"

    @classmethod
    def _missing_(cls, value):
        # Accept "RGB", "Oklch", ... as well as the canonical lowercase names
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


CHANNELS = {
    ColorSpace.RGB: ("r", "g", "b", "a"),
    ColorSpace.LINEAR_RGB: ("r", "g", "b", "a"),
    ColorSpace.XYZ: ("x", "y", "z"),
    ColorSpace.OKLAB: ("L", "a", "b"),
    ColorSpace.OKLCH: ("l", "c", "h", "a"),
    ColorSpace.HSL: ("h", "s", "l", "a"),
    ColorSpace.P3: ("r", "g", "b", "a"),
}

ALPHA_SPACES = {space for space, names in CHANNELS.items() if names[-1] == "a"}

HUE_360 = 360
