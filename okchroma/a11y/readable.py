from enum import Enum
from typing import Literal

from ..types.color_types import AnyColor
from .contrast import contrast

WCAG_THRESHOLDS = {
    "AAA": 7.0,
    "AAA_LARGE": 4.5,
    "AA": 4.5,
    "AA_LARGE": 3.0,
}


class ReadabilityLevel(str, Enum):
    AAA = "AAA"
    AA = "AA"
    FAIL = "fail"


def required_contrast(level: Literal["AA", "AAA"] = "AA", large_text: bool = False) -> float:
    if level == "AAA":
        return WCAG_THRESHOLDS["AAA_LARGE" if large_text else "AAA"]
    if level == "AA":
        return WCAG_THRESHOLDS["AA_LARGE" if large_text else "AA"]
    raise ValueError(f"Unknown WCAG level: {level!r}")

def is_readable(
    foreground: AnyColor,
    background: AnyColor,
    level: Literal["AA", "AAA"] = "AA",
    large_text: bool = False,
) -> bool:
    """Check a foreground/background pair against a WCAG conformance level."""
    return contrast(foreground, background) >= required_contrast(level, large_text)

def get_readability_level(
    foreground: AnyColor,
    background: AnyColor,
    large_text: bool = False,
) -> ReadabilityLevel:
    ratio = contrast(foreground, background)
    if ratio >= required_contrast("AAA", large_text):
        return ReadabilityLevel.AAA
    if ratio >= required_contrast("AA", large_text):
        return ReadabilityLevel.AA
    return ReadabilityLevel.FAIL
