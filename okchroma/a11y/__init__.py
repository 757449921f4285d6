"""Accessibility: WCAG luminance and contrast, readability levels, APCA and contrast adjustment."""

from .luminance import LUMINANCE_COEFFICIENTS, luminance, np_luminance
from .contrast import WCAG_LUMINANCE_OFFSET, contrast, contrast_from_luminance, np_contrast
from .readable import (
    WCAG_THRESHOLDS,
    ReadabilityLevel,
    required_contrast,
    is_readable,
    get_readability_level,
)
from .apca import APCA_THRESHOLDS, apca_contrast
from .adjust import EnsureContrastOptions, adjust_lightness, ensure_contrast

__all__ = [
    "LUMINANCE_COEFFICIENTS",
    "luminance",
    "np_luminance",
    "WCAG_LUMINANCE_OFFSET",
    "contrast",
    "contrast_from_luminance",
    "np_contrast",
    "WCAG_THRESHOLDS",
    "ReadabilityLevel",
    "required_contrast",
    "is_readable",
    "get_readability_level",
    "APCA_THRESHOLDS",
    "apca_contrast",
    "EnsureContrastOptions",
    "adjust_lightness",
    "ensure_contrast",
]
