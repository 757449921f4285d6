"""
Automatic contrast adjustment.

``ensure_contrast`` moves a foreground color along OKLCH lightness, keeping
hue and chroma, until it reaches a WCAG contrast ratio against a fixed
background. Lightness is bisected in one direction (lighter or darker); if
that side cannot reach the target the other side is tried.

Contrast is not strictly monotone in lightness near the extremes (the
rounded 8-bit output plateaus there), so the search keeps the best
candidate it has seen instead of trusting the final interval bounds.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..types.color_types import RGBA, OKLCH, AnyColor
from ..conversions.rgb_oklch import rgb_to_oklch, oklch_to_rgb
from ..conversions.wrapper import to_rgba
from .contrast import contrast
from .luminance import luminance
from ..utils.default import value_or_default

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 15
DEFAULT_TOLERANCE = 0.01


@dataclass(frozen=True)
class EnsureContrastOptions:
    """
    Options for ``ensure_contrast``.

    Attributes:
        prefer_lighten: Force the first search direction. ``None`` infers it
            from the background luminance.
        max_iterations: Bisection steps per direction.
        tolerance: Stop as soon as a candidate meets the target by less than this.
    """
    prefer_lighten: Optional[bool] = None
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    tolerance: float = DEFAULT_TOLERANCE


def _as_rgba(color: AnyColor) -> RGBA:
    if isinstance(color, RGBA):
        return RGBA(*color)
    return to_rgba(color)

def adjust_lightness(
    fg_oklch: OKLCH,
    bg_rgba: RGBA,
    target_ratio: float,
    lighten: bool,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
) -> RGBA:
    """
    Bisect OKLCH lightness in one direction toward ``target_ratio``.

    Args:
        fg_oklch: Starting foreground color
        bg_rgba: Fixed background
        target_ratio: Contrast ratio to reach
        lighten: Search ``[l, 1]`` if True, ``[0, l]`` otherwise
        max_iterations: Upper bound on bisection steps
        tolerance: Early exit once a passing candidate is this close to the target

    Returns:
        The passing candidate closest to the target, or the unchanged
        foreground (as RGBA) when no candidate passed
    """
    low, high = (fg_oklch.l, 1.0) if lighten else (0.0, fg_oklch.l)

    best_rgba = oklch_to_rgb(fg_oklch)
    best_diff = abs(contrast(best_rgba, bg_rgba) - target_ratio)

    for step in range(max_iterations):
        mid = (low + high) / 2
        test_rgba = oklch_to_rgb(fg_oklch._replace(l=mid))
        test_ratio = contrast(test_rgba, bg_rgba)
        diff = abs(test_ratio - target_ratio)
        passes = test_ratio >= target_ratio

        if passes and diff < best_diff:
            best_rgba = test_rgba
            best_diff = diff

        if passes and diff < tolerance:
            logger.debug("contrast %.4f reached at l=%.4f after %d steps", test_ratio, mid, step + 1)
            return test_rgba

        # Moving away from the start raises contrast, moving back lowers it
        if lighten:
            if passes:
                high = mid
            else:
                low = mid
        else:
            if passes:
                low = mid
            else:
                high = mid

    return best_rgba

def ensure_contrast(
    foreground: AnyColor,
    background: AnyColor,
    min_ratio: float,
    options: EnsureContrastOptions | None = None,
) -> RGBA:
    """
    Adjust a foreground color until it has at least ``min_ratio`` contrast
    against ``background``.

    Hue and chroma are preserved; only OKLCH lightness changes. A target that
    cannot be reached from either side yields the best attainable color
    rather than an error.

    Args:
        foreground: Color to adjust, any color value type
        background: Fixed background, any color value type
        min_ratio: Required WCAG contrast ratio, e.g. 4.5 for AA
        options: Search options, defaults to ``EnsureContrastOptions()``

    Returns:
        The foreground unchanged when it already passes, otherwise the adjusted color

    >>> ensure_contrast(RGBA(150, 150, 150), RGBA(255, 255, 255), 4.5)  # doctest: +SKIP
    RGBA(r=118, g=118, b=118, a=1.0)
    """
    options = value_or_default(options, EnsureContrastOptions())

    fg_rgba = _as_rgba(foreground)
    bg_rgba = _as_rgba(background)

    if contrast(fg_rgba, bg_rgba) >= min_ratio:
        return fg_rgba

    fg_oklch = rgb_to_oklch(fg_rgba)

    prefer_lighten = options.prefer_lighten
    if prefer_lighten is None:
        bg_lum = luminance(bg_rgba)
        if bg_lum > 0.5:
            prefer_lighten = False
        elif bg_lum < 0.5:
            prefer_lighten = True
        else:
            prefer_lighten = luminance(fg_rgba) <= bg_lum

    primary = adjust_lightness(
        fg_oklch, bg_rgba, min_ratio, prefer_lighten, options.max_iterations, options.tolerance
    )
    primary_ratio = contrast(primary, bg_rgba)
    if primary_ratio >= min_ratio:
        return primary

    logger.debug(
        "%s reached only %.4f of %.4f, trying the other direction",
        "lightening" if prefer_lighten else "darkening", primary_ratio, min_ratio,
    )
    secondary = adjust_lightness(
        fg_oklch, bg_rgba, min_ratio, not prefer_lighten, options.max_iterations, options.tolerance
    )
    secondary_ratio = contrast(secondary, bg_rgba)
    if secondary_ratio >= min_ratio:
        return secondary

    return primary if primary_ratio >= secondary_ratio else secondary
