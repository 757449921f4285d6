"""
APCA (Accessible Perceptual Contrast Algorithm) lightness contrast.

Unlike the WCAG 2.x ratio, APCA is polarity-aware: the result is positive
for dark text on a light background and negative for light text on a dark
background. The magnitude is the Lc value (roughly 0-106 for BoW, 0-108 for
WoB); values below the low clip come back as 0.

Reference: https://github.com/Myndex/SAPC-APCA (APCA-W3 0.0.98G-4g constants)
"""
from ..types.color_types import RGBA, AnyColor
from ..conversions.linear import srgb_to_linear
from ..conversions.wrapper import to_rgba

# sRGB -> Y coefficients
S_R_CO = 0.2126729
S_G_CO = 0.7151522
S_B_CO = 0.0721750

# Exponents for normal (dark on light) and reverse polarity
NORM_BG = 0.56
NORM_TXT = 0.57
REV_TXT = 0.62
REV_BG = 0.65

# Soft clamp for near-black
BLK_THRS = 0.022
BLK_CLMP = 1.414

SCALE_BOW = 1.14
SCALE_WOB = 1.14
LO_BOW_OFFSET = 0.027
LO_WOB_OFFSET = 0.027
LO_CLIP = 0.1
DELTA_Y_MIN = 0.0005

APCA_THRESHOLDS = {
    "BODY_TEXT": 75,
    "LARGE_TEXT": 60,
    "HEADLINE": 45,
    "NON_TEXT": 30,
    "PREFERRED_BODY": 90,
}


def apca_luminance(rgba: RGBA) -> float:
    return (
        S_R_CO * srgb_to_linear(rgba.r)
        + S_G_CO * srgb_to_linear(rgba.g)
        + S_B_CO * srgb_to_linear(rgba.b)
    )

def soft_clamp(y: float) -> float:
    if y < 0:
        return 0.0
    if y < BLK_THRS:
        return y + (BLK_THRS - y) ** BLK_CLMP
    return y

def apca_contrast(foreground: AnyColor, background: AnyColor) -> float:
    """
    APCA Lc contrast of text (``foreground``) on ``background``.

    Returns:
        Signed Lc value, 0.0 when the difference is below the low clip
    """
    txt = foreground if isinstance(foreground, RGBA) else to_rgba(foreground)
    bg = background if isinstance(background, RGBA) else to_rgba(background)

    txt_y = soft_clamp(apca_luminance(txt))
    bg_y = soft_clamp(apca_luminance(bg))

    if abs(bg_y - txt_y) < DELTA_Y_MIN:
        return 0.0

    if bg_y > txt_y:
        sapc = (bg_y ** NORM_BG - txt_y ** NORM_TXT) * SCALE_BOW
    else:
        sapc = (bg_y ** REV_BG - txt_y ** REV_TXT) * SCALE_WOB

    if abs(sapc) < LO_CLIP:
        return 0.0

    if sapc > 0:
        return (sapc - LO_BOW_OFFSET) * 100
    return (sapc + LO_WOB_OFFSET) * 100
