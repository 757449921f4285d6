"""
Color science constants for the conversion pipeline.

sRGB / Display P3 <-> XYZ matrices come from CSS Color Level 4, the Oklab
matrices (M1, M2 and the direct linear sRGB <-> LMS pair) from Björn
Ottosson's reference implementation. They are taken as published and not
re-derived.

Every matrix is a tuple of three row tuples so the scalar path can index it
directly; ``np_matrix`` returns a cached read-only ndarray of the same
coefficients for the vectorized path.

References:
    https://www.w3.org/TR/css-color-4/#color-conversion-code
    https://bottosson.github.io/posts/oklab/
"""
from functools import lru_cache
from typing import Tuple

import numpy as np

Matrix3x3 = Tuple[
    Tuple[float, float, float],
    Tuple[float, float, float],
    Tuple[float, float, float],
]

# D65 reference white, Y normalized to 1.0
D65 = (0.95047, 1.0, 1.08883)

# sRGB transfer function (IEC 61966-2-1), shared by Display P3
SRGB_TO_LINEAR_THRESHOLD = 0.04045
LINEAR_TO_SRGB_THRESHOLD = 0.0031308
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_DIVISOR = 1.055
SRGB_GAMMA = 2.4

RGB_MAX = 255.0

# Chroma below this is treated as gray: hue forced to 0, a = b = 0
ACHROMATIC_THRESHOLD = 1e-4

# Tolerance on the [0, 1] linear channel test at the gamut boundary
GAMUT_EPSILON = 1e-6

# CSS Color 4 just-noticeable-difference for the chroma search
DEFAULT_JND = 0.02

SRGB_TO_XYZ: Matrix3x3 = (
    (0.4123907992659595, 0.357584339383878, 0.1804807884018343),
    (0.21263900587151027, 0.715168678767756, 0.07219231536073371),
    (0.01933081871559182, 0.11919477979462598, 0.9505321522496607),
)

XYZ_TO_SRGB: Matrix3x3 = (
    (3.2404541621141054, -1.5371385940306089, -0.49853140955601579),
    (-0.96926603050518312, 1.8760108454466942, 0.041556017530349834),
    (0.055643430959114726, -0.20397695888897652, 1.0572251882231791),
)

# XYZ -> LMS
OKLAB_M1: Matrix3x3 = (
    (0.8189330101, 0.3618667424, -0.1288597137),
    (0.0329845436, 0.9293118715, 0.0361456387),
    (0.0482003018, 0.2643662691, 0.633851707),
)

# cube-rooted LMS -> Lab
OKLAB_M2: Matrix3x3 = (
    (0.2104542553, 0.793617785, -0.0040720468),
    (1.9779984951, -2.428592205, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.808675766),
)

OKLAB_M1_INV: Matrix3x3 = (
    (1.2270138511035211, -0.5577999806518222, 0.2812561489664678),
    (-0.0405801784232806, 1.1122568696168302, -0.0716766786656012),
    (-0.0763812845057069, -0.4214819784180127, 1.5861632204407947),
)

OKLAB_M2_INV: Matrix3x3 = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.291485548),
)

# Direct linear sRGB <-> LMS, bypassing XYZ
LRGB_TO_LMS: Matrix3x3 = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

LMS_TO_LRGB: Matrix3x3 = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.707614701),
)

P3_TO_XYZ: Matrix3x3 = (
    (0.4865709486482162, 0.26566769316909306, 0.1982172852343625),
    (0.2289745640697488, 0.6917385218365064, 0.079286914093745),
    (0.0, 0.04511338185890264, 1.043944368900976),
)

XYZ_TO_P3: Matrix3x3 = (
    (2.493496911941425, -0.9313836179191239, -0.40271078445071684),
    (-0.8294889695615747, 1.7626640603183463, 0.023624685841943577),
    (0.03584583024378447, -0.07617238926804182, 0.9568845240076872),
)


def mat_vec(m: Matrix3x3, x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Multiply a 3x3 matrix by the column vector (x, y, z)."""
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )


@lru_cache(maxsize=None)
def np_matrix(m: Matrix3x3) -> np.ndarray:
    arr = np.array(m, dtype=np.float64)
    arr.setflags(write=False)
    return arr


def np_mat_vec(m: Matrix3x3, vectors: np.ndarray) -> np.ndarray:
    """Apply a 3x3 matrix to every vector along the last axis of ``vectors``."""
    return np.asarray(vectors, dtype=np.float64) @ np_matrix(m).T
