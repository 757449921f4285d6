import numpy as np

from okchroma.conversions.constants import D65
from okchroma.conversions.xyz import (
    linear_rgb_to_xyz,
    xyz_to_linear_rgb,
    rgb_to_xyz,
    xyz_to_rgb,
    np_rgb_to_xyz,
    np_xyz_to_rgb,
)
from okchroma.types import RGBA, LinearRGB, XYZ
from ..samples import samples_rgb_grid


def test_white_is_d65():
    white = rgb_to_xyz(RGBA(255, 255, 255))
    assert isinstance(white, XYZ)
    assert np.allclose(white, D65, atol=1e-3)
    assert abs(white.y - 1.0) < 1e-9

def test_black_is_origin():
    assert rgb_to_xyz(RGBA(0, 0, 0)) == XYZ(0.0, 0.0, 0.0)

def test_primaries():
    x, y, z = linear_rgb_to_xyz(LinearRGB(1.0, 0.0, 0.0))
    assert abs(x - 0.4124) < 1e-4
    assert abs(y - 0.2126) < 1e-4
    assert abs(z - 0.0193) < 1e-4

def test_matrices_are_inverse():
    xyz = XYZ(0.3, 0.4, 0.5)
    back = linear_rgb_to_xyz(xyz_to_linear_rgb(xyz))
    # XYZ_TO_SRGB is the published Lindbloom inverse of the CSS SRGB_TO_XYZ
    # matrix rather than its exact inverse, so the pair drifts by ~1e-4
    assert np.allclose(back, xyz, atol=1e-3)

def test_alpha_argument():
    assert xyz_to_linear_rgb(XYZ(*D65), 0.5).a == 0.5
    assert xyz_to_rgb(XYZ(*D65), 0.5) == RGBA(255, 255, 255, 0.5)
    assert xyz_to_rgb(XYZ(*D65)).a == 1.0

def test_round_trip_grid():
    for rgb in samples_rgb_grid:
        assert xyz_to_rgb(rgb_to_xyz(RGBA(*rgb)))[:3] == rgb

def test_numpy_matches_scalar():
    rgb = np.array(samples_rgb_grid, dtype=float)
    xyz = np_rgb_to_xyz(rgb)
    expected = np.array([rgb_to_xyz(RGBA(*c)) for c in samples_rgb_grid])
    assert np.allclose(xyz, expected)
    assert np.array_equal(np_xyz_to_rgb(xyz), rgb)
