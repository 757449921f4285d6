import numpy as np
import pytest

from okchroma.conversions import convert, np_convert, to_rgba
from okchroma.types import RGBA, LinearRGB, XYZ, Oklab, OKLCH, HSLA, P3, ColorSpace


def test_convert_returns_target_type():
    red = RGBA(255, 0, 0)
    expected_types = {
        ColorSpace.RGB: RGBA,
        ColorSpace.LINEAR_RGB: LinearRGB,
        ColorSpace.XYZ: XYZ,
        ColorSpace.OKLAB: Oklab,
        ColorSpace.OKLCH: OKLCH,
        ColorSpace.HSL: HSLA,
        ColorSpace.P3: P3,
    }
    for space, cls in expected_types.items():
        result = convert(red, space)
        assert isinstance(result, cls)
        assert result.space is space

def test_string_spaces_are_case_insensitive():
    assert convert(RGBA(255, 0, 0), "hsl") == HSLA(0.0, 1.0, 0.5, 1.0)
    assert convert(RGBA(255, 0, 0), "HSL") == HSLA(0.0, 1.0, 0.5, 1.0)
    assert convert(RGBA(255, 0, 0), "OkLch") == convert(RGBA(255, 0, 0), ColorSpace.OKLCH)

def test_same_space_returns_copy():
    color = OKLCH(0.5, 0.1, 200, 0.4)
    result = convert(color, "oklch")
    assert result == color
    assert result is not color

def test_unknown_space():
    with pytest.raises(ValueError):
        convert(RGBA(0, 0, 0), "cmyk")

def test_non_color_input():
    with pytest.raises(TypeError):
        convert((255, 0, 0), "hsl")

def test_hsl_to_oklch_goes_through_rgb():
    lch = convert(HSLA(0, 1, 0.5), "oklch")
    assert abs(lch.l - 0.628) < 5e-3
    assert abs(lch.c - 0.258) < 5e-3
    assert abs(lch.h - 29.2) < 0.5

def test_oklch_to_rgb():
    assert convert(OKLCH(0.0, 0.0, 0.0), "rgb") == RGBA(0, 0, 0, 1.0)
    assert convert(OKLCH(1.0, 0.0, 0.0), "rgb") == RGBA(255, 255, 255, 1.0)
    assert convert(OKLCH(0.5, 0.1, 10, 0.75), "rgb").a == 0.75

def test_alpha_across_spaces():
    color = RGBA(10, 120, 200, 0.3)
    for space in (ColorSpace.LINEAR_RGB, ColorSpace.OKLCH, ColorSpace.HSL, ColorSpace.P3):
        assert convert(color, space).a == 0.3
    # XYZ and Oklab carry no alpha, coming back defaults it to opaque
    assert convert(convert(color, "xyz"), "rgb").a == 1.0
    assert convert(convert(color, "oklab"), "rgb").a == 1.0

def test_to_rgba():
    assert to_rgba(HSLA(120, 1, 0.5, 0.5)) == RGBA(0, 255, 0, 0.5)
    assert to_rgba(P3(1.0, 1.0, 1.0)) == RGBA(255, 255, 255, 1.0)

def test_np_convert_matches_scalar():
    colors = [RGBA(255, 0, 0), RGBA(12, 200, 90), RGBA(128, 128, 128), RGBA(3, 4, 250)]
    rgb = np.array([c[:3] for c in colors], dtype=float)
    for space in ColorSpace:
        result = np_convert(rgb, "rgb", space)
        expected = np.array([convert(c, space)[:3] for c in colors])
        assert result.shape == (4, 3)
        assert np.allclose(result, expected)

def test_np_convert_back_to_rgb():
    rgb = np.array([[255, 0, 0], [12, 200, 90], [128, 128, 128]], dtype=float)
    for space in ColorSpace:
        back = np_convert(np_convert(rgb, ColorSpace.RGB, space), space, ColorSpace.RGB)
        assert np.allclose(back, rgb, atol=1)

def test_np_convert_alpha():
    rgba = np.array([[255, 0, 0, 0.5], [0, 0, 255, 1.0]])
    hsla = np_convert(rgba, "rgb", "hsl")
    assert hsla.shape == (2, 4)
    assert np.array_equal(hsla[..., 3], [0.5, 1.0])
    assert np_convert(rgba, "rgb", "xyz").shape == (2, 3)

def test_np_convert_rejects_alpha_for_xyz():
    with pytest.raises(ValueError):
        np_convert(np.zeros((2, 4)), "xyz", "rgb")

def test_np_convert_rejects_bad_shape():
    with pytest.raises(ValueError):
        np_convert(np.zeros((2, 5)), "rgb", "hsl")

def test_np_convert_same_space_copies():
    arr = np.array([[1.0, 2.0, 3.0]])
    result = np_convert(arr, "rgb", "rgb")
    assert np.array_equal(result, arr)
    assert result is not arr

def test_cross_space_goes_through_8bit_rgba():
    from okchroma.conversions import linear_rgb_to_xyz, rgb_to_xyz

    gray = LinearRGB(0.5, 0.5, 0.5)
    via_convert = convert(gray, "xyz")
    assert via_convert == rgb_to_xyz(to_rgba(gray))
    assert abs(via_convert.x - 0.47797) < 1e-4
    assert abs(linear_rgb_to_xyz(gray).x - 0.47523) < 1e-4
