from okchroma.ops import lighten, darken, invert_lightness
from okchroma.a11y import luminance
from okchroma.types import RGBA, HSLA, OKLCH


def test_lighten_oklch():
    result = lighten(OKLCH(0.5, 0.1, 200, 0.4), 0.2)
    assert isinstance(result, OKLCH)
    assert abs(result.l - 0.7) < 1e-12
    assert result[1:] == (0.1, 200, 0.4)

def test_lighten_clamps():
    assert lighten(OKLCH(0.9, 0.0, 0.0), 0.5).l == 1.0
    assert darken(OKLCH(0.1, 0.0, 0.0), 0.5).l == 0.0

def test_darken_is_negative_lighten():
    color = OKLCH(0.6, 0.12, 40)
    assert darken(color, 0.15) == lighten(color, -0.15)

def test_keeps_input_type():
    fg = RGBA(100, 50, 50, 0.5)
    lighter = lighten(fg, 0.1)
    assert isinstance(lighter, RGBA)
    assert lighter.a == 0.5
    assert luminance(lighter) > luminance(fg)
    assert isinstance(darken(HSLA(200, 0.5, 0.5), 0.1), HSLA)

def test_invert_lightness():
    result = invert_lightness(OKLCH(0.3, 0.05, 120, 0.5))
    assert abs(result.l - 0.7) < 1e-12
    assert result[1:] == (0.05, 120, 0.5)
    assert invert_lightness(RGBA(0, 0, 0)) == RGBA(255, 255, 255, 1.0)
