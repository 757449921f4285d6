from okchroma.ops import invert
from okchroma.types import RGBA, HSLA, OKLCH


def test_invert_rgb():
    assert invert(RGBA(0, 0, 0, 0.5)) == RGBA(255, 255, 255, 0.5)
    assert invert(RGBA(255, 128, 0)) == RGBA(0, 127, 255, 1.0)

def test_invert_twice():
    color = RGBA(12, 200, 90, 0.7)
    assert invert(invert(color)) == color

def test_invert_keeps_input_type():
    cyan = invert(HSLA(0, 1, 0.5))
    assert isinstance(cyan, HSLA)
    assert abs(cyan.h - 180) < 1e-9
    assert abs(cyan.s - 1) < 1e-9
    assert abs(cyan.l - 0.5) < 1e-9

    white = invert(OKLCH(0.0, 0.0, 0.0))
    assert isinstance(white, OKLCH)
    assert abs(white.l - 1.0) < 1e-3
