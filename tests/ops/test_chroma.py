from okchroma.ops import saturate, desaturate, grayscale
from okchroma.conversions import is_in_gamut
from okchroma.types import RGBA, HSLA, OKLCH


def test_saturate_small_step():
    result = saturate(OKLCH(0.6, 0.05, 30), 0.02)
    assert abs(result.c - 0.07) < 1e-12
    assert result.l == 0.6 and result.h == 30

def test_saturate_stays_in_gamut():
    for h in (30, 140, 200, 260, 330):
        result = saturate(OKLCH(0.6, 0.1, h), 1.0)
        assert is_in_gamut(result)
    # red has room well past 0.1 chroma at this lightness
    assert saturate(OKLCH(0.6, 0.1, 30), 1.0).c > 0.1

def test_desaturate_floors_at_zero():
    result = desaturate(OKLCH(0.5, 0.05, 100), 1.0)
    assert result.c == 0.0

def test_grayscale():
    assert grayscale(OKLCH(0.6, 0.2, 30, 0.8)) == OKLCH(0.6, 0.0, 30, 0.8)
    gray = grayscale(RGBA(255, 0, 0, 0.3))
    assert isinstance(gray, RGBA)
    assert max(gray[:3]) - min(gray[:3]) <= 1
    assert gray.a == 0.3

def test_keeps_input_type():
    assert isinstance(saturate(HSLA(200, 0.3, 0.5), 0.05), HSLA)
    assert isinstance(desaturate(RGBA(200, 40, 40), 0.05), RGBA)
