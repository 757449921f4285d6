import pytest

from okchroma.ops import mix, mix_colors
from okchroma.conversions.constants import DEFAULT_JND
from okchroma.types import RGBA, OKLCH

BLACK = OKLCH(0.0, 0.0, 0.0)
WHITE = OKLCH(1.0, 0.0, 0.0)
RED = OKLCH(0.6, 0.15, 30)
BLUE = OKLCH(0.4, 0.15, 260)


def hue_distance(h1, h2):
    d = abs(h1 - h2) % 360
    return min(d, 360 - d)

def test_mix_halfway():
    assert abs(mix(BLACK, WHITE).l - 0.5) < 1e-9

def test_mix_endpoints():
    start = mix(RED, BLUE, 0)
    end = mix(RED, BLUE, 1)
    assert abs(start.l - 0.6) < 1e-9
    assert abs(start.c - 0.15) < DEFAULT_JND
    assert hue_distance(start.h, 30) < 1e-9
    assert abs(end.l - 0.4) < 1e-9
    assert abs(end.c - 0.15) < DEFAULT_JND
    assert hue_distance(end.h, 260) < 1e-9

def test_mix_takes_short_way_round():
    result = mix(OKLCH(0.5, 0.2, 10), OKLCH(0.5, 0.2, 350))
    assert hue_distance(result.h, 0) < 1e-9
    result = mix(OKLCH(0.5, 0.1, 350), OKLCH(0.5, 0.1, 10), 0.25)
    assert hue_distance(result.h, 355) < 1e-9

def test_mix_alpha():
    result = mix(OKLCH(0.5, 0.1, 30, 1.0), OKLCH(0.5, 0.1, 30, 0.0))
    assert abs(result.a - 0.5) < 1e-12

def test_mix_clamps_ratio():
    a = OKLCH(0.3, 0.1, 30)
    b = OKLCH(0.7, 0.1, 200)
    assert abs(mix(a, b, -0.5).l - 0.3) < 1e-9
    assert abs(mix(a, b, 1.5).l - 0.7) < 1e-9

def test_mix_grays_stay_gray():
    result = mix(OKLCH(0.3, 0.0, 0.0), OKLCH(0.7, 0.0, 0.0))
    assert abs(result.l - 0.5) < 1e-9
    assert result.c == 0

def test_mix_rgb():
    assert mix(RGBA(255, 0, 0), RGBA(0, 0, 255), 0.5, "rgb") == RGBA(128, 0, 128, 1.0)
    assert mix(RGBA(0, 0, 0), RGBA(255, 255, 255), 0.25, "rgb").r == 64

def test_mix_result_follows_first_color():
    assert isinstance(mix(RGBA(255, 0, 0), RGBA(0, 255, 0)), RGBA)
    assert isinstance(mix(OKLCH(0.5, 0.1, 30), RGBA(0, 255, 0)), OKLCH)
    assert isinstance(mix(OKLCH(0.5, 0.1, 30), RGBA(0, 255, 0), space="rgb"), OKLCH)

def test_mix_rejects_other_spaces():
    with pytest.raises(ValueError):
        mix(RED, BLUE, space="hsl")
    with pytest.raises(ValueError):
        mix(RED, BLUE, space="cmyk")

def test_mix_colors_equal_weights():
    result = mix_colors([BLACK, WHITE])
    assert isinstance(result, OKLCH)
    assert abs(result.l - 0.5) < 1e-9

def test_mix_colors_weights():
    assert abs(mix_colors([BLACK, WHITE], [3, 1]).l - 0.25) < 1e-9

def test_mix_colors_single_color():
    assert mix_colors([RED]) is RED

def test_mix_colors_empty():
    with pytest.raises(ValueError, match="at least one color"):
        mix_colors([])

def test_mix_colors_bad_weights():
    with pytest.raises(ValueError):
        mix_colors([BLACK, WHITE], [1.0])
    with pytest.raises(ValueError):
        mix_colors([BLACK, WHITE], [])
    with pytest.raises(ValueError):
        mix_colors([BLACK, WHITE], [0.0, 0.0])

def test_mix_colors_rgb():
    result = mix_colors([RGBA(255, 0, 0), RGBA(0, 255, 0), RGBA(0, 0, 255)], space="rgb")
    assert isinstance(result, RGBA)
    assert result[:3] == (85, 85, 85)
    assert abs(result.a - 1.0) < 1e-12

def test_mix_colors_circular_hue_mean():
    result = mix_colors([OKLCH(0.5, 0.1, 10), OKLCH(0.5, 0.1, 350)])
    assert hue_distance(result.h, 0) < 1e-6
    result = mix_colors([OKLCH(0.5, 0.1, 0), OKLCH(0.5, 0.1, 120), OKLCH(0.5, 0.1, 240)])
    assert result.c < 0.15

def test_mix_colors_same_color():
    color = OKLCH(0.5, 0.1, 60, 0.8)
    result = mix_colors([color, color, color])
    assert abs(result.l - 0.5) < 1e-9
    assert abs(result.c - 0.1) < DEFAULT_JND
    assert abs(result.a - 0.8) < 1e-9
    assert hue_distance(result.h, 60) < 1e-6

def test_mix_colors_returns_oklch_for_any_input():
    assert isinstance(mix_colors([RGBA(255, 0, 0), RGBA(0, 0, 255)]), OKLCH)
