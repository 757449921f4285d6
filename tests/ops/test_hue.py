from okchroma.ops import rotate, complement
from okchroma.types import RGBA, OKLCH


def test_rotate_wraps():
    assert rotate(OKLCH(0.5, 0.1, 30), 720).h == 30
    assert rotate(OKLCH(0.5, 0.1, 0), -90).h == 270
    assert rotate(OKLCH(0.5, 0.1, 350), 20).h == 10

def test_rotate_keeps_other_channels():
    result = rotate(OKLCH(0.4, 0.08, 100, 0.6), 45)
    assert result == OKLCH(0.4, 0.08, 145, 0.6)

def test_complement():
    assert complement(OKLCH(0.5, 0.1, 300)).h == 120
    assert complement(OKLCH(0.5, 0.1, 30)).h == 210

def test_rotate_rgb():
    result = rotate(RGBA(200, 60, 60), 120)
    assert isinstance(result, RGBA)
    # red turned a third of the way round lands in the greens
    assert result.g > result.r and result.g > result.b
