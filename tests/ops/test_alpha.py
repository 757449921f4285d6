from okchroma.ops import alpha, opacify, transparentize
from okchroma.types import RGBA, XYZ, OKLCH


def test_alpha_clamps():
    color = OKLCH(0.5, 0.1, 200, 0.4)
    assert alpha(color, 0.25) == OKLCH(0.5, 0.1, 200, 0.25)
    assert alpha(color, 2).a == 1.0
    assert alpha(color, -1).a == 0.0

def test_alpha_rgb():
    result = alpha(RGBA(10, 120, 200), 0.25)
    assert isinstance(result, RGBA)
    assert result.a == 0.25
    for got, expected in zip(result[:3], (10, 120, 200)):
        assert abs(got - expected) <= 1

def test_opacify_and_transparentize():
    color = OKLCH(0.5, 0.0, 0.0, 0.5)
    assert abs(opacify(color, 0.3).a - 0.8) < 1e-12
    assert opacify(color, 1.0).a == 1.0
    assert transparentize(color, 0.7).a == 0.0
    assert transparentize(color, 0.2) == opacify(color, -0.2)

def test_spaces_without_alpha():
    assert isinstance(alpha(XYZ(0.3, 0.4, 0.5), 0.5), XYZ)
