import math

import numpy as np

from okchroma.utils import (
    value_or_default,
    normalize_hue,
    np_normalize_hue,
    clamp,
    round_half_up,
    np_round_half_up,
    cbrt,
)

def test_value_or_default():
    assert value_or_default(None, 3) == 3
    assert value_or_default(0, 3) == 0
    assert value_or_default(False, True) is False

def test_value_or_default_keeps_empty_containers():
    empty = []
    assert value_or_default(empty, [1.0, 1.0]) is empty
    assert value_or_default(None, [1.0, 1.0]) == [1.0, 1.0]

def test_normalize_hue():
    assert normalize_hue(0) == 0
    assert normalize_hue(360) == 0
    assert normalize_hue(370) == 10
    assert normalize_hue(-30) == 330
    assert normalize_hue(-1e-20) == 0.0

def test_np_normalize_hue():
    result = np_normalize_hue(np.array([-30.0, 0.0, 360.0, 725.0, -1e-20]))
    assert np.allclose(result, [330.0, 0.0, 0.0, 5.0, 0.0])
    assert np.all(result < 360)

def test_clamp():
    assert clamp(5, 0, 1) == 1
    assert clamp(-5, 0, 1) == 0
    assert clamp(0.5, 0, 1) == 0.5

def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(-2.5) == -2
    assert round_half_up(127.49) == 127
    assert isinstance(round_half_up(1.2), int)
    assert math.isnan(round_half_up(float("nan")))
    assert round_half_up(float("inf")) == float("inf")

def test_np_round_half_up():
    assert np.array_equal(np_round_half_up([0.5, 1.5, 2.5, -0.5]), [1.0, 2.0, 3.0, 0.0])

def test_cbrt_keeps_sign():
    assert abs(cbrt(27.0) - 3.0) < 1e-12
    assert abs(cbrt(-8.0) + 2.0) < 1e-12
    assert cbrt(0.0) == 0.0
