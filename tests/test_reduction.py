# tests/test_reduction.py

import math

import pytest

from digicalc import range_reduce

TWO_PI = 2 * math.pi


def test_zero_and_small_angles():
    assert range_reduce(0.0) == 0.0
    assert range_reduce(1.0) == pytest.approx(1.0, abs=1e-15)
    assert range_reduce(math.pi / 2) == math.pi / 2

def test_exact_multiple_folds_to_zero():
    assert range_reduce(TWO_PI) == 0.0

@pytest.mark.parametrize("x", [0.5, 7.0, 100.0, 12345.678, 1.234e5])
def test_matches_fmod(x):
    assert range_reduce(x) == pytest.approx(math.fmod(x, TWO_PI), abs=1e-7)

@pytest.mark.parametrize("x", [0.5, 7.0, 100.0, 1e10, 1e20, 1e100, 1.7e308])
def test_result_in_principal_window(x):
    r = range_reduce(x)
    assert 0.0 <= r < TWO_PI

@pytest.mark.parametrize("x", [-1.0, float("nan"), float("inf")])
def test_rejects_bad_angles(x):
    with pytest.raises(ValueError):
        range_reduce(x)
