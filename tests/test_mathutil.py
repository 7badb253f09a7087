import math

import pytest

from splashraster.mathutil import (
    splash_avg,
    splash_ceil,
    splash_check_det,
    splash_dist,
    splash_floor,
    splash_round,
    stroke_adjust,
)

SAMPLES = [-3.75, -2.5, -1.0, -0.25, 0.0, 0.4, 0.5, 1.0, 2.49, 7.5, 123.456]


@pytest.mark.parametrize("x", SAMPLES)
def test_floor_bounds(x):
    f = splash_floor(x)
    assert isinstance(f, int)
    assert f <= x < f + 1


@pytest.mark.parametrize("x", SAMPLES)
def test_ceil_bounds(x):
    c = splash_ceil(x)
    assert isinstance(c, int)
    assert c - 1 < x <= c


@pytest.mark.parametrize("x", SAMPLES)
def test_round_nearest(x):
    r = splash_round(x)
    assert r - 0.5 <= x < r + 0.5


@pytest.mark.parametrize("k", [-4, -1, 0, 2, 10])
def test_round_half_goes_up(k):
    assert splash_round(k + 0.5) == k + 1


def test_avg_between_and_symmetric():
    for x, y in [(1.0, 3.0), (-2.0, 5.5), (4.0, 4.0)]:
        a = splash_avg(x, y)
        assert a == splash_avg(y, x)
        assert min(x, y) <= a <= max(x, y)
        assert math.isclose(a - x, y - a)


def test_dist_properties():
    assert splash_dist(0, 0, 3, 4) == 5
    assert splash_dist(1.5, -2.0, 1.5, -2.0) == 0
    assert splash_dist(1, 2, 7, -3) == splash_dist(7, -3, 1, 2)


def test_check_det():
    assert splash_check_det(1, 0, 0, 1, 0.01)
    assert not splash_check_det(1, 2, 2, 4, 0.01)
    assert not splash_check_det(0.001, 0, 0, 0.001, 0.01)


def test_stroke_adjust_documented_examples():
    assert stroke_adjust(10.1, 11.3) == (10, 11)
    assert stroke_adjust(10.4, 11.6) == (10, 12)


@pytest.mark.parametrize("lo,hi", [(5.0, 5.2), (3.3, 3.4), (-1.2, -1.1)])
def test_stroke_adjust_never_empty(lo, hi):
    x0, x1 = stroke_adjust(lo, hi)
    assert x0 == splash_round(lo)
    assert x1 == x0 + 1