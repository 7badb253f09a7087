"""Numeric helpers used throughout the rasterizer."""

from __future__ import annotations

import math


def splash_floor(x: float) -> int:
    """Largest integer not greater than ``x``."""
    return math.floor(x)


def splash_ceil(x: float) -> int:
    """Smallest integer not less than ``x``."""
    return math.ceil(x)


def splash_round(x: float) -> int:
    """Round to the nearest integer, with halves rounded up."""
    return math.floor(x + 0.5)


def splash_avg(x: float, y: float) -> float:
    """Arithmetic mean of two values."""
    return 0.5 * (x + y)


def splash_dist(x0: float, y0: float, x1: float, y1: float) -> float:
    """Euclidean distance between two points."""
    dx = x1 - x0
    dy = y1 - y0
    return math.sqrt(dx * dx + dy * dy)


def splash_check_det(
    m11: float, m12: float, m21: float, m22: float, epsilon: float
) -> bool:
    """True if the 2x2 matrix determinant is at least ``epsilon`` in magnitude."""
    return abs(m11 * m22 - m12 * m21) >= epsilon


def stroke_adjust(x_min: float, x_max: float) -> tuple[int, int]:
    """Map the range ``[x_min, x_max)`` to an integer range for stroke adjustment.

    Both edges are rounded, so adjacent strokes and fills line up without
    gaps or overlaps; an empty result is widened to one pixel.
    """
    x0 = splash_round(x_min)
    x1 = splash_round(x_max)
    if x1 == x0:
        x1 += 1
    return x0, x1