"""Rectangular clipping regions in device space."""

from __future__ import annotations

from enum import Enum

from .mathutil import splash_ceil, splash_floor, stroke_adjust


class ClipResult(Enum):
    """Outcome of testing a rectangle against a clipping region."""

    ALL_INSIDE = 0    # every pixel of the rectangle is visible
    ALL_OUTSIDE = 1   # every pixel of the rectangle is clipped
    PARTIAL = 2       # part inside, part outside


class SplashClip:
    """A clipping region.

    The region is the floating point rectangle ``[x_min, x_max) x
    [y_min, y_max)``, further limited to the hard integer bounds
    ``[hard_x_min, hard_x_max) x [hard_y_min, hard_y_max)``.
    """

    def __init__(
        self, hard_x_min: int, hard_y_min: int, hard_x_max: int, hard_y_max: int
    ) -> None:
        self._hard_x_min = hard_x_min
        self._hard_y_min = hard_y_min
        self._hard_x_max = hard_x_max
        self._hard_y_max = hard_y_max
        self._x_min: float = hard_x_min
        self._y_min: float = hard_y_min
        self._x_max: float = hard_x_max
        self._y_max: float = hard_y_max
        self._x_min_i = self._y_min_i = self._x_max_i = self._y_max_i = 0
        self._int_bounds_valid = False
        self._int_bounds_stroke_adjust = False

    def copy(self) -> SplashClip:
        """Return an independent copy of this clip."""
        other = SplashClip(
            self._hard_x_min, self._hard_y_min, self._hard_x_max, self._hard_y_max
        )
        other._x_min = self._x_min
        other._y_min = self._y_min
        other._x_max = self._x_max
        other._y_max = self._y_max
        other._x_min_i = self._x_min_i
        other._y_min_i = self._y_min_i
        other._x_max_i = self._x_max_i
        other._y_max_i = self._y_max_i
        other._int_bounds_valid = self._int_bounds_valid
        other._int_bounds_stroke_adjust = self._int_bounds_stroke_adjust
        return other

    @property
    def x_min(self) -> float:
        return self._x_min

    @property
    def x_max(self) -> float:
        return self._x_max

    @property
    def y_min(self) -> float:
        return self._y_min

    @property
    def y_max(self) -> float:
        return self._y_max

    def reset_to_rect(self, x0: float, y0: float, x1: float, y1: float) -> None:
        """Replace the clip region with the given rectangle."""
        self._x_min, self._x_max = (x0, x1) if x0 < x1 else (x1, x0)
        self._y_min, self._y_max = (y0, y1) if y0 < y1 else (y1, y0)
        self._int_bounds_valid = False

    def clip_to_rect(self, x0: float, y0: float, x1: float, y1: float) -> None:
        """Intersect the clip region with the given rectangle."""
        lo_x, hi_x = (x0, x1) if x0 < x1 else (x1, x0)
        lo_y, hi_y = (y0, y1) if y0 < y1 else (y1, y0)
        if lo_x > self._x_min:
            self._x_min = lo_x
            self._int_bounds_valid = False
        if hi_x < self._x_max:
            self._x_max = hi_x
            self._int_bounds_valid = False
        if lo_y > self._y_min:
            self._y_min = lo_y
            self._int_bounds_valid = False
        if hi_y < self._y_max:
            self._y_max = hi_y
            self._int_bounds_valid = False

    def test_rect(
        self,
        rect_x_min: int,
        rect_y_min: int,
        rect_x_max: int,
        rect_y_max: int,
        stroke_adjust: bool,
    ) -> ClipResult:
        """Test the integer rectangle ``[min, max]`` against the region."""
        if stroke_adjust:
            # the region is [xMinI, xMaxI + 1) x [yMinI, yMaxI + 1)
            self._update_int_bounds(True)
            if self._x_min_i > self._x_max_i or self._y_min_i > self._y_max_i:
                return ClipResult.ALL_OUTSIDE
            if (
                rect_x_max + 1 <= self._x_min_i
                or rect_x_min >= self._x_max_i + 1
                or rect_y_max + 1 <= self._y_min_i
                or rect_y_min >= self._y_max_i + 1
            ):
                return ClipResult.ALL_OUTSIDE
            if (
                rect_x_min >= self._x_min_i
                and rect_x_max <= self._x_max_i
                and rect_y_min >= self._y_min_i
                and rect_y_max <= self._y_max_i
            ):
                return ClipResult.ALL_INSIDE
        else:
            if self._x_min >= self._x_max or self._y_min >= self._y_max:
                return ClipResult.ALL_OUTSIDE
            if (
                rect_x_max + 1 <= self._x_min
                or rect_x_min >= self._x_max
                or rect_y_max + 1 <= self._y_min
                or rect_y_min >= self._y_max
            ):
                return ClipResult.ALL_OUTSIDE
            if (
                rect_x_min >= self._x_min
                and rect_x_max + 1 <= self._x_max
                and rect_y_min >= self._y_min
                and rect_y_max + 1 <= self._y_max
            ):
                return ClipResult.ALL_INSIDE
        return ClipResult.PARTIAL

    def _clip_int_span(
        self, line: bytearray, y: int, x0: int, x1: int
    ) -> tuple[int, int] | None:
        """Zero the parts of ``line[x0..x1]`` outside the integer bounds.

        Returns the remaining inclusive span, or None if nothing is left.
        """
        if (
            y < self._y_min_i
            or y > self._y_max_i
            or x1 < self._x_min_i
            or x0 > self._x_max_i
        ):
            if x0 <= x1:
                line[x0:x1 + 1] = bytes(x1 - x0 + 1)
            return None
        if x0 > self._x_min_i:
            x0a = x0
        else:
            x0a = self._x_min_i
            line[x0:x0a] = bytes(x0a - x0)
        if x1 < self._x_max_i:
            x1a = x1
        else:
            x1a = self._x_max_i
            line[x1a + 1:x1 + 1] = bytes(x1 - x1a)
        if x0a > x1a:
            return None
        return x0a, x1a

    def clip_span(
        self, line: bytearray, y: int, x0: int, x1: int, stroke_adjust: bool
    ) -> None:
        """Multiply ``line[x0..x1]`` in place by the clip coverage on row ``y``."""
        self._update_int_bounds(stroke_adjust)
        span = self._clip_int_span(line, y, x0, x1)
        if span is None or stroke_adjust:
            return
        x0a, x1a = span

        def scale(x: int, d: float) -> None:
            line[x] = int(line[x] * d) & 0xFF

        if x0a == self._x_min_i:
            scale(x0a, (self._x_min_i + 1) - self._x_min)
        if x1a == self._x_max_i:
            scale(x1a, self._x_max - self._x_max_i)
        if y == self._y_min_i:
            d = (self._y_min_i + 1) - self._y_min
            for x in range(x0a, x1a + 1):
                scale(x, d)
        if y == self._y_max_i:
            d = self._y_max - self._y_max_i
            for x in range(x0a, x1a + 1):
                scale(x, d)

    def clip_span_binary(
        self, line: bytearray, y: int, x0: int, x1: int, stroke_adjust: bool
    ) -> bool:
        """Clip ``line[x0..x1]`` in place to all-or-nothing coverage.

        Returns True if any non-zero value remains in the span.
        """
        self._update_int_bounds(stroke_adjust)
        span = self._clip_int_span(line, y, x0, x1)
        if span is None:
            return False
        x0a, x1a = span
        return any(line[x0a:x1a + 1])

    def get_x_min_i(self, stroke_adjust: bool) -> int:
        self._update_int_bounds(stroke_adjust)
        return self._x_min_i

    def get_x_max_i(self, stroke_adjust: bool) -> int:
        self._update_int_bounds(stroke_adjust)
        return self._x_max_i

    def get_y_min_i(self, stroke_adjust: bool) -> int:
        self._update_int_bounds(stroke_adjust)
        return self._y_min_i

    def get_y_max_i(self, stroke_adjust: bool) -> int:
        self._update_int_bounds(stroke_adjust)
        return self._y_max_i

    def _update_int_bounds(self, adjust: bool) -> None:
        if self._int_bounds_valid and adjust == self._int_bounds_stroke_adjust:
            return
        if adjust:
            x_min_i, x_max_i = stroke_adjust(self._x_min, self._x_max)
            y_min_i, y_max_i = stroke_adjust(self._y_min, self._y_max)
        else:
            x_min_i = splash_floor(self._x_min)
            y_min_i = splash_floor(self._y_min)
            x_max_i = splash_ceil(self._x_max)
            y_max_i = splash_ceil(self._y_max)
        x_min_i = max(x_min_i, self._hard_x_min)
        y_min_i = max(y_min_i, self._hard_y_min)
        x_max_i = min(x_max_i, self._hard_x_max)
        y_max_i = min(y_max_i, self._hard_y_max)
        # the span code works with the inclusive range [min, max]
        self._x_min_i = x_min_i
        self._y_min_i = y_min_i
        self._x_max_i = x_max_i - 1
        self._y_max_i = y_max_i - 1
        self._int_bounds_valid = True
        self._int_bounds_stroke_adjust = adjust