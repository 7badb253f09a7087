"""Vector paths made of lines and cubic Bezier curves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

from .errors import BogusPathError, NoCurrentPointError


class PathFlag(IntFlag):
    """Per-point flags on a path."""

    NONE = 0
    FIRST = 0x01   # first point of a subpath
    LAST = 0x02    # last point of a subpath
    CLOSED = 0x04  # set on first and last points of a closed subpath
    CURVE = 0x08   # curve control point


@dataclass
class PathPoint:
    """A point on a path."""

    x: float
    y: float


@dataclass(frozen=True)
class PathHint:
    """A stroke adjustment hint.

    ``ctrl0`` and ``ctrl1`` identify the controlling segments by their
    first point; points ``first_pt`` .. ``last_pt`` are adjusted.
    """

    ctrl0: int
    ctrl1: int
    first_pt: int
    last_pt: int


class SplashPath:
    """A sequence of subpaths.

    The path is in one of three states: no current point (zero or more
    finished subpaths), a subpath holding one point, or an open subpath
    with two or more points.
    """

    def __init__(self) -> None:
        self._pts: list[PathPoint] = []
        self._flags: list[PathFlag] = []
        self._cur_subpath = 0
        self._hints: list[PathHint] = []

    def copy(self) -> SplashPath:
        """Return an independent copy of this path."""
        other = SplashPath()
        other._pts = [PathPoint(p.x, p.y) for p in self._pts]
        other._flags = list(self._flags)
        other._cur_subpath = self._cur_subpath
        other._hints = list(self._hints)
        return other

    def __len__(self) -> int:
        return len(self._pts)

    @property
    def hints(self) -> tuple[PathHint, ...]:
        """The stroke adjustment hints, in the order they were added."""
        return tuple(self._hints)

    def _no_current_point(self) -> bool:
        return self._cur_subpath == len(self._pts)

    def _one_point_subpath(self) -> bool:
        return self._cur_subpath == len(self._pts) - 1

    def append(self, path: SplashPath) -> None:
        """Append the points of ``path`` to this path."""
        self._cur_subpath = len(self._pts) + path._cur_subpath
        self._pts.extend(PathPoint(p.x, p.y) for p in path._pts)
        self._flags.extend(path._flags)

    def move_to(self, x: float, y: float) -> None:
        """Start a new subpath at (x, y)."""
        if self._one_point_subpath():
            raise BogusPathError()
        self._cur_subpath = len(self._pts)
        self._pts.append(PathPoint(x, y))
        self._flags.append(PathFlag.FIRST | PathFlag.LAST)

    def line_to(self, x: float, y: float) -> None:
        """Add a line segment to the last subpath."""
        if self._no_current_point():
            raise NoCurrentPointError()
        self._flags[-1] &= ~PathFlag.LAST
        self._pts.append(PathPoint(x, y))
        self._flags.append(PathFlag.LAST)

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
    ) -> None:
        """Add a cubic Bezier segment to the last subpath."""
        if self._no_current_point():
            raise NoCurrentPointError()
        self._flags[-1] &= ~PathFlag.LAST
        self._pts.extend((PathPoint(x1, y1), PathPoint(x2, y2), PathPoint(x3, y3)))
        self._flags.extend((PathFlag.CURVE, PathFlag.CURVE, PathFlag.LAST))

    def close(self, force: bool = False) -> None:
        """Close the last subpath, adding a line segment if needed.

        With ``force`` a segment is added even if the current point equals
        the first point of the subpath.
        """
        if self._no_current_point():
            raise NoCurrentPointError()
        first = self._pts[self._cur_subpath]
        last = self._pts[-1]
        if (
            force
            or self._one_point_subpath()
            or last.x != first.x
            or last.y != first.y
        ):
            self.line_to(first.x, first.y)
        self._flags[self._cur_subpath] |= PathFlag.CLOSED
        self._flags[-1] |= PathFlag.CLOSED
        self._cur_subpath = len(self._pts)

    def add_stroke_adjust_hint(
        self, ctrl0: int, ctrl1: int, first_pt: int, last_pt: int
    ) -> None:
        """Record a stroke adjustment hint."""
        self._hints.append(PathHint(ctrl0, ctrl1, first_pt, last_pt))

    def offset(self, dx: float, dy: float) -> None:
        """Add (dx, dy) to every point on the path."""
        for p in self._pts:
            p.x += dx
            p.y += dy

    def get_point(self, i: int) -> tuple[float, float, PathFlag]:
        """Return ``(x, y, flags)`` for point ``i``."""
        p = self._pts[i]
        return p.x, p.y, self._flags[i]

    def current_point(self) -> tuple[float, float] | None:
        """Return the current point, or None if there is none."""
        if self._no_current_point():
            return None
        p = self._pts[-1]
        return p.x, p.y