"""Halftone screens: threshold matrices used for dithering."""

from __future__ import annotations

import random
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum

from .mathutil import splash_round


class ScreenType(Enum):
    """Kind of threshold matrix."""

    DISPERSED = "dispersed"
    CLUSTERED = "clustered"
    STOCHASTIC_CLUSTERED = "stochasticClustered"


@dataclass
class ScreenParams:
    """Parameters for building a halftone screen."""

    screen_type: ScreenType = ScreenType.DISPERSED
    size: int = 2
    dot_radius: int = 2
    gamma: float = 1.0
    black_threshold: float = 0.0
    white_threshold: float = 1.0


class SplashScreen:
    """A square threshold matrix whose size is a power of two.

    Dispersed screens use recursive tesselation; clustered screens use a
    45 degree circular dot; stochastic clustered screens place dots along
    a random space-filling walk.
    """

    def __init__(self, params: ScreenParams | None = None) -> None:
        if params is None:
            params = ScreenParams()

        size, log2 = 2, 1
        while size < params.size:
            size <<= 1
            log2 += 1

        if params.screen_type is ScreenType.STOCHASTIC_CLUSTERED:
            while size < (params.dot_radius << 1):
                size <<= 1
                log2 += 1

        self._size = size
        self._log2_size = log2
        self._size_m1 = size - 1

        if params.screen_type is ScreenType.DISPERSED:
            mat = self._build_dispersed()
        elif params.screen_type is ScreenType.CLUSTERED:
            mat = self._build_clustered()
        else:
            mat = self._build_scd(params.dot_radius)

        black = max(splash_round(255.0 * params.black_threshold), 1)
        white = min(splash_round(255.0 * params.white_threshold), 255)
        min_val, max_val = 255, 0
        for i, m in enumerate(mat):
            u = splash_round(255.0 * ((m / 255.0) ** params.gamma)) & 0xFF
            if u < black:
                u = black & 0xFF
            elif u >= white:
                u = white & 0xFF
            mat[i] = u
            if u < min_val:
                min_val = u
            elif u > max_val:
                max_val = u
        self._mat = bytes(mat)
        self._min_val = min_val
        self._max_val = max_val

    @property
    def size(self) -> int:
        return self._size

    @property
    def matrix(self) -> bytes:
        """The threshold matrix, row by row."""
        return self._mat

    @property
    def min_val(self) -> int:
        return self._min_val

    @property
    def max_val(self) -> int:
        return self._max_val

    def copy(self) -> SplashScreen:
        """Return a copy of this screen."""
        other = SplashScreen.__new__(SplashScreen)
        other._size = self._size
        other._log2_size = self._log2_size
        other._size_m1 = self._size_m1
        other._mat = self._mat
        other._min_val = self._min_val
        other._max_val = self._max_val
        return other

    def test(self, x: int, y: int, value: int) -> int:
        """Return 0 (black) or 1 (white) for gray ``value`` at (x, y)."""
        xx = x & self._size_m1
        yy = y & self._size_m1
        return 0 if value < self._mat[(yy << self._log2_size) + xx] else 1

    def is_static(self, value: int) -> bool:
        """True if ``value`` halftones to solid black or solid white."""
        return value < self._min_val or value >= self._max_val

    # ----- matrix construction

    def _build_dispersed(self) -> list[int]:
        size, log2 = self._size, self._log2_size
        mat = [0] * (size * size)
        denom = size * size - 1

        def build(i: int, j: int, val: int, delta: int, offset: int) -> None:
            if delta == 0:
                # map values in [1, size^2] to [1, 255]
                mat[(i << log2) + j] = 1 + (254 * (val - 1)) // denom
                return
            half = delta // 2
            build(i, j, val, half, 4 * offset)
            build((i + delta) % size, (j + delta) % size, val + offset, half, 4 * offset)
            build((i + delta) % size, j, val + 2 * offset, half, 4 * offset)
            build((i + 2 * delta) % size, (j + delta) % size, val + 3 * offset, half, 4 * offset)

        build(size // 2, size // 2, 1, size // 2, 1)
        return mat

    def _build_clustered(self) -> list[int]:
        size, log2 = self._size, self._log2_size
        size2 = size >> 1
        mat = [0] * (size * size)

        dist = [0.0] * (size * size2)
        for y in range(size2):
            for x in range(size2):
                if x + y < size2 - 1:
                    u, v = x + 0.5, y + 0.5
                else:
                    u, v = x + 0.5 - size2, y + 0.5 - size2
                dist[y * size2 + x] = u * u + v * v
        for y in range(size2):
            for x in range(size2):
                if x < y:
                    u, v = x + 0.5, y + 0.5 - size2
                else:
                    u, v = x + 0.5 - size2, y + 0.5
                dist[(size2 + y) * size2 + x] = u * u + v * v

        denom = 2 * size * size2 - 1
        x1 = y1 = 0
        for i in range(size * size2):
            d = -1.0
            for y in range(size):
                for x in range(size2):
                    if mat[(y << log2) + x] == 0 and dist[y * size2 + x] > d:
                        x1, y1 = x, y
                        d = dist[y * size2 + x]
            # map values in [0, 2*size*size2-1] to [1, 255]
            mat[(y1 << log2) + x1] = 1 + (254 * (2 * i)) // denom
            val = 1 + (254 * (2 * i + 1)) // denom
            if y1 < size2:
                mat[((y1 + size2) << log2) + x1 + size2] = val
            else:
                mat[((y1 - size2) << log2) + x1 + size2] = val
        return mat

    def _distance(self, x0: int, y0: int, x1: int, y1: int) -> int:
        """Squared distance between two points on a torus."""
        size = self._size
        dx0 = abs(x0 - x1)
        dx = min(dx0, size - dx0)
        dy0 = abs(y0 - y1)
        dy = min(dy0, size - dy0)
        return dx * dx + dy * dy

    def _build_scd(self, r: int) -> list[int]:
        size, log2 = self._size, self._log2_size
        rng = random.Random(123)
        n_cells = size * size

        # random space-filling walk
        pts = [(x, y) for y in range(size) for x in range(size)]
        for i in range(n_cells):
            j = i + int((n_cells - i) * rng.random())
            pts[i], pts[j] = pts[j], pts[i]

        # walk the curve, placing dots on free cells
        grid = [[False] * size for _ in range(size)]
        dots: list[tuple[int, int]] = []
        for x, y in pts:
            if grid[y][x]:
                continue
            dots.append((x, y))
            for yy in range(r + 1):
                ya = (y + yy) % size
                yb = (y - yy) % size
                for xx in range(r + 1):
                    if xx * yy <= r * r:
                        xa = (x + xx) % size
                        xb = (x - xx) % size
                        grid[ya][xa] = True
                        grid[ya][xb] = True
                        grid[yb][xa] = True
                        grid[yb][xb] = True

        # assign each cell to its nearest dot
        regions: dict[int, list[tuple[int, int, int]]] = defaultdict(list)
        for y in range(size):
            for x in range(size):
                best, best_d = 0, self._distance(dots[0][0], dots[0][1], x, y)
                for k, (dx, dy) in enumerate(dots[1:], start=1):
                    d = self._distance(dx, dy, x, y)
                    if d < best_d:
                        best, best_d = k, d
                regions[best].append((x, y, best_d))

        # thresholds fall from the dot center outwards
        mat = [0] * n_cells
        for cells in regions.values():
            cells.sort(key=lambda cell: cell[2])
            denom = max(len(cells) - 1, 1)
            for j, (x, y, _) in enumerate(cells):
                # map [0 .. n-1] to [255 .. 1]
                mat[(y << log2) + x] = 255 - (254 * j) // denom
        return mat