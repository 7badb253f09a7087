"""Graphics state: transform, patterns, line style, clip and transfer tables."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum
from typing import Any, Callable

from .bitmap import SplashBitmap
from .clip import SplashClip
from .pattern import SplashPattern, SplashSolidColor
from .screen import ScreenParams, SplashScreen

# number of bytes in a color value (enough for CMYK)
_MAX_COLOR_COMPS = 4

_IDENTITY = bytes(range(256))


class LineCap(IntEnum):
    """How the ends of open stroked subpaths are drawn."""

    BUTT = 0
    ROUND = 1
    PROJECTING = 2


class LineJoin(IntEnum):
    """How corners of stroked paths are drawn."""

    MITER = 0
    ROUND = 1
    BEVEL = 2


def _table(values: Sequence[int], name: str) -> bytes:
    table = bytes(values)
    if len(table) != 256:
        raise ValueError(f"{name} transfer table must have 256 entries, got {len(table)}")
    return table


class SplashState:
    """One entry of the graphics state stack.

    The clip region is shared with the state a copy was made from until
    one of them changes it; it is copied on the first write.
    """

    def __init__(
        self,
        width: int,
        height: int,
        vector_antialias: bool = False,
        screen: SplashScreen | ScreenParams | None = None,
    ) -> None:
        self.matrix: list[float] = [1.0, 0.0, 0.0, 1.0, 0.0, 0.0]
        black = bytes(_MAX_COLOR_COMPS)
        self.stroke_pattern: SplashPattern = SplashSolidColor(black)
        self.fill_pattern: SplashPattern = SplashSolidColor(black)
        if isinstance(screen, SplashScreen):
            self.screen = screen.copy()
        else:
            self.screen = SplashScreen(screen)
        self.blend_func: Callable[..., Any] | None = None
        self.stroke_alpha = 1.0
        self.fill_alpha = 1.0
        self.line_width = 1.0
        self.line_cap = LineCap.BUTT
        self.line_join = LineJoin.MITER
        self.miter_limit = 10.0
        self.flatness = 1.0
        self.line_dash: tuple[float, ...] = ()
        self.line_dash_phase = 0.0
        self.stroke_adjust = False
        self._clip = SplashClip(0, 0, width, height)
        self._clip_is_shared = False
        self.soft_mask: SplashBitmap | None = None
        self.in_non_isolated_group = False
        self.in_knockout_group = False
        self.rgb_transfer_r = _IDENTITY
        self.rgb_transfer_g = _IDENTITY
        self.rgb_transfer_b = _IDENTITY
        self.gray_transfer = _IDENTITY
        self.cmyk_transfer_c = _IDENTITY
        self.cmyk_transfer_m = _IDENTITY
        self.cmyk_transfer_y = _IDENTITY
        self.cmyk_transfer_k = _IDENTITY
        self.overprint_mask = 0xFFFFFFFF
        self.next: SplashState | None = None

    @property
    def clip(self) -> SplashClip:
        """The current clip region (treat as read-only; use the clip methods)."""
        return self._clip

    def copy(self) -> SplashState:
        """Return a copy for saving on the state stack; the clip is shared."""
        other = SplashState.__new__(SplashState)
        other.matrix = list(self.matrix)
        other.stroke_pattern = self.stroke_pattern.copy()
        other.fill_pattern = self.fill_pattern.copy()
        other.screen = self.screen.copy()
        other.blend_func = self.blend_func
        other.stroke_alpha = self.stroke_alpha
        other.fill_alpha = self.fill_alpha
        other.line_width = self.line_width
        other.line_cap = self.line_cap
        other.line_join = self.line_join
        other.miter_limit = self.miter_limit
        other.flatness = self.flatness
        other.line_dash = self.line_dash
        other.line_dash_phase = self.line_dash_phase
        other.stroke_adjust = self.stroke_adjust
        other._clip = self._clip
        other._clip_is_shared = True
        other.soft_mask = self.soft_mask
        other.in_non_isolated_group = self.in_non_isolated_group
        other.in_knockout_group = self.in_knockout_group
        other.rgb_transfer_r = self.rgb_transfer_r
        other.rgb_transfer_g = self.rgb_transfer_g
        other.rgb_transfer_b = self.rgb_transfer_b
        other.gray_transfer = self.gray_transfer
        other.cmyk_transfer_c = self.cmyk_transfer_c
        other.cmyk_transfer_m = self.cmyk_transfer_m
        other.cmyk_transfer_y = self.cmyk_transfer_y
        other.cmyk_transfer_k = self.cmyk_transfer_k
        other.overprint_mask = self.overprint_mask
        other.next = None
        return other

    def set_line_dash(self, line_dash: Sequence[float], phase: float) -> None:
        """Set the dash pattern; the sequence is copied."""
        self.line_dash = tuple(line_dash)
        self.line_dash_phase = phase

    def _own_clip(self) -> SplashClip:
        if self._clip_is_shared:
            self._clip = self._clip.copy()
            self._clip_is_shared = False
        return self._clip

    def clip_reset_to_rect(self, x0: float, y0: float, x1: float, y1: float) -> None:
        """Replace the clip region with a rectangle."""
        self._own_clip().reset_to_rect(x0, y0, x1, y1)

    def clip_to_rect(self, x0: float, y0: float, x1: float, y1: float) -> None:
        """Intersect the clip region with a rectangle."""
        self._own_clip().clip_to_rect(x0, y0, x1, y1)

    def set_soft_mask(self, soft_mask: SplashBitmap | None) -> None:
        """Set the soft mask bitmap."""
        self.soft_mask = soft_mask

    def set_transfer(
        self,
        red: Sequence[int],
        green: Sequence[int],
        blue: Sequence[int],
        gray: Sequence[int],
    ) -> None:
        """Set the transfer tables; the CMYK tables are derived from them."""
        r = _table(red, "red")
        g = _table(green, "green")
        b = _table(blue, "blue")
        k = _table(gray, "gray")
        self.rgb_transfer_r = r
        self.rgb_transfer_g = g
        self.rgb_transfer_b = b
        self.gray_transfer = k
        self.cmyk_transfer_c = bytes(255 - r[255 - i] for i in range(256))
        self.cmyk_transfer_m = bytes(255 - g[255 - i] for i in range(256))
        self.cmyk_transfer_y = bytes(255 - b[255 - i] for i in range(256))
        self.cmyk_transfer_k = bytes(255 - k[255 - i] for i in range(256))