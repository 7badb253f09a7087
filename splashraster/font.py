"""Scaled fonts, font files and the glyph bitmap cache."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from .path import SplashPath

# fractional glyph positioning uses this many bits
FONT_FRACTION_BITS = 2
FONT_FRACTION = 1 << FONT_FRACTION_BITS
FONT_FRACTION_MUL = 1.0 / FONT_FRACTION

# glyph cache parameters
_CACHE_ASSOC = 8
_CACHE_MAX_SETS = 8
_CACHE_SIZE = 128 * 1024

_VALID = 0x80000000
_AGE = 0x7FFFFFFF


@dataclass
class GlyphBitmap:
    """A rasterized glyph.

    With ``aa`` the data is an 8-bit alpha bitmap of ``w`` bytes per row;
    otherwise it is 1 bit per pixel, rows padded to whole bytes.
    """

    x: int
    y: int
    w: int
    h: int
    aa: bool
    data: bytes


@dataclass
class _CacheTag:
    mru: int
    c: int = 0
    x_frac: int = 0
    y_frac: int = 0
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    data: bytes = b""


class SplashFontFileID(ABC):
    """Identifies a font file, so that it can be found in a cache."""

    @abstractmethod
    def matches(self, other: SplashFontFileID) -> bool:
        """True if ``other`` identifies the same font file."""


class SplashFontFile(ABC):
    """A loaded font file, shared by the fonts scaled from it.

    It is reference counted: each font made from it holds one reference.
    """

    def __init__(self, font_id: SplashFontFileID) -> None:
        self._id = font_id
        self._ref_count = 0

    @property
    def font_id(self) -> SplashFontFileID:
        return self._id

    @property
    def ref_count(self) -> int:
        return self._ref_count

    @abstractmethod
    def make_font(self, mat: Sequence[float], text_mat: Sequence[float]) -> SplashFont:
        """Create a scaled instance of this font file."""

    def inc_ref(self) -> None:
        """Take a reference."""
        self._ref_count += 1

    def dec_ref(self) -> None:
        """Drop a reference; the file is released when none remain."""
        if self._ref_count <= 0:
            raise ValueError("font file reference count is already zero")
        self._ref_count -= 1
        if self._ref_count == 0:
            self._release()

    def _release(self) -> None:
        """Free resources held by the file; called when the last reference goes."""


class SplashFont(ABC):
    """A font file scaled by a transform, with a cache of glyph bitmaps.

    Subclasses set the bounding box (``x_min`` .. ``y_max``) in their
    constructor and then call :meth:`init_cache`.
    """

    def __init__(
        self,
        font_file: SplashFontFile,
        mat: Sequence[float],
        text_mat: Sequence[float],
        aa: bool,
    ) -> None:
        self.font_file = font_file
        font_file.inc_ref()
        self.mat = tuple(mat[:4])
        self.text_mat = tuple(text_mat[:4])
        self.aa = aa
        self.x_min = self.y_min = self.x_max = self.y_max = 0
        self.glyph_w = self.glyph_h = self.glyph_size = 0
        self._cache_sets = 0
        self._cache_assoc = _CACHE_ASSOC
        self._tags: list[_CacheTag] | None = None
        self._released = False

    def init_cache(self) -> None:
        """Size and clear the glyph cache from the bounding box."""
        # padding of 2 beyond (max - min + 1) absorbs rounding errors
        self.glyph_w = self.x_max - self.x_min + 3
        self.glyph_h = self.y_max - self.y_min + 3
        if self.aa:
            self.glyph_size = self.glyph_w * self.glyph_h
        else:
            self.glyph_size = ((self.glyph_w + 7) >> 3) * self.glyph_h
        sets = _CACHE_MAX_SETS
        while sets > 1 and sets * self._cache_assoc * self.glyph_size > _CACHE_SIZE:
            sets >>= 1
        self._cache_sets = sets
        self._tags = [
            _CacheTag(mru=i & (self._cache_assoc - 1))
            for i in range(sets * self._cache_assoc)
        ]

    def release(self) -> None:
        """Drop this font's reference to its font file."""
        if not self._released:
            self._released = True
            self.font_file.dec_ref()

    def matches(
        self,
        font_file: SplashFontFile,
        mat: Sequence[float],
        text_mat: Sequence[float],
    ) -> bool:
        """True if this font was made from ``font_file`` with these matrices."""
        return (
            font_file is self.font_file
            and tuple(mat[:4]) == self.mat
            and tuple(text_mat[:4]) == self.text_mat
        )

    def get_glyph(self, c: int, x_frac: int, y_frac: int) -> GlyphBitmap | None:
        """Return the glyph bitmap for ``c``, from the cache if possible.

        ``x_frac`` and ``y_frac`` are numerators of fractions with
        denominator :data:`FONT_FRACTION`.  Returns None if the glyph
        cannot be made.
        """
        if self._tags is None:
            raise RuntimeError("glyph cache not initialised; call init_cache()")

        # no fractional positions for large or non-anti-aliased glyphs
        if not self.aa or self.glyph_h > 50:
            x_frac = y_frac = 0

        assoc = self._cache_assoc
        base = (c & (self._cache_sets - 1)) * assoc
        tags = self._tags[base:base + assoc]

        for j, tag in enumerate(tags):
            if (
                tag.mru & _VALID
                and tag.c == c
                and tag.x_frac == x_frac
                and tag.y_frac == y_frac
            ):
                age = tag.mru & _AGE
                for k, other in enumerate(tags):
                    if k != j and (other.mru & _AGE) < age:
                        other.mru += 1
                tag.mru = _VALID
                return GlyphBitmap(tag.x, tag.y, tag.w, tag.h, self.aa, tag.data)

        glyph = self.make_glyph(c, x_frac, y_frac)
        if glyph is None:
            return None

        # glyphs larger than the bounding box are returned uncached
        if glyph.w > self.glyph_w or glyph.h > self.glyph_h:
            return glyph

        if self.aa:
            size = glyph.w * glyph.h
        else:
            size = ((glyph.w + 7) >> 3) * glyph.h
        data = bytes(glyph.data[:size])
        for tag in tags:
            if (tag.mru & _AGE) == assoc - 1:
                tag.mru = _VALID
                tag.c = c
                tag.x_frac = x_frac
                tag.y_frac = y_frac
                tag.x, tag.y, tag.w, tag.h = glyph.x, glyph.y, glyph.w, glyph.h
                tag.data = data
            else:
                tag.mru += 1
        return GlyphBitmap(glyph.x, glyph.y, glyph.w, glyph.h, glyph.aa, data)

    @abstractmethod
    def make_glyph(self, c: int, x_frac: int, y_frac: int) -> GlyphBitmap | None:
        """Rasterize glyph ``c``; return None if it cannot be made."""

    @abstractmethod
    def get_glyph_path(self, c: int) -> SplashPath | None:
        """Return the outline of glyph ``c``, or None."""

    def bbox(self) -> tuple[int, int, int, int]:
        """The glyph bounding box ``(x_min, y_min, x_max, y_max)``."""
        return self.x_min, self.y_min, self.x_max, self.y_max