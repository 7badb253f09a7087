"""Font engine: a most-recently-used cache of scaled fonts."""

from __future__ import annotations

from collections.abc import Sequence

from .font import SplashFont, SplashFontFile, SplashFontFileID
from .mathutil import splash_check_det

# number of scaled fonts kept in the cache
FONT_CACHE_SIZE = 16

# fonts whose transform has a determinant smaller than this are replaced
_SINGULAR_EPSILON = 0.01


class SplashFontEngine:
    """Hands out scaled fonts, reusing recently used ones.

    The cache holds up to :data:`FONT_CACHE_SIZE` fonts, most recently
    used first.  A font pushed out of the cache releases its reference to
    its font file.
    """

    def __init__(self, aa: bool = False) -> None:
        self.aa = aa
        self._cache: list[SplashFont] = []

    def __enter__(self) -> SplashFontEngine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        for font in self._cache:
            font.release()
        self._cache.clear()

    @property
    def fonts(self) -> tuple[SplashFont, ...]:
        """The cached fonts, most recently used first."""
        return tuple(self._cache)

    def get_font_file(self, font_id: SplashFontFileID) -> SplashFontFile | None:
        """Return a cached font file matching ``font_id``, or None."""
        for font in self._cache:
            font_file = font.font_file
            if font_file is not None and font_file.font_id.matches(font_id):
                return font_file
        return None

    def get_font(
        self,
        font_file: SplashFontFile,
        text_mat: Sequence[float],
        ctm: Sequence[float],
    ) -> SplashFont:
        """Return the font for ``font_file`` scaled by ``text_mat * ctm``.

        The device y axis points downward, so the vertical terms of the
        product are negated.  A (nearly) singular product is replaced by
        a tiny uniform scale.
        """
        mat = [
            text_mat[0] * ctm[0] + text_mat[1] * ctm[2],
            -(text_mat[0] * ctm[1] + text_mat[1] * ctm[3]),
            text_mat[2] * ctm[0] + text_mat[3] * ctm[2],
            -(text_mat[2] * ctm[1] + text_mat[3] * ctm[3]),
        ]
        if not splash_check_det(mat[0], mat[1], mat[2], mat[3], _SINGULAR_EPSILON):
            mat = [0.01, 0.0, 0.0, 0.01]

        for i, font in enumerate(self._cache):
            if font.matches(font_file, mat, text_mat):
                if i > 0:
                    del self._cache[i]
                    self._cache.insert(0, font)
                return font

        font = font_file.make_font(mat, text_mat)
        if len(self._cache) >= FONT_CACHE_SIZE:
            self._cache.pop().release()
        self._cache.insert(0, font)
        return font