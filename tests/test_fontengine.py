import pytest

from splashraster.font import GlyphBitmap, SplashFont, SplashFontFile, SplashFontFileID
from splashraster.fontengine import FONT_CACHE_SIZE, SplashFontEngine


class NameID(SplashFontFileID):
    def __init__(self, name):
        self.name = name

    def matches(self, other):
        return isinstance(other, NameID) and other.name == self.name


class BoxFont(SplashFont):
    def __init__(self, font_file, mat, text_mat):
        super().__init__(font_file, mat, text_mat, True)
        self.x_min, self.y_min, self.x_max, self.y_max = 0, 0, 4, 4

    def make_glyph(self, c, x_frac, y_frac):
        return GlyphBitmap(0, 0, 1, 1, True, b"\xff")

    def get_glyph_path(self, c):
        return None


class CountingFile(SplashFontFile):
    def __init__(self, name):
        super().__init__(NameID(name))
        self.made = 0
        self.released = False

    def make_font(self, mat, text_mat):
        self.made += 1
        font = BoxFont(self, mat, text_mat)
        font.init_cache()
        return font

    def _release(self):
        self.released = True


IDENTITY = [1.0, 0.0, 0.0, 1.0]


def ctm_scale(s):
    return [s, 0.0, 0.0, s, 0.0, 0.0]


def test_font_matrix_flips_y():
    engine = SplashFontEngine()
    ff = CountingFile("a")
    font = engine.get_font(ff, IDENTITY, [2.0, 0.0, 0.0, 3.0, 0.0, 0.0])
    assert font.mat == (2.0, 0.0, 0.0, -3.0)
    assert font.text_mat == tuple(IDENTITY)


def test_singular_matrix_replaced():
    engine = SplashFontEngine()
    ff = CountingFile("a")
    font = engine.get_font(ff, IDENTITY, [0.0] * 6)
    assert font.mat == (0.01, 0.0, 0.0, 0.01)


def test_same_request_reuses_font():
    engine = SplashFontEngine()
    ff = CountingFile("a")
    f1 = engine.get_font(ff, IDENTITY, ctm_scale(5.0))
    f2 = engine.get_font(ff, IDENTITY, ctm_scale(5.0))
    assert f1 is f2
    assert ff.made == 1
    assert ff.ref_count == 1


def test_different_file_makes_new_font():
    engine = SplashFontEngine()
    a, b = CountingFile("a"), CountingFile("b")
    fa = engine.get_font(a, IDENTITY, ctm_scale(5.0))
    fb = engine.get_font(b, IDENTITY, ctm_scale(5.0))
    assert fa is not fb
    assert engine.fonts == (fb, fa)


def test_cache_evicts_least_recently_used():
    engine = SplashFontEngine()
    ff = CountingFile("a")
    first = engine.get_font(ff, IDENTITY, ctm_scale(1.0))
    for s in range(2, FONT_CACHE_SIZE + 1):
        engine.get_font(ff, IDENTITY, ctm_scale(float(s)))
    assert len(engine.fonts) == FONT_CACHE_SIZE
    assert ff.ref_count == FONT_CACHE_SIZE
    engine.get_font(ff, IDENTITY, ctm_scale(100.0))
    assert len(engine.fonts) == FONT_CACHE_SIZE
    assert first not in engine.fonts
    assert ff.ref_count == FONT_CACHE_SIZE
    assert ff.released is False


def test_hit_moves_font_to_front():
    engine = SplashFontEngine()
    ff = CountingFile("a")
    first = engine.get_font(ff, IDENTITY, ctm_scale(1.0))
    second = engine.get_font(ff, IDENTITY, ctm_scale(2.0))
    for s in range(3, FONT_CACHE_SIZE + 1):
        engine.get_font(ff, IDENTITY, ctm_scale(float(s)))
    assert engine.get_font(ff, IDENTITY, ctm_scale(1.0)) is first
    assert engine.fonts[0] is first
    engine.get_font(ff, IDENTITY, ctm_scale(100.0))
    assert first in engine.fonts
    assert second not in engine.fonts


def test_evicting_last_font_releases_file():
    engine = SplashFontEngine()
    lone = CountingFile("lone")
    engine.get_font(lone, IDENTITY, ctm_scale(1.0))
    other = CountingFile("other")
    for s in range(1, FONT_CACHE_SIZE + 1):
        engine.get_font(other, IDENTITY, ctm_scale(float(s)))
    assert lone.ref_count == 0
    assert lone.released is True


def test_get_font_file_by_id():
    engine = SplashFontEngine()
    a, b = CountingFile("a"), CountingFile("b")
    engine.get_font(a, IDENTITY, ctm_scale(1.0))
    engine.get_font(b, IDENTITY, ctm_scale(1.0))
    assert engine.get_font_file(NameID("a")) is a
    assert engine.get_font_file(NameID("b")) is b
    assert engine.get_font_file(NameID("c")) is None


def test_context_exit_releases_all():
    ff = CountingFile("a")
    with SplashFontEngine(aa=True) as engine:
        engine.get_font(ff, IDENTITY, ctm_scale(1.0))
        engine.get_font(ff, IDENTITY, ctm_scale(2.0))
        assert ff.ref_count == 2
    assert ff.ref_count == 0
    assert ff.released is True
    assert engine.fonts == ()


def test_cached_font_serves_glyphs():
    engine = SplashFontEngine()
    ff = CountingFile("a")
    font = engine.get_font(ff, IDENTITY, ctm_scale(1.0))
    glyph = font.get_glyph(65, 0, 0)
    assert glyph.data == b"\xff"
    assert font.bbox() == (0, 0, 4, 4)


@pytest.mark.parametrize("scale", [0.05, 0.09])
def test_near_singular_scale_replaced(scale):
    engine = SplashFontEngine()
    ff = CountingFile("a")
    font = engine.get_font(ff, IDENTITY, ctm_scale(scale))
    assert font.mat == (0.01, 0.0, 0.0, 0.01)