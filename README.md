# splashraster

Building blocks for a raster graphics engine, in pure Python with no
third-party dependencies.

## What is inside

- `splashraster.path`: `SplashPath`, a list of subpaths built with
  `move_to`, `line_to`, `curve_to` and `close`. Each point carries
  `PathFlag`s (`FIRST`, `LAST`, `CLOSED`, `CURVE`); `get_point(i)` returns
  `(x, y, flags)`, `current_point()` returns `(x, y)` or `None`, and
  `add_stroke_adjust_hint` records `PathHint`s (see the `hints` property).
  `offset`, `append` and `copy` are also available.
- `splashraster.bitmap`: `SplashBitmap` in one of the `ColorMode`s
  (`MONO1`, `MONO8`, `RGB8`, `BGR8`, `CMYK8`), with rows padded to a multiple
  of `row_pad` bytes, optional alpha plane, and top-down or bottom-up storage
  (a bottom-up bitmap has a negative `row_size`). `write_pnm` /
  `write_pnm_file` write PBM, PGM or PPM (nothing is written for CMYK);
  `write_alpha_pgm_file` writes the alpha plane. `get_pixel` returns a tuple
  of components (RGB order for BGR bitmaps) or `None` outside the bitmap;
  `take_data` hands over the pixel buffer.
- `splashraster.pattern`: the abstract `SplashPattern` and the constant
  colour `SplashSolidColor`.
- `splashraster.screen`: `SplashScreen` halftone threshold matrices
  (`ScreenType.DISPERSED`, `CLUSTERED`, `STOCHASTIC_CLUSTERED`) configured
  with `ScreenParams`; the matrix size is rounded up to a power of two.
  `test(x, y, value)` returns 0 (black) or 1 (white); `is_static(value)`
  tells whether a grey level halftones to solid black or white.
- `splashraster.clip`: `SplashClip`, a rectangular clip region limited to
  hard integer bounds. `clip_to_rect` intersects, `reset_to_rect` replaces,
  `test_rect` returns a `ClipResult`, and `clip_span` / `clip_span_binary`
  clip a `bytearray` scan line in place.
- `splashraster.state`: `SplashState`, the graphics state: matrix, stroke
  and fill patterns, screen, line style (`LineCap`, `LineJoin`, dashes),
  clip, soft mask and transfer tables. `copy()` shares the clip until one
  side changes it; `set_transfer` derives the CMYK tables from the RGB and
  grey tables.
- `splashraster.font`: `SplashFontFileID`, the reference-counted
  `SplashFontFile`, and `SplashFont` with a set-associative glyph cache that
  returns `GlyphBitmap`s. All three are abstract: you supply `matches`,
  `make_font`, `make_glyph` and `get_glyph_path`.
- `splashraster.fontengine`: `SplashFontEngine`, a most-recently-used cache
  of up to 16 scaled fonts; `get_font(font_file, text_mat, ctm)` reuses a
  cached font or makes a new one, and `get_font_file(font_id)` finds a cached
  font file. Used as a context manager it releases its fonts on exit.
- `splashraster.mathutil`: `splash_floor`, `splash_ceil`, `splash_round`
  (halves round up), `splash_avg`, `splash_dist`, `splash_check_det` and
  `stroke_adjust`.
- `splashraster.errors`: the `SplashError` hierarchy, each subclass with a
  numeric `code` (`NoCurrentPointError`, `EmptyPathError`,
  `BogusPathError`, `NoSaveError`, `OpenFileError`, `NoGlyphError`,
  `ModeMismatchError`, `SingularMatrixError`).

## Installing

```
pip install .
```

## Examples

Write a small RGB bitmap as a PPM file:

```python
from splashraster.bitmap import SplashBitmap, ColorMode

bmp = SplashBitmap(4, 2, 1, ColorMode.RGB8, False, True)
bmp.write_pnm_file("out.ppm")
print(bmp.get_pixel(0, 0))   # (0, 0, 0)
```

Build a closed path:

```python
from splashraster.path import SplashPath

path = SplashPath()
path.move_to(0, 0)
path.line_to(10, 0)
path.line_to(10, 10)
path.close(False)
print(len(path), path.current_point())   # 4 None
```

Adding a line with no current point raises `NoCurrentPointError`; starting
a new subpath while the last one holds a single point raises
`BogusPathError`.

Build a halftone screen and threshold a grey value:

```python
from splashraster.screen import SplashScreen, ScreenParams, ScreenType

screen = SplashScreen(ScreenParams(screen_type=ScreenType.CLUSTERED, size=4))
print(screen.test(0, 0, 128))
```

Clip a scan line:

```python
from splashraster.clip import SplashClip

clip = SplashClip(0, 0, 10, 10)
clip.clip_to_rect(2, 0, 5, 10)
line = bytearray([255] * 10)
clip.clip_span(line, 3, 0, 9, False)
print(list(line))   # zero outside columns 2..4
```

## What it does not do

The package holds the pieces a rasterizer is built from, not a rasterizer:
there is no drawing object that strokes or fills paths, draws images or
composites into a `SplashBitmap`. Clipping is to rectangles only; there is
no clipping to arbitrary paths. There is no font file loader or glyph
renderer: `SplashFontFile` and `SplashFont` must be subclassed to supply
glyphs. There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```