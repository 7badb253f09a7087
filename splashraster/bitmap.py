"""Raster bitmaps in several color modes, with optional alpha plane."""

from __future__ import annotations

from enum import IntEnum
from typing import BinaryIO

from .errors import ModeMismatchError, OpenFileError


class ColorMode(IntEnum):
    """Pixel layout of a bitmap."""

    MONO1 = 0  # 1 bit per pixel, packed, most significant bit first
    MONO8 = 1  # 1 byte per pixel
    RGB8 = 2  # 3 bytes per pixel: R, G, B
    BGR8 = 3  # 3 bytes per pixel: B, G, R
    CMYK8 = 4  # 4 bytes per pixel: C, M, Y, K

    @property
    def n_comps(self) -> int:
        """Number of color components per pixel."""
        return _N_COMPS[self]


_N_COMPS = {
    ColorMode.MONO1: 1,
    ColorMode.MONO8: 1,
    ColorMode.RGB8: 3,
    ColorMode.BGR8: 3,
    ColorMode.CMYK8: 4,
}


class SplashBitmap:
    """A bitmap of ``width`` x ``height`` pixels.

    Rows are padded to a multiple of ``row_pad`` bytes.  If ``top_down``
    is false the rows are stored upside down (last row first in memory)
    and ``row_size`` is negative.  The alpha plane, when present, is
    always top-down with one byte per pixel.
    """

    def __init__(
        self,
        width: int,
        height: int,
        row_pad: int,
        mode: ColorMode,
        alpha: bool = False,
        top_down: bool = True,
    ) -> None:
        if width <= 0:
            raise ValueError(f"invalid bitmap width: {width}")
        if height < 0:
            raise ValueError(f"invalid bitmap height: {height}")
        if row_pad < 1:
            raise ValueError(f"invalid row padding: {row_pad}")
        self._width = width
        self._height = height
        self._mode = ColorMode(mode)
        if self._mode is ColorMode.MONO1:
            row_size = (width + 7) >> 3
        else:
            row_size = width * self._mode.n_comps
        row_size += row_pad - 1
        row_size -= row_size % row_pad
        self._data: bytearray | None = bytearray(height * row_size)
        self._row_size = row_size if top_down else -row_size
        self._alpha: bytearray | None = bytearray(width * height) if alpha else None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def row_size(self) -> int:
        """Bytes per row; negative for bottom-up bitmaps."""
        return self._row_size

    @property
    def alpha_row_size(self) -> int:
        return self._width

    @property
    def mode(self) -> ColorMode:
        return self._mode

    @property
    def data(self) -> bytearray | None:
        """The color data in memory order, or None once taken."""
        return self._data

    @property
    def alpha(self) -> bytearray | None:
        """The alpha plane (top-down), or None if the bitmap has none."""
        return self._alpha

    def _require_data(self) -> bytearray:
        if self._data is None:
            raise ValueError("bitmap data has been taken")
        return self._data

    def _row_start(self, y: int) -> int:
        if self._row_size >= 0:
            return y * self._row_size
        return (self._height - 1 - y) * -self._row_size

    def _row(self, y: int, length: int) -> bytes:
        data = self._require_data()
        start = self._row_start(y)
        return bytes(data[start:start + length])

    def write_pnm(self, stream: BinaryIO) -> None:
        """Write the bitmap as PBM/PGM/PPM to a binary stream.

        CMYK bitmaps have no PNM form, so nothing is written for them.
        """
        self._require_data()
        w, h = self._width, self._height
        mode = self._mode
        if mode is ColorMode.MONO1:
            stream.write(b"P4\n%d %d\n" % (w, h))
            nbytes = (w + 7) >> 3
            for y in range(h):
                stream.write(bytes(b ^ 0xFF for b in self._row(y, nbytes)))
        elif mode is ColorMode.MONO8:
            stream.write(b"P5\n%d %d\n255\n" % (w, h))
            for y in range(h):
                stream.write(self._row(y, w))
        elif mode is ColorMode.RGB8:
            stream.write(b"P6\n%d %d\n255\n" % (w, h))
            for y in range(h):
                stream.write(self._row(y, 3 * w))
        elif mode is ColorMode.BGR8:
            stream.write(b"P6\n%d %d\n255\n" % (w, h))
            for y in range(h):
                row = self._row(y, 3 * w)
                out = bytearray(3 * w)
                out[0::3] = row[2::3]
                out[1::3] = row[1::3]
                out[2::3] = row[0::3]
                stream.write(bytes(out))

    def write_pnm_file(self, path) -> None:
        """Write the bitmap as a PNM file at ``path``."""
        try:
            f = open(path, "wb")
        except OSError as exc:
            raise OpenFileError(f"couldn't open file: {path}") from exc
        with f:
            self.write_pnm(f)

    def write_alpha_pgm_file(self, path) -> None:
        """Write the alpha plane as a PGM file at ``path``."""
        if self._alpha is None:
            raise ModeMismatchError("bitmap has no alpha plane")
        try:
            f = open(path, "wb")
        except OSError as exc:
            raise OpenFileError(f"couldn't open file: {path}") from exc
        with f:
            f.write(b"P5\n%d %d\n255\n" % (self._width, self._height))
            f.write(bytes(self._alpha))

    def get_pixel(self, x: int, y: int) -> tuple[int, ...] | None:
        """Return the color components at (x, y), or None if outside.

        BGR pixels are returned in R, G, B order.
        """
        if y < 0 or y >= self._height or x < 0 or x >= self._width:
            return None
        data = self._require_data()
        start = self._row_start(y)
        mode = self._mode
        if mode is ColorMode.MONO1:
            byte = data[start + (x >> 3)]
            return (0xFF if byte & (0x80 >> (x & 7)) else 0x00,)
        if mode is ColorMode.MONO8:
            return (data[start + x],)
        if mode is ColorMode.RGB8:
            p = start + 3 * x
            return tuple(data[p:p + 3])
        if mode is ColorMode.BGR8:
            p = start + 3 * x
            return (data[p + 2], data[p + 1], data[p])
        p = start + 4 * x
        return tuple(data[p:p + 4])

    def get_alpha(self, x: int, y: int) -> int:
        """Return the alpha value at (x, y)."""
        if self._alpha is None:
            raise ModeMismatchError("bitmap has no alpha plane")
        if y < 0 or y >= self._height or x < 0 or x >= self._width:
            raise IndexError(f"pixel ({x}, {y}) is outside the bitmap")
        return self._alpha[y * self._width + x]

    def take_data(self) -> bytearray:
        """Hand over the color data; the bitmap no longer holds it."""
        data = self._require_data()
        self._data = None
        return data