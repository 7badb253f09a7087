"""Exceptions raised by the rasterizer, one per failure kind."""

from __future__ import annotations


class SplashError(Exception):
    """Base class for every rasterizer error.

    Each subclass carries a numeric ``code`` that identifies the kind of
    failure, and a default message used when none is given.
    """

    code: int = 0
    default_message: str = "rasterizer error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NoCurrentPointError(SplashError):
    """The path has no current point."""

    code = 1
    default_message = "no current point"


class EmptyPathError(SplashError):
    """The path has zero points."""

    code = 2
    default_message = "zero points in path"


class BogusPathError(SplashError):
    """A subpath holds only one point."""

    code = 3
    default_message = "only one point in subpath"


class NoSaveError(SplashError):
    """The state stack is empty."""

    code = 4
    default_message = "state stack is empty"


class OpenFileError(SplashError):
    """A file could not be opened."""

    code = 5
    default_message = "couldn't open file"


class NoGlyphError(SplashError):
    """The requested glyph could not be obtained."""

    code = 6
    default_message = "couldn't get the requested glyph"


class ModeMismatchError(SplashError):
    """An invalid combination of color modes was used."""

    code = 7
    default_message = "invalid combination of color modes"


class SingularMatrixError(SplashError):
    """A matrix is singular."""

    code = 8
    default_message = "matrix is singular"