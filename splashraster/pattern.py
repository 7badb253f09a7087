"""Fill and stroke patterns."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SplashPattern(ABC):
    """A source of color values for pixels."""

    @abstractmethod
    def copy(self) -> SplashPattern:
        """Return an independent copy of the pattern."""

    @abstractmethod
    def get_color(self, x: int, y: int) -> bytes:
        """Return the color value for the pixel at (x, y)."""

    @abstractmethod
    def is_static(self) -> bool:
        """True if every pixel gets the same color."""


class SplashSolidColor(SplashPattern):
    """A pattern of one solid color."""

    def __init__(self, color) -> None:
        self._color = bytes(color)

    @property
    def color(self) -> bytes:
        return self._color

    def copy(self) -> SplashSolidColor:
        return SplashSolidColor(self._color)

    def get_color(self, x: int, y: int) -> bytes:
        return self._color

    def is_static(self) -> bool:
        return True