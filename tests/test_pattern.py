import pytest

from splashraster.pattern import SplashPattern, SplashSolidColor


def test_solid_color_same_everywhere():
    pattern = SplashSolidColor([10, 20, 30])
    assert pattern.get_color(0, 0) == bytes([10, 20, 30])
    assert pattern.get_color(123, -7) == pattern.get_color(0, 0)


def test_solid_color_is_static():
    assert SplashSolidColor([0]).is_static() is True


def test_solid_color_copies_input():
    source = bytearray([1, 2, 3, 4])
    pattern = SplashSolidColor(source)
    source[0] = 99
    assert pattern.get_color(0, 0) == bytes([1, 2, 3, 4])


def test_copy_is_equal_and_distinct():
    pattern = SplashSolidColor([5, 6, 7])
    clone = pattern.copy()
    assert clone is not pattern
    assert clone.get_color(3, 4) == pattern.get_color(3, 4)
    assert isinstance(clone, SplashSolidColor)


def test_base_is_abstract():
    with pytest.raises(TypeError):
        SplashPattern()