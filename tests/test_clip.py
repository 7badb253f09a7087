import pytest

from splashraster.clip import ClipResult, SplashClip


@pytest.fixture
def clip():
    return SplashClip(0, 0, 100, 100)


def test_initial_bounds_match_hard_bounds(clip):
    assert (clip.x_min, clip.y_min, clip.x_max, clip.y_max) == (0, 0, 100, 100)
    assert clip.get_x_min_i(False) == 0
    assert clip.get_x_max_i(False) == 100 - 1
    assert clip.get_y_max_i(True) == 100 - 1


def test_clip_to_rect_intersects_and_orders(clip):
    clip.clip_to_rect(80, 90, 10, 20)
    assert (clip.x_min, clip.y_min, clip.x_max, clip.y_max) == (10, 20, 80, 90)
    clip.clip_to_rect(0, 0, 200, 200)
    assert (clip.x_min, clip.y_min, clip.x_max, clip.y_max) == (10, 20, 80, 90)


def test_reset_to_rect_replaces_region(clip):
    clip.clip_to_rect(10, 10, 20, 20)
    clip.reset_to_rect(50, 60, 5, 6)
    assert (clip.x_min, clip.y_min, clip.x_max, clip.y_max) == (5, 6, 50, 60)


def test_int_bounds_clamped_to_hard_bounds(clip):
    clip.reset_to_rect(-20, -20, 300, 300)
    assert clip.get_x_min_i(False) == 0
    assert clip.get_y_min_i(False) == 0
    assert clip.get_x_max_i(False) == 100 - 1
    assert clip.get_y_max_i(False) == 100 - 1


def test_int_bounds_floor_and_ceil(clip):
    clip.clip_to_rect(10.5, 20.5, 30.5, 40.5)
    assert clip.get_x_min_i(False) == 10
    assert clip.get_y_min_i(False) == 20
    assert clip.get_x_max_i(False) == 30
    assert clip.get_y_max_i(False) == 40


def test_int_bounds_track_stroke_adjust_flag(clip):
    clip.clip_to_rect(10.2, 10.2, 10.3, 10.3)
    assert clip.get_x_max_i(True) >= clip.get_x_min_i(True)
    assert clip.get_x_min_i(False) == 10
    assert clip.get_x_max_i(False) == 10


def test_test_rect_inside_outside_partial(clip):
    clip.clip_to_rect(10, 10, 50, 50)
    for adjust in (False, True):
        assert clip.test_rect(20, 20, 30, 30, adjust) is ClipResult.ALL_INSIDE
        assert clip.test_rect(60, 60, 70, 70, adjust) is ClipResult.ALL_OUTSIDE
        assert clip.test_rect(0, 0, 20, 20, adjust) is ClipResult.PARTIAL


def test_test_rect_empty_region_is_outside(clip):
    clip.clip_to_rect(10, 10, 10, 50)
    assert clip.test_rect(0, 0, 99, 99, False) is ClipResult.ALL_OUTSIDE


def test_test_rect_edge_exclusive(clip):
    clip.clip_to_rect(10, 10, 50, 50)
    assert clip.test_rect(50, 20, 55, 30, False) is ClipResult.ALL_OUTSIDE
    assert clip.test_rect(40, 20, 49, 30, False) is ClipResult.ALL_INSIDE


def test_clip_span_integer_rect(clip):
    clip.clip_to_rect(10, 10, 20, 20)
    line = bytearray([200] * 100)
    clip.clip_span(line, 15, 0, 99, False)
    assert all(v == 0 for v in line[:10])
    assert all(v == 200 for v in line[10:20])
    assert all(v == 0 for v in line[20:])


def test_clip_span_row_outside_zeroes_span(clip):
    clip.clip_to_rect(10, 10, 20, 20)
    line = bytearray([200] * 100)
    clip.clip_span(line, 50, 5, 25, False)
    assert all(v == 0 for v in line[5:26])
    assert line[4] == 200 and line[26] == 200


def test_clip_span_fractional_edges_reduce_coverage(clip):
    clip.clip_to_rect(10.5, 10, 19.5, 20)
    line = bytearray([200] * 100)
    clip.clip_span(line, 15, 0, 99, False)
    assert line[10] == 100
    assert line[19] == 100
    assert all(v == 200 for v in line[11:19])


def test_clip_span_stroke_adjust_skips_fractional_scaling(clip):
    clip.clip_to_rect(10.4, 10, 19.6, 20)
    line = bytearray([200] * 100)
    clip.clip_span(line, 15, 0, 99, True)
    assert all(v == 200 for v in line[10:20])
    assert line[9] == 0 and line[20] == 0


def test_clip_span_binary(clip):
    clip.clip_to_rect(10, 10, 20, 20)
    line = bytearray([255] * 100)
    assert clip.clip_span_binary(line, 15, 0, 99, False) is True
    assert all(v == 0 for v in line[:10])
    assert all(v == 255 for v in line[10:20])

    empty = bytearray(100)
    assert clip.clip_span_binary(empty, 15, 0, 99, False) is False
    outside = bytearray([255] * 100)
    assert clip.clip_span_binary(outside, 50, 0, 99, False) is False
    assert not any(outside)


def test_copy_is_independent(clip):
    clip.clip_to_rect(10, 10, 50, 50)
    other = clip.copy()
    other.clip_to_rect(20, 20, 30, 30)
    assert (clip.x_min, clip.x_max) == (10, 50)
    assert (other.x_min, other.x_max) == (20, 30)
    assert other.test_rect(12, 12, 14, 14, False) is ClipResult.ALL_OUTSIDE
    assert clip.test_rect(12, 12, 14, 14, False) is ClipResult.ALL_INSIDE