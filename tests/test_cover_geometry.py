import pytest

from bmsplayer.cover_geometry import (
    CoverRegion,
    lane_cover_regions,
    long_note_bar_span,
    visible_measure_lines,
)
from bmsplayer.lane_cover import LaneCover
from bmsplayer.layout import Rect

RECT = Rect(100.0, 50.0, 400.0, 800.0)
BOTTOM = RECT.y + RECT.height


def test_no_cover_gives_no_regions():
    assert lane_cover_regions(RECT, LaneCover(), BOTTOM, 400.0) == []


def test_region_order_and_labels():
    cover = LaneCover(sudden=300, hidden=200, lift=100)
    regions = lane_cover_regions(RECT, cover, 700.0, 400.0)
    assert [r.kind for r in regions] == ["sudden", "lift", "hidden"]
    assert [r.label for r in regions] == ["SUD+ 300", "LIFT 100", "HID+ 200"]
    assert all(isinstance(r, CoverRegion) for r in regions)


def test_full_sudden_covers_whole_rect_height():
    (region,) = lane_cover_regions(RECT, LaneCover(sudden=1000), BOTTOM, 400.0)
    assert region.rect == Rect(RECT.x, RECT.y, 400.0, RECT.height)
    assert region.label_x == RECT.x + 10.0
    assert region.label_y == pytest.approx(RECT.y + RECT.height - 10.0)


def test_sudden_height_independent_of_judge_line():
    cover = LaneCover(sudden=400)
    high = lane_cover_regions(RECT, cover, 500.0, 400.0)[0]
    low = lane_cover_regions(RECT, cover, BOTTOM, 400.0)[0]
    assert high.rect.height == pytest.approx(low.rect.height)


def test_lift_fills_from_judge_line_to_bottom():
    judge_y = 600.0
    (region,) = lane_cover_regions(RECT, LaneCover(lift=250), judge_y, 400.0)
    assert region.rect.y == judge_y
    assert region.rect.y + region.rect.height == pytest.approx(BOTTOM)
    assert region.label_y == judge_y + 15.0


def test_full_hidden_reaches_rect_bottom():
    judge_y = 600.0
    (region,) = lane_cover_regions(RECT, LaneCover(hidden=1000), judge_y, 400.0)
    assert region.rect.y == judge_y
    assert region.rect.y + region.rect.height == pytest.approx(BOTTOM)


def test_hidden_no_wider_than_area_below_judge():
    judge_y = 600.0
    (region,) = lane_cover_regions(RECT, LaneCover(hidden=300), judge_y, 400.0)
    assert 0.0 < region.rect.height < BOTTOM - judge_y


def test_regions_use_given_highway_width():
    cover = LaneCover(sudden=100, hidden=100, lift=100)
    regions = lane_cover_regions(RECT, cover, 700.0, 321.0)
    assert {r.rect.width for r in regions} == {321.0}


def test_measure_line_at_current_time_sits_on_judge_line():
    lines = visible_measure_lines(RECT, BOTTOM, 1000.0, 0.5, [1000.0], 2000.0)
    assert lines == [BOTTOM]


def test_measure_lines_in_past_are_dropped():
    lines = visible_measure_lines(RECT, BOTTOM, 1000.0, 0.5, [950.0, 500.0], 2000.0)
    assert lines == []


def test_measure_lines_beyond_range_are_dropped():
    lines = visible_measure_lines(RECT, BOTTOM, 0.0, 0.1, [2500.0], 2000.0)
    assert lines == []


def test_measure_lines_above_rect_are_dropped():
    lines = visible_measure_lines(RECT, BOTTOM, 0.0, 1.0, [1900.0], 2000.0)
    assert lines == []


def test_measure_lines_keep_order_and_stay_inside():
    times = [0.0, 400.0, 800.0]
    lines = visible_measure_lines(RECT, BOTTOM, 0.0, 0.5, times, 2000.0)
    assert len(lines) == 3
    assert lines == sorted(lines, reverse=True)
    assert all(RECT.y <= y <= BOTTOM for y in lines)


def test_long_note_bar_passed_is_none():
    assert long_note_bar_span(BOTTOM, -200.0, -50.0, 0.5) is None


def test_long_note_bar_clipped_at_judge_line():
    top, height = long_note_bar_span(BOTTOM, -100.0, 400.0, 0.5)
    assert top + height == pytest.approx(BOTTOM)
    assert top < BOTTOM


def test_long_note_bar_ahead_of_judge_line():
    span = long_note_bar_span(500.0, 100.0, 300.0, 1.0)
    assert span is not None
    top, height = span
    assert top == pytest.approx(500.0 - 300.0)
    assert top + height == pytest.approx(500.0 - 100.0)


def test_long_note_bar_without_height_is_none():
    assert long_note_bar_span(500.0, 200.0, 200.0, 1.0) is None