import pytest

from bmsplayer.effects import VIRTUAL_WIDTH
from bmsplayer.highway import Highway
from bmsplayer.lane_cover import LaneCover
from bmsplayer.layout import HighwayConfig, PlayMode, Rect


@pytest.mark.parametrize("mode", list(PlayMode))
def test_highway_is_centred(mode):
    highway = Highway.for_mode(mode)
    assert highway.highway_x() * 2 + highway.total_width() == pytest.approx(VIRTUAL_WIDTH)


@pytest.mark.parametrize("mode", [PlayMode.BMS_7KEY, PlayMode.PMS_9KEY])
def test_lane_widths_sum_to_total(mode):
    highway = Highway.for_mode(mode)
    assert sum(highway.lane_widths()) == pytest.approx(highway.total_width())


def test_lane_widths_match_config():
    highway = Highway.for_mode(PlayMode.DP_14KEY)
    config = HighwayConfig.for_mode(PlayMode.DP_14KEY)
    assert highway.lane_widths() == [
        config.lane_width_for_lane(i) for i in range(config.lane_count())
    ]
    assert highway.total_width() == config.total_width()


def test_set_play_mode_replaces_config():
    highway = Highway()
    highway.set_play_mode(PlayMode.PMS_9KEY)
    assert highway.play_mode is PlayMode.PMS_9KEY
    assert len(highway.lane_widths()) == 9


def test_judge_line_defaults():
    highway = Highway()
    assert highway.judge_line_y() == 500.0
    assert highway.adjusted_judge_line_y() == highway.judge_line_y()


def test_lift_raises_judge_line():
    highway = Highway(lane_cover=LaneCover(lift=200))
    assert highway.adjusted_judge_line_y() < highway.judge_line_y()
    rect = Rect(10.0, 20.0, 300.0, 800.0)
    assert highway.judge_y_in_rect(rect) < rect.y + rect.height
    assert highway.judge_y_in_rect(rect) > rect.y


def test_judge_y_in_rect_without_lift_is_bottom():
    highway = Highway()
    rect = Rect(10.0, 20.0, 300.0, 800.0)
    assert highway.judge_y_in_rect(rect) == rect.y + rect.height


def test_scale_for_rect():
    highway = Highway()
    width = highway.total_width()
    assert highway.scale_for_rect(Rect(0.0, 0.0, width, 100.0)) == pytest.approx(1.0)
    assert highway.scale_for_rect(Rect(0.0, 0.0, width * 2, 100.0)) == pytest.approx(2.0)


def test_note_y_at_judge_time_is_judge_line():
    highway = Highway()
    assert highway.note_y(500.0, 0.0, 1.0) == 500.0


def test_note_y_moves_up_for_later_notes():
    highway = Highway()
    near = highway.note_y(500.0, 100.0, 1.0)
    far = highway.note_y(500.0, 200.0, 1.0)
    assert far < near < 500.0
    assert highway.note_y(500.0, 100.0, 2.0) == pytest.approx(far)


@pytest.mark.parametrize(
    "diff, visible",
    [(-100.0, True), (-100.5, False), (0.0, True), (2000.0, True), (2000.5, False)],
)
def test_visible_time_window(diff, visible):
    assert Highway().is_visible_time(diff) is visible