"""Geometry of the note highway: lane positions, judge line and note placement."""

from __future__ import annotations

from dataclasses import dataclass, field

from bmsplayer.effects import VIRTUAL_WIDTH
from bmsplayer.lane_cover import LaneCover
from bmsplayer.layout import HighwayConfig, PlayMode, Rect

_PIXELS_PER_MS_PER_SPEED = 0.5
_EARLIEST_VISIBLE_MS = -100.0
_COVER_SCALE = 1000.0


@dataclass
class Highway:
    """Lane layout together with the lane cover that shifts the judge line."""

    config: HighwayConfig = field(default_factory=HighwayConfig)
    lane_cover: LaneCover = field(default_factory=LaneCover)

    @classmethod
    def for_mode(cls, mode: PlayMode) -> Highway:
        return cls(config=HighwayConfig.for_mode(mode))

    @property
    def play_mode(self) -> PlayMode:
        return self.config.play_mode

    def set_play_mode(self, mode: PlayMode) -> None:
        """Switch to the default layout of another play mode."""
        self.config = HighwayConfig.for_mode(mode)

    def highway_x(self) -> float:
        """Left edge of the highway when centred on the virtual screen."""
        return (VIRTUAL_WIDTH - self.config.total_width()) / 2.0

    def lane_widths(self) -> list[float]:
        return [self.config.lane_width_for_lane(i) for i in range(self.config.lane_count())]

    def total_width(self) -> float:
        return self.config.total_width()

    def judge_line_y(self) -> float:
        return self.config.judge_line_y

    def adjusted_judge_line_y(self) -> float:
        """Judge line raised by the LIFT cover."""
        lift_offset = self.lane_cover.judge_line_position() * self.config.judge_line_y
        return self.config.judge_line_y - lift_offset

    def judge_y_in_rect(self, rect: Rect) -> float:
        """Judge line within ``rect``: at its bottom, raised by the LIFT share."""
        lift_ratio = self.lane_cover.lift / _COVER_SCALE
        return rect.y + rect.height * (1.0 - lift_ratio)

    def scale_for_rect(self, rect: Rect) -> float:
        """Factor that fits the highway's natural width into ``rect``."""
        return rect.width / self.config.total_width()

    def note_y(self, judge_y: float, time_diff_ms: float, scroll_speed: float) -> float:
        """Vertical position of a note ``time_diff_ms`` ahead of the judge line."""
        return judge_y - time_diff_ms * scroll_speed * _PIXELS_PER_MS_PER_SPEED

    def is_visible_time(self, time_diff_ms: float) -> bool:
        """Whether a note this far from now is inside the drawn time window."""
        return _EARLIEST_VISIBLE_MS <= time_diff_ms <= self.config.visible_range_ms