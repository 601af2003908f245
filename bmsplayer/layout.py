"""Lane layout of the note highway for each play mode."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class PlayMode(Enum):
    """Key layout of a chart."""

    BMS_7KEY = "Bms7Key"
    PMS_9KEY = "Pms9Key"
    DP_14KEY = "Dp14Key"


class LaneType(IntEnum):
    """Colour class of a lane."""

    SCRATCH = 0
    WHITE = 1
    BLACK = 2


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in virtual screen pixels."""

    x: float
    y: float
    width: float
    height: float


LANE_COUNT_BMS = 8
LANE_COUNT_PMS = 9
LANE_COUNT_DP = 16
DP_CENTER_GAP = 20.0

_LANE_COUNTS = {
    PlayMode.BMS_7KEY: LANE_COUNT_BMS,
    PlayMode.PMS_9KEY: LANE_COUNT_PMS,
    PlayMode.DP_14KEY: LANE_COUNT_DP,
}

_LANE_WIDTHS = {
    PlayMode.BMS_7KEY: 50.0,
    PlayMode.PMS_9KEY: 44.0,
    PlayMode.DP_14KEY: 40.0,
}

_S, _W, _B = LaneType.SCRATCH, LaneType.WHITE, LaneType.BLACK
_BMS_LANE_TYPES = (_S, _W, _B, _W, _B, _W, _B, _W)
_DP_LANE_TYPES = _BMS_LANE_TYPES + (_W, _B, _W, _B, _W, _B, _W, _S)
_P1_LANES = 8


def lane_count(mode: PlayMode) -> int:
    return _LANE_COUNTS[mode]


@dataclass
class HighwayConfig:
    """Lane sizes and timing window of the highway."""

    lane_width: float = 50.0
    note_height: float = 10.0
    judge_line_y: float = 500.0
    visible_range_ms: float = 2000.0
    play_mode: PlayMode = PlayMode.BMS_7KEY

    @classmethod
    def for_mode(cls, mode: PlayMode) -> HighwayConfig:
        return cls(lane_width=_LANE_WIDTHS[mode], play_mode=mode)

    def lane_count(self) -> int:
        return lane_count(self.play_mode)

    def lane_type(self, lane: int) -> LaneType | None:
        """Colour class of a lane; ``None`` for nine-key lanes and lanes out of range."""
        if self.play_mode is PlayMode.BMS_7KEY:
            types = _BMS_LANE_TYPES
        elif self.play_mode is PlayMode.DP_14KEY:
            types = _DP_LANE_TYPES
        else:
            return None
        return types[lane] if 0 <= lane < len(types) else None

    def is_scratch_lane(self, lane: int) -> bool:
        if self.play_mode is PlayMode.BMS_7KEY:
            return lane == 0
        if self.play_mode is PlayMode.DP_14KEY:
            return lane in (0, LANE_COUNT_DP - 1)
        return False

    def lane_width_for_lane(self, lane: int) -> float:
        """Width of a lane; scratch lanes are twice as wide."""
        return self.lane_width * 2.0 if self.is_scratch_lane(lane) else self.lane_width

    def _width_of(self, lanes: range) -> float:
        return sum((self.lane_width_for_lane(i) for i in lanes), 0.0)

    def total_width(self) -> float:
        width = self._width_of(range(self.lane_count()))
        if self.play_mode is PlayMode.DP_14KEY:
            width += DP_CENTER_GAP
        return width

    def lane_x_offset(self, lane: int) -> float:
        """Left edge of a lane relative to the highway, including the DP centre gap."""
        if self.play_mode is PlayMode.DP_14KEY and lane >= _P1_LANES:
            return (
                self._width_of(range(_P1_LANES))
                + DP_CENTER_GAP
                + self._width_of(range(_P1_LANES, lane))
            )
        return self._width_of(range(lane))