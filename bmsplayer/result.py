"""Outcome of a finished play."""

from __future__ import annotations

from dataclasses import dataclass, field

from bmsplayer.judgment import ClearLamp, RandomOption
from bmsplayer.protocol import PlayOptionFlags

_RANKS = (
    (100.0, "MAX"),
    (94.44, "AAA"),
    (88.88, "AA"),
    (77.77, "A"),
    (66.66, "B"),
    (55.55, "C"),
    (44.44, "D"),
    (33.33, "E"),
)


@dataclass
class PlayResult:
    """Scores, judgment counts and options of one play."""

    chart_path: str = ""
    title: str = ""
    artist: str = ""
    ex_score: int = 0
    max_combo: int = 0
    pgreat_count: int = 0
    great_count: int = 0
    good_count: int = 0
    bad_count: int = 0
    poor_count: int = 0
    total_notes: int = 0
    clear_lamp: ClearLamp = ClearLamp.NO_PLAY
    random_option: RandomOption = RandomOption.OFF
    fast_count: int = 0
    slow_count: int = 0
    play_options: PlayOptionFlags = field(default_factory=PlayOptionFlags)

    def accuracy(self) -> float:
        """EX score as a percentage of the maximum; 0 for an empty chart."""
        if self.total_notes == 0:
            return 0.0
        return self.ex_score / (self.total_notes * 2) * 100.0

    def rank(self) -> str:
        acc = self.accuracy()
        return next((name for limit, name in _RANKS if acc >= limit), "F")