"""Running judgment counts and combo."""

from __future__ import annotations

from dataclasses import dataclass, fields

from bmsplayer.judgment import JudgeResult

_COUNTERS = {
    JudgeResult.PGREAT: "pgreat_count",
    JudgeResult.GREAT: "great_count",
    JudgeResult.GOOD: "good_count",
    JudgeResult.BAD: "bad_count",
    JudgeResult.POOR: "poor_count",
}

_COMBO_BREAKERS = {JudgeResult.BAD, JudgeResult.POOR}


@dataclass
class ScoreManager:
    """Tallies judgments, combo and EX score during play."""

    pgreat_count: int = 0
    great_count: int = 0
    good_count: int = 0
    bad_count: int = 0
    poor_count: int = 0
    combo: int = 0
    max_combo: int = 0

    def add_judgment(self, result: JudgeResult) -> None:
        counter = _COUNTERS[result]
        setattr(self, counter, getattr(self, counter) + 1)
        if result in _COMBO_BREAKERS:
            self.combo = 0
        else:
            self.combo += 1
        self.max_combo = max(self.max_combo, self.combo)

    def ex_score(self) -> int:
        return self.pgreat_count * 2 + self.great_count

    def total_notes(self) -> int:
        return (
            self.pgreat_count
            + self.great_count
            + self.good_count
            + self.bad_count
            + self.poor_count
        )

    def accuracy(self) -> float:
        """EX score as a percentage of the maximum so far; 100 before any note."""
        total = self.total_notes()
        if total == 0:
            return 100.0
        return self.ex_score() / (total * 2) * 100.0

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, 0)