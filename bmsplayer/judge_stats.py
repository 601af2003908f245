"""Judgment tallies and BPM shown beside the highway."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class JudgeData:
    """Judgment and timing counts taken from the score keeper."""

    pgreat: int = 0
    great: int = 0
    good: int = 0
    bad: int = 0
    poor: int = 0
    fast: int = 0
    slow: int = 0


@dataclass
class JudgeStats:
    """Judgment counts as displayed, including combo breaks."""

    pgreat: int = 0
    great: int = 0
    good: int = 0
    bad: int = 0
    poor: int = 0
    combo_break: int = 0
    fast: int = 0
    slow: int = 0

    def update(self, data: JudgeData) -> None:
        self.pgreat = data.pgreat
        self.great = data.great
        self.good = data.good
        self.bad = data.bad
        self.poor = data.poor
        self.combo_break = data.bad + data.poor
        self.fast = data.fast
        self.slow = data.slow

    def rows(self) -> list[tuple[str, int]]:
        """Label and count of each displayed judgment row, top to bottom."""
        return [
            ("PG:", self.pgreat),
            ("GR:", self.great),
            ("GD:", self.good),
            ("BD:", self.bad),
            ("PR:", self.poor),
            ("CB:", self.combo_break),
        ]


class BpmDisplay:
    """Minimum, current and maximum BPM of the chart."""

    def __init__(self, bpm: int = 150) -> None:
        self.min_bpm = bpm
        self.current_bpm = bpm
        self.max_bpm = bpm

    def update(self, minimum: int, current: int, maximum: int) -> None:
        self.min_bpm = minimum
        self.current_bpm = current
        self.max_bpm = maximum