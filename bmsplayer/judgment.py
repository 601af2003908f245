"""Judgment, gauge, random-option and clear-lamp enumerations."""

from __future__ import annotations

from enum import Enum


class JudgeResult(Enum):
    """Timing judgment given to a single note."""

    PGREAT = "PGreat"
    GREAT = "Great"
    GOOD = "Good"
    BAD = "Bad"
    POOR = "Poor"


class GaugeType(Enum):
    """Groove gauge used during play."""

    ASSIST_EASY = "AssistEasy"
    EASY = "Easy"
    NORMAL = "Normal"
    HARD = "Hard"
    EX_HARD = "ExHard"
    HAZARD = "Hazard"


class RandomOption(Enum):
    """Lane arrangement option."""

    OFF = "Off"
    MIRROR = "Mirror"
    RANDOM = "Random"
    R_RANDOM = "RRandom"
    S_RANDOM = "SRandom"
    H_RANDOM = "HRandom"


_GAUGE_LAMPS = {
    GaugeType.ASSIST_EASY: "AssistEasy",
    GaugeType.EASY: "Easy",
    GaugeType.NORMAL: "Normal",
    GaugeType.HARD: "Hard",
    GaugeType.EX_HARD: "ExHard",
    GaugeType.HAZARD: "ExHard",
}

_DISPLAY_NAMES = {
    "NoPlay": "NO PLAY",
    "Failed": "FAILED",
    "AssistEasy": "ASSIST EASY",
    "Easy": "EASY CLEAR",
    "Normal": "CLEAR",
    "Hard": "HARD CLEAR",
    "ExHard": "EX-HARD CLEAR",
    "FullCombo": "FULL COMBO",
}


class ClearLamp(Enum):
    """Clear lamp of a play, ordered from worst to best."""

    NO_PLAY = "NoPlay"
    FAILED = "Failed"
    ASSIST_EASY = "AssistEasy"
    EASY = "Easy"
    NORMAL = "Normal"
    HARD = "Hard"
    EX_HARD = "ExHard"
    FULL_COMBO = "FullCombo"

    @classmethod
    def from_gauge(cls, gauge_type: GaugeType | None, is_full_combo: bool) -> ClearLamp:
        """Lamp for a play cleared on ``gauge_type`` (``None`` means failed)."""
        if is_full_combo:
            return cls.FULL_COMBO
        if gauge_type is None:
            return cls.FAILED
        return cls(_GAUGE_LAMPS[gauge_type])

    def display_name(self) -> str:
        return _DISPLAY_NAMES[self.value]

    def as_u8(self) -> int:
        """Numeric code of the lamp, its position in declaration order."""
        return list(ClearLamp).index(self)