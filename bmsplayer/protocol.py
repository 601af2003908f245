"""Data exchanged with internet ranking (IR) servers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from bmsplayer.judgment import ClearLamp, GaugeType, RandomOption


def _field(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _optional_int(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    return None if value is None else int(value)


class IrServerType(Enum):
    """Kind of IR server to talk to."""

    LR2IR = "Lr2Ir"
    MOCHA_IR = "MochaIr"
    MIN_IR = "MinIr"
    CUSTOM = "Custom"

    def display_name(self) -> str:
        return {
            IrServerType.LR2IR: "LR2IR",
            IrServerType.MOCHA_IR: "Mocha-IR",
            IrServerType.MIN_IR: "MinIR",
            IrServerType.CUSTOM: "Custom",
        }[self]

    def default_url(self) -> str:
        return {
            IrServerType.LR2IR: "https://www.dream-pro.info/~lavalse/LR2IR/2",
            IrServerType.MOCHA_IR: "https://mocha-repository.info/ir",
            IrServerType.MIN_IR: "https://minir.cc/api",
            IrServerType.CUSTOM: "",
        }[self]


_RANDOM_BITS = {
    RandomOption.OFF: 0,
    RandomOption.MIRROR: 1,
    RandomOption.RANDOM: 2,
    RandomOption.R_RANDOM: 2,  # R-RANDOM is reported as RANDOM
    RandomOption.S_RANDOM: 3,
    RandomOption.H_RANDOM: 4,
}

_GAUGE_BITS = {
    GaugeType.ASSIST_EASY: 0,
    GaugeType.EASY: 1,
    GaugeType.NORMAL: 2,
    GaugeType.HARD: 3,
    GaugeType.EX_HARD: 4,
    GaugeType.HAZARD: 5,
}


@dataclass
class PlayOptionFlags:
    """Play options reported with a score."""

    random_option: RandomOption = RandomOption.OFF
    gauge_type: GaugeType = GaugeType.NORMAL
    auto_scratch: bool = False
    legacy_note: bool = False
    expand_judge: bool = False
    battle: bool = False

    def has_assist(self) -> bool:
        return self.auto_scratch or self.legacy_note or self.expand_judge

    def to_lr2ir_option(self) -> int:
        """Pack the options into the LR2IR option bit field."""
        option = _RANDOM_BITS[self.random_option]
        option |= _GAUGE_BITS[self.gauge_type] << 4
        if self.auto_scratch:
            option |= 1 << 8
        if self.legacy_note:
            option |= 1 << 9
        if self.expand_judge:
            option |= 1 << 10
        if self.battle:
            option |= 1 << 12
        return option

    def to_dict(self) -> dict[str, Any]:
        return {
            "random_option": self.random_option.value,
            "gauge_type": self.gauge_type.value,
            "auto_scratch": self.auto_scratch,
            "legacy_note": self.legacy_note,
            "expand_judge": self.expand_judge,
            "battle": self.battle,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PlayOptionFlags:
        return cls(
            random_option=RandomOption(_field(data, "random_option")),
            gauge_type=GaugeType(_field(data, "gauge_type")),
            auto_scratch=bool(_field(data, "auto_scratch")),
            legacy_note=bool(_field(data, "legacy_note")),
            expand_judge=bool(_field(data, "expand_judge")),
            battle=bool(_field(data, "battle")),
        )


_SUBMISSION_INTS = (
    "ex_score",
    "max_combo",
    "pgreat_count",
    "great_count",
    "good_count",
    "bad_count",
    "poor_count",
    "total_notes",
    "timestamp",
)


@dataclass
class ScoreSubmission:
    """A score as sent to an IR server."""

    player_id: str
    chart_hash: str
    chart_md5: str
    ex_score: int
    clear_lamp: ClearLamp
    max_combo: int
    pgreat_count: int
    great_count: int
    good_count: int
    bad_count: int
    poor_count: int
    total_notes: int
    play_option: PlayOptionFlags = field(default_factory=PlayOptionFlags)
    timestamp: int = 0
    client_version: str = ""
    score_hash: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "player_id": self.player_id,
            "chart_hash": self.chart_hash,
            "chart_md5": self.chart_md5,
            "ex_score": self.ex_score,
            "clear_lamp": self.clear_lamp.value,
            "max_combo": self.max_combo,
            "pgreat_count": self.pgreat_count,
            "great_count": self.great_count,
            "good_count": self.good_count,
            "bad_count": self.bad_count,
            "poor_count": self.poor_count,
            "total_notes": self.total_notes,
            "play_option": self.play_option.to_dict(),
            "timestamp": self.timestamp,
            "client_version": self.client_version,
            "score_hash": self.score_hash,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ScoreSubmission:
        numbers = {name: int(_field(data, name)) for name in _SUBMISSION_INTS}
        return cls(
            player_id=str(_field(data, "player_id")),
            chart_hash=str(_field(data, "chart_hash")),
            chart_md5=str(_field(data, "chart_md5")),
            clear_lamp=ClearLamp(_field(data, "clear_lamp")),
            play_option=PlayOptionFlags.from_dict(_field(data, "play_option")),
            client_version=str(_field(data, "client_version")),
            score_hash=str(_field(data, "score_hash")),
            **numbers,
        )


@dataclass
class SubmissionResponse:
    """Server reply to a score submission."""

    success: bool
    rank: int | None = None
    total_players: int | None = None
    message: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SubmissionResponse:
        message = data.get("message")
        return cls(
            success=bool(_field(data, "success")),
            rank=_optional_int(data, "rank"),
            total_players=_optional_int(data, "total_players"),
            message=None if message is None else str(message),
        )


@dataclass
class RankingEntry:
    """One row of a chart leaderboard."""

    rank: int
    player_name: str
    ex_score: int
    clear_lamp: ClearLamp
    timestamp: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RankingEntry:
        return cls(
            rank=int(_field(data, "rank")),
            player_name=str(_field(data, "player_name")),
            ex_score=int(_field(data, "ex_score")),
            clear_lamp=ClearLamp(_field(data, "clear_lamp")),
            timestamp=_optional_int(data, "timestamp"),
        )


@dataclass
class ChartRanking:
    """Leaderboard of one chart."""

    chart_hash: str
    entries: list[RankingEntry] = field(default_factory=list)
    total_players: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ChartRanking:
        return cls(
            chart_hash=str(_field(data, "chart_hash")),
            entries=[RankingEntry.from_dict(entry) for entry in _field(data, "entries")],
            total_players=int(_field(data, "total_players")),
        )


class IrSubmitState(Enum):
    """Progress of a score submission, for display."""

    IDLE = "Idle"
    SUBMITTING = "Submitting"
    SUCCESS = "Success"
    FAILED = "Failed"
    DISABLED = "Disabled"

    def display_text(self) -> str:
        return {
            IrSubmitState.IDLE: "",
            IrSubmitState.SUBMITTING: "IR: Submitting...",
            IrSubmitState.SUCCESS: "IR: Submitted!",
            IrSubmitState.FAILED: "IR: Failed",
            IrSubmitState.DISABLED: "IR: Disabled",
        }[self]