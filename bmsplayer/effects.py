"""Timed visual effects: judgment text, combo, lane flashes, key beams and bombs."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from bmsplayer.judgment import JudgeResult
from bmsplayer.layout import LANE_COUNT_DP

MAX_LANE_COUNT = LANE_COUNT_DP
MAX_BOMBS = 128
VIRTUAL_WIDTH = 1920.0
VIRTUAL_HEIGHT = 1080.0

_FADE_PORTION = 0.3
_JUDGE_GROWTH = 0.3
_COMBO_BOUNCE = 0.4

_JUDGE_TEXTS = {
    JudgeResult.PGREAT: "PGREAT",
    JudgeResult.GREAT: "GREAT",
    JudgeResult.GOOD: "GOOD",
    JudgeResult.BAD: "BAD",
    JudgeResult.POOR: "POOR",
}


def judge_text(result: JudgeResult) -> str:
    """Text shown for a judgment."""
    return _JUDGE_TEXTS[result]


def fast_slow_label(timing_diff_ms: float | None) -> str | None:
    """``"FAST"`` for early hits, ``"SLOW"`` for late ones, ``None`` otherwise."""
    if timing_diff_ms is None or timing_diff_ms == 0.0:
        return None
    return "FAST" if timing_diff_ms > 0.0 else "SLOW"


def _fade_alpha(progress: float) -> float:
    return progress / _FADE_PORTION if progress < _FADE_PORTION else 1.0


@dataclass
class JudgeEffect:
    """Judgment text that grows slightly and fades out over its duration."""

    result: JudgeResult
    x: float
    y: float
    duration: float
    timer: float = field(init=False)

    def __post_init__(self) -> None:
        self.timer = self.duration

    def update(self, dt: float) -> None:
        self.timer -= dt

    def is_active(self) -> bool:
        return self.timer > 0.0

    def progress(self) -> float:
        """Remaining share of the effect, from 1 at start down to 0."""
        if self.duration <= 0.0:
            return 0.0
        return self.timer / self.duration

    def alpha(self) -> float:
        """Opacity; fades out over the last 30% of the effect."""
        return _fade_alpha(self.progress())

    def scale(self) -> float:
        """Text scale; starts at 1 and grows as the effect ages."""
        return 1.0 + (1.0 - self.progress()) * _JUDGE_GROWTH


@dataclass
class ComboEffect:
    """Combo counter that bounces when the combo changes."""

    combo: int
    x: float
    y: float
    duration: float
    timer: float = field(init=False)

    def __post_init__(self) -> None:
        self.timer = self.duration

    def update(self, dt: float) -> None:
        self.timer -= dt

    def update_combo(self, combo: int, duration: float) -> None:
        self.combo = combo
        self.timer = duration

    def scale(self) -> float:
        """Text scale: enlarged during the first half of the effect, then 1."""
        progress = max(self.timer / self.duration, 0.0) if self.duration > 0.0 else 0.0
        if progress > 0.5:
            return 1.0 + (progress - 0.5) * _COMBO_BOUNCE
        return 1.0

    def text(self) -> str | None:
        """Combo caption, or ``None`` while the combo is below two."""
        if self.combo < 2:
            return None
        return f"{self.combo} COMBO"


@dataclass
class LaneFlash:
    """Brief flash of a lane when its key is pressed."""

    duration: float = 0.1
    timer: float = 0.0

    def trigger(self) -> None:
        self.timer = self.duration

    def update(self, dt: float) -> None:
        if self.timer > 0.0:
            self.timer -= dt

    def is_active(self) -> bool:
        return self.timer > 0.0

    def alpha(self) -> float:
        if self.timer > 0.0 and self.duration > 0.0:
            return self.timer / self.duration
        return 0.0


@dataclass
class KeyBeam:
    """Beam shown above a lane while its key is held."""

    is_held: bool = False

    def set_held(self, held: bool) -> None:
        self.is_held = held

    def is_active(self) -> bool:
        return self.is_held


@dataclass
class BombEffect:
    """Expanding ring shown on the judge line when a note is hit."""

    lane: int
    duration: float
    timer: float = field(init=False)

    def __post_init__(self) -> None:
        self.timer = self.duration

    def update(self, dt: float) -> None:
        self.timer -= dt

    def is_active(self) -> bool:
        return self.timer > 0.0

    def progress(self) -> float:
        """Elapsed share of the effect, clamped to 0-1; 1 for a zero duration."""
        if self.duration <= 0.0:
            return 1.0
        return min(max(1.0 - self.timer / self.duration, 0.0), 1.0)


@dataclass(frozen=True)
class EffectTimings:
    """Durations (seconds) and switches that drive the effects."""

    judge_duration: float = 0.5
    combo_duration: float = 0.5
    lane_flash_duration: float = 0.1
    bomb_enabled: bool = True
    bomb_duration: float = 0.25


class EffectManager:
    """Owns and advances every visual effect of the play screen."""

    def __init__(
        self,
        combo_x: float = VIRTUAL_WIDTH / 2.0,
        combo_y: float = VIRTUAL_HEIGHT / 2.0 + 50.0,
        timings: EffectTimings | None = None,
    ) -> None:
        self.timings = timings if timings is not None else EffectTimings()
        self.judge_effect: JudgeEffect | None = None
        self.combo_effect = ComboEffect(0, combo_x, combo_y, self.timings.combo_duration)
        self.lane_flashes = [
            LaneFlash(self.timings.lane_flash_duration) for _ in range(MAX_LANE_COUNT)
        ]
        self.key_beams = [KeyBeam() for _ in range(MAX_LANE_COUNT)]
        self.bombs: deque[BombEffect] = deque(maxlen=MAX_BOMBS)

    @staticmethod
    def _lane_ok(lane: int) -> bool:
        return 0 <= lane < MAX_LANE_COUNT

    def trigger_judge(self, result: JudgeResult, x: float, y: float) -> None:
        self.judge_effect = JudgeEffect(result, x, y, self.timings.judge_duration)

    def trigger_bomb(self, lane: int) -> None:
        """Start a bomb on a lane; the oldest bomb is dropped once the cap is reached."""
        if not self._lane_ok(lane) or not self.timings.bomb_enabled:
            return
        self.bombs.append(BombEffect(lane, self.timings.bomb_duration))

    def update_combo(self, combo: int) -> None:
        self.combo_effect.update_combo(combo, self.timings.combo_duration)

    def trigger_lane_flash(self, lane: int) -> None:
        if self._lane_ok(lane):
            self.lane_flashes[lane].trigger()

    def set_key_held(self, lane: int, held: bool) -> None:
        if self._lane_ok(lane):
            self.key_beams[lane].set_held(held)

    def update(self, dt: float) -> None:
        """Advance all effects by ``dt`` seconds and drop the finished ones."""
        if self.judge_effect is not None:
            self.judge_effect.update(dt)
            if not self.judge_effect.is_active():
                self.judge_effect = None
        self.combo_effect.update(dt)
        for flash in self.lane_flashes:
            flash.update(dt)
        for bomb in self.bombs:
            bomb.update(dt)
        self.bombs = deque((b for b in self.bombs if b.is_active()), maxlen=MAX_BOMBS)

    def judge_caption(self) -> str | None:
        """Judgment text followed by the combo, e.g. ``"GREAT 12"``; ``None`` when idle."""
        effect = self.judge_effect
        if effect is None or not effect.is_active():
            return None
        text = judge_text(effect.result)
        if self.combo_effect.combo >= 1:
            return f"{text} {self.combo_effect.combo}"
        return text