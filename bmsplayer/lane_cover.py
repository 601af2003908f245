"""SUDDEN+, HIDDEN+ and LIFT lane cover settings."""

from __future__ import annotations

from dataclasses import dataclass

_SCALE = 1000.0
_SUDDEN_MAX = 900
_LIFT_MAX = 500
_HIDDEN_MAX = 500
_DEFAULT_SUDDEN = 300
_MIN_VISIBLE = 0.1


def _clamp(value: int, upper: int) -> int:
    return max(0, min(upper, value))


@dataclass
class LaneCover:
    """Cover amounts in thousandths of the lane height."""

    sudden: int = 0
    hidden: int = 0
    lift: int = 0

    def visible_ratio(self) -> float:
        """Uncovered share of the lane, never below 10%."""
        covered = (self.sudden + self.hidden + self.lift) / _SCALE
        return max(1.0 - covered, _MIN_VISIBLE)

    def visible_top(self) -> float:
        """Top edge of the visible area, measured from the bottom (0-1)."""
        return 1.0 - self.sudden / _SCALE

    def visible_bottom(self) -> float:
        """Bottom edge of the visible area, measured from the bottom (0-1)."""
        return (self.lift + self.hidden) / _SCALE

    def judge_line_position(self) -> float:
        """Judge line height above the bottom of the lane (0-1)."""
        return self.lift / _SCALE

    def is_visible(self, position: float) -> bool:
        return self.visible_bottom() <= position <= self.visible_top()

    def adjust_sudden(self, delta: int) -> None:
        self.sudden = _clamp(self.sudden + delta, _SUDDEN_MAX)

    def adjust_lift(self, delta: int) -> None:
        self.lift = _clamp(self.lift + delta, _LIFT_MAX)

    def adjust_hidden(self, delta: int) -> None:
        self.hidden = _clamp(self.hidden + delta, _HIDDEN_MAX)

    def toggle_sudden(self) -> None:
        self.sudden = 0 if self.sudden > 0 else _DEFAULT_SUDDEN

    def white_number(self) -> int:
        return self.sudden