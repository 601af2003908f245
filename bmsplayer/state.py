"""Per-note judgment state during play."""

from __future__ import annotations

from dataclasses import dataclass

from bmsplayer.judgment import JudgeResult


@dataclass(frozen=True)
class NoteState:
    """State of one note: pending, judged with a result, or missed."""

    result: JudgeResult | None = None
    missed: bool = False

    def __post_init__(self) -> None:
        if self.missed and self.result is not None:
            raise ValueError("a note cannot be both judged and missed")

    def is_pending(self) -> bool:
        return self.result is None and not self.missed


class GamePlayState:
    """States of every note in a chart."""

    def __init__(self, note_count: int) -> None:
        self.note_states: list[NoteState] = [NoteState()] * note_count

    def reset(self) -> None:
        self.note_states = [NoteState()] * len(self.note_states)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self.note_states)

    def set_judged(self, index: int, result: JudgeResult) -> None:
        """Mark a note as judged; indexes outside the chart are ignored."""
        if self._in_range(index):
            self.note_states[index] = NoteState(result=result)

    def set_missed(self, index: int) -> None:
        """Mark a note as missed; indexes outside the chart are ignored."""
        if self._in_range(index):
            self.note_states[index] = NoteState(missed=True)

    def get_state(self, index: int) -> NoteState | None:
        return self.note_states[index] if self._in_range(index) else None

    def all_notes_processed(self, total: int) -> bool:
        """Whether none of the first ``total`` notes is still pending."""
        return not any(state.is_pending() for state in self.note_states[:total])