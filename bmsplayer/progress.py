"""Song progress bar geometry and time labels."""

from __future__ import annotations

from dataclasses import dataclass

from bmsplayer.layout import Rect

_INDICATOR_HEIGHT = 4.0


def format_time(ms: float) -> str:
    """Format milliseconds as ``m:ss``; negative times show as zero."""
    seconds = int(max(ms / 1000.0, 0.0))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02}"


@dataclass
class ProgressBar:
    """Vertical bar whose indicator climbs from bottom to top as the song plays."""

    total_duration_ms: float = 0.0

    def progress(self, current_time_ms: float) -> float:
        """Played share of the song (0-1); 0 when the duration is unknown."""
        if self.total_duration_ms <= 0.0:
            return 0.0
        return min(max(current_time_ms / self.total_duration_ms, 0.0), 1.0)

    def indicator_y(self, rect: Rect, current_time_ms: float) -> float:
        """Top edge of the indicator within ``rect``."""
        return (
            rect.y
            + rect.height * (1.0 - self.progress(current_time_ms))
            - _INDICATOR_HEIGHT / 2.0
        )

    def time_labels(self, current_time_ms: float) -> tuple[str, str]:
        """Elapsed and total time as ``m:ss`` strings."""
        return format_time(current_time_ms), format_time(self.total_duration_ms)