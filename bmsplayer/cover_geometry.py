"""Placement of lane covers, measure lines and long-note bars inside a highway rect."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

from bmsplayer.lane_cover import LaneCover
from bmsplayer.layout import Rect

_COVER_SCALE = 1000.0
_EARLIEST_VISIBLE_MS = -100.0
_LABEL_INSET_X = 10.0
_SUDDEN_LABEL_LIFT = 10.0
_BELOW_JUDGE_LABEL_DROP = 15.0

CoverKind = Literal["sudden", "lift", "hidden"]


@dataclass(frozen=True)
class CoverRegion:
    """One drawn lane cover: its area and the caption written on it."""

    kind: CoverKind
    rect: Rect
    label: str
    label_x: float
    label_y: float


def lane_cover_regions(
    rect: Rect, lane_cover: LaneCover, judge_y: float, highway_width: float
) -> list[CoverRegion]:
    """Covers to draw, in drawing order: SUDDEN+, then LIFT, then HIDDEN+.

    SUDDEN+ hangs from the top of ``rect`` and is sized by the whole rect height, so it
    does not depend on LIFT. LIFT fills everything below the judge line; HIDDEN+ covers
    its share of that same area, starting at the judge line.
    """
    regions: list[CoverRegion] = []
    label_x = rect.x + _LABEL_INSET_X
    below_judge = rect.y + rect.height - judge_y

    if lane_cover.sudden > 0:
        height = lane_cover.sudden / _COVER_SCALE * rect.height
        regions.append(
            CoverRegion(
                kind="sudden",
                rect=Rect(rect.x, rect.y, highway_width, height),
                label=f"SUD+ {lane_cover.sudden}",
                label_x=label_x,
                label_y=rect.y + height - _SUDDEN_LABEL_LIFT,
            )
        )

    if lane_cover.lift > 0:
        regions.append(
            CoverRegion(
                kind="lift",
                rect=Rect(rect.x, judge_y, highway_width, below_judge),
                label=f"LIFT {lane_cover.lift}",
                label_x=label_x,
                label_y=judge_y + _BELOW_JUDGE_LABEL_DROP,
            )
        )

    if lane_cover.hidden > 0:
        height = lane_cover.hidden / _COVER_SCALE * below_judge
        regions.append(
            CoverRegion(
                kind="hidden",
                rect=Rect(rect.x, judge_y, highway_width, height),
                label=f"HID+ {lane_cover.hidden}",
                label_x=label_x,
                label_y=judge_y + _BELOW_JUDGE_LABEL_DROP,
            )
        )

    return regions


def visible_measure_lines(
    rect: Rect,
    judge_y: float,
    current_time_ms: float,
    pixels_per_ms: float,
    measure_times: Iterable[float],
    visible_range_ms: float,
) -> list[float]:
    """Vertical positions of the measure lines to draw, in the order of ``measure_times``.

    A line is kept when its time lies in the visible window and it falls between the
    top of ``rect`` and the judge line.
    """
    lines: list[float] = []
    for time_ms in measure_times:
        time_diff = time_ms - current_time_ms
        if not _EARLIEST_VISIBLE_MS <= time_diff <= visible_range_ms:
            continue
        y = judge_y - time_diff * pixels_per_ms
        if y > judge_y or y < rect.y:
            continue
        lines.append(y)
    return lines


def long_note_bar_span(
    judge_y: float,
    start_time_diff_ms: float,
    end_time_diff_ms: float,
    pixels_per_ms: float,
) -> tuple[float, float] | None:
    """Top and height of a long-note bar, clipped at the judge line.

    Returns ``None`` when the whole bar has passed the judge line or has no height.
    """
    start_y = judge_y - start_time_diff_ms * pixels_per_ms
    end_y = judge_y - end_time_diff_ms * pixels_per_ms
    if start_y > judge_y and end_y > judge_y:
        return None
    height = min(start_y, judge_y) - end_y
    if height <= 0.0:
        return None
    return end_y, height