"""Turntable state for the scratch lane display."""

from __future__ import annotations

import math
from dataclasses import dataclass

from bmsplayer.layout import Rect

_INDICATOR_LENGTH = 0.7
_EDGE_MARGIN = 5.0


@dataclass
class Turntable:
    """Rotation of the turntable, spinning while the scratch is active."""

    rotation: float = 0.0
    is_active: bool = False
    rotation_speed: float = 180.0  # degrees per second

    def update(self, scratch_active: bool, dt: float) -> None:
        self.is_active = scratch_active
        if scratch_active:
            self.rotation += self.rotation_speed * dt
            if self.rotation >= 360.0:
                self.rotation -= 360.0

    def _centre_and_radius(self, rect: Rect) -> tuple[float, float, float]:
        centre_x = rect.x + rect.width / 2.0
        centre_y = rect.y + rect.height / 2.0
        radius = min(rect.width, rect.height) / 2.0 - _EDGE_MARGIN
        return centre_x, centre_y, radius

    def indicator_endpoint(self, rect: Rect) -> tuple[float, float]:
        """Outer end of the rotation indicator line drawn from the centre of ``rect``."""
        centre_x, centre_y, radius = self._centre_and_radius(rect)
        angle = math.radians(self.rotation)
        length = radius * _INDICATOR_LENGTH
        return centre_x + length * math.cos(angle), centre_y + length * math.sin(angle)