"""Averaging of angles as vectors, so that 359 and 1 average to 0."""

from __future__ import annotations

import enum
import math


class AngleType(enum.Enum):
    """Unit used for angles put in and taken out."""

    DEGREES = "degrees"
    RADIANS = "radians"


class AverageAngle:
    """Sums unit-direction vectors, each weighted by a length."""

    def __init__(self, angle_type=AngleType.DEGREES):
        self._type = AngleType(angle_type)
        self.reset()

    def add(self, alpha, length=1.0):
        """Add an angle with an optional weight."""
        if self._type is AngleType.DEGREES:
            alpha = math.radians(alpha)
        self._sum_x += math.cos(alpha) * length
        self._sum_y += math.sin(alpha) * length
        self._count += 1

    def reset(self):
        self._sum_x = 0.0
        self._sum_y = 0.0
        self._count = 0

    def count(self):
        return self._count

    def angle_type(self):
        return self._type

    def average(self):
        """Direction of the summed vector, in [0, full turn)."""
        angle = math.atan2(self._sum_y, self._sum_x)
        if angle < 0:
            angle += 2 * math.pi
        if self._type is AngleType.DEGREES:
            angle = math.degrees(angle)
        return angle

    def total_length(self):
        if self._count == 0:
            return 0.0
        return math.hypot(self._sum_y, self._sum_x)

    def average_length(self):
        if self._count == 0:
            return 0.0
        return math.hypot(self._sum_y, self._sum_x) / self._count