"""Linear mapping of one range onto another, with a precomputed factor."""

from __future__ import annotations

import math


class FastMap:
    """Maps values from [in_min, in_max] to [out_min, out_max] and back."""

    def __init__(self, in_min=0.0, in_max=1.0, out_min=0.0, out_max=1.0):
        self.init(in_min, in_max, out_min, out_max)

    def init(self, in_min, in_max, out_min, out_max):
        """Set both ranges and recompute the mapping."""
        if in_max == in_min:
            raise ValueError("input range is empty")
        self._in_min = in_min
        self._in_max = in_max
        self._out_min = out_min
        self._out_max = out_max
        self._factor = (out_max - out_min) / (in_max - in_min)
        self._base = out_min - in_min * self._factor
        if self._factor == 0:
            self._back_factor = math.copysign(math.inf, self._factor)
        else:
            self._back_factor = 1 / self._factor
        self._back_base = in_min - out_min * self._back_factor

    def map(self, value):
        return self._base + value * self._factor

    def back(self, value):
        """Inverse of :meth:`map`."""
        return self._back_base + value * self._back_factor

    def constrained_map(self, value):
        if value <= self._in_min:
            return self._out_min
        if value >= self._in_max:
            return self._out_max
        return self.map(value)

    def lower_constrained_map(self, value):
        if value <= self._in_min:
            return self._out_min
        return self.map(value)

    def upper_constrained_map(self, value):
        if value >= self._in_max:
            return self._out_max
        return self.map(value)