"""Histogram over buckets bounded by a sorted list of upper limits."""

from __future__ import annotations

import math


class Histogram:
    """Counts values in ``len(bounds) + 1`` buckets.

    Bucket *i* holds values up to and including ``bounds[i]``; the last
    bucket holds everything above the last bound.
    """

    def __init__(self, bounds):
        self._bounds = [float(b) for b in bounds]
        self._len = len(self._bounds) + 1
        self.clear()

    def clear(self):
        """Reset all counters."""
        self._data = [0] * self._len
        self._count = 0

    def add(self, value):
        self._data[self.find(value)] += 1
        self._count += 1

    def sub(self, value):
        """Decrease the bucket of *value*; the total count still goes up."""
        self._data[self.find(value)] -= 1
        self._count += 1

    def size(self):
        """Number of buckets."""
        return self._len

    def count(self):
        """Number of values added or subtracted."""
        return self._count

    def bucket(self, index):
        if index < 0:
            raise IndexError(f"negative bucket index {index}")
        if index >= self._len:
            return 0
        return self._data[index]

    def frequency(self, index):
        """Relative frequency of a bucket; NaN when empty."""
        if self._count == 0:
            return math.nan
        return self.bucket(index) / self._count

    def pmf(self, value):
        """Probability of the bucket *value* falls in."""
        if self._count == 0:
            return math.nan
        return self._data[self.find(value)] / self._count

    def cdf(self, value):
        """Cumulative probability up to the bucket of *value*."""
        if self._count == 0:
            return math.nan
        return sum(self._data[: self.find(value) + 1]) / self._count

    def val(self, probability):
        """Lowest bound at which the cumulative probability reaches *probability*."""
        if self._count == 0:
            return math.nan
        p = min(max(probability, 0.0), 1.0) * self._count
        total = 0
        for bound, count in zip(self._bounds, self._data):
            total += count
            if total >= p:
                return bound
        return math.inf

    def find(self, value):
        """Index of the bucket *value* falls in."""
        for index, bound in enumerate(self._bounds):
            if bound >= value:
                return index
        return self._len - 1