"""Symmetric distance table that stores only the lower triangle."""

from __future__ import annotations


class DistanceTable:
    """Distances between *size* points; the diagonal is always zero."""

    def __init__(self, size):
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._table = [0.0] * (size * (size - 1) // 2)

    def size(self):
        return self._size

    def clear(self):
        """Set every distance to zero."""
        self._table = [0.0] * len(self._table)

    def _index(self, x, y):
        if not (0 <= x < self._size and 0 <= y < self._size):
            raise IndexError(f"point ({x}, {y}) outside table of size {self._size}")
        if x < y:
            x, y = y, x
        return x * (x - 1) // 2 + y

    def set(self, x, y, value):
        """Store the distance between x and y; setting the diagonal does nothing."""
        if x == y and 0 <= x < self._size:
            return
        self._table[self._index(x, y)] = float(value)

    def get(self, x, y):
        if x == y and 0 <= x < self._size:
            return 0.0
        return self._table[self._index(x, y)]

    def dump(self):
        """The lower triangle as tab-separated rows, two decimals per value."""
        lines = []
        values = iter(self._table)
        for row in range(self._size - 1):
            lines.append("".join(f"{next(values):.2f}\t" for _ in range(row + 1)))
        return "".join(line + "\n" for line in lines) + "\n"