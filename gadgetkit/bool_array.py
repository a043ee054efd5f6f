"""Compact array of booleans, one bit per element."""

from __future__ import annotations

MAX_SIZE = 250 * 8


class BoolArray:
    """Up to 2000 booleans packed into bytes."""

    def __init__(self, size):
        if not 0 <= size <= MAX_SIZE:
            raise ValueError(f"size must be 0..{MAX_SIZE}, got {size}")
        self._size = size
        self._data = bytearray((size + 7) // 8)

    def __len__(self):
        return self._size

    def _locate(self, index):
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} outside 0..{self._size - 1}")
        return index >> 3, 1 << (index & 7)

    def clear(self):
        self.set_all(False)

    def set_all(self, value):
        fill = 0xFF if value else 0x00
        self._data = bytearray([fill]) * len(self._data)

    def get(self, index):
        byte, mask = self._locate(index)
        return bool(self._data[byte] & mask)

    def set(self, index, value):
        byte, mask = self._locate(index)
        if value:
            self._data[byte] |= mask
        else:
            self._data[byte] &= ~mask & 0xFF

    def toggle(self, index):
        byte, mask = self._locate(index)
        self._data[byte] ^= mask