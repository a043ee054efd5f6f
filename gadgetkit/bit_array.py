"""Compact array of fixed-width unsigned integers packed bit by bit."""

from __future__ import annotations

SEGMENT_SIZE = 200
DEFAULT_MAX_SEGMENTS = 5


class BitArray:
    """An array of *size* elements of *bits* bits each (1..32).

    Storage is counted in segments of up to 200 bytes; at most
    *max_segments* of them may be used.
    """

    def __init__(self, bits, size, max_segments=DEFAULT_MAX_SEGMENTS):
        if not 1 <= bits <= 32:
            raise ValueError(f"element size must be 1..32 bits, got {bits}")
        if size < 0:
            raise ValueError("size must not be negative")
        if (bits * size) // 8 > max_segments * SEGMENT_SIZE:
            raise ValueError(
                f"{size} elements of {bits} bits do not fit in "
                f"{max_segments} segments of {SEGMENT_SIZE} bytes"
            )
        self._bits = bits
        self._bytes = (bits * size + 7) // 8
        self._segments = -(-self._bytes // SEGMENT_SIZE)
        self._data = bytearray(self._bytes)

    def capacity(self):
        """Number of elements the allocated memory can hold."""
        return self._bytes * 8 // self._bits

    def memory(self):
        """Number of bytes in use."""
        return self._bytes

    def bits(self):
        return self._bits

    def segments(self):
        return self._segments

    def clear(self):
        """Set every element to zero."""
        self._data = bytearray(self._bytes)

    def _position(self, index):
        if not 0 <= index < self.capacity():
            raise IndexError(f"index {index} outside 0..{self.capacity() - 1}")
        return index * self._bits

    def _bit(self, pos):
        return (self._data[pos >> 3] >> (pos & 7)) & 1

    def get(self, index):
        pos = self._position(index)
        value = 0
        for i in reversed(range(self._bits)):
            value = (value << 1) | self._bit(pos + i)
        return value

    def set(self, index, value):
        """Store the low *bits* bits of *value*; returns *value*."""
        pos = self._position(index)
        for i in range(self._bits):
            byte, bit = divmod(pos + i, 8)
            if (value >> i) & 1:
                self._data[byte] |= 1 << bit
            else:
                self._data[byte] &= ~(1 << bit) & 0xFF
        return value

    def toggle(self, index):
        """Invert every bit of an element; returns the new value."""
        pos = self._position(index)
        for i in range(self._bits):
            byte, bit = divmod(pos + i, 8)
            self._data[byte] ^= 1 << bit
        return self.get(index)