"""Analog input with noise suppression and exponential smoothing."""

from __future__ import annotations


class AnalogPin:
    """Wraps *read_adc*, a callable returning a raw reading; reads once at creation."""

    def __init__(self, read_adc):
        self._read_adc = read_adc
        self._prev = read_adc()

    def read(self, noise=0):
        """Return the reading, keeping the previous one unless it moved more than *noise*."""
        value = self._read_adc()
        if noise == 0 or ((value - self._prev) & 0x7FFF) > noise:
            self._prev = value
        return self._prev

    def read_smoothed(self, alpha=0):
        """Blend the reading with the previous one; *alpha* 0..31 weighs the past."""
        alpha = min(alpha, 31)
        value = self._read_adc()
        if alpha > 0:
            delta = alpha * (self._prev - value)
            step = abs(delta) // 32
            value += step if delta >= 0 else -step
        self._prev = value
        return value

    def previous(self):
        return self._prev