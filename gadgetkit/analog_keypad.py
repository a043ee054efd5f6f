"""4x4 keypad read through a single resistor-ladder analog input."""

from __future__ import annotations

import bisect
import enum

# upper limits (exclusive, 8-bit scale) of each reading band and the key it means
_LIMITS = (57, 62, 75, 92, 106, 113, 119, 125, 135, 146, 155, 165, 187, 205, 222, 244)
_KEYS = (0, 16, 15, 14, 13, 12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1)


class KeyEvent(enum.IntEnum):
    """What happened between two successive reads."""

    NOKEY = 0x00
    PRESSED = 0x80
    RELEASED = 0x40
    REPEATED = 0x20
    CHANGED = 0x10


def key_from_adc(value, bits=10):
    """Key number 1..16 for an ADC reading of *bits* bits, 0 for no key."""
    if bits < 8:
        raise ValueError(f"ADC must have at least 8 bits, got {bits}")
    scaled = (value >> (bits - 8)) & 0xFF
    return _KEYS[bisect.bisect_right(_LIMITS, scaled)]


class AnalogKeypad:
    """Keypad driven by *read_adc*, a callable returning a raw ADC reading."""

    def __init__(self, read_adc, bits=10):
        self._read_adc = read_adc
        self._bits = bits
        self._last_key = 0

    def _raw(self):
        return key_from_adc(self._read_adc(), self._bits)

    def event(self):
        """Read the keypad and report the change since the last read."""
        key = self._raw()
        last = self._last_key
        if key == 0 and last == 0:
            rv = KeyEvent.NOKEY
        elif last == 0:
            rv = KeyEvent.PRESSED
        elif key == 0:
            rv = KeyEvent.RELEASED
        elif key == last:
            rv = KeyEvent.REPEATED
        else:
            rv = KeyEvent.CHANGED
        self._last_key = key
        return rv

    def pressed(self):
        """The key first pressed, ignoring changes until it is released."""
        key = self._raw()
        if key == 0 or self._last_key == 0:
            self._last_key = key
        return self._last_key

    def read(self):
        """The key pressed now; may fluctuate."""
        self._last_key = self._raw()
        return self._last_key

    def key(self):
        """The key seen by the last read."""
        return self._last_key