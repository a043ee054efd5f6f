"""Driver for a four-digit seven-segment display behind an HT16K33 over I2C.

The *bus* object must provide ``write(address, data)``, which sends bytes to
a device; errors on the bus are left to propagate.
"""

from __future__ import annotations

import math
import time

DEFAULT_ADDRESS = 0x70

# segment patterns for 0..9, A..F and a blank
DIGIT_SEGMENTS = (
    0x3F, 0x06, 0x5B, 0x4F, 0x66, 0x6D, 0x7D, 0x07,
    0x7F, 0x6F, 0x77, 0x7C, 0x39, 0x5E, 0x79, 0x71,
    0x00,
)
SPACE = 16

_ON = 0x21
_STANDBY = 0x20
_DISPLAY_ON = 0x81
_DISPLAY_OFF = 0x80
_BLINK_OFF = 0x81
_BRIGHTNESS = 0xE0

_POINT = 0x80
_COLON = 0x02
_VU_BOTH = 0x36
_VU_LEFT_ONE = 0x06
_VU_RIGHT_ONE = 0x30

# display RAM positions of the four digits; position 2 is the colon
_DIGIT_POSITIONS = (0, 1, 3, 4)


def _round(value):
    return int(math.floor(value + 0.5))


def _split_digits(value):
    high = value // 100
    low = value - high * 100
    return [high // 10, high % 10, low // 10, low % 10]


class HT16K33:
    """An HT16K33 seven-segment display at *address* (0x70..0x77) on *bus*.

    Creating the object switches the display on, clears it and suppresses
    up to three leading zeros.
    """

    def __init__(self, bus, address=DEFAULT_ADDRESS):
        self._bus = bus
        self._address = address
        self._cache = [None] * 5
        self._leading_zero_places = 0
        self.display_on()
        self.display_clear()
        self.suppress_leading_zero_places(3)
        self._cache = [None] * 5

    def _write_cmd(self, cmd):
        self._bus.write(self._address, bytes([cmd]))

    def _write_pos(self, pos, mask, point=False):
        if point:
            mask |= _POINT
        if self._cache[pos] == mask:
            return
        self._bus.write(self._address, bytes([pos * 2, mask]))
        self._cache[pos] = mask

    def display_on(self):
        self._write_cmd(_ON)
        self._write_cmd(_DISPLAY_ON)
        self.brightness(8)

    def display_off(self):
        self._write_cmd(_DISPLAY_OFF)
        self._write_cmd(_STANDBY)

    def brightness(self, value):
        """Set brightness 0..15; larger values are taken as 15."""
        value = min(value, 0x0F)
        self._write_cmd(_BRIGHTNESS | value)

    def blink(self, value):
        """Set blink rate 0..3, 0 being off; larger values switch blinking off."""
        if value > 0x03:
            value = 0x00
        self._write_cmd(_BLINK_OFF | (value << 1))

    def suppress_leading_zero_places(self, value):
        """Show up to *value* (0..4) leading zeros as blanks."""
        self._leading_zero_places = min(value, 4)

    def display_clear(self):
        self.display([SPACE] * 4)
        self.display_colon(False)

    def display_int(self, n):
        """Show 0..9999 in decimal."""
        if not 0 <= n <= 9999:
            raise ValueError(f"integer must be 0..9999, got {n}")
        self.display(_split_digits(n))

    def display_hex(self, n):
        """Show 0..0xFFFF in hexadecimal."""
        if not 0 <= n <= 0xFFFF:
            raise ValueError(f"value must be 0..0xFFFF, got {n}")
        self.display([(n >> 12) & 0x0F, (n >> 8) & 0x0F, (n >> 4) & 0x0F, n & 0x0F])

    def display_time(self, left, right):
        """Show two two-digit numbers side by side, 00 00 .. 99 99."""
        for part in (left, right):
            if not 0 <= part <= 99:
                raise ValueError(f"time part must be 0..99, got {part}")
        self.display([left // 10, left % 10, right // 10, right % 10])
        self.display_colon(False)

    def display_float(self, value):
        """Show 0.000 .. 9999 with a decimal point; values outside are ignored."""
        f = float(value)
        if f > 9999 or f < 0:
            return
        w = _round(f)
        point = 0
        if w > 9:
            point = 1
        if w > 99:
            point = 2
        if w > 999:
            point = 3
        if f >= 1:
            while f < 1000:
                f *= 10
            w = _round(f)
        else:
            w = _round(f * 1000)
        self.display(_split_digits(w), point)

    def display(self, digits, point=None):
        """Show four digit codes (0..15, or 16 for blank).

        Without *point* leading zeros are blanked as configured; with it a
        decimal point is lit after digit *point* (0..3) and no zeros are blanked.
        """
        digits = list(digits)
        if len(digits) != 4:
            raise ValueError(f"need four digits, got {len(digits)}")
        for digit in digits:
            if not 0 <= digit <= SPACE:
                raise ValueError(f"digit code must be 0..{SPACE}, got {digit}")
        if point is None:
            for i in range(self._leading_zero_places):
                if digits[i] != 0:
                    break
                digits[i] = SPACE
            for pos, digit in zip(_DIGIT_POSITIONS, digits):
                self._write_pos(pos, DIGIT_SEGMENTS[digit])
        else:
            for i, (pos, digit) in enumerate(zip(_DIGIT_POSITIONS, digits)):
                self._write_pos(pos, DIGIT_SEGMENTS[digit], point == i)

    def display_colon(self, on):
        self._write_pos(2, _COLON if on else 0)

    def display_test(self, delay, sleep=time.sleep):
        """Step every position through all 256 patterns, *delay* milliseconds apart."""
        for pattern in range(256):
            for pos in range(5):
                self._write_pos(pos, pattern)
            sleep(delay / 1000)

    def display_raw(self, segments):
        """Write four raw segment patterns to the four digits."""
        segments = list(segments)
        if len(segments) != 4:
            raise ValueError(f"need four segment patterns, got {len(segments)}")
        for pos, mask in zip(_DIGIT_POSITIONS, segments):
            self._write_pos(pos, mask & 0xFF)

    def display_vu_left(self, value):
        """Bar of *value* (0..8) half-digits growing from the right."""
        patterns = [0] * 4
        for idx in reversed(range(4)):
            if value >= 2:
                patterns[idx] = _VU_BOTH
                value -= 2
            elif value == 1:
                patterns[idx] = _VU_LEFT_ONE
                value = 0
        self.display_raw(patterns)

    def display_vu_right(self, value):
        """Bar of *value* (0..8) half-digits growing from the left."""
        patterns = [0] * 4
        for idx in range(4):
            if value >= 2:
                patterns[idx] = _VU_BOTH
                value -= 2
            elif value == 1:
                patterns[idx] = _VU_RIGHT_ONE
                value = 0
        self.display_raw(patterns)