"""Decoder for the MAX31855 thermocouple converter.

The chip is read through *read_word*, a callable returning the 32-bit word
the chip shifts out, most significant bit first.
"""

from __future__ import annotations

import enum

# linear correction of the K-type reading for other thermocouple types
E_TC = 41.276 / 76.373
J_TC = 41.276 / 57.953
K_TC = 41.276 / 41.276
N_TC = 41.276 / 36.256
R_TC = 41.276 / 10.506
S_TC = 41.276 / 9.587
T_TC = 41.276 / 52.18

_INVALID = -999.0


class Status(enum.IntFlag):
    """Fault bits of the last read."""

    OK = 0x00
    OPEN_CIRCUIT = 0x01
    SHORT_TO_GND = 0x02
    SHORT_TO_VCC = 0x04
    ERROR = 0x07
    NOREAD = 0x80


class MAX31855:
    """A MAX31855 thermocouple interface."""

    def __init__(self, read_word):
        self._read_word = read_word
        self._offset = 0.0
        self._tc_factor = K_TC
        self._status = Status.NOREAD
        self._temperature = _INVALID
        self._internal = _INVALID

    def read(self):
        """Read and decode one word; returns its status bits."""
        value = self._read_word() & 0xFFFFFFFF

        self._status = Status(value & 0x07)
        value >>= 4  # status bits and a reserved bit

        internal = (value & 0x07FF) * 0.0625
        if value & 0x0800:
            internal -= 128
        self._internal = internal
        value >>= 14  # internal temperature, fault bit and a reserved bit

        temperature = (value & 0x1FFF) * 0.25
        if value & 0x2000:
            temperature -= 2048
        self._temperature = temperature + self._offset
        return self._status

    @property
    def internal(self):
        """Cold-junction temperature in degrees Celsius."""
        return self._internal

    @property
    def temperature(self):
        """Thermocouple temperature, offset added and scaled by :attr:`tc_factor`."""
        return self._temperature * self._tc_factor

    @property
    def status(self):
        return self._status

    @property
    def status_error(self):
        return bool(self._status & Status.ERROR)

    @property
    def short_to_gnd(self):
        return bool(self._status & Status.SHORT_TO_GND)

    @property
    def short_to_vcc(self):
        return bool(self._status & Status.SHORT_TO_VCC)

    @property
    def open_circuit(self):
        return bool(self._status & Status.OPEN_CIRCUIT)

    @property
    def offset(self):
        """Degrees added to the thermocouple reading at each read."""
        return self._offset

    @offset.setter
    def offset(self, value):
        self._offset = float(value)

    @property
    def tc_factor(self):
        """Factor converting the K-type reading to the thermocouple in use."""
        return self._tc_factor

    @tc_factor.setter
    def tc_factor(self, value):
        self._tc_factor = float(value)