"""Driver for the DAC8554 quad 16-bit digital-to-analog converter over SPI.

Frames are handed to *transfer*, a callable that clocks out three bytes
(one control byte and a 16-bit value, most significant byte first).
"""

from __future__ import annotations

import enum

_BUFFER_WRITE = 0x00
_SINGLE_WRITE = 0x10
_ALL_WRITE = 0x20
_BROADCAST = 0x30
_BROADCAST_VALUE = 0x04
_BROADCAST_POWER_DOWN = 0x05


class PowerDown(enum.IntEnum):
    """Output state of a powered-down channel."""

    NORMAL = 0x00
    R1K = 0x40
    R100K = 0x80
    HIGH_IMPEDANCE = 0xC0


def _check_channel(channel):
    if not 0 <= channel <= 3:
        raise ValueError(f"channel must be 0..3, got {channel}")


def _check_value(value):
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"value must be 0..65535, got {value}")


class DAC8554:
    """A DAC8554 with address pins set to *address* (0..3)."""

    def __init__(self, transfer, address=0):
        if not 0 <= address <= 3:
            raise ValueError(f"address must be 0..3, got {address}")
        self._transfer = transfer
        self._address = address << 6

    def _write(self, config, value):
        self._transfer(bytes([config, value >> 8, value & 0xFF]))

    def _channel_write(self, mode, channel, value):
        _check_channel(channel)
        self._write(self._address | mode | (channel << 1), value)

    @staticmethod
    def _power_down_value(mode):
        return (int(PowerDown(mode)) & 0xC0) << 8

    def buffer_value(self, channel, value):
        """Put *value* in the channel's buffer without updating the output."""
        _check_value(value)
        self._channel_write(_BUFFER_WRITE, channel, value)

    def set_value(self, channel, value):
        """Write *value* and update all outputs, buffered ones included."""
        _check_value(value)
        self._channel_write(_ALL_WRITE, channel, value)

    def set_single_value(self, channel, value):
        """Write *value* to one output, leaving buffered ones alone."""
        _check_value(value)
        self._channel_write(_SINGLE_WRITE, channel, value)

    def buffer_power_down(self, channel, mode):
        self._channel_write(_BUFFER_WRITE, channel, self._power_down_value(mode))

    def set_power_down(self, channel, mode):
        self._channel_write(_ALL_WRITE, channel, self._power_down_value(mode))

    def set_single_power_down(self, channel, mode):
        self._channel_write(_SINGLE_WRITE, channel, self._power_down_value(mode))

    def broadcast_buffer(self):
        """Load the buffers of every DAC8554 on the bus into their outputs."""
        self._write(_BROADCAST, 0)

    def broadcast_value(self, value):
        """Write *value* to every channel of every DAC8554 on the bus."""
        _check_value(value)
        self._write(_BROADCAST | _BROADCAST_VALUE, value)

    def broadcast_power_down(self, mode):
        self._write(_BROADCAST | _BROADCAST_POWER_DOWN, self._power_down_value(mode))