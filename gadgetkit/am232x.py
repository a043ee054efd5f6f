"""Driver for the AM2320/AM2321/AM2322 humidity and temperature sensors over I2C.

The *bus* object must provide ``write(address, data)``, which sends bytes to a
device and raises :class:`OSError` when the device does not answer, and
``read(address, count)``, which returns up to *count* bytes from a device.
"""

from __future__ import annotations

import enum
import time

ADDRESS = 0x5C

_READ_FUNCTION = 0x03
_WRITE_FUNCTION = 0x10
_WAKE_UP_DELAY = 0.001


class AM232XErrorCode(enum.IntEnum):
    """Error codes reported by the sensor or found while checking its replies."""

    UNKNOWN = -10
    CONNECT = -11
    FUNCTION = -12
    ADDRESS = -13
    REGISTER = -14
    CRC_1 = -15
    CRC_2 = -16
    WRITE_DISABLED = -17
    WRITE_COUNT = -18
    MISSING_BYTES = -19


# exception codes the sensor puts in its reply
_DEVICE_ERRORS = {
    0x80: AM232XErrorCode.FUNCTION,
    0x81: AM232XErrorCode.ADDRESS,
    0x82: AM232XErrorCode.REGISTER,
    0x83: AM232XErrorCode.CRC_1,
    0x84: AM232XErrorCode.WRITE_DISABLED,
}


class AM232XError(Exception):
    """A failed exchange with the sensor; :attr:`code` tells why."""

    def __init__(self, code):
        self.code = AM232XErrorCode(code)
        super().__init__(f"AM232X error {self.code.name} ({int(self.code)})")


def crc16(data):
    """CRC-16 as used by the sensor: initial 0xFFFF, reflected polynomial 0xA001."""
    crc = 0xFFFF
    for byte in data:
        crc ^= byte
        for _ in range(8):
            if crc & 0x01:
                crc = (crc >> 1) ^ 0xA001
            else:
                crc >>= 1
    return crc


class AM232X:
    """An AM232X sensor at address 0x5C on *bus*.

    After :meth:`read` the last measurement is in :attr:`humidity` (percent)
    and :attr:`temperature` (degrees Celsius).
    """

    def __init__(self, bus, sleep=time.sleep):
        self._bus = bus
        self._sleep = sleep
        self.humidity = None
        self.temperature = None

    def _wake_up(self):
        # a sleeping sensor does not acknowledge the first transfer
        try:
            self._bus.write(ADDRESS, b"")
        except OSError:
            pass
        self._sleep(_WAKE_UP_DELAY)

    @staticmethod
    def _check_reply(reply, expected):
        if len(reply) != expected:
            code = _DEVICE_ERRORS.get(reply[3]) if len(reply) > 3 else None
            raise AM232XError(code if code is not None else AM232XErrorCode.UNKNOWN)
        crc = reply[-1] * 256 + reply[-2]
        if crc16(reply[:-2]) != crc:
            raise AM232XError(AM232XErrorCode.CRC_2)

    def _read_register(self, register, count):
        self._wake_up()
        self._bus.write(ADDRESS, bytes([_READ_FUNCTION, register, count]))
        # function code and byte count lead, the CRC trails
        expected = count + 4
        reply = bytes(self._bus.read(ADDRESS, expected))
        self._check_reply(reply, expected)
        return reply

    def _write_register(self, register, count, value):
        self._wake_up()
        if count == 2:
            payload = bytes([(value >> 8) & 0xFF, value & 0xFF])
        else:
            payload = bytes([value & 0xFF])
        frame = bytes([_WRITE_FUNCTION, register, count]) + payload
        crc = crc16(frame)
        self._bus.write(ADDRESS, frame + bytes([crc & 0xFF, crc >> 8]))
        expected = count + 3
        reply = bytes(self._bus.read(ADDRESS, expected))
        self._check_reply(reply, expected)

    def read(self):
        """Measure humidity and temperature; returns ``(humidity, temperature)``."""
        reply = self._read_register(0x00, 4)
        self.humidity = (reply[2] * 256 + reply[3]) * 0.1
        temperature = ((reply[4] & 0x7F) * 256 + reply[5]) * 0.1
        if reply[4] & 0x80:
            temperature = -temperature
        self.temperature = temperature
        return self.humidity, self.temperature

    def model(self):
        reply = self._read_register(0x08, 2)
        return reply[2] * 256 + reply[3]

    def version(self):
        return self._read_register(0x0A, 1)[2]

    def device_id(self):
        reply = self._read_register(0x0B, 4)
        return int.from_bytes(reply[2:6], "big")

    def status(self):
        return self._read_register(0x0F, 1)[2]

    def user_register_a(self):
        reply = self._read_register(0x10, 2)
        return reply[2] * 256 + reply[3]

    def user_register_b(self):
        reply = self._read_register(0x12, 2)
        return reply[2] * 256 + reply[3]

    def set_status(self, value):
        self._write_register(0x0F, 1, value)

    def set_user_register_a(self, value):
        self._write_register(0x10, 2, value)

    def set_user_register_b(self, value):
        self._write_register(0x12, 2, value)