"""Driver for the COZIR range of CO2, humidity and temperature sensors.

The sensor is reached through *serial*, an object with ``write(data)``,
``read(size)`` and an ``in_waiting`` count of bytes ready to be read.
Setting up the line (9600 baud) is left to the caller.
"""

from __future__ import annotations

import enum
import time

_INIT_DELAY = 1.2
_REPLY_DELAY = 0.2
_WHITESPACE = b" \t\n\v\f\r"


class OperatingMode(enum.IntEnum):
    """How the sensor reports its measurements."""

    COMMAND = 0x00
    STREAMING = 0x01
    POLLING = 0x02


class OutputField(enum.IntFlag):
    """Fields the sensor sends in streaming mode; combine them with ``|``."""

    NONE = 0x0001
    RAWCO2 = 0x0002
    FILTCO2 = 0x0004
    SENSTEMP = 0x0008
    RAWLEDSIGNAL = 0x0010
    FILTLEDSIGNAL = 0x0020
    FILTTEMP = 0x0040
    RAWTEMP = 0x0080
    ZEROPOINT = 0x0100
    MAXLED = 0x0200
    RAWLED = 0x0400
    FILTLED = 0x0800
    HUMIDITY = 0x1000
    LIGHT = 0x2000
    HTC = HUMIDITY | RAWTEMP | RAWCO2
    ALL = 0x3FFE


def _atoi(data):
    """Leading decimal integer of *data*, as the C library reads it; 0 if none."""
    i = 0
    n = len(data)
    while i < n and data[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < n and data[i] in b"+-":
        if data[i] == ord("-"):
            sign = -1
        i += 1
    value = 0
    while i < n and 0x30 <= data[i] <= 0x39:
        value = value * 10 + data[i] - 0x30
        i += 1
    return sign * value


def parse_reply(reply):
    """Number carried by a sensor reply such as ``b"Z 00450"``.

    Temperature replies start with ``T``; for them the digits from the sixth
    character on are used and a byte 1 in the fifth character adds 1000.
    """
    if isinstance(reply, str):
        reply = reply.encode("latin-1")
    reply = bytes(reply)
    if not reply:
        return 0
    if reply[0] == ord("T"):
        value = _atoi(reply[5:])
        if len(reply) > 4 and reply[4] == 1:
            value += 1000
    else:
        value = _atoi(reply[2:])
    return value & 0xFFFFFFFF


def _check(value, bits, name):
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{name} must be 0..{(1 << bits) - 1}, got {value}")
    return int(value)


class Cozir:
    """A COZIR sensor on *serial*; put in polling mode when created."""

    def __init__(self, serial, sleep=time.sleep):
        self._serial = serial
        self._sleep = sleep
        self.set_operating_mode(OperatingMode.POLLING)
        self._sleep(_INIT_DELAY)

    def _command(self, text):
        self._serial.write(text.encode("ascii") + b"\r\n")

    def _request(self, text):
        self._command(text)
        # the sensor may take up to 100 ms to answer
        self._sleep(_REPLY_DELAY)
        reply = bytearray()
        while self._serial.in_waiting:
            chunk = self._serial.read(self._serial.in_waiting)
            if not chunk:
                break
            reply += chunk
        return parse_reply(bytes(reply))

    def set_operating_mode(self, mode):
        """Switch between command, streaming and polling mode."""
        self._command(f"K {int(OperatingMode(mode))}")

    # polling mode

    def celsius(self):
        raw = self._request("T") & 0xFFFF
        return 0.1 * (raw - 1000.0)

    def fahrenheit(self):
        return self.celsius() * 1.8 + 32

    def humidity(self):
        """Relative humidity in percent."""
        return 0.1 * self._request("H")

    def light(self):
        return 1.0 * self._request("L")

    def co2(self):
        return self._request("Z")

    # calibration

    def fine_tune_zero_point(self, v1, v2):
        """Make a reading of *v1* be reported as *v2*."""
        v1 = _check(v1, 16, "v1")
        v2 = _check(v2, 16, "v2")
        return self._request(f"F {v1} {v2}") & 0xFFFF

    def calibrate_fresh_air(self):
        return self._request("G") & 0xFFFF

    def calibrate_nitrogen(self):
        return self._request("U") & 0xFFFF

    def calibrate_known_gas(self, value):
        value = _check(value, 16, "value")
        return self._request(f"X {value}") & 0xFFFF

    def get_span_calibrate(self):
        return self._request("s") & 0xFFFF

    def set_digi_filter(self, value):
        """Set the smoothing filter: 1 is fast and noisy, 255 slow and smooth."""
        value = _check(value, 8, "filter")
        self._command(f"A {value}")

    def get_digi_filter(self):
        return self._request("a") & 0xFF

    # streaming mode

    def set_output_fields(self, fields):
        """Choose the fields sent in streaming mode."""
        fields = _check(int(fields), 16, "fields")
        self._command(f"M {fields}")

    def get_recent_fields(self):
        """Ask for the latest fields; the caller reads the reply from the line."""
        self._command("Q")

    # EEPROM

    def set_eeprom(self, address, value):
        address = _check(address, 8, "address")
        value = _check(value, 8, "value")
        self._command(f"P {address} {value}")

    def get_eeprom(self, address):
        address = _check(address, 8, "address")
        return self._request(f"p {address}") & 0xFF

    # command mode; the caller reads the reply from the line

    def get_version_serial(self):
        self._command("Y")

    def get_configuration(self):
        self._command("*")