"""Driver for the AD5241/AD5242 I2C digital potentiometers.

The *bus* object must provide ``write(address, data)`` and
``read(address, count)``; errors on the bus are left to propagate.
"""

from __future__ import annotations

DEFAULT_ADDRESS = 0x2C
MID_SCALE = 127

_RDAC0 = 0x00
_RDAC1 = 0x80
_RESET = 0x40
_O1_HIGH = 0x10
_O2_HIGH = 0x08


class AD524XError(ValueError):
    """An argument the potentiometer cannot take."""


def _check_rdac(rdac):
    if rdac not in (0, 1):
        raise AD524XError(f"rdac must be 0 or 1, got {rdac}")


class AD524X:
    """An AD524X at *address* (0x2C..0x2F) with two wipers and two output lines.

    Wiper positions are remembered locally; both start at mid scale as after
    power-on reset.
    """

    def __init__(self, bus, address=DEFAULT_ADDRESS):
        self._bus = bus
        self._address = address
        self._last = [MID_SCALE, MID_SCALE]
        self._o1 = 0
        self._o2 = 0

    def _send(self, cmd, value):
        self._bus.write(self._address, bytes([cmd, value]))

    def zero_all(self):
        """Move both wipers to zero and pull both outputs low."""
        self.write(0, 0, False, False)
        self.write(1, 0)

    def write(self, rdac, value, o1=None, o2=None):
        """Set wiper *rdac* to *value* (0..255), optionally setting the outputs too."""
        _check_rdac(rdac)
        if not 0 <= value <= 255:
            raise AD524XError(f"value must be 0..255, got {value}")
        if o1 is not None:
            self._o1 = _O1_HIGH if o1 else 0
        if o2 is not None:
            self._o2 = _O2_HIGH if o2 else 0
        cmd = (_RDAC1 if rdac == 1 else _RDAC0) | self._o1 | self._o2
        self._last[rdac] = value
        self._send(cmd, value)

    def set_o1(self, value):
        self._o1 = _O1_HIGH if value else 0
        self._send(_RDAC0 | self._o1 | self._o2, self._last[0])

    def set_o2(self, value):
        self._o2 = _O2_HIGH if value else 0
        self._send(_RDAC0 | self._o1 | self._o2, self._last[0])

    def o1(self):
        return self._o1 > 0

    def o2(self):
        return self._o2 > 0

    def read(self, rdac):
        """The last value written to wiper *rdac*."""
        _check_rdac(rdac)
        return self._last[rdac]

    def read_back_register(self):
        """The register byte as the device reports it."""
        self._bus.write(self._address, b"")
        return bytes(self._bus.read(self._address, 1))[0]

    def mid_scale_reset(self, rdac):
        """Return wiper *rdac* to mid scale."""
        _check_rdac(rdac)
        cmd = _RESET | (_RDAC1 if rdac == 1 else 0) | self._o1 | self._o2
        self._last[rdac] = MID_SCALE
        self._send(cmd, MID_SCALE)