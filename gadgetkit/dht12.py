"""Driver for the DHT12 humidity and temperature sensor over I2C.

The *bus* object must provide ``write(address, data)`` and
``read(address, count)``, the latter returning up to *count* bytes.
"""

from __future__ import annotations

ADDRESS = 0x5C
_FRAME_LENGTH = 5


class DHT12Error(Exception):
    """A failed read of the DHT12."""


class DHT12ChecksumError(DHT12Error):
    """The data arrived but its checksum did not match."""


class DHT12ConnectError(DHT12Error):
    """The sensor returned no data at all."""


class DHT12MissingBytesError(DHT12Error):
    """The sensor returned fewer than five bytes."""


class DHT12:
    """A DHT12 at address 0x5C on *bus*.

    After :meth:`read` the measurement is in :attr:`humidity` (percent) and
    :attr:`temperature` (degrees Celsius).
    """

    def __init__(self, bus):
        self._bus = bus
        self.humidity = None
        self.temperature = None

    def read(self):
        """Measure; returns ``(humidity, temperature)``.

        On a checksum error the values are still stored before the error is raised.
        """
        self._bus.write(ADDRESS, b"\x00")
        data = bytes(self._bus.read(ADDRESS, _FRAME_LENGTH))
        if not data:
            raise DHT12ConnectError("no reply from DHT12")
        if len(data) < _FRAME_LENGTH:
            raise DHT12MissingBytesError(f"DHT12 sent {len(data)} of {_FRAME_LENGTH} bytes")

        self.humidity = data[0] + data[1] * 0.1
        temperature = data[2] + (data[3] & 0x7F) * 0.1
        if data[3] & 0x80:
            temperature = -temperature
        self.temperature = temperature

        if sum(data[:4]) & 0xFF != data[4]:
            raise DHT12ChecksumError("DHT12 checksum mismatch")
        return self.humidity, self.temperature