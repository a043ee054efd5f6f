"""Driver for I2C serial EEPROMs of the 24LC series.

The *bus* object must provide ``write(address, data)``, which sends bytes to
a device and raises :class:`OSError` when it does not acknowledge, and
``read(address, count)``, which returns up to *count* bytes.
"""

from __future__ import annotations

import time

DEFAULT_DEVICE_SIZE = 64
TWI_BUFFER_SIZE = 30
_WRITE_DELAY = 0.005


class EepromError(OSError):
    """A failed exchange with the EEPROM."""


def _check_address(memaddr):
    if not 0 <= memaddr <= 0xFFFF:
        raise ValueError(f"memory address must be 0..0xFFFF, got {memaddr}")


def _check_byte(value):
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value must be 0..255, got {value}")


class I2CEeprom:
    """An EEPROM at *address* on *bus* holding *device_size* bytes.

    Chips of 2048 bytes or less take a one-byte memory address; the page
    size is guessed from the device size. *clock* returns seconds and is
    used to wait out the write cycle of the chip.
    """

    def __init__(self, bus, address, device_size=DEFAULT_DEVICE_SIZE, clock=time.monotonic):
        self._bus = bus
        self._address = address
        self._clock = clock
        self._last_write = None
        if device_size <= 256:
            self._two_byte_address = False
            self._page_size = 8
        elif device_size <= 256 * 8:
            self._two_byte_address = False
            self._page_size = 16
        else:
            self._two_byte_address = True
            self._page_size = 32

    def page_size(self):
        return self._page_size

    def _address_bytes(self, memaddr):
        if self._two_byte_address:
            return bytes([(memaddr >> 8) & 0xFF, memaddr & 0xFF])
        return bytes([memaddr & 0xFF])

    def _wait_ready(self):
        # poll until the chip acknowledges again, at most the write delay
        if self._last_write is None:
            return
        while self._clock() - self._last_write <= _WRITE_DELAY:
            try:
                self._bus.write(self._address, b"")
            except OSError:
                continue
            break

    def _write_chunk(self, memaddr, chunk):
        self._wait_ready()
        try:
            self._bus.write(self._address, self._address_bytes(memaddr) + chunk)
        except OSError as exc:
            raise EepromError(f"write at {memaddr:#06x} failed: {exc}") from exc
        finally:
            self._last_write = self._clock()

    def _read_chunk(self, memaddr, count):
        self._wait_ready()
        try:
            self._bus.write(self._address, self._address_bytes(memaddr))
        except OSError:
            return b""
        return bytes(self._bus.read(self._address, count))[:count]

    def _page_block(self, memaddr, data):
        addr = memaddr
        offset = 0
        while offset < len(data):
            until_boundary = self._page_size - addr % self._page_size
            count = min(len(data) - offset, until_boundary, TWI_BUFFER_SIZE)
            self._write_chunk(addr, data[offset:offset + count])
            addr = (addr + count) & 0xFFFF
            offset += count

    def write_byte(self, memaddr, value):
        _check_address(memaddr)
        _check_byte(value)
        self._write_chunk(memaddr, bytes([value]))

    def write_block(self, memaddr, data):
        """Write *data*, split at page boundaries and bus buffer size."""
        _check_address(memaddr)
        self._page_block(memaddr, bytes(data))

    def set_block(self, memaddr, value, length):
        """Fill *length* bytes from *memaddr* on with *value*."""
        _check_address(memaddr)
        _check_byte(value)
        if length < 0:
            raise ValueError("length must not be negative")
        self._page_block(memaddr, bytes([value]) * length)

    def read_byte(self, memaddr):
        _check_address(memaddr)
        data = self._read_chunk(memaddr, 1)
        if not data:
            raise EepromError(f"no data at {memaddr:#06x}")
        return data[0]

    def read_block(self, memaddr, length):
        """Read up to *length* bytes; fewer come back if the chip sends fewer."""
        _check_address(memaddr)
        if length < 0:
            raise ValueError("length must not be negative")
        chunks = []
        addr = memaddr
        remaining = length
        while remaining > 0:
            count = min(remaining, TWI_BUFFER_SIZE)
            chunks.append(self._read_chunk(addr, count))
            addr = (addr + count) & 0xFFFF
            remaining -= count
        return b"".join(chunks)

    def determine_size(self):
        """Size in kilobytes (64, 32, 16, 8, 4, 2, 1), or 0 below 1 KB.

        Found by writing test bytes and seeing where the memory folds back;
        the bytes touched are restored afterwards.
        """
        if not self._read_chunk(0, 1):
            raise EepromError("no reply from EEPROM")
        probes = [((512 << i) + 1) & 0xFFFF for i in range(9)]
        originals = [self.read_byte(addr) for addr in probes[:8]]
        found = 0
        for i in range(8):
            found = i
            self.write_byte(probes[i], 0xAA)
            self.write_byte(probes[i + 1], 0x55)
            if self.read_byte(probes[i]) == 0x55:
                break
        for addr, value in zip(probes[:8], originals):
            self.write_byte(addr, value)
        return 1 << (found - 1) if found else 0