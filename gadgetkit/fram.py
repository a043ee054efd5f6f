"""Driver for I2C ferroelectric RAM chips such as the MB85RC series.

The *bus* object must provide ``write(address, data)`` and
``read(address, count)``, the latter returning up to *count* bytes.
Multi-byte values are stored least significant byte first.
"""

from __future__ import annotations

DEFAULT_ADDRESS = 0x50
_SLAVE_ID = 0x7C
_BLOCK_SIZE = 24
_FUJITSU = 0x000A

# Fujitsu product id -> size in kilobytes
_SIZES = {
    0x0358: 8,    # MB85RC64T
    0x0510: 32,   # MB85RC256V
    0x0658: 64,   # MB85RC512T
    0x0758: 128,  # MB85RC1MT
}


def _check_address(memaddr):
    if not 0 <= memaddr <= 0xFFFF:
        raise ValueError(f"memory address must be 0..0xFFFF, got {memaddr}")


class FRAM:
    """An FRAM chip at *address* (0x50..0x57) on *bus*.

    The chip size is looked up from its device id when it is created; an
    unknown chip has size 0.
    """

    def __init__(self, bus, address=DEFAULT_ADDRESS):
        if not 0x50 <= address <= 0x57:
            raise ValueError(f"FRAM address must be 0x50..0x57, got {address:#x}")
        self._bus = bus
        self._address = address
        self._size = 0
        try:
            manufacturer = self.manufacturer_id()
            product = self.product_id()
        except OSError:
            return
        if manufacturer == _FUJITSU:
            self._size = _SIZES.get(product, 0)

    def size(self):
        """Size in kilobytes, 0 when unknown."""
        return self._size

    def _device_id(self, count):
        self._bus.write(_SLAVE_ID, bytes([(self._address << 1) & 0xFF]))
        data = bytes(self._bus.read(_SLAVE_ID, count))
        if len(data) != count:
            raise OSError(f"device id: expected {count} bytes, got {len(data)}")
        return data

    def manufacturer_id(self):
        data = self._device_id(2)
        return ((data[0] << 4) | (data[1] >> 4)) & 0xFFFF

    def product_id(self):
        data = self._device_id(3)
        return ((data[1] & 0x0F) << 8) | data[2]

    def _write_block(self, memaddr, chunk):
        self._bus.write(self._address, bytes([memaddr >> 8, memaddr & 0xFF]) + chunk)

    def _read_block(self, memaddr, count):
        self._bus.write(self._address, bytes([memaddr >> 8, memaddr & 0xFF]))
        data = bytes(self._bus.read(self._address, count))
        if len(data) != count:
            raise OSError(f"read at {memaddr:#06x}: expected {count} bytes, got {len(data)}")
        return data

    def _write_int(self, memaddr, value, width):
        _check_address(memaddr)
        if not 0 <= value < 1 << (8 * width):
            raise ValueError(f"value {value} does not fit in {width} bytes")
        self._write_block(memaddr, value.to_bytes(width, "little"))

    def _read_int(self, memaddr, width):
        _check_address(memaddr)
        return int.from_bytes(self._read_block(memaddr, width), "little")

    def write8(self, memaddr, value):
        self._write_int(memaddr, value, 1)

    def write16(self, memaddr, value):
        self._write_int(memaddr, value, 2)

    def write32(self, memaddr, value):
        self._write_int(memaddr, value, 4)

    def write(self, memaddr, data):
        """Write *data* from *memaddr* on, in blocks of 24 bytes."""
        _check_address(memaddr)
        data = bytes(data)
        for start in range(0, len(data), _BLOCK_SIZE):
            self._write_block(memaddr, data[start:start + _BLOCK_SIZE])
            memaddr = (memaddr + _BLOCK_SIZE) & 0xFFFF

    def read8(self, memaddr):
        return self._read_int(memaddr, 1)

    def read16(self, memaddr):
        return self._read_int(memaddr, 2)

    def read32(self, memaddr):
        return self._read_int(memaddr, 4)

    def read(self, memaddr, size):
        """Read *size* bytes from *memaddr* on, in blocks of 24 bytes."""
        _check_address(memaddr)
        if size < 0:
            raise ValueError("size must not be negative")
        chunks = []
        for start in range(0, size, _BLOCK_SIZE):
            count = min(_BLOCK_SIZE, size - start)
            chunks.append(self._read_block(memaddr, count))
            memaddr = (memaddr + _BLOCK_SIZE) & 0xFFFF
        return b"".join(chunks)