import pytest

from gadgetkit.dht12 import (
    ADDRESS,
    DHT12,
    DHT12ChecksumError,
    DHT12ConnectError,
    DHT12Error,
    DHT12MissingBytesError,
)


class FakeBus:
    def __init__(self, reply):
        self.reply = bytes(reply)
        self.writes = []
        self.requests = []

    def write(self, address, data):
        self.writes.append((address, bytes(data)))

    def read(self, address, count):
        self.requests.append((address, count))
        return self.reply


def with_checksum(values):
    return bytes(values) + bytes([sum(values) & 0xFF])


def test_read_positive():
    bus = FakeBus(with_checksum([55, 3, 21, 5]))
    sensor = DHT12(bus)
    humidity, temperature = sensor.read()
    assert humidity == pytest.approx(55.3)
    assert temperature == pytest.approx(21.5)
    assert (sensor.humidity, sensor.temperature) == (humidity, temperature)


def test_read_negative_temperature():
    sensor = DHT12(FakeBus(with_checksum([40, 0, 3, 0x82])))
    _, temperature = sensor.read()
    assert temperature == pytest.approx(-3.2)


def test_read_addresses_register_zero():
    bus = FakeBus(with_checksum([1, 0, 1, 0]))
    DHT12(bus).read()
    assert bus.writes == [(ADDRESS, b"\x00")]
    assert bus.requests == [(ADDRESS, 5)]


def test_checksum_wraps_at_one_byte():
    values = [200, 9, 60, 9]
    sensor = DHT12(FakeBus(with_checksum(values)))
    humidity, _ = sensor.read()
    assert humidity == pytest.approx(200.9)


def test_checksum_error_keeps_values():
    reply = with_checksum([50, 0, 20, 0])
    sensor = DHT12(FakeBus(reply[:4] + bytes([reply[4] ^ 1])))
    with pytest.raises(DHT12ChecksumError):
        sensor.read()
    assert sensor.humidity == pytest.approx(50.0)
    assert sensor.temperature == pytest.approx(20.0)


def test_no_reply_is_connect_error():
    sensor = DHT12(FakeBus(b""))
    with pytest.raises(DHT12ConnectError):
        sensor.read()
    assert sensor.humidity is None


def test_short_reply_is_missing_bytes():
    with pytest.raises(DHT12MissingBytesError):
        DHT12(FakeBus(b"\x01\x02\x03")).read()


def test_errors_share_base_class():
    with pytest.raises(DHT12Error):
        DHT12(FakeBus(b"\x01")).read()