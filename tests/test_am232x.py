import pytest

from gadgetkit.am232x import ADDRESS, AM232X, AM232XError, AM232XErrorCode, crc16


def frame(payload):
    payload = bytes(payload)
    crc = crc16(payload)
    return payload + bytes([crc & 0xFF, crc >> 8])


class FakeBus:
    def __init__(self, replies, fail_wake_up=False):
        self.replies = list(replies)
        self.writes = []
        self.requests = []
        self.fail_wake_up = fail_wake_up

    def write(self, address, data):
        self.writes.append((address, bytes(data)))
        if not data and self.fail_wake_up:
            raise OSError("no ack")

    def read(self, address, count):
        self.requests.append((address, count))
        return self.replies.pop(0)


def make(replies, **kwargs):
    bus = FakeBus(replies, **kwargs)
    sleeps = []
    return AM232X(bus, sleep=sleeps.append), bus, sleeps


def test_crc16_check_value():
    assert crc16(b"123456789") == 0x4B37


def test_crc16_empty_is_initial_value():
    assert crc16(b"") == 0xFFFF


def test_read_measurement():
    sensor, bus, _ = make([frame([0x03, 0x04, 0x01, 0xF4, 0x00, 0xFA])])
    humidity, temperature = sensor.read()
    assert humidity == pytest.approx(50.0)
    assert temperature == pytest.approx(25.0)
    assert sensor.humidity == humidity
    assert sensor.temperature == temperature
    assert bus.writes[-1] == (ADDRESS, bytes([0x03, 0x00, 0x04]))
    assert bus.requests == [(ADDRESS, 8)]


def test_read_negative_temperature():
    sensor, _, _ = make([frame([0x03, 0x04, 0x01, 0xF4, 0x80, 0xFA])])
    _, temperature = sensor.read()
    assert temperature == pytest.approx(-25.0)


def test_wake_up_failure_is_ignored_and_waits():
    sensor, bus, sleeps = make([frame([0x03, 0x02, 0x09, 0x26])], fail_wake_up=True)
    assert sensor.model() == 0x0926
    assert bus.writes[0] == (ADDRESS, b"")
    assert sleeps == [0.001]


def test_version_and_status():
    sensor, bus, _ = make([frame([0x03, 0x01, 0x07]), frame([0x03, 0x01, 0x42])])
    assert sensor.version() == 0x07
    assert sensor.status() == 0x42
    assert bus.writes[1][1] == bytes([0x03, 0x0A, 0x01])
    assert bus.writes[3][1] == bytes([0x03, 0x0F, 0x01])


def test_device_id_is_big_endian():
    sensor, _, _ = make([frame([0x03, 0x04, 0x12, 0x34, 0x56, 0x78])])
    assert sensor.device_id() == 0x12345678


def test_user_registers():
    sensor, bus, _ = make([frame([0x03, 0x02, 0xAB, 0xCD]), frame([0x03, 0x02, 0x01, 0x02])])
    assert sensor.user_register_a() == 0xABCD
    assert sensor.user_register_b() == 0x0102
    assert bus.writes[1][1] == bytes([0x03, 0x10, 0x02])
    assert bus.writes[3][1] == bytes([0x03, 0x12, 0x02])


def test_device_error_code_in_short_reply():
    sensor, _, _ = make([bytes([0x83, 0x00, 0x00, 0x82])])
    with pytest.raises(AM232XError) as info:
        sensor.model()
    assert info.value.code is AM232XErrorCode.REGISTER


def test_unknown_error_for_very_short_reply():
    sensor, _, _ = make([b""])
    with pytest.raises(AM232XError) as info:
        sensor.read()
    assert info.value.code is AM232XErrorCode.UNKNOWN


def test_bad_crc_in_reply():
    good = frame([0x03, 0x02, 0x09, 0x26])
    bad = good[:-1] + bytes([good[-1] ^ 0xFF])
    sensor, _, _ = make([bad])
    with pytest.raises(AM232XError) as info:
        sensor.model()
    assert info.value.code is AM232XErrorCode.CRC_2


def test_set_user_register_sends_frame_with_crc():
    sensor, bus, _ = make([frame([0x10, 0x10, 0x02])])
    sensor.set_user_register_a(0x1234)
    sent = bus.writes[-1][1]
    assert sent[:5] == bytes([0x10, 0x10, 0x02, 0x12, 0x34])
    assert sent == frame(sent[:5])
    assert bus.requests == [(ADDRESS, 5)]


def test_set_status_sends_single_byte():
    sensor, bus, _ = make([frame([0x10, 0x0F])])
    sensor.set_status(0x05)
    sent = bus.writes[-1][1]
    assert sent[:4] == bytes([0x10, 0x0F, 0x01, 0x05])
    assert sent == frame(sent[:4])


def test_write_disabled_reported():
    sensor, _, _ = make([bytes([0x90, 0x12, 0x00, 0x84])])
    with pytest.raises(AM232XError) as info:
        sensor.set_user_register_b(1)
    assert info.value.code is AM232XErrorCode.WRITE_DISABLED