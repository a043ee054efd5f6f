import math

import pytest

from gadgetkit.average_angle import AngleType, AverageAngle


def test_default_type_is_degrees():
    assert AverageAngle().angle_type() is AngleType.DEGREES


def test_same_angle_averages_to_itself():
    avg = AverageAngle()
    avg.add(90)
    avg.add(90)
    assert avg.count() == 2
    assert avg.average() == pytest.approx(90)


def test_wraparound_average():
    avg = AverageAngle()
    avg.add(10)
    avg.add(350)
    result = avg.average()
    assert min(result, 360 - result) < 1e-6


def test_average_is_never_negative():
    avg = AverageAngle()
    avg.add(-90)
    assert 0 <= avg.average() < 360
    assert avg.average() == pytest.approx(-90 + 360)


def test_radians():
    avg = AverageAngle(AngleType.RADIANS)
    avg.add(math.pi / 2)
    avg.add(math.pi / 4, 0.0)
    assert avg.angle_type() is AngleType.RADIANS
    assert avg.average() == pytest.approx(math.pi / 2)


def test_lengths_in_one_direction_add_up():
    avg = AverageAngle()
    for length in (2.0, 3.0, 5.0):
        avg.add(45, length)
    assert avg.total_length() == pytest.approx(2.0 + 3.0 + 5.0)
    assert avg.average_length() == pytest.approx(avg.total_length() / avg.count())


def test_opposite_directions_cancel():
    avg = AverageAngle()
    avg.add(0)
    avg.add(180)
    assert avg.total_length() == pytest.approx(0, abs=1e-12)


def test_empty_lengths_are_zero():
    avg = AverageAngle()
    assert avg.total_length() == 0
    assert avg.average_length() == 0


def test_reset():
    avg = AverageAngle()
    avg.add(30, 4)
    avg.reset()
    assert avg.count() == 0
    assert avg.total_length() == 0