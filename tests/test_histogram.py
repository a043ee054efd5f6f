import math

import pytest

from gadgetkit.histogram import Histogram


@pytest.fixture
def hist():
    return Histogram([0, 10, 20])


def test_size_is_bounds_plus_one(hist):
    assert hist.size() == 4


def test_find(hist):
    assert hist.find(-5) == 0
    assert hist.find(0) == 0
    assert hist.find(5) == 1
    assert hist.find(10) == 1
    assert hist.find(100) == 3


def test_add_counts(hist):
    for v in (-1, 5, 5, 15, 50):
        hist.add(v)
    assert hist.count() == 5
    assert [hist.bucket(i) for i in range(4)] == [1, 2, 1, 1]
    assert hist.bucket(10) == 0


def test_frequencies_sum_to_one(hist):
    for v in (-1, 5, 5, 15, 50, 60):
        hist.add(v)
    assert math.isclose(sum(hist.frequency(i) for i in range(4)), 1.0)
    assert hist.frequency(1) == hist.pmf(5)


def test_cdf_reaches_one(hist):
    for v in (1, 2, 30):
        hist.add(v)
    assert hist.cdf(1000) == 1.0
    assert hist.cdf(-100) == 0.0


def test_val(hist):
    for v in (-1, 5, 15, 50):
        hist.add(v)
    assert hist.val(0.0) == 0.0
    assert hist.val(0.5) == 10.0
    assert hist.val(1.0) == math.inf


def test_empty_is_nan(hist):
    nan = pytest.approx(math.nan, nan_ok=True)
    assert hist.frequency(0) == nan
    assert hist.pmf(1) == nan
    assert hist.cdf(1) == nan
    assert hist.val(0.5) == nan


def test_sub_decrements_bucket_but_counts(hist):
    hist.add(5)
    hist.sub(5)
    assert hist.bucket(1) == 0
    assert hist.count() == 2


def test_clear(hist):
    hist.add(5)
    hist.clear()
    assert hist.count() == 0
    assert hist.bucket(1) == 0


def test_negative_bucket_index(hist):
    with pytest.raises(IndexError):
        hist.bucket(-1)