import pytest

from gadgetkit.bool_array import BoolArray


def test_new_array_is_false():
    arr = BoolArray(20)
    assert len(arr) == 20
    assert not any(arr.get(i) for i in range(20))


def test_set_and_get():
    arr = BoolArray(20)
    arr.set(9, True)
    assert arr.get(9) is True
    assert arr.get(8) is False
    assert arr.get(10) is False
    arr.set(9, 0)
    assert arr.get(9) is False


def test_toggle():
    arr = BoolArray(16)
    arr.toggle(15)
    assert arr.get(15) is True
    arr.toggle(15)
    assert arr.get(15) is False


def test_set_all_and_clear():
    arr = BoolArray(13)
    arr.set_all(True)
    assert all(arr.get(i) for i in range(13))
    arr.clear()
    assert not any(arr.get(i) for i in range(13))


def test_max_size():
    assert len(BoolArray(2000)) == 2000
    with pytest.raises(ValueError):
        BoolArray(2001)


def test_index_errors():
    arr = BoolArray(8)
    with pytest.raises(IndexError):
        arr.get(8)
    with pytest.raises(IndexError):
        arr.set(-1, True)
    with pytest.raises(IndexError):
        arr.toggle(100)