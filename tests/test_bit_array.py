import pytest

from gadgetkit.bit_array import BitArray


def test_round_trip_ten_bit_values():
    arr = BitArray(10, 50)
    values = [0, 1, 512, 1023, 77, 300]
    for index, value in enumerate(values):
        arr.set(index, value)
    assert [arr.get(i) for i in range(len(values))] == values


def test_set_returns_value_and_masks_storage():
    arr = BitArray(3, 10)
    assert arr.set(4, 15) == 15
    assert arr.get(4) == (1 << 3) - 1


def test_neighbours_untouched():
    arr = BitArray(5, 20)
    arr.set(7, 31)
    assert arr.get(6) == 0
    assert arr.get(8) == 0


def test_capacity_and_memory_cover_request():
    arr = BitArray(10, 100)
    assert arr.capacity() >= 100
    assert arr.memory() * 8 >= 10 * 100
    assert arr.bits() == 10


def test_segments_split_at_segment_size():
    assert BitArray(8, 200).segments() == 1
    assert BitArray(8, 400).segments() == 2


def test_toggle_twice_restores():
    arr = BitArray(7, 10)
    arr.set(3, 42)
    arr.toggle(3)
    assert arr.toggle(3) == 42
    assert arr.get(3) == 42


def test_toggle_zero_gives_all_ones():
    arr = BitArray(6, 10)
    assert arr.toggle(2) == (1 << 6) - 1


def test_clear():
    arr = BitArray(4, 10)
    arr.set(1, 9)
    arr.clear()
    assert arr.get(1) == 0


@pytest.mark.parametrize("bits", [0, 33])
def test_bad_element_size(bits):
    with pytest.raises(ValueError):
        BitArray(bits, 10)


def test_too_large():
    with pytest.raises(ValueError):
        BitArray(8, 1001, max_segments=5)
    assert BitArray(8, 1000, max_segments=5).segments() == 5


def test_index_out_of_range():
    arr = BitArray(8, 4)
    with pytest.raises(IndexError):
        arr.get(4)
    with pytest.raises(IndexError):
        arr.set(-1, 0)